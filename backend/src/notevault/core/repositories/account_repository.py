"""Account repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.account import Account, normalize_email


class AccountRepository:
    """Repository for account database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_account(self, account_data: dict) -> Account:
        """Create new account. Raises IntegrityError on a duplicate email."""
        account = Account(**account_data)
        self.session.add(account)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(account)
        return account

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID."""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email, compared lowercase."""
        stmt = select(Account).where(Account.email == normalize_email(email))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, account_id: UUID) -> bool:
        stmt = select(Account.id).where(Account.id == account_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def is_email_taken(self, email: str) -> bool:
        """Check if email exists."""
        return await self.get_by_email(email) is not None

    async def update_password_hash(self, account: Account, password_hash: str) -> Account:
        account.password_hash = password_hash
        await self.session.commit()
        return account
