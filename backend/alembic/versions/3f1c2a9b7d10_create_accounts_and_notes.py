"""Create accounts, notes and note_tags tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-18 10:12:31.402117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from notevault.core.models.types import GUID, UTCDateTime


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', UTCDateTime(), nullable=False),
        sa.Column('updated_at', UTCDateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'accounts',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('display_name', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('email'),
        sa.CheckConstraint('email = lower(email)', name='ck_accounts_email_lowercase'),
        sa.CheckConstraint('length(display_name) <= 50', name='ck_accounts_display_name_len'),
    )

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_archived', sa.Boolean(), nullable=False),
        sa.Column(
            'owner_id', GUID(), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False
        ),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
        sa.CheckConstraint('length(content) <= 10000', name='ck_notes_content_len'),
    )
    op.create_index('idx_notes_owner_created', 'notes', ['owner_id', 'created_at'])
    op.create_index('idx_notes_owner_archived', 'notes', ['owner_id', 'is_archived'])

    op.create_table(
        'note_tags',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column(
            'note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False
        ),
        sa.Column('name', sa.String(length=30), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_note_tags_name', 'note_tags', ['name'])
    op.create_index('idx_note_tags_note_id', 'note_tags', ['note_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_note_tags_note_id', table_name='note_tags')
    op.drop_index('idx_note_tags_name', table_name='note_tags')
    op.drop_table('note_tags')
    op.drop_index('idx_notes_owner_archived', table_name='notes')
    op.drop_index('idx_notes_owner_created', table_name='notes')
    op.drop_table('notes')
    op.drop_table('accounts')
