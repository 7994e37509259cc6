"""Password hashing utilities."""

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256 so passwords longer than 72 bytes
# are not silently truncated by bcrypt.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")

MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Hash a plain-text password for storage."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain-text password against a stored hash."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash passlib recognises
        return False


def needs_update(hashed_password: str) -> bool:
    """True when the stored hash uses outdated parameters and should be redone."""
    return pwd_context.needs_update(hashed_password)
