# resumehub/core/security.py
"""
Credential management.
Owns password hashing/verification (the only place secrets are compared) and,
for AUTH_MODE=jwt, signing and decoding of access tokens.
"""
import os
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables from the backend directory
ENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# Password hashing context
# Argon2 is salted and memory-hard; its default cost is well above a 10-round bcrypt
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

# JWT configuration (only consulted when AUTH_MODE=jwt)
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me-in-production-0000")  # Secret key for JWT signing (use strong secret in production)
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))  # Token expiration time in minutes
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash (must be non-empty)

    Returns:
        Hashed password string (safe to store in database)

    Raises:
        ValueError: If the password is empty
    """
    if not plain:
        raise ValueError("password must not be empty")
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Never raises on mismatch: an empty password, an empty hash or a hash
    passlib cannot identify all verify as False.
    """
    if not plain or not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (UnknownHashError, ValueError):
        return False

def create_access_token(account_id: str) -> str:
    """
    Create a signed access token for an account.

    Token payload:
        - sub: Subject (account id as a string)
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": str(account_id),
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)

def decode_access_token(token: str) -> dict:
    """
    Decode and validate an access token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
