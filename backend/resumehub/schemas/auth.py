# resumehub/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration and login.
"""
from typing import Optional
from pydantic import BaseModel

class RegisterIn(BaseModel):
    """
    Request model for account registration.
    Fields are optional at the schema level so that missing values are
    reported as a VALIDATION_ERROR by the service instead of a 422.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None  # Plain text, hashed server-side
    title: Optional[str] = None
    bio: Optional[str] = None

class LoginRequest(BaseModel):
    """Credentials for the login endpoint."""
    email: Optional[str] = None
    password: Optional[str] = None

class AccountIdentity(BaseModel):
    """Public identity returned after registration (never echoes the password)."""
    id: int
    name: str
    email: str

class LoginUser(BaseModel):
    """Public profile returned on successful login."""
    id: int
    name: str
    email: str
    title: str = ""
    bio: str = ""
    hasAttachment: bool = False

class LoginResponse(BaseModel):
    """
    Response model for successful login.
    token is the bearer identifier the caller presents on later calls:
    the bare account id in self-asserted mode, a signed JWT in jwt mode.
    """
    token: str
    user: LoginUser
