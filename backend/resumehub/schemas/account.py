# resumehub/schemas/account.py
"""
Pydantic schemas for account profile, search and résumé endpoints.
"""
import datetime as dt
from typing import Optional
from pydantic import BaseModel

from resumehub.models.account import Account

class AccountProfile(BaseModel):
    """
    Full public profile of an account, including the attachment filenames.
    Never carries the password hash.
    """
    id: int
    name: str
    email: str
    title: str = ""
    bio: str = ""
    resumeFilename: Optional[str] = None  # Stored (generated) name
    resumeOriginalName: Optional[str] = None  # Name the uploader supplied
    hasAttachment: bool = False
    createdAt: Optional[dt.datetime] = None

    @classmethod
    def from_model(cls, account: Account) -> "AccountProfile":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            title=account.title or "",
            bio=account.bio or "",
            resumeFilename=account.resume_filename,
            resumeOriginalName=account.resume_original_name,
            hasAttachment=account.has_attachment,
            createdAt=account.created_at,
        )

class AccountSummary(BaseModel):
    """Search result row."""
    id: int
    name: str
    title: str = ""
    bio: str = ""
    hasAttachment: bool = False

    @classmethod
    def from_model(cls, account: Account) -> "AccountSummary":
        return cls(
            id=account.id,
            name=account.name,
            title=account.title or "",
            bio=account.bio or "",
            hasAttachment=account.has_attachment,
        )

class ProfileUpdateIn(BaseModel):
    """Only the provided fields are changed."""
    title: Optional[str] = None
    bio: Optional[str] = None

class UploadOut(BaseModel):
    """Response model for a successful résumé upload."""
    ok: bool = True
    filename: str  # Stored (generated) name
    original: str  # Name the uploader supplied
