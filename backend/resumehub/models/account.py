# resumehub/models/account.py
"""
Database model for accounts.
Represents a registered person: credentials, profile fields and the pointer
to their single attached résumé document.
"""
from tortoise import fields, models

class Account(models.Model):
    """
    Account database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all accounts; the unique index is the only
      duplicate check, so concurrent registrations resolve in the database

    Attachment:
    - resume_filename / resume_original_name are either both NULL or both set
    - resume_filename names a document the artifact store has already written
    """
    id = fields.IntField(primary_key=True)  # Autoincrement, never reused
    name = fields.CharField(max_length=255)  # Display name (non-unique)
    email = fields.CharField(max_length=255, unique=True)  # Identity key, case-sensitive as stored
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never returned to callers
    title = fields.TextField(default="")
    bio = fields.TextField(default="")
    resume_filename = fields.CharField(max_length=255, null=True)  # Stored (generated) document name
    resume_original_name = fields.CharField(max_length=255, null=True)  # Name the uploader supplied
    created_at = fields.DatetimeField(auto_now_add=True)  # Default listing order (newest first)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "accounts"

    @property
    def has_attachment(self) -> bool:
        return self.resume_filename is not None
