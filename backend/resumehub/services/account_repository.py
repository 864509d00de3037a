"""
Account Repository

Durable store of account records on top of the Tortoise `Account` model.
Email uniqueness is enforced by the table's unique index; this module never
pre-checks for duplicates, it translates the database's IntegrityError.
"""
from typing import List, Optional, Set

from tortoise.exceptions import IntegrityError

from resumehub.core.errors import DuplicateIdentity, NotFound
from resumehub.models.account import Account
from resumehub.schemas.account import AccountProfile, AccountSummary

DEFAULT_SEARCH_LIMIT = 200


class AccountRepository:
    """Lookup, update and search over the accounts table."""

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        title: str = "",
        bio: str = "",
    ) -> Account:
        """
        Insert a new account; id and created_at are assigned by storage.

        Raises DuplicateIdentity when the email is already registered.
        """
        try:
            return await Account.create(
                name=name,
                email=email,
                password_hash=password_hash,
                title=title or "",
                bio=bio or "",
            )
        except IntegrityError as exc:
            raise DuplicateIdentity() from exc

    async def find_by_email(self, email: str) -> Optional[Account]:
        # Full record including password_hash; only the login path uses it
        return await Account.get_or_none(email=email)

    async def find_by_id(self, account_id: int) -> Optional[AccountProfile]:
        account = await Account.get_or_none(id=account_id)
        if account is None:
            return None
        return AccountProfile.from_model(account)

    async def update_attachment(self, account_id: int, stored_name: str, original_name: str) -> None:
        """Set both attachment columns in one UPDATE statement."""
        updated = await Account.filter(id=account_id).update(
            resume_filename=stored_name,
            resume_original_name=original_name,
        )
        if not updated:
            raise NotFound("User not found")

    async def update_profile(
        self,
        account_id: int,
        title: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> AccountProfile:
        changes = {}
        if title is not None:
            changes["title"] = title
        if bio is not None:
            changes["bio"] = bio
        if changes:
            updated = await Account.filter(id=account_id).update(**changes)
            if not updated:
                raise NotFound("User not found")
        profile = await self.find_by_id(account_id)
        if profile is None:
            raise NotFound("User not found")
        return profile

    async def search(self, query: Optional[str] = None, limit: int = DEFAULT_SEARCH_LIMIT) -> List[AccountSummary]:
        """
        Case-insensitive substring match on name, newest first.
        An empty query matches every account (still capped at limit).
        """
        qs = Account.all()
        if query:
            qs = qs.filter(name__icontains=query)
        rows = await qs.order_by("-created_at", "-id").limit(limit)
        return [AccountSummary.from_model(a) for a in rows]

    async def attachment_names(self) -> Set[str]:
        names = await Account.filter(resume_filename__isnull=False).values_list("resume_filename", flat=True)
        return set(names)
