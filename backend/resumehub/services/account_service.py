"""
Account Service

Orchestrates registration, login, profile reads/updates, résumé upload and
download, search and the orphan sweep. It is the only component that sees
both the repository and the artifact store, and it sequences writes so that
an account's attachment pointer always names a document that was already
stored: bytes first, pointer second. The reverse is not guaranteed; a failed
pointer update or a replacement upload leaves an orphaned document behind.
"""
import asyncio
import logging
import secrets
from dataclasses import dataclass
from typing import List, Optional, Set

from resumehub.core.errors import (
    DuplicateIdentity,
    InternalError,
    InvalidCredentials,
    NotFound,
    ServiceError,
    ValidationError,
)
from resumehub.core.security import create_access_token, hash_password, verify_password
from resumehub.schemas.account import AccountProfile, AccountSummary
from resumehub.schemas.auth import AccountIdentity, LoginResponse, LoginUser
from resumehub.services.account_repository import DEFAULT_SEARCH_LIMIT, AccountRepository
from resumehub.services.artifact_store import ArtifactStore, StoredReference

logger = logging.getLogger("uvicorn.error")

AUTH_MODE_SELF_ASSERTED = "self-asserted"
AUTH_MODE_JWT = "jwt"

# Verified against when the email is unknown; matches no real password
_DUMMY_PASSWORD_HASH = hash_password(secrets.token_urlsafe(16))


@dataclass
class Download:
    """Bytes of an attached document plus the name it was uploaded under"""
    content: bytes
    original_filename: str


class AccountService:
    """
    Parameters:
    - repository: AccountRepository over the accounts table
    - store: ArtifactStore holding the documents
    - auth_mode: "self-asserted" (token is the account id) or "jwt"
    - search_limit: Default cap on search results
    - orphan_grace_seconds: Documents younger than this are never swept
    """

    def __init__(
        self,
        repository: AccountRepository,
        store: ArtifactStore,
        auth_mode: str = AUTH_MODE_SELF_ASSERTED,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
        orphan_grace_seconds: int = 3600,
    ):
        if auth_mode not in (AUTH_MODE_SELF_ASSERTED, AUTH_MODE_JWT):
            raise ValueError(f"unknown auth mode: {auth_mode!r}")
        self.repository = repository
        self.store = store
        self.auth_mode = auth_mode
        self.search_limit = search_limit
        self.orphan_grace_seconds = orphan_grace_seconds

    # -------- credentials --------
    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        title: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> AccountIdentity:
        if not name or not email or not password:
            raise ValidationError("missing fields")
        try:
            account = await self.repository.create(
                name=name,
                email=email,
                password_hash=hash_password(password),
                title=title or "",
                bio=bio or "",
            )
        except DuplicateIdentity:
            logger.info("[accounts] registration rejected, email already exists")
            raise
        except Exception as exc:
            logger.exception("[accounts] registration failed")
            raise InternalError() from exc
        logger.info("[accounts] registered id=%s", account.id)
        return AccountIdentity(id=account.id, name=account.name, email=account.email)

    async def login(self, email: Optional[str], password: Optional[str]) -> LoginResponse:
        # Unknown email and wrong password must be indistinguishable
        account = await self.repository.find_by_email(email) if email else None
        # Unknown emails still pay for one argon2 verify
        password_hash = account.password_hash if account is not None else _DUMMY_PASSWORD_HASH
        if not verify_password(password or "", password_hash) or account is None:
            logger.info("[accounts] failed login")
            raise InvalidCredentials()
        return LoginResponse(
            token=self.issue_token(account.id),
            user=LoginUser(
                id=account.id,
                name=account.name,
                email=account.email,
                title=account.title or "",
                bio=account.bio or "",
                hasAttachment=account.has_attachment,
            ),
        )

    def issue_token(self, account_id: int) -> str:
        # Self-asserted identity: the bearer identifier is the account id itself
        if self.auth_mode == AUTH_MODE_JWT:
            return create_access_token(str(account_id))
        return str(account_id)

    # -------- profile --------
    async def get_profile(self, account_id: int) -> AccountProfile:
        profile = await self.repository.find_by_id(account_id)
        if profile is None:
            raise NotFound("User not found")
        return profile

    async def update_profile(
        self,
        account_id: int,
        title: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> AccountProfile:
        return await self.repository.update_profile(account_id, title=title, bio=bio)

    # -------- attachment --------
    async def upload_attachment(self, account_id: int, data: bytes, original_filename: str) -> StoredReference:
        """
        Store a new résumé and point the account at it.

        Raises NotFound (no account), UnsupportedType / TooLarge (policy,
        nothing stored). The previous document, if any, is left in place.
        """
        if await self.repository.find_by_id(account_id) is None:
            raise NotFound("User not found")
        ref = await self.store.accept(data, original_filename)
        try:
            await self.repository.update_attachment(account_id, ref.stored_name, ref.original_filename)
        except ServiceError:
            logger.warning("[accounts] pointer update failed for id=%s, %s orphaned", account_id, ref.stored_name)
            raise
        except Exception as exc:
            logger.exception("[accounts] pointer update failed for id=%s, %s orphaned", account_id, ref.stored_name)
            raise InternalError("upload error") from exc
        return ref

    async def download_attachment(self, account_id: int) -> Download:
        profile = await self.repository.find_by_id(account_id)
        if profile is None or not profile.resumeFilename:
            raise NotFound("Resume not found")
        content = await self.store.retrieve(profile.resumeFilename)
        return Download(content=content, original_filename=profile.resumeOriginalName or profile.resumeFilename)

    # -------- search --------
    async def search(self, query: Optional[str] = None, limit: Optional[int] = None) -> List[AccountSummary]:
        return await self.repository.search(query or "", limit=limit or self.search_limit)

    # -------- maintenance --------
    async def sweep_orphans(self, dry_run: bool = False) -> List[str]:
        """
        Remove stored documents no account references.

        Documents younger than orphan_grace_seconds are skipped: their
        upload may still be waiting on its pointer update.
        Returns the orphaned names (removed unless dry_run).
        """
        referenced = await self.repository.attachment_names()
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._remove_orphans, referenced, dry_run)

    def _remove_orphans(self, referenced: Set[str], dry_run: bool) -> List[str]:
        # Blocking directory scan, stat and unlink; runs in the executor
        orphans = []
        for name in sorted(self.store.list_names() - referenced):
            try:
                if self.store.age_seconds(name) < self.orphan_grace_seconds:
                    continue
            except (NotFound, FileNotFoundError):
                continue
            orphans.append(name)
            if not dry_run:
                self.store.discard(name)
        return orphans
