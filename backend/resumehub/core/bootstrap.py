# resumehub/core/bootstrap.py
"""
Bootstrap module for application initialization.
Builds the account service from settings and runs optional startup
maintenance (the orphaned-document sweep).
"""
import logging
from typing import List

from resumehub.config import Settings
from resumehub.services.account_repository import AccountRepository
from resumehub.services.account_service import AccountService
from resumehub.services.artifact_store import ArtifactStore

logger = logging.getLogger("uvicorn.error")

def build_account_service(settings: Settings) -> AccountService:
    """
    Wire the repository and the artifact store into an AccountService.
    The upload directory is created here if it does not exist yet.
    """
    store = ArtifactStore(
        settings.upload_dir,
        allowed_extensions=settings.allowed_extensions,
        max_bytes=settings.max_upload_bytes,
    )
    return AccountService(
        AccountRepository(),
        store,
        auth_mode=settings.auth_mode,
        search_limit=settings.search_limit,
        orphan_grace_seconds=settings.orphan_grace_seconds,
    )

async def sweep_orphaned_documents(service: AccountService, dry_run: bool = False) -> List[str]:
    """
    Remove stored documents that no account points at any more
    (left behind by replacement uploads or failed pointer updates).
    """
    removed = await service.sweep_orphans(dry_run=dry_run)
    if removed:
        logger.warning("[bootstrap] %s %d orphaned document(s): %s",
                       "found" if dry_run else "removed", len(removed), ", ".join(removed))
    else:
        logger.info("[bootstrap] no orphaned documents")
    return removed
