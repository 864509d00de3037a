import mimetypes
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile
from resumehub.api.deps import get_account_service, require_account_owner
from resumehub.core.errors import ValidationError
from resumehub.schemas.account import AccountProfile, AccountSummary, ProfileUpdateIn, UploadOut
from resumehub.services.account_service import AccountService

router = APIRouter(prefix="/users", tags=["users"])

def _content_disposition(filename: str) -> str:
    # RFC 5987 form only when the name is not plain ASCII-safe
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'

@router.get("", response_model=List[AccountSummary])
async def search_users(
    q: str | None = Query(default=None, description="Case-insensitive substring of the name"),
    limit: int | None = Query(default=None, ge=1, le=1000),
    service: AccountService = Depends(get_account_service),
):
    """
    Search accounts by name, newest first.
    An empty or missing q lists every account (capped at the search limit).
    """
    return await service.search(q, limit=limit)

@router.get("/{user_id}", response_model=AccountProfile)
async def get_profile(user_id: int, service: AccountService = Depends(get_account_service)):
    """
    Get the full public profile of an account, including the résumé filenames.

    Raises:
        NOT_FOUND (404): No such account
    """
    return await service.get_profile(user_id)

@router.patch("/{user_id}", response_model=AccountProfile)
async def update_profile(
    body: ProfileUpdateIn,
    user_id: int = Depends(require_account_owner),
    service: AccountService = Depends(get_account_service),
):
    """Update title and/or bio; omitted fields are left unchanged."""
    return await service.update_profile(user_id, title=body.title, bio=body.bio)

@router.post("/{user_id}/resume", response_model=UploadOut)
async def upload_resume(
    user_id: int = Depends(require_account_owner),
    resume: UploadFile | None = File(default=None),
    service: AccountService = Depends(get_account_service),
):
    """
    Upload (or replace) the account's résumé. Multipart field name: "resume".

    The previous document is not deleted; it becomes orphaned.

    Error codes:
        - NO_FILE (400): No file in the request
        - UNSUPPORTED_TYPE (400): Extension other than .pdf/.doc/.docx
        - TOO_LARGE (400): More than the configured ceiling (10 MiB)
        - NOT_FOUND (404): No such account
    """
    if resume is None:
        raise ValidationError("No file uploaded", code="NO_FILE")
    # One byte past the ceiling is enough to tell TooLarge apart
    data = await resume.read(service.store.max_bytes + 1)
    ref = await service.upload_attachment(user_id, data, resume.filename or "")
    return UploadOut(ok=True, filename=ref.stored_name, original=ref.original_filename)

@router.get("/{user_id}/resume")
async def download_resume(user_id: int, service: AccountService = Depends(get_account_service)):
    """
    Download the account's résumé under its original filename.

    Raises:
        NOT_FOUND (404): No account, no résumé, or the file is missing on disk
    """
    download = await service.download_attachment(user_id)
    media_type = mimetypes.guess_type(download.original_filename)[0] or "application/octet-stream"
    return Response(
        content=download.content,
        media_type=media_type,
        headers={"Content-Disposition": _content_disposition(download.original_filename)},
    )
