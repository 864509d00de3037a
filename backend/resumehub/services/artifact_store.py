"""
Artifact Store

Keeps uploaded résumé documents on local disk under generated names.

Naming: "<epoch millis>-<random 0..1e9><original extension>", e.g.
"1718000000000-482913377.pdf". Files are created with exclusive-create, so a
name is never reused or overwritten. The store has no update-in-place;
replacing an account's document means accepting a new one.
"""
import asyncio
import logging
import os
import re
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Set

from resumehub.core.errors import InternalError, NotFound, TooLarge, UnsupportedType

logger = logging.getLogger("uvicorn.error")

DEFAULT_ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx")
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MiB

# Attempts at finding a free name before giving up
_MAX_NAME_ATTEMPTS = 5

# Shape of every name _generate_name produces; other files in the root are not ours
_STORED_NAME_RE = re.compile(r"^\d+-\d+\.[^./\\]+$")


@dataclass(frozen=True)
class StoredReference:
    """Result of a successful accept()"""
    stored_name: str
    original_filename: str


def _generate_name(extension: str) -> str:
    millis = int(time.time() * 1000)
    return f"{millis}-{secrets.randbelow(10**9)}{extension}"


class ArtifactStore:
    """
    Filesystem-backed document store with an upload policy.

    Parameters:
    - root: Directory holding the documents (created if missing)
    - allowed_extensions: Accepted extensions, compared case-insensitively
    - max_bytes: Largest accepted payload; anything above is rejected
    """

    def __init__(
        self,
        root,
        allowed_extensions: Iterable[str] = DEFAULT_ALLOWED_EXTENSIONS,
        max_bytes: int = DEFAULT_MAX_BYTES,
    ):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.allowed_extensions = {ext.lower() for ext in allowed_extensions}
        self.max_bytes = max_bytes

    # -------- policy --------
    def extension_of(self, original_filename: str) -> str:
        return os.path.splitext(original_filename or "")[1]

    def check_policy(self, size: int, original_filename: str) -> str:
        """
        Validate an upload before anything touches the disk.

        Returns the original extension (case preserved) on success.
        """
        extension = self.extension_of(original_filename)
        if extension.lower() not in self.allowed_extensions:
            allowed = ", ".join(sorted(self.allowed_extensions))
            raise UnsupportedType(f"Only {allowed} allowed")
        if size > self.max_bytes:
            raise TooLarge(f"File exceeds {self.max_bytes} bytes")
        return extension

    # -------- write --------
    async def accept(self, data: bytes, original_filename: str) -> StoredReference:
        """
        Validate and durably store an uploaded document.

        Raises:
        - UnsupportedType: extension not in the allow-list (nothing written)
        - TooLarge: payload above max_bytes (nothing written)
        - InternalError: the write itself failed (partial file removed)
        """
        extension = self.check_policy(len(data), original_filename)
        loop = asyncio.get_running_loop()
        stored_name = await loop.run_in_executor(None, self._write_new, data, extension)
        logger.info("[store] stored %s (%d bytes, original=%r)", stored_name, len(data), original_filename)
        return StoredReference(stored_name=stored_name, original_filename=original_filename)

    def _write_new(self, data: bytes, extension: str) -> str:
        for _ in range(_MAX_NAME_ATTEMPTS):
            name = _generate_name(extension)
            path = self.root / name
            try:
                fh = open(path, "xb")
            except FileExistsError:
                continue
            except OSError as exc:
                raise InternalError("could not store document") from exc
            try:
                with fh:
                    fh.write(data)
                    fh.flush()
                    os.fsync(fh.fileno())
            except OSError as exc:
                path.unlink(missing_ok=True)
                raise InternalError("could not store document") from exc
            return name
        raise InternalError("could not allocate a document name")

    # -------- read --------
    def _path_for(self, stored_name: str) -> Optional[Path]:
        # Stored names are flat; anything that could escape the root is unknown
        if not stored_name or stored_name in (".", "..") or "/" in stored_name or "\\" in stored_name:
            return None
        return self.root / stored_name

    def exists(self, stored_name: str) -> bool:
        path = self._path_for(stored_name)
        return path is not None and path.is_file()

    async def retrieve(self, stored_name: str) -> bytes:
        """
        Read a stored document.

        Raises NotFound when it was never written or was removed out of band.
        """
        path = self._path_for(stored_name)
        if path is None:
            raise NotFound("File missing on server")
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, path.read_bytes)
        except FileNotFoundError:
            raise NotFound("File missing on server")

    def list_names(self) -> Set[str]:
        return {
            p.name for p in self.root.iterdir()
            if _STORED_NAME_RE.match(p.name) and p.is_file()
        }

    def age_seconds(self, stored_name: str) -> float:
        path = self._path_for(stored_name)
        if path is None:
            raise NotFound("File missing on server")
        return time.time() - path.stat().st_mtime

    # -------- cleanup (orphan sweep only) --------
    def discard(self, stored_name: str) -> bool:
        """Remove a document; returns False if it was already gone."""
        path = self._path_for(stored_name)
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
