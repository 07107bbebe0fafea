"""Avatar storage backed by a local media directory."""

import asyncio
import shutil
from pathlib import Path
from uuid import uuid4

import logfire

from userhub.domain.service.avatar_service import AvatarStorage
from userhub.domain.value import AccountId


def build_avatar_key(account_id: AccountId, suffix: str) -> str:
    """Object key for a new avatar of an account.

    Each upload gets a fresh key so URLs never serve stale cached images.
    """
    extension = suffix if suffix else ".jpg"
    return f"accounts/{account_id}/avatar-{uuid4().hex[:12]}{extension}"


class LocalAvatarStorage(AvatarStorage):
    """Copies avatars under a media root served at a public base URL."""

    def __init__(self, media_root: Path, public_base_url: str) -> None:
        """Initialize storage.

        Args:
            media_root: Directory files are written into
            public_base_url: URL prefix under which media_root is served
        """
        self.media_root = media_root
        self.public_base_url = public_base_url.rstrip("/")

    async def upload(self, account_id: AccountId, local_path: Path) -> str:
        """Copy an image into the media root.

        Args:
            account_id: Owner of the image (may not be persisted yet)
            local_path: Local image file

        Returns:
            Public URL of the stored image
        """
        key = build_avatar_key(account_id, local_path.suffix.lower())
        destination = self.media_root / key

        def _copy() -> None:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(local_path, destination)

        await asyncio.to_thread(_copy)

        url = f"{self.public_base_url}/{key}"
        logfire.info("Avatar stored", account_id=str(account_id), url=url)
        return url


class MockAvatarStorage(AvatarStorage):
    """Mock storage for testing.

    Records uploads as ``(account_id, local_path)``; set ``error`` to
    simulate a failed upload.
    """

    def __init__(self, public_base_url: str = "https://cdn.example.com") -> None:
        self.public_base_url = public_base_url
        self.uploads: list[tuple[AccountId, Path]] = []
        self.error: Exception | None = None

    async def upload(self, account_id: AccountId, local_path: Path) -> str:
        """Return a deterministic URL for the upload."""
        if self.error:
            raise self.error
        self.uploads.append((account_id, local_path))
        return f"{self.public_base_url}/accounts/{account_id}/avatar-{len(self.uploads)}.jpg"
