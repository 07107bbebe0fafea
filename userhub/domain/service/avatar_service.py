"""Avatar pipeline interfaces.

Downloading remote images and storing them are infrastructure concerns;
the domain only depends on these contracts.
"""

from pathlib import Path

from userhub.domain.value import AccountId


class AvatarDownloader:
    """Fetches remote avatar images to local temporary files."""

    async def download_from_url(self, url: str) -> Path:
        """Download an image to a local file.

        Args:
            url: Remote image URL

        Returns:
            Path of the downloaded file

        Raises:
            AvatarDownloadError: If the image cannot be fetched
        """
        raise NotImplementedError

    async def discard(self, path: Path) -> None:
        """Remove a file previously returned by download_from_url."""
        raise NotImplementedError


class AvatarStorage:
    """Stores avatar images and returns the URL they are served from."""

    async def upload(self, account_id: AccountId, local_path: Path) -> str:
        """Store an image for an account.

        The account does not need to be persisted yet.

        Args:
            account_id: Owner of the image
            local_path: Local image file

        Returns:
            Stable URL of the stored image
        """
        raise NotImplementedError
