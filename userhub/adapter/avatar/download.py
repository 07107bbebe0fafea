"""Remote avatar download."""

import asyncio
import mimetypes
import tempfile
from pathlib import Path

import httpx
import logfire

from userhub.adapter.error import AvatarDownloadError
from userhub.domain.service.avatar_service import AvatarDownloader


def _write_temp_file(content: bytes, suffix: str) -> Path:
    with tempfile.NamedTemporaryFile(
        delete=False, prefix="avatar-", suffix=suffix
    ) as tmp:
        tmp.write(content)
        return Path(tmp.name)


class HttpAvatarDownloader(AvatarDownloader):
    """Downloads avatar images over HTTP into temporary files."""

    def __init__(self, timeout: float = 10.0, max_bytes: int = 5 * 1024 * 1024) -> None:
        """Initialize downloader.

        Args:
            timeout: Request timeout in seconds
            max_bytes: Largest accepted image size
        """
        self.timeout = timeout
        self.max_bytes = max_bytes

    async def download_from_url(self, url: str) -> Path:
        """Download an image to a temporary file.

        Args:
            url: Remote image URL

        Returns:
            Path of the temporary file (suffix guessed from Content-Type)

        Raises:
            AvatarDownloadError: On HTTP errors, non-image responses or
                oversized images
        """
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                async with client.stream("GET", url, timeout=self.timeout) as response:
                    if response.status_code != 200:
                        logfire.error(
                            "Avatar download failed",
                            url=url,
                            status_code=response.status_code,
                        )
                        raise AvatarDownloadError(
                            f"Avatar download failed: {response.status_code}"
                        )

                    content_type = (
                        response.headers.get("content-type", "")
                        .split(";")[0]
                        .strip()
                    )
                    if content_type and not content_type.startswith("image/"):
                        raise AvatarDownloadError(
                            f"Avatar URL did not return an image: {content_type}"
                        )

                    content = bytearray()
                    async for chunk in response.aiter_bytes():
                        content.extend(chunk)
                        if len(content) > self.max_bytes:
                            raise AvatarDownloadError(
                                f"Avatar exceeds {self.max_bytes} bytes"
                            )

        except httpx.HTTPError as e:
            logfire.error("Avatar download HTTP error", url=url, error=str(e))
            raise AvatarDownloadError(f"HTTP error downloading avatar: {e}")

        suffix = mimetypes.guess_extension(content_type) or ".jpg"
        path = await asyncio.to_thread(_write_temp_file, bytes(content), suffix)
        logfire.info("Avatar downloaded", url=url, size=len(content), path=str(path))
        return path

    async def discard(self, path: Path) -> None:
        """Delete a downloaded temporary file."""
        await asyncio.to_thread(path.unlink, missing_ok=True)


class MockAvatarDownloader(AvatarDownloader):
    """Mock downloader for testing.

    Records requested URLs and discarded paths; set ``error`` to simulate
    a failed download.
    """

    def __init__(self) -> None:
        self.downloaded: list[str] = []
        self.discarded: list[Path] = []
        self.error: AvatarDownloadError | None = None

    async def download_from_url(self, url: str) -> Path:
        """Return a fake local path for the URL."""
        if self.error:
            raise self.error
        self.downloaded.append(url)
        return Path(f"/tmp/mock-avatar-{len(self.downloaded)}.jpg")

    async def discard(self, path: Path) -> None:
        """Record the discarded path."""
        self.discarded.append(path)
