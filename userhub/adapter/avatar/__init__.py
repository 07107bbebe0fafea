"""Avatar download and storage adapters."""

from .download import HttpAvatarDownloader, MockAvatarDownloader
from .storage import LocalAvatarStorage, MockAvatarStorage

__all__ = [
    "HttpAvatarDownloader",
    "LocalAvatarStorage",
    "MockAvatarDownloader",
    "MockAvatarStorage",
]
