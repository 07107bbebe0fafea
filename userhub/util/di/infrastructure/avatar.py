"""Avatar infrastructure providers."""

from dishka import Scope, provide

from userhub.adapter.avatar import HttpAvatarDownloader, LocalAvatarStorage
from userhub.config import AvatarSettings
from userhub.domain.service import AvatarDownloader, AvatarStorage
from userhub.util.di.base import ProviderBase


class AvatarProvider(ProviderBase):
    """Avatar component base."""

    __mock_component__ = "avatar"


class ProdAvatarProvider(AvatarProvider):
    """Production avatar provider: HTTP downloads, local media storage."""

    __is_mock__ = False

    scope = Scope.APP

    @provide
    def get_avatar_downloader(self, avatars: AvatarSettings) -> AvatarDownloader:
        """Provide avatar downloader."""
        return HttpAvatarDownloader(
            timeout=avatars.download_timeout, max_bytes=avatars.max_bytes
        )

    @provide
    def get_avatar_storage(self, avatars: AvatarSettings) -> AvatarStorage:
        """Provide avatar storage."""
        return LocalAvatarStorage(
            media_root=avatars.media_root, public_base_url=avatars.public_base_url
        )
