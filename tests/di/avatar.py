"""Mock avatar providers for testing."""

from dishka import Scope, provide

from userhub.adapter.avatar import MockAvatarDownloader, MockAvatarStorage
from userhub.domain.service import AvatarDownloader, AvatarStorage
from userhub.util.di.infrastructure.avatar import AvatarProvider


class MockAvatarProvider(AvatarProvider):
    """Mock avatar provider recording downloads and uploads."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_avatar_downloader(self) -> AvatarDownloader:
        """Provide mock avatar downloader."""
        return MockAvatarDownloader()

    @provide(scope=Scope.APP)
    def get_avatar_storage(self) -> AvatarStorage:
        """Provide mock avatar storage."""
        return MockAvatarStorage()
