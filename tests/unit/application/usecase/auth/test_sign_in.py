"""Unit tests for SignInUseCase."""

from dishka import AsyncContainer
import pytest

from userhub.adapter.facebook.client import FacebookGraphClient
from userhub.adapter.google.client import GoogleOAuthClient, GoogleOAuthError
from userhub.application.usecase.auth import SignInUseCase
from userhub.domain.error import AccountValidationError, MalformedProfileError
from userhub.domain.repository import AccountRepository
from userhub.domain.service import (
    AccountMaterializer,
    AuthService,
    AvatarDownloader,
    AvatarStorage,
    IdentityResolver,
    SignInEvents,
)
from userhub.domain.value import MatchKind
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSignInWithGoogle:
    """Tests for SignInUseCase.sign_in_with_google()."""

    @pytest.mark.asyncio
    async def test_links_existing_account_found_by_email(self, unit_env: AsyncContainer):
        """Existing email without a Google id should be linked, not duplicated."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        google.profile = {**google.profile, "id": "g1", "email": "a@x.com"}
        existing = make_account(email="a@x.com")
        await repo.save(existing)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_google("auth-code-1")

        # Assert
        assert response.match == MatchKind.FOUND_BY_EMAIL
        assert response.created is False
        assert response.account.account_id == str(existing.id)
        assert response.account.google_external_id == "g1"
        assert len(repo.all()) == 1
        assert (await repo.find_by_id(existing.id)).google_external_id == "g1"
        assert google.codes == ["auth-code-1"]

    @pytest.mark.asyncio
    async def test_creates_account_for_unknown_profile(self, unit_env: AsyncContainer):
        """Unknown email and external id should create exactly one account."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        downloader = await unit_env.get(AvatarDownloader)
        google.profile = {
            "id": "g2",
            "email": "new@x.com",
            "given_name": "A",
            "family_name": "B",
            "picture": "http://img",
        }
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_google("auth-code-2")

        # Assert
        assert response.match == MatchKind.NOT_FOUND
        assert response.created is True
        accounts = repo.all()
        assert len(accounts) == 1
        created = accounts[0]
        assert created.first_name == "A"
        assert created.last_name == "B"
        assert created.email == "new@x.com"
        assert created.google_external_id == "g2"
        assert created.avatar_url
        assert downloader.downloaded == ["http://img"]

    @pytest.mark.asyncio
    async def test_found_by_external_id_is_not_mutated(self, unit_env: AsyncContainer):
        """A match on external id alone should return the account unchanged."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        google.profile = {**google.profile, "id": "g3", "email": "changed@x.com"}
        existing = make_account(email="original@x.com", google_external_id="g3")
        await repo.save(existing)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_google("auth-code")

        # Assert
        assert response.match == MatchKind.FOUND_BY_EXTERNAL_ID
        assert response.account.email == "original@x.com"
        assert repo.save_count == 1
        assert await repo.find_by_id(existing.id) == existing

    @pytest.mark.asyncio
    async def test_repeated_sign_in_is_idempotent(self, unit_env: AsyncContainer):
        """Signing in twice should reuse the account created the first time."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        first = await use_case.sign_in_with_google("code-1")
        saves_after_first = repo.save_count
        second = await use_case.sign_in_with_google("code-2")

        # Assert
        assert first.created is True
        assert second.created is False
        assert second.match == MatchKind.FOUND_BY_EMAIL
        assert second.account.account_id == first.account.account_id
        assert len(repo.all()) == 1
        assert repo.save_count == saves_after_first

    @pytest.mark.asyncio
    async def test_existing_different_external_id_is_kept(
        self, unit_env: AsyncContainer
    ):
        """An email match already linked to another Google id keeps that id."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        google.profile = {**google.profile, "id": "g-new", "email": "a@x.com"}
        existing = make_account(email="a@x.com", google_external_id="g-old")
        await repo.save(existing)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_google("code")

        # Assert
        assert response.match == MatchKind.FOUND_BY_EMAIL
        assert response.account.google_external_id == "g-old"
        assert repo.save_count == 1

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, unit_env: AsyncContainer):
        """A failed code exchange should surface and create nothing."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        google.error = GoogleOAuthError("Token exchange failed: 400")
        use_case = await unit_env.get(SignInUseCase)

        # Act & Assert
        with pytest.raises(GoogleOAuthError):
            await use_case.sign_in_with_google("bad-code")

        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_malformed_profile_creates_nothing(self, unit_env: AsyncContainer):
        """A profile without an email should be rejected before any lookup."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        google.profile = {k: v for k, v in google.profile.items() if k != "email"}
        use_case = await unit_env.get(SignInUseCase)

        # Act & Assert
        with pytest.raises(MalformedProfileError):
            await use_case.sign_in_with_google("code")

        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_profile_without_family_name_creates_nothing(
        self, unit_env: AsyncContainer
    ):
        """A new profile missing a last name should be rejected."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        downloader = await unit_env.get(AvatarDownloader)
        google.profile = {
            k: v for k, v in google.profile.items() if k != "family_name"
        }
        use_case = await unit_env.get(SignInUseCase)

        # Act & Assert
        with pytest.raises(AccountValidationError) as exc_info:
            await use_case.sign_in_with_google("code")

        assert exc_info.value.code == "last_name_required"
        assert downloader.downloaded == []
        assert repo.all() == []

    @pytest.mark.asyncio
    async def test_external_id_owned_elsewhere_returns_email_match_unlinked(
        self, unit_env: AsyncContainer
    ):
        """A Google id held by another account leaves the email match unlinked."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        google = await unit_env.get(GoogleOAuthClient)
        google.profile = {**google.profile, "id": "g1", "email": "b@x.com"}
        first = make_account(email="a@x.com", google_external_id="g1")
        second = make_account(email="b@x.com")
        await repo.save(first)
        await repo.save(second)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_google("code")

        # Assert
        assert response.match == MatchKind.FOUND_BY_EMAIL
        assert response.created is False
        assert response.account.account_id == str(second.id)
        assert response.account.google_external_id is None
        assert len(repo.all()) == 2
        assert (await repo.find_by_id(first.id)).google_external_id == "g1"
        assert (await repo.find_by_id(second.id)).google_external_id is None


class TestSignInWithFacebook:
    """Tests for SignInUseCase.sign_in_with_facebook()."""

    @pytest.mark.asyncio
    async def test_creates_account_with_facebook_id(self, unit_env: AsyncContainer):
        """A new Facebook user should get an account with the Graph avatar."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        facebook = await unit_env.get(FacebookGraphClient)
        downloader = await unit_env.get(AvatarDownloader)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_facebook("fb-token")

        # Assert
        assert response.created is True
        assert response.account.facebook_external_id == "1000000001"
        assert response.account.google_external_id is None
        assert facebook.tokens == ["fb-token"]
        assert downloader.downloaded == [
            "https://platform-lookaside.fbsbx.com/mock-avatar"
        ]
        assert len(repo.all()) == 1

    @pytest.mark.asyncio
    async def test_links_facebook_to_google_account(self, unit_env: AsyncContainer):
        """Signing in with Facebook under a Google account's email links both."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        facebook = await unit_env.get(FacebookGraphClient)
        facebook.profile = {**facebook.profile, "email": "a@x.com"}
        existing = make_account(email="a@x.com", google_external_id="g1")
        await repo.save(existing)
        use_case = await unit_env.get(SignInUseCase)

        # Act
        response = await use_case.sign_in_with_facebook("fb-token")

        # Assert
        assert response.match == MatchKind.FOUND_BY_EMAIL
        stored = await repo.find_by_id(existing.id)
        assert stored.google_external_id == "g1"
        assert stored.facebook_external_id == "1000000001"


class RacingMaterializer(AccountMaterializer):
    """Lets a concurrent sign-in create the same account first."""

    def __init__(self, winner, **kwargs):
        super().__init__(**kwargs)
        self.winner = winner

    async def materialize(self, profile):
        await self.account_repository.save(self.winner)
        return await super().materialize(profile)


class TestConcurrentCreation:
    """Tests for losing the account creation race."""

    @pytest.mark.asyncio
    async def test_conflict_returns_winning_account(self, unit_env: AsyncContainer):
        """A uniqueness conflict should resolve to the account created first."""
        # Arrange
        repo = await unit_env.get(AccountRepository)
        winner = make_account(
            email="mock.user@gmail.com", google_external_id="google-mock-123"
        )
        use_case = SignInUseCase(
            auth_service=await unit_env.get(AuthService),
            identity_resolver=await unit_env.get(IdentityResolver),
            account_materializer=RacingMaterializer(
                winner,
                account_repository=repo,
                avatar_downloader=await unit_env.get(AvatarDownloader),
                avatar_storage=await unit_env.get(AvatarStorage),
            ),
            events=await unit_env.get(SignInEvents),
        )

        # Act
        response = await use_case.sign_in_with_google("code")

        # Assert
        assert response.created is False
        assert response.match == MatchKind.FOUND_BY_EMAIL
        assert response.account.account_id == str(winner.id)
        assert len(repo.all()) == 1
