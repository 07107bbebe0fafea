"""Unit tests for AccountService."""

from pathlib import Path
from uuid import uuid4

import pytest

from userhub.adapter.avatar import MockAvatarStorage
from userhub.domain.error import (
    AccountConflictError,
    AccountValidationError,
    NotFoundError,
)
from userhub.domain.service import AccountService, validate_account_attributes
from userhub.domain.value import AccountId, AccountPatch
from userhub.persistence.repository.inmemory import InMemoryAccountRepository
from tests.factories import make_account


class TestValidateAccountAttributes:
    """Tests for validate_account_attributes()."""

    def test_valid_attributes_pass(self):
        validate_account_attributes(
            {"first_name": "Jane", "last_name": "Doe", "email": "jane@example.com"}
        )

    @pytest.mark.parametrize(
        "attributes,code",
        [
            ({"first_name": "", "last_name": "", "email": ""}, "first_name_required"),
            ({"first_name": "Jane", "last_name": None, "email": ""}, "last_name_required"),
            ({"first_name": "Jane", "last_name": "Doe", "email": "  "}, "email_required"),
        ],
    )
    def test_reports_first_failure_in_order(self, attributes, code):
        """Should check first name, then last name, then email."""
        with pytest.raises(AccountValidationError) as exc_info:
            validate_account_attributes(attributes)

        assert exc_info.value.code == code


class TestGetById:
    """Tests for AccountService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_missing_account_raises(self):
        """Should raise NotFoundError for an unknown id."""
        service = AccountService(InMemoryAccountRepository(), MockAvatarStorage())

        with pytest.raises(NotFoundError):
            await service.get_by_id(AccountId(uuid4()))


class TestUpdateAttributes:
    """Tests for AccountService.update_attributes()."""

    @pytest.mark.asyncio
    async def test_applies_only_present_fields(self):
        """Should leave attributes absent from the patch untouched."""
        repo = InMemoryAccountRepository()
        account = make_account()
        await repo.save(account)
        service = AccountService(repo, MockAvatarStorage())

        updated = await service.update_attributes(
            account.id, AccountPatch(last_name="Smith")
        )

        assert updated.first_name == "Jane"
        assert updated.last_name == "Smith"
        assert updated.email == "jane@example.com"
        assert updated.updated_at >= account.updated_at

    @pytest.mark.asyncio
    async def test_empty_first_name_rejected_without_saving(self):
        """Should raise first_name_required and write nothing."""
        repo = InMemoryAccountRepository()
        account = make_account()
        await repo.save(account)
        service = AccountService(repo, MockAvatarStorage())

        with pytest.raises(AccountValidationError) as exc_info:
            await service.update_attributes(account.id, AccountPatch(first_name=""))

        assert exc_info.value.code == "first_name_required"
        assert repo.save_count == 1
        assert (await repo.find_by_id(account.id)).first_name == "Jane"

    @pytest.mark.asyncio
    async def test_email_taken_by_other_account_conflicts(self):
        """Should refuse to give two accounts the same email."""
        repo = InMemoryAccountRepository()
        account = make_account()
        await repo.save(account)
        await repo.save(make_account(email="taken@example.com"))
        service = AccountService(repo, MockAvatarStorage())

        with pytest.raises(AccountConflictError):
            await service.update_attributes(
                account.id, AccountPatch(email="taken@example.com")
            )


class TestUpdateAvatar:
    """Tests for AccountService.update_avatar()."""

    @pytest.mark.asyncio
    async def test_points_account_at_uploaded_image(self):
        """Should upload the image and store the returned URL."""
        repo = InMemoryAccountRepository()
        storage = MockAvatarStorage()
        account = make_account()
        await repo.save(account)
        service = AccountService(repo, storage)

        updated = await service.update_avatar(account.id, Path("/tmp/new.png"))

        assert storage.uploads == [(account.id, Path("/tmp/new.png"))]
        assert updated.avatar_url == (
            f"https://cdn.example.com/accounts/{account.id}/avatar-1.jpg"
        )
        assert (await repo.find_by_id(account.id)).avatar_url == updated.avatar_url

    @pytest.mark.asyncio
    async def test_missing_account_uploads_nothing(self):
        """Should not upload for an unknown account."""
        storage = MockAvatarStorage()
        service = AccountService(InMemoryAccountRepository(), storage)

        with pytest.raises(NotFoundError):
            await service.update_avatar(AccountId(uuid4()), Path("/tmp/new.png"))

        assert storage.uploads == []
