"""Account use cases."""

from .get_account import GetAccountUseCase
from .update_account import UpdateAccountUseCase
from .update_account_avatar import UpdateAccountAvatarUseCase

__all__ = ["GetAccountUseCase", "UpdateAccountUseCase", "UpdateAccountAvatarUseCase"]
