"""Authentication use cases."""

from .sign_in import SignInUseCase

__all__ = ["SignInUseCase"]
