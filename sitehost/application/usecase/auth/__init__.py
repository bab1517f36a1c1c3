"""Authentication use cases."""

from .sign_in import SignInRequest, SignInResponse, SignInUseCase

__all__ = [
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
]
