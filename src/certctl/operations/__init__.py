"""Operations layer - single Vault operations that return Result types."""

from certctl.operations.pki import create_pki_backend, describe_pki_backend
from certctl.operations.token import create_tokens

__all__ = [
    # pki
    "create_pki_backend",
    "describe_pki_backend",
    # token
    "create_tokens",
]
