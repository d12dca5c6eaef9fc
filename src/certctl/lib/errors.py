"""Error types for certctl.

Errors are frozen dataclasses returned inside Err, one per setup step.
The CLI layer pattern matches on them to print a message and exit.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class InvalidConfigurationError:
    """A required input is missing or invalid."""

    field: str
    reason: str


@dataclass(frozen=True, slots=True)
class VaultConnectionError:
    """The Vault client could not be built."""

    address: str
    reason: str


@dataclass(frozen=True, slots=True)
class BackendSetupError:
    """Provisioning the cluster's PKI backend failed.

    step is one of "mount", "root-ca", "role", "policy" (or "inspect" when
    reading state). Earlier steps stay provisioned in Vault.
    """

    cluster_id: str
    step: str
    reason: str


@dataclass(frozen=True, slots=True)
class TokenGenerationError:
    """Minting bootstrap tokens failed after the backend was set up."""

    cluster_id: str
    reason: str


ConnectError: TypeAlias = InvalidConfigurationError | VaultConnectionError
SetupError: TypeAlias = ConnectError | BackendSetupError | TokenGenerationError
InspectError: TypeAlias = ConnectError | BackendSetupError
