"""certctl data models.

Frozen dataclasses passed by value between the workflow steps, plus the
per-cluster naming scheme used for every Vault object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

DEFAULT_CA_TTL = "86400h"  # 10 years
DEFAULT_TOKEN_TTL = "720h"  # 30 days
DEFAULT_NUM_TOKENS = 1


def mount_path(cluster_id: str) -> str:
    """PKI secrets engine mount for a cluster."""
    return f"pki-{cluster_id}"


def role_name(cluster_id: str) -> str:
    return f"role-{cluster_id}"


def policy_name(cluster_id: str) -> str:
    return f"pki-issue-policy-{cluster_id}"


def policy_document(cluster_id: str) -> str:
    """HCL policy allowing certificate issuance through the cluster's role."""
    return (
        f'path "{mount_path(cluster_id)}/issue/{role_name(cluster_id)}" {{\n'
        f'  capabilities = ["create", "update"]\n'
        f"}}\n"
    )


@dataclass(frozen=True)
class SetupRequest:
    """Operator parameters for one setup run."""

    vault_address: str
    vault_token: str
    cluster_id: str
    allowed_domains: str
    common_name: str
    ca_ttl: str = DEFAULT_CA_TTL
    allow_bare_domains: bool = False
    num_tokens: int = DEFAULT_NUM_TOKENS
    token_ttl: str = DEFAULT_TOKEN_TTL

    def __repr__(self) -> str:
        return (
            f"SetupRequest(vault_address={self.vault_address!r}, vault_token='***', "
            f"cluster_id={self.cluster_id!r}, allowed_domains={self.allowed_domains!r}, "
            f"common_name={self.common_name!r}, ca_ttl={self.ca_ttl!r}, "
            f"allow_bare_domains={self.allow_bare_domains!r}, "
            f"num_tokens={self.num_tokens!r}, token_ttl={self.token_ttl!r})"
        )


@dataclass(frozen=True)
class PKICreateSpec:
    """What the PKI backend operation provisions for one cluster."""

    cluster_id: str
    common_name: str
    allowed_domains: str
    ttl: str
    allow_bare_domains: bool

    @classmethod
    def from_request(cls, request: SetupRequest) -> Self:
        return cls(
            cluster_id=request.cluster_id,
            common_name=request.common_name,
            allowed_domains=request.allowed_domains,
            ttl=request.ca_ttl,
            allow_bare_domains=request.allow_bare_domains,
        )

    @property
    def mount_path(self) -> str:
        return mount_path(self.cluster_id)

    @property
    def role_name(self) -> str:
        return role_name(self.cluster_id)

    @property
    def policy_name(self) -> str:
        return policy_name(self.cluster_id)


@dataclass(frozen=True)
class TokenCreateSpec:
    """How many bootstrap tokens to mint for a cluster, and for how long."""

    cluster_id: str
    num: int
    ttl: str

    @classmethod
    def from_request(cls, request: SetupRequest) -> Self:
        return cls(
            cluster_id=request.cluster_id,
            num=request.num_tokens,
            ttl=request.token_ttl,
        )

    @property
    def policy_name(self) -> str:
        return policy_name(self.cluster_id)


@dataclass(frozen=True)
class SetupResult:
    """Outcome of a successful setup run. Tokens are secrets; never persist them."""

    cluster_id: str
    tokens: tuple[str, ...]

    def __repr__(self) -> str:
        return f"SetupResult(cluster_id={self.cluster_id!r}, tokens=<{len(self.tokens)} hidden>)"


@dataclass(frozen=True)
class PKIStatus:
    """Which parts of a cluster's PKI backend exist in Vault."""

    cluster_id: str
    mounted: bool
    ca_generated: bool
    role_created: bool
    policy_created: bool

    @property
    def is_complete(self) -> bool:
        return self.mounted and self.ca_generated and self.role_created and self.policy_created
