"""Token operations - mint bootstrap tokens scoped to a cluster's PKI policy."""

from __future__ import annotations

import hvac

from certctl.lib.errors import TokenGenerationError
from certctl.lib.logging_config import get_logger
from certctl.lib.result import Err, Ok, Result
from certctl.lib.vault import VAULT_ERRORS
from certctl.models import TokenCreateSpec

log = get_logger(__name__)


def _create_token(client: hvac.Client, spec: TokenCreateSpec) -> str | None:
    response = client.auth.token.create(
        policies=[spec.policy_name],
        meta={"cluster-id": spec.cluster_id},
        no_parent=True,
        ttl=spec.ttl,
        display_name=spec.cluster_id,
    )
    return (response or {}).get("auth", {}).get("client_token")


def create_tokens(
    client: hvac.Client, spec: TokenCreateSpec
) -> Result[tuple[str, ...], TokenGenerationError]:
    """Mint spec.num orphan tokens carrying the cluster's issue policy.

    Tokens come back in creation order. A missing or repeated token fails
    the whole batch; tokens already minted are not revoked.
    """
    tokens: list[str] = []

    for i in range(spec.num):
        log.debug("Creating token %d/%d for cluster %s", i + 1, spec.num, spec.cluster_id)
        try:
            token = _create_token(client, spec)
        except VAULT_ERRORS as e:
            return Err(TokenGenerationError(spec.cluster_id, str(e) or type(e).__name__))

        if not token:
            return Err(TokenGenerationError(spec.cluster_id, "Vault returned no client token"))
        if token in tokens:
            return Err(TokenGenerationError(spec.cluster_id, "Vault returned a duplicate token"))
        tokens.append(token)

    return Ok(tuple(tokens))
