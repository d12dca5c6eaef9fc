"""Inspect workflow - report which setup steps already exist for a cluster."""

import requests

from certctl.lib.errors import InspectError, InvalidConfigurationError
from certctl.lib.result import Err, Ok, Result
from certctl.lib.vault import connect
from certctl.models import PKIStatus
from certctl.operations.pki import describe_pki_backend


def inspect_cluster(
    vault_address: str,
    vault_token: str,
    cluster_id: str,
    session: requests.Session | None = None,
) -> Result[PKIStatus, InspectError]:
    """Read the state of a cluster's PKI backend without changing it."""
    if not vault_token:
        return Err(InvalidConfigurationError("vault-token", "Vault token must not be empty"))
    if not cluster_id:
        return Err(InvalidConfigurationError("cluster-id", "cluster ID must not be empty"))

    match connect(vault_address, session or requests.Session(), vault_token):
        case Err() as e:
            return e
        case Ok(client):
            pass

    return describe_pki_backend(client, cluster_id)
