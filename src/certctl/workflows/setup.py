"""Setup workflow - provision a cluster's PKI backend and bootstrap tokens.

The run is a fixed sequence; each step must succeed before the next one
starts and the first Err ends the run:

    validate -> connect -> create PKI backend -> create tokens -> SetupResult

There are no retries and no rollback. A run that fails after the backend
step leaves the backend provisioned; running setup again with the same
input is the recovery path.
"""

import requests

from certctl.lib.errors import InvalidConfigurationError, SetupError
from certctl.lib.logging_config import get_logger
from certctl.lib.result import Err, Ok, Result
from certctl.lib.vault import connect
from certctl.models import PKICreateSpec, SetupRequest, SetupResult, TokenCreateSpec
from certctl.operations.pki import create_pki_backend
from certctl.operations.token import create_tokens

log = get_logger(__name__)

# Validated in this order; the first empty field is reported.
REQUIRED_FIELDS = (
    ("vault_token", "vault-token", "Vault token must not be empty"),
    ("allowed_domains", "allowed-domains", "allowed domains must not be empty"),
    ("cluster_id", "cluster-id", "cluster ID must not be empty"),
    ("common_name", "common-name", "common name must not be empty"),
)


def validate_request(request: SetupRequest) -> Result[SetupRequest, InvalidConfigurationError]:
    """Check the required fields of a setup request.

    Defaulted fields (TTLs, token count, bare domain flag) are not checked
    here; Vault rejects TTLs it cannot parse.
    """
    for attr, field, reason in REQUIRED_FIELDS:
        if not getattr(request, attr):
            return Err(InvalidConfigurationError(field, reason))
    return Ok(request)


def setup_cluster(
    request: SetupRequest,
    session: requests.Session | None = None,
) -> Result[SetupResult, SetupError]:
    """Set up the PKI backend for request.cluster_id and mint its tokens.

    Args:
        request: Operator parameters
        session: HTTP session for Vault calls; a new one is created if omitted

    Returns:
        SetupResult with the cluster ID and the generated tokens on success
    """
    # Validate
    match validate_request(request):
        case Err() as e:
            return e
        case Ok(_):
            pass

    # Connect
    log.info("Connecting to Vault at %s", request.vault_address)
    match connect(request.vault_address, session or requests.Session(), request.vault_token):
        case Err() as e:
            return e
        case Ok(client):
            pass

    # PKI backend: mount, root CA, role, policy
    log.info("Setting up PKI backend for cluster %s", request.cluster_id)
    match create_pki_backend(client, PKICreateSpec.from_request(request)):
        case Err() as e:
            log.error("PKI backend setup failed at step %s", e.error.step)
            return e
        case Ok(_):
            pass

    # Bootstrap tokens
    log.info("Creating %d token(s) for cluster %s", request.num_tokens, request.cluster_id)
    match create_tokens(client, TokenCreateSpec.from_request(request)):
        case Err() as e:
            log.error("Token generation failed; PKI backend stays provisioned")
            return e
        case Ok(tokens):
            pass

    return Ok(SetupResult(cluster_id=request.cluster_id, tokens=tokens))
