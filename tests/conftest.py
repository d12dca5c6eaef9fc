"""Shared pytest fixtures for certctl tests."""

import itertools
from unittest.mock import MagicMock

import pytest

from certctl.models import SetupRequest


@pytest.fixture
def setup_request() -> SetupRequest:
    """A complete, valid setup request for cluster c1."""
    return SetupRequest(
        vault_address="http://127.0.0.1:8200",
        vault_token="root",
        cluster_id="c1",
        allowed_domains="example.com",
        common_name="c1 CA",
        ca_ttl="86400h",
        num_tokens=2,
        token_ttl="720h",
    )


@pytest.fixture
def vault_client() -> MagicMock:
    """Mocked hvac client for a healthy Vault with nothing set up yet.

    Every token create call returns a new token (t-1, t-2, ...).
    """
    client = MagicMock()
    client.sys.list_mounted_secrets_engines.return_value = {
        "data": {"secret/": {"type": "kv"}, "sys/": {"type": "system"}}
    }
    client.secrets.pki.read_ca_certificate.return_value = ""

    counter = itertools.count(1)
    client.auth.token.create.side_effect = lambda **_: {
        "auth": {"client_token": f"t-{next(counter)}"}
    }
    return client
