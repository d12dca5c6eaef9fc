"""Vault client construction.

VaultFactory is configured once at workflow entry from the address, the
HTTP session and the admin token, then builds the hvac client used for
every call of the run. Building a client does not touch the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

import hvac
import requests
from hvac.exceptions import VaultError
from requests.exceptions import RequestException

from certctl.lib.errors import InvalidConfigurationError, VaultConnectionError
from certctl.lib.result import Err, Ok, Result

DEFAULT_ADDRESS = "http://127.0.0.1:8200"

# Raised by any call through the client; operations turn them into Err values
VAULT_ERRORS = (VaultError, RequestException)


@dataclass(frozen=True)
class VaultFactory:
    """Builds authenticated Vault clients for one address and admin token.

    Example:
        match VaultFactory.configure(address, requests.Session(), token):
            case Ok(factory):
                client = factory.new_client()
    """

    address: str
    session: requests.Session
    admin_token: str

    @classmethod
    def configure(
        cls,
        address: str,
        session: requests.Session | None,
        admin_token: str,
    ) -> Result[VaultFactory, InvalidConfigurationError]:
        """Check the factory inputs in order: address, session, admin token."""
        if not address:
            return Err(InvalidConfigurationError("vault-addr", "Vault address must not be empty"))
        if session is None:
            return Err(InvalidConfigurationError("session", "HTTP session must not be empty"))
        if not admin_token:
            return Err(
                InvalidConfigurationError("vault-token", "Vault admin token must not be empty")
            )

        return Ok(cls(address=address, session=session, admin_token=admin_token))

    def new_client(self) -> Result[hvac.Client, VaultConnectionError]:
        """Build a client bound to the address and session, authenticated with the admin token."""
        parsed = urlparse(self.address)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return Err(
                VaultConnectionError(self.address, "address must be an http(s) URL with a host")
            )

        try:
            client = hvac.Client(url=self.address, session=self.session)
        except (TypeError, ValueError) as e:
            return Err(VaultConnectionError(self.address, str(e)))

        client.token = self.admin_token
        return Ok(client)


def connect(
    address: str,
    session: requests.Session | None,
    admin_token: str,
) -> Result[hvac.Client, InvalidConfigurationError | VaultConnectionError]:
    """Configure a factory and build its client in one step."""
    match VaultFactory.configure(address, session, admin_token):
        case Err() as e:
            return e
        case Ok(factory):
            return factory.new_client()
