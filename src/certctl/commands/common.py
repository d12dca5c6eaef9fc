"""Shared CLI utilities.

Vault connection options, error handling, output formatting.
"""

import json
import sys
from collections.abc import Callable
from dataclasses import asdict, is_dataclass
from typing import Any, ParamSpec, TypeVar

import click

from certctl.lib.errors import (
    BackendSetupError,
    InvalidConfigurationError,
    TokenGenerationError,
    VaultConnectionError,
)
from certctl.lib.result import Err, Ok, Result
from certctl.lib.vault import DEFAULT_ADDRESS

P = ParamSpec("P")
T = TypeVar("T")


def vault_addr_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --vault-addr option (env VAULT_ADDR)."""
    return click.option(
        "--vault-addr",
        envvar="VAULT_ADDR",
        default=DEFAULT_ADDRESS,
        show_default=True,
        help="Address used to connect to Vault.",
    )(fn)


def vault_token_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --vault-token option (env VAULT_TOKEN)."""
    return click.option(
        "--vault-token",
        envvar="VAULT_TOKEN",
        default="",
        show_default=False,
        help="Token used to authenticate against Vault.",
    )(fn)


def cluster_id_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --cluster-id option."""
    return click.option(
        "--cluster-id",
        default="",
        help="Cluster ID the PKI backend belongs to.",
    )(fn)


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def vault_options(fn: Callable[P, T]) -> Callable[P, T]:
    """Add all Vault connection options (address, token)."""
    fn = vault_addr_option(fn)
    fn = vault_token_option(fn)
    return fn


def handle_result(result: Result[T, Any]) -> T:
    """Return the Ok value, or print the error and exit with code 1."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            handle_error(error)
            sys.exit(1)  # Should never reach here, but for type checker


def handle_error(error: Any) -> None:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case InvalidConfigurationError(field, reason):
            return f"Invalid configuration (--{field}): {reason}"

        case VaultConnectionError(address, reason):
            return f"Cannot create Vault client for '{address}': {reason}"

        case BackendSetupError(cluster_id, "inspect", reason):
            return f"Failed to inspect PKI backend for cluster '{cluster_id}': {reason}"

        case BackendSetupError(cluster_id, step, reason):
            return (
                f"PKI backend setup for cluster '{cluster_id}' failed at step '{step}': "
                f"{reason}. Earlier steps were not rolled back; re-run setup to resume."
            )

        case TokenGenerationError(cluster_id, reason):
            return (
                f"Token generation for cluster '{cluster_id}' failed: {reason}. "
                "The PKI backend is set up but no tokens were issued."
            )

        case _:
            return str(error)


def to_json(obj: Any) -> str:
    """Convert a dataclass (or plain value) to a JSON string."""
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, indent=2)


def echo_key_value(key: str, value: Any, indent: int = 0) -> None:
    """Print a key-value pair with optional indentation."""
    prefix = "  " * indent
    click.echo(f"{prefix}{key}: {value}")
