"""Tests for commands/common.py - _format_error pattern matching.

Every error type gets its own test to catch wrong positional
destructuring and missing case arms.
"""

from certctl.commands.common import _format_error
from certctl.lib.errors import (
    BackendSetupError,
    InvalidConfigurationError,
    TokenGenerationError,
    VaultConnectionError,
)


class TestFormatError:
    def test_invalid_configuration(self) -> None:
        error = InvalidConfigurationError(field="cluster-id", reason="cluster ID must not be empty")
        result = _format_error(error)
        assert "--cluster-id" in result
        assert "cluster ID must not be empty" in result

    def test_vault_connection(self) -> None:
        error = VaultConnectionError(address="vault:8200", reason="bad scheme")
        result = _format_error(error)
        assert "vault:8200" in result
        assert "bad scheme" in result

    def test_backend_setup(self) -> None:
        error = BackendSetupError(cluster_id="c1", step="role", reason="permission denied")
        result = _format_error(error)
        assert "'c1'" in result
        assert "'role'" in result
        assert "permission denied" in result
        assert "re-run" in result

    def test_backend_inspect(self) -> None:
        error = BackendSetupError(cluster_id="c1", step="inspect", reason="permission denied")
        result = _format_error(error)
        assert "inspect" in result
        assert "re-run" not in result

    def test_token_generation(self) -> None:
        error = TokenGenerationError(cluster_id="c1", reason="denied")
        result = _format_error(error)
        assert "'c1'" in result
        assert "denied" in result
        assert "no tokens were issued" in result

    def test_unknown_error_falls_back_to_str(self) -> None:
        assert _format_error("plain failure") == "plain failure"
