"""Tests for workflows/inspect.py - read-only PKI backend status."""

from unittest.mock import MagicMock, patch

from certctl.lib.errors import InvalidConfigurationError, VaultConnectionError
from certctl.lib.result import Err, Ok
from certctl.models import PKIStatus
from certctl.workflows.inspect import inspect_cluster


class TestInspectCluster:
    def test_empty_token(self) -> None:
        with patch("certctl.workflows.inspect.connect") as mock_connect:
            result = inspect_cluster("http://127.0.0.1:8200", "", "c1")

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidConfigurationError)
        assert result.error.field == "vault-token"
        mock_connect.assert_not_called()

    def test_empty_cluster_id(self) -> None:
        with patch("certctl.workflows.inspect.connect") as mock_connect:
            result = inspect_cluster("http://127.0.0.1:8200", "root", "")

        assert isinstance(result, Err)
        assert result.error.field == "cluster-id"
        mock_connect.assert_not_called()

    def test_malformed_address(self) -> None:
        result = inspect_cluster("vault", "root", "c1")

        assert isinstance(result, Err)
        assert isinstance(result.error, VaultConnectionError)

    def test_reports_status(self, vault_client: MagicMock) -> None:
        vault_client.sys.list_mounted_secrets_engines.return_value = {"data": {"pki-c1/": {}}}
        vault_client.secrets.pki.read_ca_certificate.return_value = "-----BEGIN CERTIFICATE-----"

        with patch("certctl.workflows.inspect.connect", return_value=Ok(vault_client)):
            result = inspect_cluster("http://127.0.0.1:8200", "root", "c1")

        assert result == Ok(PKIStatus("c1", True, True, True, True))
