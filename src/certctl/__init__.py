"""certctl - Vault PKI setup for clusters."""

__version__ = "0.1.0"
