"""Workflows layer - orchestrate operations into user intents."""

from certctl.workflows.inspect import inspect_cluster
from certctl.workflows.setup import setup_cluster, validate_request

__all__ = [
    "setup_cluster",
    "validate_request",
    "inspect_cluster",
]
