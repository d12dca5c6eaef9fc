"""Inspect command - show which parts of a cluster's PKI backend exist."""

import click

from certctl.commands.common import (
    cluster_id_option,
    echo_key_value,
    handle_result,
    json_option,
    to_json,
    vault_options,
)
from certctl.models import mount_path
from certctl.workflows.inspect import inspect_cluster


def _mark(done: bool) -> str:
    return "yes" if done else "no"


@click.command()
@vault_options
@cluster_id_option
@json_option
def inspect(vault_addr: str, vault_token: str, cluster_id: str, as_json: bool) -> None:
    """Inspect the Vault PKI backend of a cluster.

    \b
    Examples:
      certctl inspect --cluster-id c1
      certctl inspect --cluster-id c1 --json
    """
    status = handle_result(inspect_cluster(vault_addr, vault_token, cluster_id))

    if as_json:
        click.echo(to_json(status))
        return

    click.echo(f"PKI backend for cluster '{cluster_id}' ({mount_path(cluster_id)}):")
    click.echo()
    echo_key_value("Backend mounted", _mark(status.mounted), indent=2)
    echo_key_value("Root CA generated", _mark(status.ca_generated), indent=2)
    echo_key_value("Role created", _mark(status.role_created), indent=2)
    echo_key_value("Policy created", _mark(status.policy_created), indent=2)

    if not status.is_complete:
        click.echo()
        click.echo("Run 'certctl setup' to complete the PKI backend.")
