"""Setup command - provision a cluster's PKI backend and bootstrap tokens."""

import click

from certctl.commands.common import (
    cluster_id_option,
    handle_result,
    json_option,
    to_json,
    vault_options,
)
from certctl.commands.report import format_setup_summary
from certctl.models import DEFAULT_CA_TTL, DEFAULT_NUM_TOKENS, DEFAULT_TOKEN_TTL, SetupRequest
from certctl.workflows.setup import setup_cluster


@click.command()
@vault_options
@cluster_id_option
@click.option(
    "--allowed-domains",
    default="",
    help="Comma separated domains allowed to authenticate against the cluster's root CA.",
)
@click.option(
    "--common-name",
    default="",
    help="Common name used to generate a new root CA for.",
)
@click.option(
    "--ca-ttl",
    default=DEFAULT_CA_TTL,
    show_default=True,
    help="TTL used to generate a new root CA.",
)
@click.option(
    "--allow-bare-domains",
    is_flag=True,
    help="Allow issuing certs for bare domains.",
)
@click.option(
    "--num-tokens",
    type=click.IntRange(min=1),
    default=DEFAULT_NUM_TOKENS,
    show_default=True,
    help="Number of tokens to generate.",
)
@click.option(
    "--token-ttl",
    default=DEFAULT_TOKEN_TTL,
    show_default=True,
    help="TTL used to generate new tokens.",
)
@json_option
def setup(
    vault_addr: str,
    vault_token: str,
    cluster_id: str,
    allowed_domains: str,
    common_name: str,
    ca_ttl: str,
    allow_bare_domains: bool,
    num_tokens: int,
    token_ttl: str,
    as_json: bool,
) -> None:
    """Setup a Vault PKI backend including all necessary requirements.

    Mounts pki-<cluster-id>, generates its root CA, creates the issuing
    role and policy, then prints freshly minted bootstrap tokens. Safe to
    re-run after a failure.

    \b
    Examples:
      certctl setup --cluster-id c1 --allowed-domains example.com --common-name "c1 CA"
      certctl setup --cluster-id c1 --allowed-domains example.com \\
          --common-name "c1 CA" --num-tokens 3 --token-ttl 24h
    """
    request = SetupRequest(
        vault_address=vault_addr,
        vault_token=vault_token,
        cluster_id=cluster_id,
        allowed_domains=allowed_domains,
        common_name=common_name,
        ca_ttl=ca_ttl,
        allow_bare_domains=allow_bare_domains,
        num_tokens=num_tokens,
        token_ttl=token_ttl,
    )

    result = handle_result(setup_cluster(request))

    if as_json:
        click.echo(to_json(result))
        return

    click.echo(format_setup_summary(result), nl=False)
