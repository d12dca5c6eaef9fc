"""PKI backend operations - mount, root CA, role and policy for a cluster.

Each sub-step checks Vault before writing where a second write would
change state (mount, root CA), so re-running after a partial failure
resumes instead of conflicting. Nothing is rolled back on failure.
"""

from __future__ import annotations

import hvac
from hvac.exceptions import InvalidPath, InvalidRequest

from certctl.lib.errors import BackendSetupError
from certctl.lib.logging_config import get_logger
from certctl.lib.result import Err, Ok, Result
from certctl.lib.vault import VAULT_ERRORS
from certctl.models import (
    PKICreateSpec,
    PKIStatus,
    mount_path,
    policy_document,
    policy_name,
    role_name,
)

log = get_logger(__name__)


def _is_mounted(client: hvac.Client, path: str) -> bool:
    mounts = client.sys.list_mounted_secrets_engines()
    # Newer Vault versions nest the mount table under "data"
    mounts = mounts.get("data", mounts)
    return f"{path}/" in mounts


def _is_ca_generated(client: hvac.Client, path: str) -> bool:
    # Vault answers 4xx instead of an empty body when the mount has no issuer yet
    try:
        pem = client.secrets.pki.read_ca_certificate(mount_point=path)
    except (InvalidPath, InvalidRequest):
        return False
    return bool(pem and pem.strip())


def _exists(read, *args, **kwargs) -> bool:
    try:
        read(*args, **kwargs)
    except InvalidPath:
        return False
    return True


def _mount(client: hvac.Client, spec: PKICreateSpec) -> None:
    if _is_mounted(client, spec.mount_path):
        log.info("PKI backend already mounted: %s", spec.mount_path)
        return

    log.debug("Mounting PKI backend: %s", spec.mount_path)
    client.sys.enable_secrets_engine(
        backend_type="pki",
        path=spec.mount_path,
        description=f"PKI backend for cluster {spec.cluster_id}",
        config={"max_lease_ttl": spec.ttl},
    )


def _generate_root_ca(client: hvac.Client, spec: PKICreateSpec) -> None:
    if _is_ca_generated(client, spec.mount_path):
        log.info("Root CA already generated: %s", spec.mount_path)
        return

    log.debug("Generating root CA: %s", spec.common_name)
    client.secrets.pki.generate_root(
        type="internal",
        common_name=spec.common_name,
        extra_params={"ttl": spec.ttl},
        mount_point=spec.mount_path,
    )


def _create_role(client: hvac.Client, spec: PKICreateSpec) -> None:
    log.debug("Writing PKI role: %s", spec.role_name)
    client.secrets.pki.create_or_update_role(
        name=spec.role_name,
        extra_params={
            "allowed_domains": spec.allowed_domains,
            "allow_subdomains": True,
            "allow_bare_domains": spec.allow_bare_domains,
            "ttl": spec.ttl,
        },
        mount_point=spec.mount_path,
    )


def _create_policy(client: hvac.Client, spec: PKICreateSpec) -> None:
    log.debug("Writing PKI policy: %s", spec.policy_name)
    client.sys.create_or_update_policy(
        name=spec.policy_name,
        policy=policy_document(spec.cluster_id),
    )


STEPS = (
    ("mount", _mount),
    ("root-ca", _generate_root_ca),
    ("role", _create_role),
    ("policy", _create_policy),
)


def create_pki_backend(
    client: hvac.Client, spec: PKICreateSpec
) -> Result[None, BackendSetupError]:
    """Provision the cluster's PKI backend.

    1. Mount a pki secrets engine at pki-<cluster>
    2. Generate an internal root CA with the common name and TTL
    3. Create role-<cluster> allowing the configured domains
    4. Create pki-issue-policy-<cluster> granting issuance through that role

    Stops at the first failing step; the steps before it stay in place.
    """
    for step, run in STEPS:
        try:
            run(client, spec)
        except VAULT_ERRORS as e:
            return Err(BackendSetupError(spec.cluster_id, step, str(e) or type(e).__name__))

    return Ok(None)


def describe_pki_backend(
    client: hvac.Client, cluster_id: str
) -> Result[PKIStatus, BackendSetupError]:
    """Read which parts of the cluster's PKI backend exist. Writes nothing."""
    path = mount_path(cluster_id)

    try:
        mounted = _is_mounted(client, path)
        if not mounted:
            return Ok(PKIStatus(cluster_id, False, False, False, False))

        return Ok(
            PKIStatus(
                cluster_id=cluster_id,
                mounted=True,
                ca_generated=_is_ca_generated(client, path),
                role_created=_exists(
                    client.secrets.pki.read_role, name=role_name(cluster_id), mount_point=path
                ),
                policy_created=_exists(client.sys.read_policy, name=policy_name(cluster_id)),
            )
        )
    except VAULT_ERRORS as e:
        return Err(BackendSetupError(cluster_id, "inspect", str(e) or type(e).__name__))
