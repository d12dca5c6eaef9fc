"""Human-readable summary of a successful setup run."""

from certctl.models import SetupResult

COMPLETED_ACTIONS = (
    "PKI backend mounted",
    "Root CA generated",
    "PKI role created",
    "PKI policy created",
)


def format_setup_summary(result: SetupResult) -> str:
    """Render the fixed-format summary: cluster ID, completed actions, tokens."""
    lines = [f"Set up cluster for ID '{result.cluster_id}':", ""]
    lines += [f"    - {action}" for action in COMPLETED_ACTIONS]
    lines += ["", "The following tokens have been generated for this cluster:", ""]
    lines += [f"    {token}" for token in result.tokens]
    lines.append("")
    return "\n".join(lines) + "\n"
