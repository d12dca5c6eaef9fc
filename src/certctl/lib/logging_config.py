"""JSON logging for certctl.

Logs go to stderr so stdout stays reserved for the setup summary.
"""

import logging

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "certctl"


class CertctlJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter emitting timestamp, level, logger, message and exc_info."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        allowed_fields = {"timestamp", "level", "name", "message", "exc_info"}
        for key in [key for key in log_record if key not in allowed_fields]:
            log_record.pop(key)


def _setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    # Module reloads must not stack handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        CertctlJsonFormatter(
            fmt="%(timestamp)s %(levelname)s %(name)s %(message)s",
            timestamp=True,
        )
    )

    logger.setLevel(logging.WARNING)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def set_verbosity(verbose: int) -> None:
    """Map the CLI's -v count to a log level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    LOGGER.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Child logger under the certctl logger, e.g. certctl.workflows.setup."""
    return LOGGER.getChild(name.removeprefix(f"{LOGGER_NAME}."))


LOGGER = _setup_logger()
