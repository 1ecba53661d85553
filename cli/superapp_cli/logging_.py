from __future__ import annotations

import logging

SDK_LOGGER = "superapp_client"


def sdk_log_level(*, verbose: bool, quiet: bool) -> int:
    """Discovery/registration status lines are INFO; show them unless --quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.INFO


def setup_logging(verbose: bool, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(SDK_LOGGER).setLevel(sdk_log_level(verbose=verbose, quiet=quiet))

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.DEBUG if verbose else logging.WARNING)
