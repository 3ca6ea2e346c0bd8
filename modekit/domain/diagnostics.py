"""
Diagnostics shared by the build and the mode manager.

Skip and omission policies (mode file without ``mode``, mode missing from
the inventory) never fail a build or a render. They are logged at WARNING
and handed back to the caller as ``BuildWarning`` records.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class BuildWarning:
    """A non-fatal diagnostic."""

    code: str
    message: str
    source: str | None = None


def record_warning(
    warnings: list[BuildWarning],
    logger: logging.Logger,
    code: str,
    message: str,
    source: str | None = None,
) -> BuildWarning:
    """Log a warning and append it to ``warnings``."""
    warning = BuildWarning(code=code, message=message, source=source)
    if source:
        logger.warning("%s: %s (%s)", code, message, source)
    else:
        logger.warning("%s: %s", code, message)
    warnings.append(warning)
    return warning
