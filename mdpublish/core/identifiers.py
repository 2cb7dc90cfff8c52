"""Identifier allocation for published pages.

Ids are random UUID4 strings (122 bits of OS entropy).  Uniqueness is
probabilistic: at a few million pages the collision odds are negligible.
"""

from __future__ import annotations

import logging
import re
import uuid

from mdpublish.core.errors import AllocatorUnavailableError

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
)


def allocate() -> str:
    """Return a fresh page identifier.

    Raises
    ------
    AllocatorUnavailableError
        If the OS entropy source cannot be read.
    """
    try:
        return str(uuid.uuid4())
    except (OSError, NotImplementedError) as exc:
        logger.error("Entropy source failed: %s", exc)
        raise AllocatorUnavailableError(f"Entropy source failed: {exc}") from exc


def is_valid_id(value: str) -> bool:
    """Whether ``value`` is a canonical identifier as produced by ``allocate``."""
    return bool(_ID_PATTERN.fullmatch(value))
