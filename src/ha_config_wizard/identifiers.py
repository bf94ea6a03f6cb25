"""Unique id generation for discovery payloads."""

from __future__ import annotations

import logging
import secrets

logger = logging.getLogger(__name__)

SUFFIX_BYTES = 2


def generate_unique_id(device_name: str) -> str:
    """Return ``device_name`` followed by a random uppercase hex suffix.

    The suffix is 4 characters drawn from ``secrets`` (2 bytes, 16 bits of
    entropy). Nothing checks the result against ids already in use.
    """
    suffix = secrets.token_hex(SUFFIX_BYTES).upper()
    unique_id = f"{device_name}{suffix}"
    logger.debug("Generated unique id %s for device %r", unique_id, device_name)
    return unique_id


__all__ = ["generate_unique_id"]
