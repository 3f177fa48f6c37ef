from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from typing import Final

from errors import EntropySourceError
from protocol import Move

SCHEME_ID: Final[str] = "hmac-sha3-256"
KEY_BYTES: Final[int] = 32

logger = logging.getLogger(__name__)


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    if num_bytes < KEY_BYTES:
        raise ValueError(f"key must be at least {KEY_BYTES} bytes, got {num_bytes}")
    try:
        raw = secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"secure random source unavailable: {exc}") from exc
    logger.debug("generated %d-bit round key", num_bytes * 8)
    return raw.hex()


def compute_commitment(*, key: str, move: Move) -> str:
    # Keyed with the hex text as displayed, so the revealed key can be pasted
    # into any HMAC-SHA3-256 tool as-is.
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha3_256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, move: Move) -> bool:
    computed = compute_commitment(key=key, move=move)
    return hmac.compare_digest(expected_commitment.strip().lower().encode("utf-8"), computed.encode("utf-8"))
