"""Hash-to-group by try-and-increment, plus a domain-separated hash to Fr."""

from __future__ import annotations

import logging
from hashlib import sha512
from typing import Optional, TypeVar

from .errors import HashToGroupError
from .interfaces import GroupOps
from .params import Params

P = TypeVar("P")

log = logging.getLogger(__name__)

_BLOCK = sha512().digest_size


def expand_digest(domain: bytes, counter: int, message: bytes, size: int) -> bytes:
    """SHA-512(len(domain) || domain || counter || block || message), chained to ``size`` bytes."""
    if len(domain) > 255:
        raise ValueError("domain tag longer than 255 bytes")
    prefix = bytes([len(domain)]) + domain + counter.to_bytes(4, "big")
    out = b""
    block = 0
    while len(out) < size:
        out += sha512(prefix + bytes([block]) + message).digest()
        block += 1
    return out[:size]


def try_and_increment(ops: GroupOps[P], domain: bytes, message: bytes, max_attempts: int) -> P:
    """Deterministically map ``message`` into the prime-order subgroup of ``ops``.

    Each attempt derives a fresh seed from (domain, counter, message) and asks
    the group binding to read it as an x-coordinate. About half the attempts
    land on the curve, so running out of attempts means something is broken.
    """
    for counter in range(max_attempts):
        seed = expand_digest(domain, counter, message, ops.seed_size)
        point: Optional[P] = ops.map_to_point(seed)
        if point is not None:
            log.debug("hash to %s succeeded after %d attempt(s)", ops.name, counter + 1)
            return point
    log.error("hash to %s exhausted %d attempts", ops.name, max_attempts)
    raise HashToGroupError(f"no {ops.name} point found after {max_attempts} attempts")


def hash_to_group(params: Params, message: bytes):
    """H(m): the message point in the signature group."""
    return try_and_increment(params.sig_ops, params.domain, bytes(message), params.max_attempts)


def hash_to_scalar(params: Params, data: bytes, counter: int = 0) -> int:
    """Domain-separated stand-in for a random oracle {0,1}* -> Fr."""
    h = expand_digest(params.domain + b"SCALAR_", counter, bytes(data), _BLOCK)
    return params.scalar.from_int(int.from_bytes(h, "big"))
