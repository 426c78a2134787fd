"""Error taxonomy for the BLS aggregate signature layer.

A failed verification is *not* an error: the verify family returns ``False``.
Only aggregation of nothing, decoding, the (practically unreachable)
hash-to-group attempt bound and a misbehaving curve binding raise.
"""

from __future__ import annotations


class BLSError(Exception):
    """Base class for every error raised by :mod:`blsagg`."""


class EmptyInputError(BLSError, ValueError):
    """Aggregation (or a batch operation) was given zero inputs."""


class DecodeError(BLSError, ValueError):
    """Bytes could not be turned into a scalar or group element."""


class MalformedEncodingError(DecodeError):
    """Wrong length, bad flags, out-of-range coordinate or point not on the curve."""


class InvalidPointError(DecodeError):
    """Well-formed point that is not in the prime-order subgroup."""


class HashToGroupError(BLSError, RuntimeError):
    """Try-and-increment ran out of attempts. Indicates a bug, not bad input."""


class BindingError(BLSError, RuntimeError):
    """A curve binding broke its own contract (e.g. an encoder emitted the wrong width)."""
