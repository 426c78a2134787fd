from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import MalformedEncodingError
from .interfaces import RandomSource
from .params import Params
from .ro import hash_to_group


def _sample_nonzero(params: Params, rng: RandomSource) -> int:
    while True:
        s = params.scalar.random(rng)
        if s != 0:
            return s


class PrivateKey:
    """A nonzero scalar sk in Fr.

    The scalar never shows up in ``repr`` and can be dropped with
    :meth:`zeroize`; a zeroized key refuses every further operation.
    """

    __slots__ = ("params", "_scalar")

    def __init__(self, params: Params, scalar: int):
        scalar = params.scalar.to_int(scalar)
        if not 0 < scalar < params.order:
            raise ValueError("Secret key must be nonzero in Z_r")
        self.params = params
        self._scalar: Optional[int] = scalar

    @classmethod
    def generate(cls, params: Params, rng: Optional[RandomSource] = None) -> "PrivateKey":
        return cls(params, _sample_nonzero(params, rng or secrets.SystemRandom()))

    @classmethod
    def from_bytes(cls, params: Params, data: bytes) -> "PrivateKey":
        s = params.sk_codec.decode(data)
        if s == 0:
            raise MalformedEncodingError("private key scalar must be nonzero")
        return cls(params, s)

    @property
    def scalar(self) -> int:
        if self._scalar is None:
            raise ValueError("private key has been zeroized")
        return self._scalar

    def public_key(self) -> "PublicKey":
        ops = self.params.pk_ops
        return PublicKey(self.params, ops.scale(ops.generator(), self.scalar))

    def sign(self, message: bytes) -> "Signature":
        h = hash_to_group(self.params, message)
        return Signature(self.params, self.params.sig_ops.scale(h, self.scalar))

    def as_bytes(self) -> bytes:
        return self.params.sk_codec.encode(self.scalar)

    def zeroize(self) -> None:
        self._scalar = None

    @property
    def zeroized(self) -> bool:
        return self._scalar is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self.params is other.params and self._scalar == other._scalar

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "zeroized" if self.zeroized else "<redacted>"
        return f"PrivateKey({self.params.name}, {state})"


@dataclass(frozen=True, eq=False)
class _PointValue:
    params: Params = field(repr=False)
    point: Any

    def _ops(self):
        raise NotImplementedError

    def _codec(self):
        raise NotImplementedError

    def as_bytes(self) -> bytes:
        return self._codec().encode(self.point)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._ops().eq(self.point, other.point)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.as_bytes()))


@dataclass(frozen=True, eq=False)
class PublicKey(_PointValue):
    """sk · G in the public-key group."""

    def _ops(self):
        return self.params.pk_ops

    def _codec(self):
        return self.params.pk_codec

    @classmethod
    def from_bytes(cls, params: Params, data: bytes) -> "PublicKey":
        return cls(params, params.pk_codec.decode(data))


@dataclass(frozen=True, eq=False)
class Signature(_PointValue):
    """A point in the signature group; aggregates are Signatures too."""

    def _ops(self):
        return self.params.sig_ops

    def _codec(self):
        return self.params.sig_codec

    @classmethod
    def from_bytes(cls, params: Params, data: bytes) -> "Signature":
        return cls(params, params.sig_codec.decode(data))
