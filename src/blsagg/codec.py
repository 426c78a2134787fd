from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import BindingError, InvalidPointError, MalformedEncodingError

E = TypeVar("E")

log = logging.getLogger(__name__)


def int_to_fixed_bytes(x: int, length: int) -> bytes:
    return x.to_bytes(length, "big")


def int_from_fixed_bytes(bts: bytes) -> int:
    return int.from_bytes(bts, "big")


@dataclass(frozen=True)
class FixedWidthCodec(Generic[E]):
    """Canonical fixed-width codec for one kind of element.

    Decoding runs three gates in order:

    1. ``len(data) == size``, else :class:`MalformedEncodingError`;
    2. ``parse(data)`` rebuilds the element, returning None as ⊥ on
       bad flags, out-of-range coordinates or points off the curve
       (:class:`MalformedEncodingError`);
    3. ``check(value)`` asserts prime-order subgroup membership
       (:class:`InvalidPointError`).

    The curve binding supplies ``emit``/``parse``/``check``; this class owns
    the error policy so every element kind fails the same way.
    """

    label: str
    size: int
    emit: Callable[[E], bytes]
    parse: Callable[[bytes], Optional[E]]
    check: Optional[Callable[[E], bool]] = None

    def encode(self, value: E) -> bytes:
        out = self.emit(value)
        if len(out) != self.size:
            raise BindingError(f"{self.label} encoder produced {len(out)} bytes, expected {self.size}")
        return out

    def decode(self, data: bytes) -> E:
        data = bytes(data)
        if len(data) != self.size:
            log.warning("rejecting %s encoding: %d bytes, expected %d", self.label, len(data), self.size)
            raise MalformedEncodingError(
                f"{self.label}: expected {self.size} bytes, got {len(data)}"
            )
        value = self.parse(data)
        if value is None:
            log.warning("rejecting %s encoding: not a canonical element", self.label)
            raise MalformedEncodingError(f"{self.label}: not a canonical encoding")
        if self.check is not None and not self.check(value):
            log.warning("rejecting %s encoding: not in the prime-order subgroup", self.label)
            raise InvalidPointError(f"{self.label}: element is not in the prime-order subgroup")
        return value
