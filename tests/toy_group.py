"""A toy (insecure) bilinear group for exercising the protocol layer quickly.

G1 = G2 = GT = Z_Q written additively, e(a, b) = a*b mod Q. The pairing is
bilinear, which is all the scheme relies on. Encodings are 4 bytes; values in
[Q, 2Q) parse but sit "outside the subgroup", so both decode errors can be hit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from blsagg.algebra import scale_additive, scale_multiplicative
from blsagg.codec import FixedWidthCodec, int_from_fixed_bytes, int_to_fixed_bytes
from blsagg.params import Params

Q = 65537
WIDTH = 4


@dataclass(frozen=True)
class ZqScalar:
    order: int = Q

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return (a + b) % Q

    def neg(self, a: int) -> int:
        return (-a) % Q

    def sub(self, a: int, b: int) -> int:
        return (a - b) % Q

    def mul(self, a: int, b: int) -> int:
        return (a * b) % Q

    def inverse(self, a: int) -> Optional[int]:
        return None if a % Q == 0 else pow(a, -1, Q)

    def from_int(self, value: int) -> int:
        return value % Q

    def to_int(self, value: int) -> int:
        return value

    def from_random_bytes(self, data: bytes) -> Optional[int]:
        if len(data) < 3:
            return None
        v = int.from_bytes(data[:3], "big") & 0x1FFFF
        return v if v < Q else None

    def random(self, rng) -> int:
        while True:
            v = self.from_random_bytes(rng.randbytes(3))
            if v is not None:
                return v

    def encoded_size(self) -> int:
        return WIDTH


@dataclass(frozen=True)
class ZqGroup:
    name: str
    seed_size: int = 8

    def identity(self) -> int:
        return 0

    def generator(self) -> int:
        return 1

    def add(self, a: int, b: int) -> int:
        return (a + b) % Q

    def neg(self, a: int) -> int:
        return (-a) % Q

    def eq(self, a: int, b: int) -> bool:
        return a % Q == b % Q

    def is_identity(self, a: int) -> bool:
        return a % Q == 0

    def scale(self, a: int, n: int) -> int:
        return scale_additive(self, n, a)

    def random(self, rng) -> int:
        return ZqScalar().random(rng)

    def in_subgroup(self, a: int) -> bool:
        return 0 <= a < Q

    def map_to_point(self, seed: bytes) -> Optional[int]:
        # reject odd first bytes so several attempts are exercised
        if seed[0] & 1:
            return None
        v = int.from_bytes(seed, "big") % Q
        return v or None

    def encoded_size(self) -> int:
        return WIDTH


@dataclass(frozen=True)
class ZqTarget:
    name: str = "GT"

    def one(self) -> int:
        return 0

    def combine(self, a: int, b: int) -> int:
        return (a + b) % Q

    def eq(self, a: int, b: int) -> bool:
        return a % Q == b % Q

    def scale(self, a: int, n: int) -> int:
        return scale_multiplicative(self, n % Q, a)

    def random(self, rng) -> int:
        return ZqScalar().random(rng)

    def in_subgroup(self, a: int) -> bool:
        return 0 <= a < Q

    def encoded_size(self) -> int:
        return WIDTH


@dataclass(frozen=True)
class ToyCurve:
    name: str = "toy"
    scalar: ZqScalar = field(default_factory=ZqScalar)
    g1: ZqGroup = field(default_factory=lambda: ZqGroup("G1"))
    g2: ZqGroup = field(default_factory=lambda: ZqGroup("G2"))
    gt: ZqTarget = field(default_factory=ZqTarget)

    def pair(self, p: int, q: int) -> int:
        return (p * q) % Q


def _parse(buf: bytes) -> Optional[int]:
    v = int_from_fixed_bytes(buf)
    return v if v < 2 * Q else None


def _codec(label: str, group: ZqGroup) -> FixedWidthCodec:
    return FixedWidthCodec(
        label=label,
        size=WIDTH,
        emit=lambda v: int_to_fixed_bytes(v % Q, WIDTH),
        parse=_parse,
        check=group.in_subgroup,
    )


def make_toy_params(max_attempts: int = 256) -> Params:
    curve = ToyCurve()
    return Params(
        name="toy",
        curve=curve,
        pk_ops=curve.g1,
        sig_ops=curve.g2,
        gt_ops=curve.gt,
        pair=lambda sig, pk: curve.pair(pk, sig),
        sk_codec=FixedWidthCodec(
            label="Zq",
            size=WIDTH,
            emit=lambda s: int_to_fixed_bytes(s, WIDTH),
            parse=lambda buf: (lambda v: v if v < Q else None)(int_from_fixed_bytes(buf)),
        ),
        pk_codec=_codec("G1", curve.g1),
        sig_codec=_codec("G2", curve.g2),
        domain=b"TOY_SIG_",
        pop_domain=b"TOY_POP_",
        max_attempts=max_attempts,
    )
