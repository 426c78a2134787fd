"""Capability interfaces for the pairing group triple (G1, G2, GT) and Fr.

The signature scheme in :mod:`blsagg.core` is written against these
protocols only; a concrete curve supplies one object per role.
"""

from __future__ import annotations

from typing import Optional, Protocol, TypeVar

S = TypeVar("S")
P = TypeVar("P")
T = TypeVar("T")
G1E = TypeVar("G1E")
G2E = TypeVar("G2E")
GTE = TypeVar("GTE")
Encoded = TypeVar("Encoded")


class RandomSource(Protocol):
    """Anything that can hand out uniform bytes.

    ``secrets.SystemRandom()`` and a seeded ``random.Random`` both qualify.
    """

    def randbytes(self, n: int) -> bytes:
        ...


class ScalarField(Protocol[S]):
    """The scalar field Fr of the pairing groups."""

    order: int

    def zero(self) -> S:
        ...

    def one(self) -> S:
        ...

    def add(self, left: S, right: S) -> S:
        ...

    def neg(self, value: S) -> S:
        ...

    def sub(self, left: S, right: S) -> S:
        ...

    def mul(self, left: S, right: S) -> S:
        ...

    def inverse(self, value: S) -> Optional[S]:
        ...

    def from_int(self, value: int) -> S:
        ...

    def to_int(self, value: S) -> int:
        ...

    def from_random_bytes(self, data: bytes) -> Optional[S]:
        ...

    def random(self, rng: RandomSource) -> S:
        ...

    def encoded_size(self) -> int:
        ...


class GroupOps(Protocol[P]):
    """An additive prime-order group (G1 or G2) with hash-to-point support."""

    name: str
    seed_size: int

    def identity(self) -> P:
        ...

    def generator(self) -> P:
        ...

    def add(self, left: P, right: P) -> P:
        ...

    def neg(self, value: P) -> P:
        ...

    def eq(self, left: P, right: P) -> bool:
        ...

    def is_identity(self, value: P) -> bool:
        ...

    def scale(self, value: P, scalar: int) -> P:
        ...

    def random(self, rng: RandomSource) -> P:
        ...

    def in_subgroup(self, value: P) -> bool:
        ...

    def map_to_point(self, seed: bytes) -> Optional[P]:
        """One try-and-increment attempt: a subgroup point, or None to retry."""
        ...

    def encoded_size(self) -> int:
        ...


class TargetOps(Protocol[T]):
    """The multiplicative target group GT.

    ``combine`` is the group law (field multiplication); it is deliberately
    not called ``add``.
    """

    name: str

    def one(self) -> T:
        ...

    def combine(self, left: T, right: T) -> T:
        ...

    def eq(self, left: T, right: T) -> bool:
        ...

    def scale(self, value: T, scalar: int) -> T:
        ...

    def random(self, rng: RandomSource) -> T:
        ...

    def in_subgroup(self, value: T) -> bool:
        ...

    def encoded_size(self) -> int:
        ...


class PairingCurve(Protocol[S, G1E, G2E, GTE]):
    """One concrete pairing-friendly curve: the four roles plus e: G1 x G2 -> GT."""

    name: str
    scalar: ScalarField[S]
    g1: GroupOps[G1E]
    g2: GroupOps[G2E]
    gt: TargetOps[GTE]

    def pair(self, p: G1E, q: G2E) -> GTE:
        ...


class Codec(Protocol[Encoded]):
    """Fixed-width canonical encoding of one kind of value."""

    size: int

    def encode(self, value: Encoded) -> bytes:
        ...

    def decode(self, data: bytes) -> Encoded:
        ...
