from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .interfaces import Codec, GroupOps, PairingCurve, TargetOps

PK = TypeVar("PK")
SG = TypeVar("SG")
GT = TypeVar("GT")

DEFAULT_MAX_ATTEMPTS = 256


@dataclass(frozen=True)
class Params(Generic[PK, SG, GT]):
    """Everything the scheme needs to know about one curve and orientation.

    ``pk_ops`` is the group public keys live in, ``sig_ops`` the other one
    (messages hash there too). ``pair`` is already oriented as
    e(signature-side, public-key-side) so the scheme never has to care which
    of G1/G2 is which.
    """

    name: str
    curve: PairingCurve[Any, Any, Any, GT]
    pk_ops: GroupOps[PK]
    sig_ops: GroupOps[SG]
    gt_ops: TargetOps[GT]
    pair: Callable[[SG, PK], GT]
    sk_codec: Codec[int]
    pk_codec: Codec[PK]
    sig_codec: Codec[SG]
    domain: bytes
    pop_domain: bytes
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    @property
    def scalar(self):
        return self.curve.scalar

    @property
    def order(self) -> int:
        return self.curve.scalar.order
