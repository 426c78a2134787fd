# src/instantiations/bls12_381/inst.py
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from blsagg.algebra import scale_multiplicative
from blsagg.codec import FixedWidthCodec, int_from_fixed_bytes, int_to_fixed_bytes
from blsagg.params import DEFAULT_MAX_ATTEMPTS, Params

# py_ecc for BLS12-381 group ops, pairing and point compression.
# Install: pip install py-ecc
try:
    from py_ecc.optimized_bls12_381 import (
        FQ12,
        G1,
        G2,
        Z1,
        Z2,
        add,
        b,
        b2,
        curve_order,
        field_modulus,
        is_inf,
        is_on_curve,
        multiply,
        neg,
        normalize,
        pairing,
    )
    from py_ecc.bls.point_compression import (
        compress_G1,
        compress_G2,
        decompress_G1,
        decompress_G2,
    )
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "BLS12-381 instantiation requires 'py-ecc'. Install via: pip install py-ecc"
    ) from e


# ----------------------------
# Curve constants
# - BLS_X is the BLS12 family parameter; r, h1 and h2 are polynomials in it.
# - Compressed encodings carry three flag bits in the top byte:
#   c (bit 383) compressed, b (bit 382) infinity, a (bit 381) sign of y.
# ----------------------------

BLS_X = -0xD201000000010000
H1 = (BLS_X - 1) ** 2 // 3
H2 = (
    BLS_X**8 - 4 * BLS_X**7 + 5 * BLS_X**6 - 4 * BLS_X**4
    + 6 * BLS_X**3 - 4 * BLS_X**2 - 4 * BLS_X + 13
) // 9

_POW_2_381 = 2**381
_POW_2_383 = 2**383

FQ_BYTES = 48
FR_BYTES = 32
G1_BYTES = 48
G2_BYTES = 96
GT_BYTES = 12 * FQ_BYTES

# 64 bytes per base-field coordinate keeps the reduction mod q close to uniform
_COORD_SEED = 64

DOMAIN_PREFIX = b"BLS_SIG_BLSAGG_BLS12381_TAI_"


def _eq(P, Q) -> bool:
    """Projective equality via canonical affine form."""
    if is_inf(P) or is_inf(Q):
        return is_inf(P) and is_inf(Q)
    return normalize(P) == normalize(Q)


# ----------------------------
# Fr: the scalar field, scalars are plain ints in [0, r)
# ----------------------------

@dataclass(frozen=True)
class FrOps:
    order: int = curve_order

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def add(self, a: int, b_: int) -> int:
        return (a + b_) % self.order

    def neg(self, a: int) -> int:
        return (-a) % self.order

    def sub(self, a: int, b_: int) -> int:
        return (a - b_) % self.order

    def mul(self, a: int, b_: int) -> int:
        return (a * b_) % self.order

    def inverse(self, a: int) -> Optional[int]:
        if a % self.order == 0:
            return None
        return pow(a, -1, self.order)

    def from_int(self, value: int) -> int:
        return int(value) % self.order

    def to_int(self, value: int) -> int:
        return int(value)

    def from_random_bytes(self, data: bytes) -> Optional[int]:
        """Big-endian, top bits masked to bitlen(r); None if the result is >= r."""
        if len(data) < FR_BYTES:
            return None
        v = int.from_bytes(data[:FR_BYTES], "big")
        v &= (1 << self.order.bit_length()) - 1
        if v >= self.order:
            return None
        return v

    def random(self, rng) -> int:
        while True:
            s = self.from_random_bytes(rng.randbytes(FR_BYTES))
            if s is not None:
                return s

    def encoded_size(self) -> int:
        return FR_BYTES


# ----------------------------
# G1 / G2: additive groups over Fq and Fq2.
# - py_ecc arithmetic works on Jacobian triples (x, y, z);
#   equality goes through normalize() to affine.
# - map_to_point reads a seed as (x, sign) and lets py_ecc's decompression
#   solve for y, then clears the cofactor into the order-r subgroup.
# ----------------------------

@dataclass(frozen=True)
class _CurveGroupOps:
    # subclasses set: name, gen, inf, coeff, cofactor, size, seed_size
    name = ""
    gen = None
    inf = None
    coeff = None
    cofactor = 1
    size = 0
    seed_size = 0

    def identity(self):
        return self.inf

    def generator(self):
        return self.gen

    def add(self, A, B):
        return add(A, B)

    def neg(self, A):
        return neg(A)

    def eq(self, A, B) -> bool:
        return _eq(A, B)

    def is_identity(self, A) -> bool:
        return is_inf(A)

    def scale(self, A, scalar: int):
        # Only ever called on subgroup points, so reducing mod r is exact.
        return multiply(A, int(scalar) % curve_order)

    def random(self, rng):
        return self.scale(self.gen, FrOps().random(rng))

    def in_subgroup(self, A) -> bool:
        return is_on_curve(A, self.coeff) and is_inf(multiply(A, curve_order))

    def encoded_size(self) -> int:
        return self.size

    def _finish(self, P):
        P = multiply(P, self.cofactor)
        if is_inf(P):
            return None
        return P


@dataclass(frozen=True)
class G1Ops(_CurveGroupOps):
    name = "G1"
    gen = G1
    inf = Z1
    coeff = b
    cofactor = H1
    size = G1_BYTES
    seed_size = _COORD_SEED + 1

    def map_to_point(self, seed: bytes):
        x = int.from_bytes(seed[:_COORD_SEED], "big") % field_modulus
        z = x + _POW_2_383 + (seed[_COORD_SEED] & 1) * _POW_2_381
        try:
            P = decompress_G1(z)
        except ValueError:
            return None
        return self._finish(P)

    def emit(self, P) -> bytes:
        return int_to_fixed_bytes(int(compress_G1(P)), G1_BYTES)

    def parse(self, buf: bytes):
        try:
            return decompress_G1(int_from_fixed_bytes(buf))
        except ValueError:
            return None


@dataclass(frozen=True)
class G2Ops(_CurveGroupOps):
    name = "G2"
    gen = G2
    inf = Z2
    coeff = b2
    cofactor = H2
    size = G2_BYTES
    seed_size = 2 * _COORD_SEED + 1

    def map_to_point(self, seed: bytes):
        x_re = int.from_bytes(seed[:_COORD_SEED], "big") % field_modulus
        x_im = int.from_bytes(seed[_COORD_SEED:2 * _COORD_SEED], "big") % field_modulus
        z1 = x_im + _POW_2_383 + (seed[2 * _COORD_SEED] & 1) * _POW_2_381
        try:
            P = decompress_G2((z1, x_re))
        except ValueError:
            return None
        return self._finish(P)

    def emit(self, P) -> bytes:
        z1, z2 = compress_G2(P)
        return int_to_fixed_bytes(int(z1), FQ_BYTES) + int_to_fixed_bytes(int(z2), FQ_BYTES)

    def parse(self, buf: bytes):
        z1 = int_from_fixed_bytes(buf[:FQ_BYTES])
        z2 = int_from_fixed_bytes(buf[FQ_BYTES:])
        try:
            return decompress_G2((z1, z2))
        except ValueError:
            return None


# ----------------------------
# GT: order-r subgroup of Fq12^*, written multiplicatively.
# ----------------------------

@lru_cache(maxsize=None)
def gt_generator():
    """e(G1, G2); computed once per process."""
    return pairing(G2, G1)


@dataclass(frozen=True)
class GTOps:
    name: str = "GT"

    def one(self):
        return FQ12.one()

    def combine(self, x, y):
        return x * y

    def eq(self, x, y) -> bool:
        return x == y

    def scale(self, x, scalar: int):
        # GT has order r, so any integer exponent reduces to [0, r).
        return scale_multiplicative(self, int(scalar) % curve_order, x)

    def random(self, rng):
        return self.scale(gt_generator(), FrOps().random(rng))

    def in_subgroup(self, x) -> bool:
        if x == FQ12.zero():
            return False
        return x ** curve_order == FQ12.one()

    def encoded_size(self) -> int:
        return GT_BYTES

    def emit(self, x) -> bytes:
        return b"".join(int_to_fixed_bytes(int(c), FQ_BYTES) for c in x.coeffs)

    def parse(self, buf: bytes):
        coeffs = [
            int_from_fixed_bytes(buf[i:i + FQ_BYTES]) for i in range(0, GT_BYTES, FQ_BYTES)
        ]
        if any(c >= field_modulus for c in coeffs):
            return None
        return FQ12(coeffs)


# ----------------------------
# Curve binding
# ----------------------------

@dataclass(frozen=True)
class BLS12381Curve:
    name: str = "BLS12-381"
    scalar: FrOps = field(default_factory=FrOps)
    g1: G1Ops = field(default_factory=G1Ops)
    g2: G2Ops = field(default_factory=G2Ops)
    gt: GTOps = field(default_factory=GTOps)

    def pair(self, p, q):
        """e: G1 x G2 -> GT. py_ecc takes the G2 argument first."""
        return pairing(q, p)


CURVE = BLS12381Curve()


def _scalar_parse(buf: bytes) -> Optional[int]:
    v = int_from_fixed_bytes(buf)
    if v >= curve_order:
        return None
    return v


SCALAR_CODEC = FixedWidthCodec(
    label="Fr",
    size=FR_BYTES,
    emit=lambda s: int_to_fixed_bytes(int(s) % curve_order, FR_BYTES),
    parse=_scalar_parse,
)
G1_CODEC = FixedWidthCodec(
    label="G1", size=G1_BYTES, emit=CURVE.g1.emit, parse=CURVE.g1.parse, check=CURVE.g1.in_subgroup
)
G2_CODEC = FixedWidthCodec(
    label="G2", size=G2_BYTES, emit=CURVE.g2.emit, parse=CURVE.g2.parse, check=CURVE.g2.in_subgroup
)
GT_CODEC = FixedWidthCodec(
    label="GT", size=GT_BYTES, emit=CURVE.gt.emit, parse=CURVE.gt.parse, check=CURVE.gt.in_subgroup
)


# ----------------------------
# Params factories (plug-in for blsagg.core)
# ----------------------------

def make_min_pk_params(
    domain: Optional[bytes] = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> Params:
    """Public keys in G1 (48 bytes), signatures and message points in G2 (96 bytes)."""
    domain = domain if domain is not None else DOMAIN_PREFIX + b"G2_"
    return Params(
        name="bls12-381/min-pk",
        curve=CURVE,
        pk_ops=CURVE.g1,
        sig_ops=CURVE.g2,
        gt_ops=CURVE.gt,
        pair=lambda sig, pk: CURVE.pair(pk, sig),
        sk_codec=SCALAR_CODEC,
        pk_codec=G1_CODEC,
        sig_codec=G2_CODEC,
        domain=domain,
        pop_domain=domain + b"POP_",
        max_attempts=max_attempts,
    )


def make_min_sig_params(
    domain: Optional[bytes] = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> Params:
    """Public keys in G2 (96 bytes), signatures and message points in G1 (48 bytes)."""
    domain = domain if domain is not None else DOMAIN_PREFIX + b"G1_"
    return Params(
        name="bls12-381/min-sig",
        curve=CURVE,
        pk_ops=CURVE.g2,
        sig_ops=CURVE.g1,
        gt_ops=CURVE.gt,
        pair=lambda sig, pk: CURVE.pair(sig, pk),
        sk_codec=SCALAR_CODEC,
        pk_codec=G2_CODEC,
        sig_codec=G1_CODEC,
        domain=domain,
        pop_domain=domain + b"POP_",
        max_attempts=max_attempts,
    )


VARIANTS = {
    "min-pk": make_min_pk_params,
    "min-sig": make_min_sig_params,
}


def make_bls_params(variant: str = "min-pk", **kwargs) -> Params:
    """Return Params for BLS12-381 in the named orientation."""
    try:
        factory = VARIANTS[variant]
    except KeyError:
        raise ValueError(f"Unsupported variant={variant}. Supported: {sorted(VARIANTS)}.") from None
    return factory(**kwargs)
