from __future__ import annotations

import random

import pytest

from blsagg.errors import InvalidPointError, MalformedEncodingError
from instantiations.bls12_381 import CURVE, G1_CODEC, G2_CODEC, GT_CODEC, SCALAR_CODEC
from instantiations.bls12_381.inst import gt_generator
from py_ecc.bls.point_compression import decompress_G1, decompress_G2
from py_ecc.optimized_bls12_381 import FQ12, curve_order, field_modulus, is_inf, multiply

POW_2_383 = 2**383


def _off_subgroup_g1():
    """A point on E(Fq) that is not in the order-r subgroup."""
    for x in range(1, 1000):
        try:
            P = decompress_G1(x + POW_2_383)
        except ValueError:
            continue
        if not is_inf(multiply(P, curve_order)):
            return P
    raise AssertionError("no off-subgroup G1 point found")


def _off_subgroup_g2():
    for x in range(1, 1000):
        try:
            P = decompress_G2((x + POW_2_383, 1))
        except ValueError:
            continue
        if not is_inf(multiply(P, curve_order)):
            return P
    raise AssertionError("no off-subgroup G2 point found")


def test_widths():
    assert SCALAR_CODEC.size == CURVE.scalar.encoded_size() == 32
    assert G1_CODEC.size == CURVE.g1.encoded_size() == 48
    assert G2_CODEC.size == CURVE.g2.encoded_size() == 96
    assert GT_CODEC.size == CURVE.gt.encoded_size() == 576


def test_scalar_round_trip():
    rng = random.Random(1)
    for _ in range(5):
        s = CURVE.scalar.random(rng)
        enc = SCALAR_CODEC.encode(s)
        assert len(enc) == 32
        assert SCALAR_CODEC.decode(enc) == s


@pytest.mark.parametrize("codec,ops", [(G1_CODEC, CURVE.g1), (G2_CODEC, CURVE.g2)])
def test_point_round_trip(codec, ops):
    rng = random.Random(2)
    for P in [ops.generator(), ops.identity(), ops.random(rng), ops.random(rng)]:
        enc = codec.encode(P)
        assert len(enc) == codec.size
        assert ops.eq(codec.decode(enc), P)


def test_gt_round_trip():
    x = CURVE.gt.scale(gt_generator(), 1234567)
    enc = GT_CODEC.encode(x)

    assert len(enc) == 576
    assert GT_CODEC.decode(enc) == x
    assert GT_CODEC.decode(GT_CODEC.encode(CURVE.gt.one())) == CURVE.gt.one()


@pytest.mark.parametrize("codec", [SCALAR_CODEC, G1_CODEC, G2_CODEC, GT_CODEC])
def test_wrong_length_rejected(codec):
    for n in [0, codec.size - 1, codec.size + 1]:
        with pytest.raises(MalformedEncodingError):
            codec.decode(b"\x00" * n)


def test_scalar_out_of_range_rejected():
    with pytest.raises(MalformedEncodingError):
        SCALAR_CODEC.decode(curve_order.to_bytes(32, "big"))


def test_g1_missing_compression_flag_rejected():
    enc = bytearray(G1_CODEC.encode(CURVE.g1.generator()))
    enc[0] &= 0x7F
    with pytest.raises(MalformedEncodingError):
        G1_CODEC.decode(bytes(enc))


def test_g1_x_out_of_range_rejected():
    enc = (field_modulus + POW_2_383).to_bytes(48, "big")
    with pytest.raises(MalformedEncodingError):
        G1_CODEC.decode(enc)


def test_g1_off_subgroup_rejected():
    enc = G1_CODEC.emit(_off_subgroup_g1())
    assert len(enc) == 48
    with pytest.raises(InvalidPointError):
        G1_CODEC.decode(enc)


def test_g2_off_subgroup_rejected():
    enc = G2_CODEC.emit(_off_subgroup_g2())
    assert len(enc) == 96
    with pytest.raises(InvalidPointError):
        G2_CODEC.decode(enc)


def test_gt_coefficient_out_of_range_rejected():
    enc = field_modulus.to_bytes(48, "big") + b"\x00" * (576 - 48)
    with pytest.raises(MalformedEncodingError):
        GT_CODEC.decode(enc)


def test_gt_off_subgroup_rejected():
    x = FQ12([2] + [0] * 11)
    with pytest.raises(InvalidPointError):
        GT_CODEC.decode(GT_CODEC.encode(x))
