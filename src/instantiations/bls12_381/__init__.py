from .inst import (
    CURVE,
    G1_CODEC,
    G2_CODEC,
    GT_CODEC,
    SCALAR_CODEC,
    BLS12381Curve,
    make_bls_params,
    make_min_pk_params,
    make_min_sig_params,
)

__all__ = [
    "BLS12381Curve",
    "CURVE",
    "G1_CODEC",
    "G2_CODEC",
    "GT_CODEC",
    "SCALAR_CODEC",
    "make_bls_params",
    "make_min_pk_params",
    "make_min_sig_params",
]
