from __future__ import annotations

import logging
from typing import Optional, Sequence

from .algebra import product_elements, sum_elements
from .errors import EmptyInputError
from .interfaces import RandomSource
from .keys import PrivateKey, PublicKey, Signature
from .params import Params
from .ro import hash_to_group, hash_to_scalar, try_and_increment

log = logging.getLogger(__name__)


def keygen(params: Params, rng: Optional[RandomSource] = None) -> PrivateKey:
    """sk ←$ Fr \\ {0}; ``rng`` defaults to the OS CSPRNG."""
    return PrivateKey.generate(params, rng)


def keygen_from_seed(params: Params, seed: bytes) -> PrivateKey:
    """Deterministic key from seed material (tests, reproducible fixtures)."""
    counter = 0
    while True:
        s = hash_to_scalar(params, seed, counter)
        if s != 0:
            return PrivateKey(params, s)
        counter += 1


def public_key(params: Params, sk: PrivateKey) -> PublicKey:
    """pk := sk · G."""
    return sk.public_key()


def hash_message(params: Params, message: bytes):
    """H(m) in the signature group."""
    return hash_to_group(params, message)


def sign(params: Params, sk: PrivateKey, message: bytes) -> Signature:
    """σ := sk · H(m)."""
    return sk.sign(message)


def aggregate(params: Params, signatures: Sequence[Signature]) -> Signature:
    """σ_agg := Σ σ_i. Order of the inputs does not matter."""
    if len(signatures) == 0:
        raise EmptyInputError("cannot aggregate an empty list of signatures")
    acc = sum_elements(params.sig_ops, (sig.point for sig in signatures))
    log.debug("aggregated %d signature(s)", len(signatures))
    return Signature(params, acc)


def verify(
    params: Params,
    agg: Signature,
    hashes: Sequence,
    public_keys: Sequence[PublicKey],
) -> bool:
    """Check e(σ_agg, G) == Π e(H_i, pk_i).

    ``hashes`` are message points already in the signature group (see
    :func:`hash_message`). Empty or length-mismatched inputs verify as False.
    """
    if len(hashes) == 0 or len(public_keys) == 0:
        log.debug("verify: empty input")
        return False
    if len(hashes) != len(public_keys):
        log.debug("verify: %d hashes vs %d public keys", len(hashes), len(public_keys))
        return False

    gt = params.gt_ops
    lhs = params.pair(agg.point, params.pk_ops.generator())
    rhs = product_elements(
        gt, (params.pair(h, pk.point) for h, pk in zip(hashes, public_keys))
    )
    ok = gt.eq(lhs, rhs)
    log.debug("verify over %d pair(s): %s", len(hashes), ok)
    return ok


def verify_messages(
    params: Params,
    agg: Signature,
    messages: Sequence[bytes],
    public_keys: Sequence[PublicKey],
) -> bool:
    """Hash every message and delegate to :func:`verify`.

    Precondition: the messages are pairwise distinct, or every public key
    has passed :func:`verify_possession`. Without one of the two an
    adversary can pick a rogue key that cancels honest ones. This function
    does not check either; see :func:`verify_distinct_messages`.
    """
    if len(messages) != len(public_keys) or len(messages) == 0:
        log.debug("verify_messages: %d messages vs %d public keys", len(messages), len(public_keys))
        return False
    hashes = [hash_to_group(params, m) for m in messages]
    return verify(params, agg, hashes, public_keys)


def messages_distinct(messages: Sequence[bytes]) -> bool:
    return len({bytes(m) for m in messages}) == len(messages)


def verify_distinct_messages(
    params: Params,
    agg: Signature,
    messages: Sequence[bytes],
    public_keys: Sequence[PublicKey],
) -> bool:
    """:func:`verify_messages` that also rejects repeated messages."""
    if not messages_distinct(messages):
        log.debug("verify_distinct_messages: repeated message")
        return False
    return verify_messages(params, agg, messages, public_keys)


def verify_single(params: Params, sig: Signature, message: bytes, pk: PublicKey) -> bool:
    return verify(params, sig, [hash_to_group(params, message)], [pk])


def prove_possession(params: Params, sk: PrivateKey) -> Signature:
    """π := sk · H_pop(pk), with H_pop separated from message hashing."""
    pk = sk.public_key()
    h = try_and_increment(params.sig_ops, params.pop_domain, pk.as_bytes(), params.max_attempts)
    return Signature(params, params.sig_ops.scale(h, sk.scalar))


def verify_possession(params: Params, pk: PublicKey, proof: Signature) -> bool:
    if params.pk_ops.is_identity(pk.point):
        log.debug("verify_possession: identity public key")
        return False
    h = try_and_increment(params.sig_ops, params.pop_domain, pk.as_bytes(), params.max_attempts)
    return verify(params, proof, [h], [pk])
