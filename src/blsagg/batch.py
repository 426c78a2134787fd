"""Batch helpers. Every per-index job is independent, so order of completion
does not matter; results always come back in input order.

The pool is a thread pool: it lets batch calls overlap with other work in
the process, but py_ecc arithmetic is pure Python and holds the GIL, so
``workers > 1`` does not make a batch finish sooner.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from .errors import EmptyInputError
from .keys import PrivateKey, PublicKey, Signature
from .params import Params
from .ro import hash_to_group

X = TypeVar("X")
Y = TypeVar("Y")


def _map(fn: Callable[[X], Y], items: Iterable[X], workers: Optional[int]) -> List[Y]:
    if not workers or workers <= 1:
        return [fn(x) for x in items]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(fn, items))


def sign_all(
    params: Params,
    keys: Sequence[PrivateKey],
    messages: Sequence[bytes],
    workers: Optional[int] = None,
) -> List[Signature]:
    if len(keys) != len(messages):
        raise ValueError(f"{len(keys)} keys vs {len(messages)} messages")
    return _map(lambda km: km[0].sign(km[1]), list(zip(keys, messages)), workers)


def hash_all(params: Params, messages: Sequence[bytes], workers: Optional[int] = None) -> list:
    return _map(lambda m: hash_to_group(params, m), messages, workers)


def public_keys_all(
    params: Params, keys: Sequence[PrivateKey], workers: Optional[int] = None
) -> List[PublicKey]:
    return _map(lambda sk: sk.public_key(), keys, workers)


def aggregate_tree(params: Params, signatures: Sequence[Signature]) -> Signature:
    """Pairwise tree reduction; same result as :func:`blsagg.core.aggregate`."""
    if len(signatures) == 0:
        raise EmptyInputError("cannot aggregate an empty list of signatures")
    ops = params.sig_ops
    level = [s.point for s in signatures]
    while len(level) > 1:
        nxt = [ops.add(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        if len(level) % 2:
            nxt.append(level[-1])
        level = nxt
    return Signature(params, level[0])
