from __future__ import annotations

from typing import Iterable, Protocol, TypeVar

A = TypeVar("A")
M = TypeVar("M")


class _Additive(Protocol[A]):
    def identity(self) -> A:
        ...

    def add(self, left: A, right: A) -> A:
        ...

    def neg(self, value: A) -> A:
        ...


class _Multiplicative(Protocol[M]):
    def one(self) -> M:
        ...

    def combine(self, left: M, right: M) -> M:
        ...


def scale_additive(ops: _Additive[A], n: int, p: A) -> A:
    """Compute n·p with the group law ``add`` (double-and-add), supporting n<0."""
    if n == 0:
        return ops.identity()
    if n < 0:
        return scale_additive(ops, -n, ops.neg(p))

    res = ops.identity()
    base = p
    while n > 0:
        if n & 1:
            res = ops.add(res, base)
        base = ops.add(base, base)
        n >>= 1
    return res


def scale_multiplicative(ops: _Multiplicative[M], n: int, x: M) -> M:
    """Compute x^n with the group law ``combine`` (square-and-multiply, LSB first)."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return ops.one()

    res = ops.one()
    base = x
    while n > 0:
        if n & 1:
            res = ops.combine(res, base)
        n >>= 1
        if n:
            base = ops.combine(base, base)
    return res


def sum_elements(ops: _Additive[A], items: Iterable[A]) -> A:
    acc = ops.identity()
    for item in items:
        acc = ops.add(acc, item)
    return acc


def product_elements(ops: _Multiplicative[M], items: Iterable[M]) -> M:
    acc = ops.one()
    for item in items:
        acc = ops.combine(acc, item)
    return acc
