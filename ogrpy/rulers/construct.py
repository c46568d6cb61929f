#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## construct.py
##
"""
    Constructors for a single Golomb ruler of a given order.

    Neither of these searches for an optimal ruler, they build *a* Golomb ruler
    mark by mark. Both return the full list of marks, the leading 0 included.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        generate_golomb_ruler_naive
        generate_golomb_ruler_improved
"""
from .ruler import dist, compute_distances
from ..exceptions import InvalidParameterError, ImplementationError


def _check_order(order):
    if order < 1:
        raise InvalidParameterError(f"Order must be greater than 0, got {order}")


def generate_golomb_ruler_naive(order):
    """
        Golomb ruler with marks `2^i - 1`, for `i` in `0..order-1`.

        Every mark exceeds the sum of all previous ones, so distances can not repeat.
    """
    _check_order(order)
    if order == 1:
        return [0]

    prev = generate_golomb_ruler_naive(order - 1)
    prev.append(2 ** (order - 1) - 1)
    return prev


def _should_accept_candidate(candidate, distances, prev):
    for m in prev:
        if dist(candidate, m) in distances:
            return False
    return True


def generate_golomb_ruler_improved(order):
    """
        Greedily extend the ruler of order `order-1` with the smallest acceptable mark.

        The candidate range `[last, 2*last + 1]` always holds an acceptable mark,
        as `2*last + 1` is further from every mark than any existing distance.
    """
    _check_order(order)
    if order == 1:
        return [0]
    if order == 2:
        return [0, 1]
    if order == 3:
        return [0, 1, 3]

    prev = generate_golomb_ruler_improved(order - 1)
    last = prev[-1]
    distances = compute_distances(prev)

    for c in range(last, 2 * last + 2):
        if c in prev:
            continue
        if _should_accept_candidate(c, distances, prev):
            prev.append(c)
            prev.sort()
            return prev

    raise ImplementationError(f"No acceptable mark in [{last}, {2 * last + 1}] for a ruler of order {order}")
