#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## enumerations.py
##
"""
    Enumerate rulers by length and order, optionally only the Golomb rulers.

    The `*_with_length` functions enumerate a single length, the others every length
    from 2 up to `max_length`, shortest first. All of them return lists.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        enumerate_rulers
        enumerate_rulers_with_length
        enumerate_rulers_with_order
        enumerate_pruned_rulers
        enumerate_golomb_rulers
        enumerate_golomb_rulers_with_length
        enumerate_golomb_rulers_pruned
        enumerate_golomb_rulers_pruned_with_length
        enumerate_golomb_rulers_depth
        enumerate_golomb_rulers_depth_with_length
        count_rulers
        count_rulers_with_order
"""
import logging
import math

from .index import decode
from .strategies import Exhaustive, CardinalityPruned, DepthLimited, RulerIterator
from ..rulers.ruler import Ruler, GolombRuler
from ..exceptions import InvalidParameterError

logger = logging.getLogger(__name__)


def _check_length(length):
    if length < 0:
        raise InvalidParameterError(f"Length must be non-negative, got {length}")


def _degenerate(length):
    # rulers of length 0 and 1 have no state to walk over
    return [decode(length)]


def _golomb_only(rulers):
    return [GolombRuler.from_ruler(r) for r in rulers if r.is_golomb_ruler()]


def _without_tree(order, length):
    """
        Rulers of `order` and `length` when no tree walk is needed, None otherwise.
    """
    if length < 2:
        return [r for r in _degenerate(length) if r.order() == order]
    if order == 2:
        # only the two end points
        return [Ruler([length])]
    if order < 2:
        return []
    return None


def enumerate_rulers(max_length):
    """
        Exhaustively enumerate all rulers with lengths 2 up to `max_length`

        :param: max_length: the maximum length
    """
    _check_length(max_length)
    out = []
    for length in range(2, max_length + 1):
        out += RulerIterator(Exhaustive(length))
    logger.debug("enumerated %d rulers up to length %d", len(out), max_length)
    return out


def enumerate_rulers_with_length(length):
    """
        All `2^(length-1)` rulers of length `length`, or the single ruler for length 0 or 1
    """
    _check_length(length)
    if length < 2:
        return _degenerate(length)
    return list(RulerIterator(Exhaustive(length)))


def enumerate_rulers_with_order(order, length):
    """
        All rulers with `order` marks up to length `length`, not necessarily Golomb rulers.

        Enumerates every ruler and filters afterwards, see `enumerate_pruned_rulers()`
        for a version that only visits rulers of the right order.
    """
    return [r for r in enumerate_rulers(length) if r.order() == order]


def enumerate_pruned_rulers(order, length):
    """
        All `C(length-1, order-2)` rulers with order `order` and length `length`,
        not necessarily Golomb rulers. Prunes the tree of rulers on the number of marks.
    """
    _check_length(length)
    rulers = _without_tree(order, length)
    if rulers is None:
        rulers = list(RulerIterator(CardinalityPruned(order, length)))
    logger.debug("enumerated %d pruned rulers of order %d and length %d", len(rulers), order, length)
    return rulers


def enumerate_golomb_rulers(order, max_length):
    """
        Every Golomb ruler of order `order` up to length `max_length`, by exhaustive enumeration
    """
    rulers = enumerate_rulers(max_length)
    return _golomb_only(r for r in rulers if r.order() == order)


def enumerate_golomb_rulers_with_length(order, length):
    """
        Every Golomb ruler of order `order` and length `length`, by exhaustive enumeration
    """
    rulers = enumerate_rulers_with_length(length)
    return _golomb_only(r for r in rulers if r.order() == order)


def enumerate_golomb_rulers_pruned(order, max_length):
    """
        Every Golomb ruler of order `order` up to length `max_length`,
        only visiting rulers with the right number of marks
    """
    _check_length(max_length)
    out = []
    for length in range(2, max_length + 1):
        out += enumerate_golomb_rulers_pruned_with_length(order, length)
    logger.debug("found %d Golomb rulers of order %d up to length %d", len(out), order, max_length)
    return out


def enumerate_golomb_rulers_pruned_with_length(order, length):
    """
        Every Golomb ruler of order `order` and length `length`,
        only visiting rulers with the right number of marks
    """
    return _golomb_only(enumerate_pruned_rulers(order, length))


def enumerate_golomb_rulers_depth(order, max_length, depth=1):
    """
        Rulers of order `order` up to length `max_length` that pass the Golomb check at depth `depth`.

        The result contains every Golomb ruler, but can also contain rulers that are not.
        Filter with `Ruler.is_golomb_ruler()` to keep only the Golomb rulers.
    """
    _check_length(max_length)
    out = []
    for length in range(2, max_length + 1):
        out += enumerate_golomb_rulers_depth_with_length(order, length, depth)
    logger.debug("%d rulers of order %d up to length %d pass the depth %d check", len(out), order, max_length, depth)
    return out


def enumerate_golomb_rulers_depth_with_length(order, length, depth=1):
    """
        Rulers of order `order` and length `length` that pass the Golomb check at depth `depth`
    """
    _check_length(length)
    rulers = _without_tree(order, length)
    if rulers is not None:
        return rulers
    return list(RulerIterator(DepthLimited(order, length, depth)))


def count_rulers(length):
    """ Number of rulers of length `length` """
    _check_length(length)
    if length < 2:
        return 1
    return 2 ** (length - 1)


def count_rulers_with_order(order, length):
    """ Number of rulers of order `order` and length `length` """
    _check_length(length)
    if length < 2:
        return len(_without_tree(order, length))
    if order < 2:
        return 0
    return math.comb(length - 1, order - 2)
