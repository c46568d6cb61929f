#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## index.py
##
"""
    Bijection between rulers and the natural numbers.

    The id of a ruler of length `L >= 1` is its state read as a binary number
    (bit `i` for mark `i+1`), with a sentinel bit at position `L-1` on top::

        [0, 2, 3]   ->   state 01   ->   0b110 = 6
                                      (sentinel)^

    so the length of a ruler is the bit length of its id. The empty ruler `[0]`
    has id 0 and `[0, 1]` has id 1. Every natural number is the id of exactly one ruler.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        decode
        encode
        decode_range
"""
from .state import RulerState
from ..rulers.ruler import Ruler
from ..exceptions import InvalidParameterError

# ids are unsigned integers of this many bits
ID_BITS = 64


def decode(idx):
    """ The ruler with id `idx` """
    if idx < 0:
        raise InvalidParameterError(f"Ruler ids are non-negative, got {idx}")
    if idx == 0:
        return Ruler()

    length = int(idx).bit_length()
    # the sentinel bit at position length-1 is not part of the state
    return RulerState.from_int(int(idx), length - 1).to_ruler()


def encode(ruler):
    """ The id of `ruler`, or None if it does not fit in `ID_BITS` bits """
    if ruler.order() == 1:
        return 0

    length = ruler.length()
    if length > ID_BITS:
        return None
    return (1 << (length - 1)) | ruler.to_state().to_int()


def decode_range(start, end):
    """ The rulers with ids in `range(start, end)` """
    return [decode(i) for i in range(start, end)]
