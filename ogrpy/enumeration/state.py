#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## state.py
##
"""
    The `state` of a ruler, and the transitions used to walk the tree of all rulers.

    A ruler's state is a boolean vector that indicates which positions strictly
    between 0 and the length are marks. Bit `i` stands for mark `i+1`.

    Consider the ruler with marks `[0, 1, 4]`. The corresponding state is::

        [True, False, False]
           1     2      3

    The marks 0 and `length` are not stored: 0 is always a mark, and the length
    is recovered from the size of the state (`length = len(state) + 1`).

    Enumerating rulers of a given length amounts to a depth-first walk of the
    binary tree whose level `i` decides whether mark `i+1` is set. Going left
    appends a cleared bit, going right sets it.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        RulerState
"""
import numpy as np

from ..exceptions import InvalidParameterError
from ..rulers.ruler import Ruler


class RulerState(object):
    """
        Immutable bit vector of interior marks.

        Every transition returns a new `RulerState`, or None when there is no
        next state. The underlying numpy array is read-only.

        .. code-block:: python

            s = RulerState("0101")
            s.to_ruler()        # [0, 2, 4, 5]
            s.backtrack()       # RulerState('0110')
    """
    __slots__ = ("_bits",)

    def __init__(self, bits=()):
        if isinstance(bits, str):
            if set(bits) - {"0", "1"}:
                raise InvalidParameterError(f"A state string only holds '0' and '1', got {bits!r}")
            bits = [c == "1" for c in bits]
        arr = np.array(bits, dtype=bool)
        if arr.ndim != 1:
            raise InvalidParameterError(f"A state is one-dimensional, got shape {arr.shape}")
        arr.flags.writeable = False
        self._bits = arr

    @classmethod
    def _wrap(cls, arr):
        # takes ownership of `arr`, no copy
        out = cls.__new__(cls)
        arr.flags.writeable = False
        out._bits = arr
        return out

    @classmethod
    def zeros(cls, n):
        return cls._wrap(np.zeros(n, dtype=bool))

    @classmethod
    def from_ruler(cls, ruler):
        """ State of `ruler`; empty for the rulers `[0]` and `[0, 1]` """
        if ruler.order() == 1 or ruler.length() == 1:
            return cls.zeros(0)

        out = np.zeros(ruler.length() - 1, dtype=bool)
        for m in ruler.marks[:-1]:
            out[m - 1] = True
        return cls._wrap(out)

    @classmethod
    def from_int(cls, value, n):
        """ State of `n` bits, bit `i` taken from bit `i` of the integer `value` """
        return cls._wrap(np.array([(value >> i) & 1 == 1 for i in range(n)], dtype=bool))

    def to_int(self):
        """ Inverse of `from_int()` """
        return sum(1 << int(i) for i in np.flatnonzero(self._bits))

    @property
    def bits(self):
        return self._bits

    def to_ruler(self):
        # 0 and the final mark are implied
        marks = [int(i) + 1 for i in np.flatnonzero(self._bits)]
        marks.append(len(self._bits) + 1)
        return Ruler(marks)

    def count_marks(self):
        """ number of set bits """
        return int(np.count_nonzero(self._bits))

    def total_marks(self):
        """ number of marks, including the implied 0 and final mark """
        return self.count_marks() + 2

    def is_full(self):
        """ True if every bit is set """
        return bool(self._bits.all())

    def contains(self, value):
        """ Check if `value` is a mark of this state, 0 and the length included """
        length = len(self._bits) + 1
        if value < 0:
            return False
        if value == 0 or value == length:
            return True
        if value > length:
            return False
        return bool(self._bits[value - 1])

    def is_golomb_ruler_order_1(self):
        """
            Depth-1 check of the Golomb property, see `Ruler.is_golomb_ruler_order_1()`.

            Mark `m = i+1` and `length - m` are both marks iff bit `i` and
            bit `len-1-i` are both set, i.e. the state overlaps its own reversal.
        """
        return not (self._bits & self._bits[::-1]).any()

    # --------------------------------------------------------------------
    # elementary transitions
    # --------------------------------------------------------------------

    def extend(self):
        """ Append a cleared bit: go one level down, to the left """
        return RulerState._wrap(np.append(self._bits, False))

    def flip_last(self):
        """ Set the final bit: go to the right sibling """
        out = self._bits.copy()
        out[-1] = True
        return RulerState._wrap(out)

    def backtrack(self):
        """
            Clear the trailing set bits and set the cleared bit before them: 0111 -> 1000

            Returns None if every bit is set.
        """
        unset = np.flatnonzero(~self._bits)
        if len(unset) == 0:
            return None
        i = unset[-1]
        out = self._bits.copy()
        out[i] = True
        out[i+1:] = False
        return RulerState._wrap(out)

    def add_mark(self):
        """
            Set the last cleared bit: 0101 -> 0111

            Returns None if every bit is set.
        """
        unset = np.flatnonzero(~self._bits)
        if len(unset) == 0:
            return None
        out = self._bits.copy()
        out[unset[-1]] = True
        return RulerState._wrap(out)

    def jump_back(self):
        """
            Skip the states that would exceed the current number of marks.

            Clears the trailing run of set bits and sets the cleared bit right before it,
            e.g. 0110 -> 1000 and 00100 -> 01000. Combined with `add_mark()` this moves to
            the next combination with the same number of set bits.

            Returns None if no cleared bit precedes that run (or nothing is set).
        """
        marked = np.flatnonzero(self._bits)
        if len(marked) == 0:
            return None

        out = self._bits.copy()
        j = marked[-1]
        out[j] = False
        for i in range(j - 1, -1, -1):
            if not out[i]:
                out[i] = True
                return RulerState._wrap(out)
            out[i] = False
        return None

    # --------------------------------------------------------------------
    # traversal steps
    # --------------------------------------------------------------------

    def next(self, length):
        """
            Next state of the exhaustive walk over all rulers of length `length`.
            None when the walk is finished.
        """
        target = length - 1
        if len(self) > target:
            return None

        if len(self) < target:
            # always go to the left
            state = self.extend()
            while len(state) < target:
                state = state.extend()
            return state

        if len(self) == 0:
            return None
        if not self._bits[-1]:
            return self.flip_last()
        if self.is_full():
            return None
        return self.backtrack()

    def pruned_propose_next(self, order):
        """
            Propose the next state when only states with `order` total marks are wanted.

            The proposal can have fewer or more marks than `order`, see `next_pruned()`.
            Only defined for `order >= 3`, order 2 has no interior marks at all.
        """
        if len(self._bits) == 0:
            return None
        if not self._bits[-1]:
            if self.total_marks() == order:
                # saturated: finished once the marks are packed to the left
                if self._bits[:order - 2].all():
                    return None
                return self.jump_back()
            return self.add_mark()

        if self.is_full():
            return None
        return self.backtrack()

    def next_pruned(self, order, length):
        """
            Next state with exactly `order` total marks and length `length`.
            None when there is none.
        """
        if order < 3:
            raise InvalidParameterError(f"Pruned tree traversal needs an order of at least 3, got {order}")
        target = length - 1
        if target < 1 or len(self) > target:
            return None

        state = self
        while len(state) < target:
            state = state.extend()

        nxt = state.pruned_propose_next(order)
        while nxt is not None and nxt.total_marks() != order:
            nxt = nxt.pruned_propose_next(order)
        return nxt

    def next_golomb_depth_1(self, order, length):
        """ Like `next_pruned()`, skipping states that fail `is_golomb_ruler_order_1()` """
        nxt = self.next_pruned(order, length)
        while nxt is not None and not nxt.is_golomb_ruler_order_1():
            nxt = nxt.next_pruned(order, length)
        return nxt

    def __len__(self):
        return len(self._bits)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return RulerState(self._bits[item])
        return bool(self._bits[item])

    def __iter__(self):
        return (bool(b) for b in self._bits)

    def __eq__(self, other):
        if not isinstance(other, RulerState):
            return NotImplemented
        return np.array_equal(self._bits, other._bits)

    def __hash__(self):
        return hash((len(self._bits), self._bits.tobytes()))

    def __str__(self):
        return "".join("1" if b else "0" for b in self._bits)

    def __repr__(self):
        return f"RulerState('{self}')"
