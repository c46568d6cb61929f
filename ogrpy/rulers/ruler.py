#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## ruler.py
##
"""
    Rulers, Golomb rulers and the Golomb property.

    A ruler is stored as the strictly increasing sequence of its positive marks.
    The mark `0` is always present and therefore implied: the ruler `[0, 1, 3, 7]`
    is stored as `(1, 3, 7)`.

    - `order` is the number of marks, including the implied 0
    - `length` is the largest mark (0 for the empty ruler `[0]`)

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        dist
        compute_distances
        is_golomb_ruler

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        Distance
        Ruler
        GolombRuler
"""
from collections import namedtuple
from functools import total_ordering

import numpy as np

from ..exceptions import InvalidRulerError, NotGolombError, IndexOverflowError


Distance = namedtuple("Distance", ["lhs", "rhs", "dist"])
Distance.__doc__ = "A pair of marks `lhs` < `rhs` and the distance between them"


def dist(a, b):
    """ absolute distance between two marks
    """
    return abs(a - b)


def compute_distances(sequence):
    """ set of all pairwise distances in `sequence`
    """
    distances = set()
    for i, lhs in enumerate(sequence):
        for rhs in sequence[i+1:]:
            distances.add(dist(lhs, rhs))
    return distances


def is_golomb_ruler(sequence):
    """
        Check whether the marks in `sequence` (without the implied 0) satisfy the Golomb property.

        Every mark is also a distance to the implied 0, so it is inserted alongside
        the pairwise distances. Returns False as soon as a distance repeats.
    """
    distances = set()
    for i, lhs in enumerate(sequence):
        if lhs in distances:
            return False
        distances.add(lhs)

        for rhs in sequence[i+1:]:
            d = dist(lhs, rhs)
            if d in distances:
                return False
            distances.add(d)

    return True


def _is_int(arg):
    return isinstance(arg, (int, np.integer)) and not isinstance(arg, (bool, np.bool_))


@total_ordering
class Ruler(object):
    """
        Immutable set of integer marks, with 0 implied.

        Two rulers are equal when they have the same marks, regardless of whether
        one of them is a `GolombRuler`. Rulers are ordered by comparing their marks
        lexicographically.

        .. code-block:: python

            r = Ruler([1, 3, 7])
            print(r)            # [0, 1, 3, 7]
            r.order()           # 4
            r.length()          # 7
            r.is_golomb_ruler() # True
    """
    __slots__ = ("_marks",)

    def __init__(self, marks=()):
        marks = tuple(marks)
        prev = 0
        for m in marks:
            if not _is_int(m):
                raise InvalidRulerError(f"Marks must be integers, got {m!r} of type {type(m)}")
            if m <= prev:
                raise InvalidRulerError(f"Marks must be positive and strictly increasing, got {list(marks)}")
            prev = m
        object.__setattr__(self, "_marks", tuple(int(m) for m in marks))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # rebuild through the constructor, for pickle and copy
        return (type(self), (self._marks,))

    @property
    def marks(self):
        """ the marks of this ruler, without the implied 0 """
        return self._marks

    def order(self):
        return len(self._marks) + 1

    def length(self):
        if len(self._marks) == 0:
            return 0
        return self._marks[-1]

    def full_marks(self):
        """ all marks, with the implied 0 prepended """
        return (0,) + self._marks

    def as_set(self):
        return set(self._marks)

    def is_golomb_ruler(self):
        """ Check if the marks of this ruler admit the Golomb property """
        return is_golomb_ruler(self._marks)

    def is_golomb_ruler_order_1(self):
        """
            Cheap, partial check of the Golomb property, used to prune enumerations.

            Only the distances from every mark to the final mark are checked: if such a
            distance is itself a mark, it repeats the distance between 0 and that mark.

            Consider the ruler `[0, 1, 3, 4]`, with (implied 0 excluded) marks `[1, 3, 4]`::

                0th order: [1, 3, 4]
                1st order: [2, 3]
                2nd order: [1]

            This only looks at the first order, so passing it does not make a Golomb ruler.
        """
        if len(self._marks) <= 1:
            return True

        marks = self.as_set()
        base = self.length()
        for m in self._marks[:-1]:
            if dist(m, base) in marks:
                return False
        return True

    def distances(self):
        """ list of `Distance` records for every pair of marks, the implied 0 included """
        out = []
        for i, lhs in enumerate(self._marks):
            out.append(Distance(0, lhs, lhs))
            for rhs in self._marks[i+1:]:
                out.append(Distance(lhs, rhs, dist(rhs, lhs)))
        return out

    def to_state(self):
        """ the `RulerState` of this ruler, see :mod:`ogrpy.enumeration.state` """
        from ..enumeration.state import RulerState
        return RulerState.from_ruler(self)

    def to_id(self, strict=False):
        """
            Natural number id of this ruler, the inverse of `Ruler.from_id()`.

            Returns None if the ruler is too long for its id to fit in `ID_BITS` bits,
            or raises `IndexOverflowError` if `strict` is set.
        """
        from ..enumeration.index import encode, ID_BITS
        idx = encode(self)
        if idx is None and strict:
            raise IndexOverflowError(f"The id of a ruler of length {self.length()} does not fit in {ID_BITS} bits")
        return idx

    @staticmethod
    def from_id(idx):
        """ Decode a ruler from its natural number id """
        from ..enumeration.index import decode
        return decode(idx)

    @staticmethod
    def from_ids(start, end):
        """ Decode all rulers with ids in `range(start, end)` """
        from ..enumeration.index import decode_range
        return decode_range(start, end)

    def next_pruned(self, order, length):
        """
            The next ruler of order `order` and length `length` in enumeration order,
            not necessarily a Golomb ruler. None if this is the last one.
        """
        state = self.to_state().next_pruned(order, length)
        if state is None:
            return None
        return state.to_ruler()

    def __len__(self):
        return len(self._marks)

    def __iter__(self):
        return iter(self._marks)

    def __eq__(self, other):
        if not isinstance(other, Ruler):
            return NotImplemented
        return self._marks == other._marks

    def __lt__(self, other):
        if not isinstance(other, Ruler):
            return NotImplemented
        return self._marks < other._marks

    def __hash__(self):
        return hash(self._marks)

    def __str__(self):
        return str(list(self.full_marks()))

    def __repr__(self):
        return str(self)


class GolombRuler(Ruler):
    """
        A `Ruler` that is guaranteed to have the Golomb property:
        no two pairs of marks are the same distance apart.
    """
    __slots__ = ()

    def __init__(self, marks=()):
        super().__init__(marks)
        if not is_golomb_ruler(self._marks):
            raise NotGolombError(f"{self} repeats a distance, it is not a Golomb ruler")

    @classmethod
    def from_ruler(cls, ruler):
        return cls(ruler.marks)

    def is_golomb_ruler(self):
        return True
