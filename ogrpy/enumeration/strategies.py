#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## strategies.py
##
"""
    Traversal strategies over the tree of ruler states.

    Each strategy walks the states of a fixed `length` and decides, given the current
    state, what the next state is (or None when the walk is finished). They only differ
    in how much of the tree they prune:

    - `Exhaustive`: every one of the `2^(length-1)` states
    - `CardinalityPruned`: only states with exactly `order` total marks
    - `DepthLimited`: as `CardinalityPruned`, also skipping states that fail the
      depth-1 Golomb check

    A `RulerIterator` turns a strategy into a lazy, finite iterator of rulers.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        TraversalStrategy
        Exhaustive
        CardinalityPruned
        DepthLimited
        RulerIterator
"""
import warnings

from .state import RulerState
from ..exceptions import InvalidParameterError


class TraversalStrategy(object):
    """
        Base class of the traversal strategies.

        Subclasses implement `advance()`. The walk starts from `initial_state()`, which
        sits one level above the leaves so that the first `advance()` returns the
        first state of the walk.
    """

    def __init__(self, length):
        if length < 2:
            raise InvalidParameterError(f"Tree traversal needs a length of at least 2, got {length}")
        self.length = length

    def initial_state(self):
        return RulerState.zeros(self.length - 2)

    def advance(self, state):
        """ Return the state following `state`, or None when the walk is finished """
        raise NotImplementedError(f"{type(self).__name__} does not implement advance()")

    def __repr__(self):
        args = ", ".join(f"{k}={v}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


class Exhaustive(TraversalStrategy):
    """
        Depth-first walk over all subsets of interior marks, leftmost first.
    """

    def advance(self, state):
        return state.next(self.length)


class CardinalityPruned(TraversalStrategy):
    """
        Walk over the states with exactly `order` total marks, in ascending
        lexicographic order of their interior marks.

        Yields `C(length-1, order-2)` states. Order 2 (no interior marks) is not
        a tree walk and is rejected here, see `enumerate_pruned_rulers()`.
    """

    def __init__(self, order, length):
        super().__init__(length)
        if order < 3:
            raise InvalidParameterError(f"Pruned tree traversal needs an order of at least 3, got {order}")
        self.order = order

    def advance(self, state):
        return state.next_pruned(self.order, self.length)


class DepthLimited(CardinalityPruned):
    """
        Cardinality-pruned walk that also drops states failing the Golomb check
        at depth `depth`. Every Golomb ruler of the given order and length is kept.

        Only depth 1 is implemented: the distances from every mark to the final mark.
    """

    def __init__(self, order, length, depth=1):
        super().__init__(order, length)
        if depth < 1:
            raise InvalidParameterError(f"Depth must be at least 1, got {depth}")
        if depth > 1:
            warnings.warn(f"Golomb check at depth {depth} is not supported, using depth 1 instead")
        self.depth = depth

    def advance(self, state):
        return state.next_golomb_depth_1(self.order, self.length)


class RulerIterator(object):
    """
        Lazy iterator over the rulers visited by `strategy`.

        Holds its own current state; iterators never share state, so independent
        iterators (also over the same strategy) can be consumed side by side.
    """

    def __init__(self, strategy):
        self.strategy = strategy
        self.state = strategy.initial_state()

    def __iter__(self):
        return self

    def __next__(self):
        if self.state is None:
            raise StopIteration
        self.state = self.strategy.advance(self.state)
        if self.state is None:
            raise StopIteration
        return self.state.to_ruler()
