"""
    Enumeration of rulers, by walking a tree of ruler states

    ==================
    List of submodules
    ==================
    .. autosummary::
        :nosignatures:

        state
        strategies
        index
        enumerations
"""

from .state import RulerState
from .strategies import TraversalStrategy, Exhaustive, CardinalityPruned, DepthLimited, RulerIterator
from .index import decode, encode, decode_range, ID_BITS
from .enumerations import enumerate_rulers, enumerate_rulers_with_length, enumerate_rulers_with_order, \
                          enumerate_pruned_rulers, \
                          enumerate_golomb_rulers, enumerate_golomb_rulers_with_length, \
                          enumerate_golomb_rulers_pruned, enumerate_golomb_rulers_pruned_with_length, \
                          enumerate_golomb_rulers_depth, enumerate_golomb_rulers_depth_with_length, \
                          count_rulers, count_rulers_with_order
