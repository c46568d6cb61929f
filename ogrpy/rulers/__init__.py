"""
    Ruler value types and single-ruler constructors

    ==================
    List of submodules
    ==================
    .. autosummary::
        :nosignatures:

        ruler
        construct
"""

from .ruler import Ruler, GolombRuler, Distance, dist, compute_distances, is_golomb_ruler
from .construct import generate_golomb_ruler_naive, generate_golomb_ruler_improved
