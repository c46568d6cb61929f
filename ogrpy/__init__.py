"""
    ogrpy enumerates rulers in search of Golomb rulers: sets of integer marks where
    no two pairs of marks are the same distance apart.

    For example `[0, 1, 3, 7]` is a Golomb ruler of *order* 4 (number of marks) and
    *length* 7 (largest mark), while `[0, 1, 2]` is not: the distance between 1 and 2
    repeats the distance between 0 and 1.

    Finding the shortest Golomb ruler of a given order (an Optimal Golomb Ruler, OGR)
    is a hard problem for which enumeration is still the only known method.
    This package provides the enumeration algorithms, not the optimisation itself.

    The package consists of 3 modules:
    - `rulers`: the `Ruler` and `GolombRuler` value types, the Golomb property and simple constructors
    - `enumeration`: ruler states, tree traversal strategies, the ruler <-> id bijection and the enumeration functions
    - `tools`: independent tools, such as random sampling of rulers and a CP-SAT cross-check
"""

__version__ = "0.3.0"


from .rulers import *
from .enumeration import *
