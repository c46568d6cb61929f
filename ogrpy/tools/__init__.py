"""
    Set of independent tools that users might appreciate.

    =============
    List of tools
    =============

    .. autosummary::
        :nosignatures:

        sampling
        cpsat
"""

from .sampling import sample_rulers, golomb_density
from .cpsat import golomb_rulers_cpsat
