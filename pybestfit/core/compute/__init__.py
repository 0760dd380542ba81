"""
Shared compute infrastructure for pybestfit.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison tolerances for fitted parameters
"""

from pybestfit.core.compute.timing import Timer
from pybestfit.core.compute.tolerances import ToleranceTier, AGREEMENT, FORMATTED

__all__ = [
    "Timer",
    "ToleranceTier",
    "AGREEMENT",
    "FORMATTED",
]
