# xysplit/algorithms/__init__.py
"""
Simplification and splitting algorithms over core Datasets.

- VisvalingamSimplifier: keeps the points with large effective (triangle) area
- Splitter: strategy interface producing boundary arrays
- VisvalingamSplitter: splits at the simplifier's key points
- PiecewiseLinearSplitter: splits into pieces that each fit a straight line
"""

from .simplifier import Removal, VisvalingamSimplifier, triangle_area
from .splitter import Splitter, check_input_data, check_ordering
from .visvalingam_splitter import VisvalingamSplitter
from .piecewise_linear import PiecewiseLinearSplitter


__all__ = [
    # simplification
    "VisvalingamSimplifier",
    "Removal",
    "triangle_area",

    # splitting
    "Splitter",
    "VisvalingamSplitter",
    "PiecewiseLinearSplitter",
    "check_input_data",
    "check_ordering",
]
