"""weighted_names

Draw names and given/family name pairs according to relative frequency
weights, using an alias-table sampler, plus census-weighted locale presets.

Primary entrypoints:
- weighted_names.NameList / weighted_names.FullNameList
- weighted_names.presets.jp / .ru / .us
- console script: weighted-names
"""

from __future__ import annotations

from .errors import EmptyList, InvalidWeights, LengthMismatch, NameListError
from .names import FullNameList, NameList
from .utils.sampling import WeightedSampler

__all__ = [
    "EmptyList",
    "FullNameList",
    "InvalidWeights",
    "LengthMismatch",
    "NameList",
    "NameListError",
    "WeightedSampler",
    "__version__",
]

__version__ = "0.1.0"
