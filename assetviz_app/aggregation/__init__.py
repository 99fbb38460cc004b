"""Aggregation and selection stages of the pipeline"""

from .aggregator import aggregate, aggregate_dataset, sector_key_fn
from .hierarchy import build_hierarchy
from .normalizer import normalize
from .selector import select, select_by_magnitude

__all__ = [
    "aggregate",
    "aggregate_dataset",
    "sector_key_fn",
    "normalize",
    "select",
    "select_by_magnitude",
    "build_hierarchy",
]
