"""
Canonical data models for aggregated asset data.

This module defines the immutable structures produced by the aggregation
stages and handed to the rendering collaborator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class Category(Enum):
    """Asset partition; the value is the display name of the category node."""
    STOCK = "Stocks"
    CRYPTO = "Crypto"


@dataclass(frozen=True)
class Aggregate:
    """Per-group statistics over all rows sharing one group key."""
    category: Category
    key: str                           # Normalized group key
    code: str                          # Display label, first raw identifier seen
    sum: float                         # Sum of the folded value
    count: int                         # Contributing rows, always >= 1
    magnitude: float = 0.0             # Sum of the magnitude column
    display_name: Optional[str] = None

    @property
    def mean(self) -> float:
        return self.sum / self.count

    @property
    def abs_mean(self) -> float:
        return abs(self.mean)

    @property
    def label(self) -> str:
        """Name shown on the chart, the display name when one is known."""
        return self.display_name or self.code

    @property
    def identity(self) -> tuple[Category, str]:
        return (self.category, self.key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.category.value,
            "symbol": self.code,
            "name": self.label,
            "sum": self.sum,
            "count": self.count,
            "mean": self.mean,
            "absMean": self.abs_mean,
            "magnitude": self.magnitude,
        }


@dataclass(frozen=True)
class NormalizedAggregate:
    """An aggregate with its share of the partition's total magnitude."""
    aggregate: Aggregate
    raw_value: float
    value: float

    @property
    def category(self) -> Category:
        return self.aggregate.category

    def to_dict(self) -> dict[str, Any]:
        """Leaf record consumed by the treemap renderer."""
        return {
            "name": self.aggregate.label,
            "symbol": self.aggregate.code,
            "type": self.aggregate.category.value,
            "rawValue": self.raw_value,
            "value": self.value,
            "avgChange": self.aggregate.mean,
            "count": self.aggregate.count,
        }


@dataclass(frozen=True)
class CategoryNode:
    """Second tree level: one node per partition."""
    category: Category
    leaves: tuple[NormalizedAggregate, ...]

    @property
    def name(self) -> str:
        return self.category.value

    @property
    def value(self) -> float:
        return sum(leaf.value for leaf in self.leaves)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.category.value,
            "children": [leaf.to_dict() for leaf in self.leaves],
        }


@dataclass(frozen=True)
class Hierarchy:
    """Three-level tree: root, category nodes, leaves."""
    name: str
    children: tuple[CategoryNode, ...]

    def leaves(self) -> Iterator[NormalizedAggregate]:
        for node in self.children:
            yield from node.leaves

    def category(self, category: Category) -> CategoryNode:
        for node in self.children:
            if node.category is category:
                return node
        raise KeyError(category)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "children": [node.to_dict() for node in self.children],
        }


@dataclass(frozen=True)
class DashboardData:
    """Everything a render request needs, built from fully loaded datasets."""
    hierarchy: Hierarchy
    movers: dict[Category, list[Aggregate]] = field(default_factory=dict)
    liquidity: dict[Category, list[Aggregate]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "treemap": self.hierarchy.to_dict(),
            "movers": {
                category.value: [a.to_dict() for a in selection]
                for category, selection in self.movers.items()
            },
            "liquidity": {
                category.value: [a.to_dict() for a in selection]
                for category, selection in self.liquidity.items()
            },
        }
