"""Treemap hierarchy assembly"""

from collections.abc import Iterable

from ..data.models import Category, CategoryNode, Hierarchy, NormalizedAggregate


def build_hierarchy(stock_leaves: Iterable[NormalizedAggregate],
                    crypto_leaves: Iterable[NormalizedAggregate],
                    root_name: str = "Assets") -> Hierarchy:
    """Wrap the two normalized partitions under fixed category nodes and a root."""
    return Hierarchy(
        name=root_name,
        children=(
            CategoryNode(category=Category.STOCK, leaves=tuple(stock_leaves)),
            CategoryNode(category=Category.CRYPTO, leaves=tuple(crypto_leaves)),
        ),
    )
