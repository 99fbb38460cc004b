"""
Main aggregation engine coordinator.

Orchestrates the pipeline from raw rows to the structures handed to the
rendering collaborator:

    rows -> group aggregation -> normalization -> hierarchy   (treemap)
    rows -> group aggregation -> rank selection               (bar charts)
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

import structlog

from .aggregation.aggregator import aggregate_dataset, sector_key_fn
from .aggregation.hierarchy import build_hierarchy
from .aggregation.normalizer import normalize
from .aggregation.selector import select, select_by_magnitude
from .config.defaults import DatasetParams, DefaultConfig
from .config.loader import ConfigLoader
from .data.models import Aggregate, Category, DashboardData, Hierarchy, NormalizedAggregate
from .data.parsers import RawRow
from .data.sources import load_sources

logger = structlog.get_logger(__name__)


class AssetAggregationEngine:
    """
    Main coordinator for the asset aggregation pipeline.

    Holds configuration only. Every build call works on the rows it is given
    and returns fresh results.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 config_dir: Optional[Path] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """Initialize the engine from an explicit config or the config loader."""
        if config is None:
            config = ConfigLoader.create(config_dir).load_config(overrides)
        self.config = config
        self.logger = logger

        self.logger.info("Asset aggregation engine initialized")

    def _params(self, category: Category) -> DatasetParams:
        return self.config.stocks if category is Category.STOCK else self.config.crypto

    def aggregate(self, rows: Iterable[RawRow], category: Category) -> list[Aggregate]:
        """Aggregate a dataset by its identifier column."""
        return list(aggregate_dataset(rows, self._params(category), category).values())

    def build_movers(self, rows: Iterable[RawRow], category: Category) -> list[Aggregate]:
        """Top gainers then top losers by mean change."""
        selection = select(
            self.aggregate(rows, category),
            self.config.selection.pos_n,
            self.config.selection.neg_n,
        )
        if not selection:
            self.logger.warning("Empty mover selection", dataset=category.value)
        return selection

    def build_liquidity(self, rows: Iterable[RawRow], category: Category) -> list[Aggregate]:
        """Largest groups by summed magnitude."""
        return select_by_magnitude(
            self.aggregate(rows, category),
            self.config.selection.liquidity_n,
        )

    def _treemap_leaves(self, rows: Iterable[RawRow], category: Category,
                        company_rows: Optional[Iterable[RawRow]] = None) -> list[NormalizedAggregate]:
        params = self._params(category)
        hierarchy_params = self.config.hierarchy

        if category is Category.STOCK and company_rows is not None and hierarchy_params.group_stocks_by_sector:
            key_fn, label_fn = sector_key_fn(
                company_rows,
                params.identifier_field,
                self.config.companies,
                hierarchy_params.unknown_sector,
            )
            aggregates = aggregate_dataset(rows, params, category, key_fn=key_fn, label_fn=label_fn)
        else:
            aggregates = aggregate_dataset(rows, params, category)

        leaves = normalize(aggregates.values())
        if not leaves:
            self.logger.warning("Empty treemap partition", dataset=category.value)
        return leaves

    def build_treemap(self, stock_rows: Iterable[RawRow], crypto_rows: Iterable[RawRow],
                      company_rows: Optional[Iterable[RawRow]] = None) -> Hierarchy:
        """
        Build the Stocks vs Crypto treemap hierarchy.

        Args:
            stock_rows: Equity rows
            crypto_rows: Cryptocurrency rows
            company_rows: Optional ticker/sector rows; when given, stock leaves
                are sectors instead of tickers

        Returns:
            Hierarchy with each partition normalized independently
        """
        return build_hierarchy(
            self._treemap_leaves(stock_rows, Category.STOCK, company_rows),
            self._treemap_leaves(crypto_rows, Category.CRYPTO),
            root_name=self.config.hierarchy.root_name,
        )

    def build_dashboard(self, stock_rows: Iterable[RawRow], crypto_rows: Iterable[RawRow],
                        company_rows: Optional[Iterable[RawRow]] = None) -> DashboardData:
        """Build the treemap and every ranked selection for one render request."""
        stock_rows = list(stock_rows)
        crypto_rows = list(crypto_rows)
        company_rows = list(company_rows) if company_rows is not None else None

        return DashboardData(
            hierarchy=self.build_treemap(stock_rows, crypto_rows, company_rows),
            movers={
                Category.STOCK: self.build_movers(stock_rows, Category.STOCK),
                Category.CRYPTO: self.build_movers(crypto_rows, Category.CRYPTO),
            },
            liquidity={
                Category.STOCK: self.build_liquidity(stock_rows, Category.STOCK),
                Category.CRYPTO: self.build_liquidity(crypto_rows, Category.CRYPTO),
            },
        )

    async def run(self, base_dir: Optional[Path] = None) -> DashboardData:
        """
        Load the configured datasets concurrently and build the dashboard.

        Args:
            base_dir: Directory relative source paths are resolved against

        Returns:
            Dashboard data built from fully loaded datasets

        Raises:
            DataSourceFailureError: If any configured dataset cannot be loaded
        """
        sources = self.config.sources
        base = Path(base_dir) if base_dir is not None else Path.cwd()

        paths = {
            "stocks": base / sources.stocks_path,
            "crypto": base / sources.crypto_path,
        }
        if sources.companies_path:
            paths["companies"] = base / sources.companies_path

        rows = await load_sources(paths, delimiter=sources.delimiter, encoding=sources.encoding)

        self.logger.info(
            "Datasets loaded",
            **{name: len(dataset_rows) for name, dataset_rows in rows.items()}
        )

        return self.build_dashboard(rows["stocks"], rows["crypto"], rows.get("companies"))
