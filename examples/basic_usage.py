#!/usr/bin/env python3
"""
Basic Usage Example - AssetViz Aggregation Engine

This script demonstrates the basic usage of the aggregation engine with
in-memory rows. It shows how to:
- Initialize the engine
- Build the Stocks vs Crypto treemap hierarchy
- Build gainer/loser and liquidity selections
- Export the payload handed to a renderer

Run: python examples/basic_usage.py [data_dir]
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Dict, List

from assetviz_app.data.models import Aggregate, Category
from assetviz_app.engine import AssetAggregationEngine
from assetviz_app.errors import DataSourceFailureError
from assetviz_app.logging import configure_logging


def sample_stock_rows() -> List[Dict[str, str]]:
    """Equity rows in stocks_cleaned.csv layout."""
    return [
        {"symbol": "AAPL", "chg_%": "+1.25%", "vol_": "52000000"},
        {"symbol": "MSFT", "chg_%": "-0.80%", "vol_": "23000000"},
        {"symbol": "NVDA", "chg_%": "+3.10%", "vol_": "61000000"},
        {"symbol": "XOM", "chg_%": "-2.40%", "vol_": "15000000"},
        {"symbol": "aapl", "chg_%": "+0.75%", "vol_": "48000000"},
        {"symbol": "JPM", "chg_%": "n/a", "vol_": "9000000"},
    ]


def sample_crypto_rows() -> List[Dict[str, str]]:
    """Cryptocurrency rows in crypto_cleaned.csv layout."""
    return [
        {"symbol": "BTC", "name": "Bitcoin", "chg_24h": "2.1", "market_cap": "1,310,000,000,000"},
        {"symbol": "ETH", "name": "Ethereum", "chg_24h": "-1.4", "market_cap": "420,000,000,000"},
        {"symbol": "SOL", "name": "Solana", "chg_24h": "5.6", "market_cap": "78,000,000,000"},
        {"symbol": "DOGE", "name": "Dogecoin", "chg_24h": "-6.2", "market_cap": "21,000,000,000"},
    ]


def sample_company_rows() -> List[Dict[str, str]]:
    """Ticker to sector rows in companies_cleaned.csv layout."""
    return [
        {"ticker": "AAPL", "sector": "Technology"},
        {"ticker": "MSFT", "sector": "Technology"},
        {"ticker": "NVDA", "sector": "Technology"},
        {"ticker": "XOM", "sector": "Energy"},
    ]


def print_selection(title: str, selection: List[Aggregate]) -> None:
    print(f"   {title}:")
    if not selection:
        print("     (empty)")
    for aggregate in selection:
        print(f"     {aggregate.label:<12} mean={aggregate.mean:+.2f}%  "
              f"count={aggregate.count}  magnitude={aggregate.magnitude:,.0f}")


def main() -> None:
    """Run the aggregation demo."""
    configure_logging(level="WARNING")

    print("🚀 AssetViz Aggregation Engine - Basic Usage Example")
    print("=" * 60)

    print("1. Initializing engine...")
    engine = AssetAggregationEngine(overrides={"selection": {"pos_n": 2, "neg_n": 2, "liquidity_n": 3}})
    print()

    if len(sys.argv) > 1:
        data_dir = Path(sys.argv[1])
        print(f"2. Loading datasets from {data_dir}...")
        try:
            dashboard = asyncio.run(engine.run(data_dir))
        except DataSourceFailureError as e:
            print(f"❌ Could not load {e.dataset} dataset: {e}")
            sys.exit(1)
    else:
        print("2. Using built-in sample rows...")
        dashboard = engine.build_dashboard(
            sample_stock_rows(), sample_crypto_rows(), sample_company_rows()
        )
    print()

    print("3. Treemap leaves:")
    for node in dashboard.hierarchy.children:
        print(f"   {node.name}:")
        for leaf in node.leaves:
            print(f"     {leaf.aggregate.label:<12} share={leaf.value:.3f}  "
                  f"avg change={leaf.aggregate.mean:+.2f}%")
    print()

    print("4. Ranked selections:")
    for category in Category:
        print_selection(f"{category.value} movers", dashboard.movers[category])
        print_selection(f"{category.value} liquidity", dashboard.liquidity[category])
    print()

    print("5. Renderer payload:")
    print(json.dumps(dashboard.to_dict()["treemap"], indent=2)[:600])
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
