"""Pytest configuration and shared fixtures."""

import pytest
from typing import Dict, List


@pytest.fixture
def stock_rows() -> List[Dict[str, str]]:
    """Sample equity rows as loaded from stocks_cleaned.csv."""
    return [
        {"symbol": "AAPL", "chg_%": "+2.00%", "vol_": "300"},
        {"symbol": "MSFT", "chg_%": "-1.50%", "vol_": "200"},
        {"symbol": "aapl ", "chg_%": "+1.00%", "vol_": "100"},
        {"symbol": "XOM", "chg_%": "0.00%", "vol_": "50"},
        {"symbol": "TSLA", "chg_%": "-4.00%", "vol_": "150"},
        {"symbol": "", "chg_%": "+9.00%", "vol_": "999"},
        {"symbol": "NVDA", "chg_%": "n/a", "vol_": "400"},
    ]


@pytest.fixture
def crypto_rows() -> List[Dict[str, str]]:
    """Sample cryptocurrency rows as loaded from crypto_cleaned.csv."""
    return [
        {"symbol": "BTC", "name": "Bitcoin", "chg_24h": "3.5", "market_cap": "1,200,000"},
        {"symbol": "ETH", "name": "Ethereum", "chg_24h": "-2.0", "market_cap": "400,000"},
        {"symbol": "DOGE", "name": "Dogecoin", "chg_24h": "-8.0", "market_cap": "0"},
        {"symbol": "btc", "name": "bitcoin", "chg_24h": "1.5", "market_cap": "bad"},
    ]


@pytest.fixture
def company_rows() -> List[Dict[str, str]]:
    """Ticker to sector lookup rows as loaded from companies_cleaned.csv."""
    return [
        {"ticker": "AAPL", "sector": "Technology"},
        {"ticker": "MSFT", "sector": "Technology"},
        {"ticker": "XOM", "sector": "Energy"},
        {"ticker": "TSLA", "sector": ""},
    ]
