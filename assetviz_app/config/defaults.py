"""Default configuration parameters for the asset aggregation engine."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DatasetParams:
    """Column mapping and parsing rules for one tabular dataset."""
    identifier_field: str                 # Grouping identity (ticker / coin symbol)
    value_field: str                      # Signed value folded into sum/mean
    value_parser: str = "percent"         # Parser name, see data.parsers.PARSERS
    magnitude_field: str = ""             # Area-encoded magnitude (liquidity)
    magnitude_parser: str = "plain"
    label_field: Optional[str] = None     # Optional display name column


@dataclass(frozen=True)
class SelectionParams:
    """Bounds for ranked bar selections."""
    pos_n: int = 10                       # Top gainers kept
    neg_n: int = 10                       # Top losers kept
    liquidity_n: int = 10                 # Largest magnitudes kept


@dataclass(frozen=True)
class SourceParams:
    """Where the tabular datasets are read from."""
    stocks_path: str = "stocks_cleaned.csv"
    crypto_path: str = "crypto_cleaned.csv"
    companies_path: Optional[str] = "companies_cleaned.csv"
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass(frozen=True)
class CompaniesParams:
    """Ticker to sector lookup columns."""
    ticker_field: str = "ticker"
    sector_field: str = "sector"


@dataclass(frozen=True)
class HierarchyParams:
    """Treemap hierarchy shaping."""
    root_name: str = "Assets"
    unknown_sector: str = "Unknown"
    group_stocks_by_sector: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    stocks: DatasetParams
    crypto: DatasetParams
    companies: CompaniesParams
    selection: SelectionParams
    sources: SourceParams
    hierarchy: HierarchyParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        stocks=DatasetParams(
            identifier_field="symbol",
            value_field="chg_%",
            value_parser="percent",
            magnitude_field="vol_",
            magnitude_parser="plain",
        ),
        crypto=DatasetParams(
            identifier_field="symbol",
            value_field="chg_24h",
            value_parser="percent",
            magnitude_field="market_cap",
            magnitude_parser="thousands",
            label_field="name",
        ),
        companies=CompaniesParams(),
        selection=SelectionParams(),
        sources=SourceParams(),
        hierarchy=HierarchyParams(),
    )
