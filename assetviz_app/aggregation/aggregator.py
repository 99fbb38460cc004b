"""
Group aggregation of raw rows into per-asset statistics.

Rows are folded in input order into a mapping local to each call. Malformed
rows (missing identifier, unparsable value) are skipped and counted; they never
raise out of the fold.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import CompaniesParams, DatasetParams
from ..data.keys import is_valid_key, normalize_key
from ..data.models import Aggregate, Category
from ..data.parsers import RawRow, RowReader, get_parser
from ..errors import MalformedRowError
from ..logging.config import get_pipeline_logger, log_fold_summary

logger = get_pipeline_logger(__name__)

KeyFn = Callable[[RowReader], Optional[str]]
ValueFn = Callable[[RowReader], Optional[float]]
LabelFn = Callable[[RowReader], Optional[str]]


@dataclass
class _Accumulator:
    """Mutable running state for one group while folding."""
    key: str
    code: str
    display_name: Optional[str]
    sum: float = 0.0
    count: int = 0
    magnitude: float = 0.0

    def freeze(self, category: Category) -> Aggregate:
        return Aggregate(
            category=category,
            key=self.key,
            code=self.code,
            sum=self.sum,
            count=self.count,
            magnitude=self.magnitude,
            display_name=self.display_name,
        )


def aggregate(rows: Iterable[RawRow],
              key_fn: KeyFn,
              value_fn: ValueFn,
              label_fn: LabelFn,
              *,
              category: Category,
              magnitude_fn: Optional[ValueFn] = None,
              name_fn: Optional[LabelFn] = None) -> dict[str, Aggregate]:
    """
    Fold rows sharing a group key into aggregates.

    Args:
        rows: Raw rows in input order
        key_fn: Group key for a row, None when the identifier is missing
        value_fn: Signed value to fold, None when unparsable
        label_fn: Display label taken from the first row of a group
        category: Partition the aggregates belong to
        magnitude_fn: Optional magnitude summed per group; misses add 0
        name_fn: Optional display name taken from the first row of a group

    Returns:
        Group key to aggregate, in first-seen order
    """
    groups: dict[str, _Accumulator] = {}
    rows_seen = 0
    rows_skipped = 0

    for index, row in enumerate(rows):
        rows_seen += 1
        reader = RowReader(row, index)

        try:
            value = value_fn(reader)
            if value is None:
                raise MalformedRowError("Unparsable value", row_index=index)

            key = key_fn(reader)
            if not is_valid_key(key):
                raise MalformedRowError("Missing group key", row_index=index)
        except MalformedRowError as e:
            rows_skipped += 1
            logger.debug("Row skipped", dataset=category.value, row_index=index,
                         reason=str(e), field=e.field)
            continue

        acc = groups.get(key)
        if acc is None:
            acc = _Accumulator(
                key=key,
                code=label_fn(reader) or key,
                display_name=name_fn(reader) if name_fn else None,
            )
            groups[key] = acc

        acc.sum += value
        acc.count += 1
        if magnitude_fn is not None:
            acc.magnitude += magnitude_fn(reader) or 0.0

    log_fold_summary(logger, category.value, rows_seen, rows_skipped, len(groups))

    return {key: acc.freeze(category) for key, acc in groups.items()}


def identifier_key_fn(field: str) -> KeyFn:
    """Group by the normalized value of one identifier column."""
    def key_fn(reader: RowReader) -> Optional[str]:
        return normalize_key(reader.require_string(field))
    return key_fn


def sector_key_fn(company_rows: Iterable[RawRow], identifier_field: str,
                  companies: Optional[CompaniesParams] = None,
                  unknown_sector: str = "Unknown") -> tuple[KeyFn, LabelFn]:
    """
    Group stock rows by the sector of their ticker.

    Tickers absent from the company rows, or with a blank sector, fall into
    ``unknown_sector``. A ticker listed twice takes its last sector. Rows
    without a ticker are still skipped.

    Returns:
        Key function and label function for ``aggregate``
    """
    companies = companies or CompaniesParams()
    sector_by_ticker: dict[str, str] = {}

    for row in company_rows:
        reader = RowReader(row)
        ticker = reader.get_string(companies.ticker_field)
        if ticker is None:
            continue
        sector = reader.get_string(companies.sector_field)
        sector_by_ticker[normalize_key(ticker)] = sector or unknown_sector

    def label_fn(reader: RowReader) -> Optional[str]:
        ticker = reader.get_string(identifier_field)
        if ticker is None:
            return None
        return sector_by_ticker.get(normalize_key(ticker), unknown_sector)

    def key_fn(reader: RowReader) -> Optional[str]:
        sector = label_fn(reader)
        return normalize_key(sector) if sector is not None else None

    return key_fn, label_fn


def aggregate_dataset(rows: Iterable[RawRow],
                      params: DatasetParams,
                      category: Category,
                      key_fn: Optional[KeyFn] = None,
                      label_fn: Optional[LabelFn] = None) -> dict[str, Aggregate]:
    """
    Aggregate a dataset described by its column mapping.

    Args:
        rows: Raw rows
        params: Column names and parser names for this dataset
        category: Partition of the dataset
        key_fn: Override for the grouping key (e.g. sector grouping)
        label_fn: Override for the display label, paired with ``key_fn``

    Returns:
        Group key to aggregate
    """
    value_parser = get_parser(params.value_parser)
    magnitude_parser = get_parser(params.magnitude_parser)

    def value_fn(reader: RowReader) -> Optional[float]:
        return reader.get_numeric(params.value_field, value_parser)

    def default_label_fn(reader: RowReader) -> Optional[str]:
        return reader.get_string(params.identifier_field)

    magnitude_fn = None
    if params.magnitude_field:
        def magnitude_fn(reader: RowReader) -> Optional[float]:
            return reader.get_numeric(params.magnitude_field, magnitude_parser)

    name_fn = None
    if params.label_field and key_fn is None:
        label_field = params.label_field

        def name_fn(reader: RowReader) -> Optional[str]:
            name = reader.get_string(label_field)
            return name.strip() if name is not None else None

    return aggregate(
        rows,
        key_fn or identifier_key_fn(params.identifier_field),
        value_fn,
        label_fn or default_label_fn,
        category=category,
        magnitude_fn=magnitude_fn,
        name_fn=name_fn,
    )
