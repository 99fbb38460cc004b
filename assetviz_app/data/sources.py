"""
Tabular dataset loading.

Reads delimited text with a header row into raw rows (``column -> string``).
Every cell is kept as text; parsing happens later behind ``RowReader``. A file
that cannot be read is a whole-dataset failure and raises
``DataSourceFailureError``.
"""

import asyncio
import warnings
from collections.abc import Mapping
from pathlib import Path
from typing import Union

import pandas as pd
import structlog

from ..errors import DataSourceFailureError
from .parsers import RawRow

logger = structlog.get_logger(__name__)

PathLike = Union[str, Path]


def _log_skipped_lines(caught: list[warnings.WarningMessage], *, dataset: str, source: str) -> None:
    """Log lines pandas dropped as malformed and re-issue any other warnings."""
    for warning in caught:
        if not issubclass(warning.category, pd.errors.ParserWarning):
            warnings.warn(warning.message, stacklevel=3)
            continue
        for detail in str(warning.message).splitlines():
            if detail.strip():
                logger.warning("Malformed line skipped", dataset=dataset, source=source,
                               detail=detail.strip())


def load_rows(path: PathLike, *, dataset: str, delimiter: str = ",",
              encoding: str = "utf-8") -> list[RawRow]:
    """
    Load one delimited file into raw rows.

    Lines with more fields than the header are skipped and logged; the rest
    of the file still loads. A trailing delimiter on every line is tolerated.

    Args:
        path: File to read
        dataset: Dataset name, used in errors and logs
        delimiter: Column separator
        encoding: Text encoding

    Returns:
        Rows in file order, blank cells as empty strings

    Raises:
        DataSourceFailureError: If the file is missing, unreadable or empty
    """
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", pd.errors.ParserWarning)
            frame = pd.read_csv(
                path,
                sep=delimiter,
                dtype=str,
                keep_default_na=False,
                encoding=encoding,
                index_col=False,
                on_bad_lines="warn",
            )
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # pandas EmptyDataError and ParserError are ValueError subclasses
        logger.error("Dataset load failed", dataset=dataset, source=str(path), error=str(e))
        raise DataSourceFailureError(
            f"Could not load {dataset} dataset from {path}: {e}",
            dataset=dataset,
            source=str(path),
        ) from e

    _log_skipped_lines(caught, dataset=dataset, source=str(path))

    rows = frame.to_dict(orient="records")
    logger.debug("Dataset loaded", dataset=dataset, source=str(path), rows=len(rows))
    return rows


async def load_sources(paths: Mapping[str, PathLike], *, delimiter: str = ",",
                       encoding: str = "utf-8") -> dict[str, list[RawRow]]:
    """
    Load several datasets concurrently.

    Args:
        paths: Dataset name to file path

    Returns:
        Dataset name to rows, in the order of ``paths``

    Raises:
        DataSourceFailureError: If any dataset fails; no partial result is returned
    """
    names = list(paths)
    results = await asyncio.gather(*(
        asyncio.to_thread(load_rows, paths[name], dataset=name,
                          delimiter=delimiter, encoding=encoding)
        for name in names
    ))
    return dict(zip(names, results))
