"""
Centralized logging configuration for the AssetViz aggregation engine.

This module provides standardized logging configuration using structlog
for all components. Pipeline stages log through these helpers so that
skipped rows and fold summaries share one structured format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_pipeline_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the aggregation subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for aggregation stages
    """
    return get_logger(name).bind(subsystem="aggregation")


def log_fold_summary(
    logger: FilteringBoundLogger,
    dataset: str,
    rows_seen: int,
    rows_skipped: int,
    groups: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one aggregation fold.

    Args:
        logger: Structlog logger instance
        dataset: Dataset (category) that was folded
        rows_seen: Number of input rows
        rows_skipped: Rows dropped as malformed
        groups: Number of aggregates produced
        context: Additional context data
    """
    bound_logger = logger.bind(
        dataset=dataset,
        rows_seen=rows_seen,
        rows_skipped=rows_skipped,
        groups=groups,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if rows_seen and rows_skipped == rows_seen:
        bound_logger.warning("Fold skipped every row")
    else:
        bound_logger.info("Fold complete")
