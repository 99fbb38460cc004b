"""
Logging configuration and utilities for the AssetViz aggregation engine.
"""
from .config import configure_logging, get_logger, get_pipeline_logger, log_fold_summary

__all__ = ["configure_logging", "get_logger", "get_pipeline_logger", "log_fold_summary"]
