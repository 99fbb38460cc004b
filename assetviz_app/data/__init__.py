"""
Tabular data ingestion module.

Handles key normalization, numeric parsing of raw string cells, the canonical
aggregate models and loading of CSV datasets into raw rows.
"""
