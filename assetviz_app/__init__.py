"""
AssetViz App - Asset Aggregation and Selection Engine

Reduces tabular equity and cryptocurrency records into normalized, rankable
aggregates: a Stocks/Crypto treemap hierarchy and ranked gainer/loser and
liquidity selections handed to a rendering collaborator.
"""

__version__ = "0.1.0"
__author__ = "AssetViz Team"
