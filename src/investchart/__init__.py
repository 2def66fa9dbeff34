"""Ticker quote tracking and multi-series price charts from the Yahoo Finance chart endpoint."""

__version__ = "0.1.0"
