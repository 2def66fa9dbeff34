"""Helpers for the chart renderer."""
