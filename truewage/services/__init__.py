"""Calculation, provenance, and formatting services."""
