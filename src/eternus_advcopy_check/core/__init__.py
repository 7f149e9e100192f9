"""Parsing, classification and aggregation of Advanced Copy session listings."""
