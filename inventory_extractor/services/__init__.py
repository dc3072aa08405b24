"""Service exports."""

from . import analyzer, extraction, extractors, mapping, scoring, tables

__all__ = ["analyzer", "extraction", "extractors", "mapping", "scoring", "tables"]
