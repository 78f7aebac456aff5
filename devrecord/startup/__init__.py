"""Startup utilities for the devrecord service."""

from .records_dir import ensure_records_dir

__all__ = ["ensure_records_dir"]
