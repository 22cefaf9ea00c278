"""Batch reports."""

from .yaml_report import (
    BatchEntry,
    BatchFormatError,
    YamlRenderer,
    load_batch,
    validate_entry,
    write_report,
)

__all__ = [
    "BatchEntry",
    "BatchFormatError",
    "YamlRenderer",
    "load_batch",
    "validate_entry",
    "write_report",
]
