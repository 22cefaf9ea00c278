"""Batch input and YAML reports."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from ...domain.models import ValidationResult
from ...domain.services import Validator
from ...markup import to_plain
from ...ports.renderer import RendererPort

logger = logging.getLogger(__name__)


class BatchFormatError(ValueError):
    """Batch file does not have the expected shape."""


@dataclass
class BatchEntry:
    curp: str | None = None
    rfc: str | None = None
    label: str | None = None


def _result_dict(result: ValidationResult) -> dict:
    data = result.to_dict()
    data["message"] = to_plain(result.message)
    return data


class YamlRenderer(RendererPort):
    """Single result as a YAML document, markup stripped."""

    def render(self, result: ValidationResult) -> str:
        return yaml.safe_dump(_result_dict(result), allow_unicode=True, sort_keys=False)


def load_batch(path: Path) -> list[BatchEntry]:
    """Read batch entries from YAML.

    Accepts either a list of mappings or a mapping with an ``entries`` list.
    Each mapping may carry ``curp``, ``rfc`` and an optional ``label``.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise BatchFormatError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("entries")
    if not isinstance(data, list):
        raise BatchFormatError(f"{path}: expected a list of entries")

    entries = []
    for i, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise BatchFormatError(f"{path}: entry {i} is not a mapping")
        curp = item.get("curp")
        rfc = item.get("rfc")
        if curp is None and rfc is None:
            logger.warning(f"Entry {i} has neither curp nor rfc")
        entries.append(
            BatchEntry(
                curp=None if curp is None else str(curp),
                rfc=None if rfc is None else str(rfc),
                label=None if item.get("label") is None else str(item["label"]),
            )
        )

    logger.info(f"Loaded {len(entries)} entries from {path.name}")
    return entries


def validate_entry(validator: Validator, entry: BatchEntry) -> dict:
    """Validate every document in an entry, plus their match when both exist."""
    row: dict = {}
    if entry.label:
        row["label"] = entry.label
    results: list[ValidationResult] = []

    if entry.curp is not None:
        result = validator.validate_curp(entry.curp)
        row["curp"] = _result_dict(result)
        results.append(result)
    if entry.rfc is not None:
        result = validator.validate_rfc(entry.rfc)
        row["rfc"] = _result_dict(result)
        results.append(result)
    if entry.curp is not None and entry.rfc is not None:
        result = validator.validate_match(entry.curp, entry.rfc)
        row["match"] = _result_dict(result)
        results.append(result)

    row["ok"] = bool(results) and all(r.success for r in results)
    return row


def write_report(rows: list[dict], path: Path | None = None) -> str:
    """Serialize report rows as YAML, writing to ``path`` when given."""
    text = yaml.safe_dump(rows, allow_unicode=True, sort_keys=False)
    if path is not None:
        path.write_text(text, encoding="utf-8")
        logger.info(f"Report written: {path}")
    return text
