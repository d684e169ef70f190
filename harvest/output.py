"""Write extracted records to JSON files."""

import json
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from harvest.profiles import EntityKind
from harvest.records import StructuredRecord

logger = logging.getLogger(__name__)


def records_payload(
    records: Sequence[StructuredRecord],
    kind: EntityKind,
) -> dict[str, Any]:
    """JSON-ready envelope: tag sets become sorted arrays, decimals strings."""
    return {
        "kind": kind.value,
        "records": [r.model_dump(mode="json") for r in records],
        "extracted_at": datetime.now(timezone.utc).isoformat(),
        "count": len(records),
    }


def write_records(
    records: Sequence[StructuredRecord],
    kind: EntityKind,
    output_dir: Path = Path("data"),
) -> Path:
    """Write *records* to ``<kind>.json``.

    Args:
        records: Deduplicated records from the pipeline.
        kind: Entity kind, used for the file name and the envelope.
        output_dir: Directory to write into (created if missing).

    Returns:
        Path to the written file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{kind.value}.json"

    with open(path, "w", encoding="utf-8") as f:
        json.dump(records_payload(records, kind), f, indent=2, ensure_ascii=False)

    logger.info("Wrote %d %s → %s", len(records), kind.value, path)
    return path
