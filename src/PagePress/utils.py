from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` like an en-US locale string: ``10/19/2026, 3:04:05 PM``."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def artifact_name(moment: datetime, prefix: str = "llm-council-answer") -> str:
    """File name derived from the epoch time in milliseconds."""
    return f"{prefix}-{int(moment.timestamp() * 1000)}.pdf"


def resolve_output_path(input_path: Path, output: Optional[str], moment: datetime, prefix: str = "llm-council-answer") -> Path:
    name = artifact_name(moment, prefix)
    if output:
        out_path = Path(output)
        if out_path.is_dir():
            out_path = out_path / name
        return out_path
    return input_path.parent / name


def read_markdown(path: Path) -> str:
    return path.read_text(encoding="utf-8")
