from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from .page_format import FONT_FAMILY, MARGIN, PAGE_FORMAT

PAGE_FORMATS = {"a3", "a4", "a5", "letter", "legal"}


class FooterPlacement(str, Enum):
    LAST_PAGE = "last_page"
    EVERY_PAGE = "every_page"


@dataclass(frozen=True)
class RenderConfig:
    title: str = "LLM Council - Final Answer"
    attribution_label: str = "Chairman: "
    margin: float = MARGIN
    page_format: str = PAGE_FORMAT
    font_family: str = FONT_FAMILY
    footer: FooterPlacement = FooterPlacement.LAST_PAGE
    artifact_prefix: str = "llm-council-answer"

    def with_overrides(self, **overrides: Any) -> "RenderConfig":
        """Return a copy with every non-None override applied and validated."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return _validated(replace(self, **_coerce(values)))


def parse_config(text: str) -> RenderConfig:
    """Parse YAML settings into a RenderConfig. Missing keys keep their defaults."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping of setting names to values.")
    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")
    return _validated(RenderConfig(**_coerce(data)))


def load_config(path: str | Path) -> RenderConfig:
    return parse_config(Path(path).read_text(encoding="utf-8"))


def _coerce(values: dict) -> dict:
    coerced = dict(values)
    if "footer" in coerced:
        try:
            coerced["footer"] = FooterPlacement(str(coerced["footer"]).strip().lower().replace("-", "_"))
        except ValueError:
            choices = ", ".join(p.value for p in FooterPlacement)
            raise ValueError(f"footer must be one of: {choices}") from None
    if "margin" in coerced:
        try:
            coerced["margin"] = float(coerced["margin"])
        except (TypeError, ValueError):
            raise ValueError("margin must be a number") from None
    for key in ("title", "attribution_label", "page_format", "font_family", "artifact_prefix"):
        if key in coerced and coerced[key] is not None:
            coerced[key] = str(coerced[key])
    return coerced


def _validated(config: RenderConfig) -> RenderConfig:
    if config.margin <= 0:
        raise ValueError("margin must be positive")
    if config.page_format.lower() not in PAGE_FORMATS:
        raise ValueError(f"Unsupported page_format: {config.page_format}")
    if not config.artifact_prefix:
        raise ValueError("artifact_prefix must not be empty")
    return config
