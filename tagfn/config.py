"""Loading render settings and page documents from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .io_utils import read_structured
from .models import PageDocument, RenderSettings


def load_settings(path: Optional[Path]) -> RenderSettings:
    """Read settings YAML/JSON, or return defaults when no path is given."""

    if path is None:
        return RenderSettings()
    if not path.exists():
        raise SystemExit(f"Settings file not found: {path}")
    try:
        data = read_structured(path) or {}
        return RenderSettings.model_validate(data)
    except (UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError, ValidationError) as exc:
        raise SystemExit(f"Invalid settings file {path}: {exc}") from exc


def load_page(path: Path) -> PageDocument:
    """Read and validate a page document.

    A document without a ``root`` key is treated as the root element itself.
    """

    if not path.exists():
        raise SystemExit(f"Page file not found: {path}")
    try:
        data = read_structured(path)
        if isinstance(data, dict) and "root" not in data:
            data = {"root": data}
        return PageDocument.model_validate(data)
    except (UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError, ValidationError) as exc:
        raise SystemExit(f"Invalid page file {path}: {exc}") from exc


__all__ = ["load_page", "load_settings"]
