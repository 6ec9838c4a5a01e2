"""Utility helpers for reading documents, writing output and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

YAML_SUFFIXES = {".yaml", ".yml"}


def read_structured(path: Path) -> Any:
    """Load a YAML or JSON document, chosen by file suffix."""

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def write_html(path: PathLike, markup: str, *, encoding: str = "utf-8") -> Path:
    """Write markup to ``path``, creating parent directories.

    Characters the encoding cannot represent become numeric character
    references, which browsers read back as the same text.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_bytes(markup.encode(encoding, errors="xmlcharrefreplace"))
    return file_path


def warn(msg: str) -> None:
    print(f"tagfn: {msg}", file=sys.stderr)


__all__ = ["read_structured", "warn", "write_html"]
