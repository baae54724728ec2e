"""
Configuration for the bootcamp tracker.

Bootcamp identity comes from the environment (.env supported); the content
catalog can be loaded from YAML.
"""

import os
from pathlib import Path
from typing import Optional
import yaml
from dotenv import load_dotenv

from models import Content, Course, Mentorship, get_strategy

# Load environment variables
load_dotenv()

DEFAULT_BOOTCAMP_NAME = "Bootcamp Java Developer"
DEFAULT_BOOTCAMP_DESCRIPTION = "Descrição Bootcamp Java Developer"

BOOTCAMP_NAME = os.environ.get("BOOTCAMP_NAME", DEFAULT_BOOTCAMP_NAME)
BOOTCAMP_DESCRIPTION = os.environ.get("BOOTCAMP_DESCRIPTION", DEFAULT_BOOTCAMP_DESCRIPTION)

# Paths
CATALOG_FILE = Path(os.environ.get("CATALOG_FILE", "catalog.yaml"))


def _build_content(entry: dict) -> Content:
    """Turn one catalog entry into a Course or Mentorship."""
    fields = dict(entry)
    kind = str(fields.pop("kind", "")).lower()

    if kind == "course":
        strategy = get_strategy(fields.pop("strategy", ""))
        return Course(strategy=strategy, **fields)
    if kind == "mentorship":
        return Mentorship(**fields)

    raise ValueError(f"Unknown content kind: {kind or '<missing>'}")


def load_catalog(path: Optional[Path] = None) -> list[Content]:
    """
    Load catalog contents from YAML.

    Returns an empty list when the file doesn't exist. Entries keep file
    order, which becomes catalog order once added to a bootcamp.
    """
    path = Path(path) if path else CATALOG_FILE
    if not path.exists():
        return []

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return [_build_content(entry) for entry in data.get("contents", [])]
