"""Metadata block writer for downstream document generation.

The front matter is written as a YAML mapping wrapped in `---` delimiters on
both sides, which Pandoc recognizes as a metadata block.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from ..models.datatypes import FrontMatter
from .storage import METADATA_FILENAME, ManuscriptStore

YAML_DELIMITER = "---\n"


def front_matter_payload(front_matter: FrontMatter) -> dict[str, str]:
    """Return non-empty front matter fields in declaration order."""

    payload: dict[str, str] = {}
    for key in FrontMatter.field_names():
        value = getattr(front_matter, key)
        if value != "":
            payload[key] = value
    return payload


def render_metadata(front_matter: FrontMatter) -> str:
    """Render front matter as a delimited YAML metadata block."""

    payload = front_matter_payload(front_matter)
    body = ""
    if payload:
        body = yaml.safe_dump(
            payload,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=float("inf"),
        )
    return f"{YAML_DELIMITER}{body}{YAML_DELIMITER}"


def write_metadata(front_matter: FrontMatter, output_dir: Path) -> Path:
    """Write `metadata.yaml` into `output_dir` and return its path.

    Raises:
        OSError: If the file cannot be written.
    """

    store = ManuscriptStore(output_dir)
    return store.save_text(Path(METADATA_FILENAME), render_metadata(front_matter))
