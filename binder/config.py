"""Configuration model for Binder assembly runs.

Responsibilities:
- Define assembly settings as a typed dataclass.
- Validate settings before any output is touched.

Key types:
- `AssemblyConfig`: normalized settings for one assembly run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .parsing import normalize_optional_string


@dataclass(slots=True)
class AssemblyConfig:
    """Runtime configuration for one assembly run.

    Attributes:
        input_file: Path to the two-document book YAML file.
        output_dir: Directory that is cleared and filled with chapter files.
        word_count: Whether to count words for every scene.
        scene_headings: Whether to prefix each scene with a `##` heading.
    """

    input_file: Path
    output_dir: Path
    word_count: bool = False
    scene_headings: bool = False

    def __post_init__(self) -> None:
        self.input_file = Path(self.input_file)
        self.output_dir = Path(self.output_dir)

    def validate(self) -> None:
        """Validate settings before the output directory is cleared.

        Raises:
            ValueError: If a path is blank or the output directory would
                remove the book file.
        """

        self._require_path(self.input_file, "input_file")
        self._require_path(self.output_dir, "output_dir")
        input_resolved = self.input_file.resolve()
        output_resolved = self.output_dir.resolve()
        if output_resolved == input_resolved or output_resolved in input_resolved.parents:
            raise ValueError(
                f"`output_dir` `{self.output_dir}` contains the book file `{self.input_file}`; "
                "it would be deleted when the output directory is cleared."
            )

    @staticmethod
    def _require_path(value: Path, field_name: str) -> None:
        if normalize_optional_string(value) in (None, "."):
            raise ValueError(f"`{field_name}` must be a non-empty path.")
