"""Output directory abstraction.

Responsibilities:
- Clear and recreate the assembly output directory.
- Resolve chapter and metadata paths inside the output directory.
- List assembled chapter files in reading order.
"""

from __future__ import annotations

from pathlib import Path
import shutil

from ..text.slug import CHAPTER_FILE_SUFFIX, chapter_filename

METADATA_FILENAME = "metadata.yaml"


class ManuscriptStore:
    """Filesystem-backed store for assembled chapter files."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with the output directory."""

        self.root = root

    def reset(self) -> Path:
        """Remove the output directory and everything in it, then recreate it.

        A missing directory is not an error; any other removal failure is.
        """

        try:
            shutil.rmtree(self.root)
        except FileNotFoundError:
            pass
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    def chapter_path(self, sequence: int, heading: str) -> Path:
        """Return the output path for the `sequence`-th chapter."""

        return self.root / chapter_filename(sequence, heading)

    def metadata_path(self) -> Path:
        """Return the metadata file path."""

        return self.root / METADATA_FILENAME

    def save_text(self, relative_path: Path, content: str) -> Path:
        """Save text content and return final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def chapter_files(self) -> list[Path]:
        """Return assembled chapter files sorted by their sequence prefix."""

        return sorted(
            path
            for path in self.root.glob(f"[0-9]*{CHAPTER_FILE_SUFFIX}")
            if path.is_file()
        )
