"""Read-only access to the markdown documentation tree."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from loguru import logger

# <project>/docs when running from a source checkout
DEFAULT_DOCS_PATH = Path(__file__).resolve().parents[3] / "docs"

HEADER_RE = re.compile(r"^(#{1,6})\s+(.+)$")


class DocNotFoundError(FileNotFoundError):
    """Raised when a documentation fragment does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Documentation not found: {path}")
        self.path = path


class DocSectionNotFoundError(LookupError):
    """Raised when a header-delimited section is missing from a document."""

    def __init__(self, path: str, title: str):
        super().__init__(f'Section "{title}" not found in {path}')
        self.path = path
        self.title = title


class DocLoader:
    """Load documentation fragments by path relative to a docs root."""

    SEPARATOR = "\n\n---\n\n"

    def __init__(self, root: Path | str | None = None):
        self._root = Path(root or os.getenv("MVP24H_DOCS_PATH") or DEFAULT_DOCS_PATH).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, relative_path: str) -> Path | None:
        """Map a relative path onto the root, rejecting anything outside it."""
        if not relative_path or Path(relative_path).is_absolute():
            return None
        full_path = (self._root / relative_path).resolve()
        if not full_path.is_relative_to(self._root):
            return None
        return full_path

    def exists(self, relative_path: str) -> bool:
        full_path = self._resolve(relative_path)
        try:
            return full_path is not None and full_path.is_file()
        except OSError:
            return False

    def load(self, relative_path: str) -> str:
        """Return the full text of a document.

        Raises:
            DocNotFoundError: If the document is missing or outside the root.
        """
        full_path = self._resolve(relative_path)
        if full_path is None or not full_path.is_file():
            raise DocNotFoundError(relative_path)

        logger.debug(f"Loading doc: {relative_path}")
        return full_path.read_text(encoding="utf-8")

    def load_many(self, relative_paths: Iterable[str]) -> str:
        """Load documents in order and join them with SEPARATOR.

        The first missing document aborts the whole call.
        """
        return self.SEPARATOR.join(self.load(path) for path in relative_paths)

    def load_section(self, relative_path: str, section_title: str) -> str:
        """Extract a section from a document, from its header to the next peer header."""
        lines = self.load(relative_path).split("\n")
        result: list[str] = []
        in_section = False
        section_level = 0

        for line in lines:
            match = HEADER_RE.match(line)
            if match:
                level = len(match.group(1))
                title = match.group(2).strip()

                if not in_section and section_title.lower() in title.lower():
                    in_section = True
                    section_level = level
                    result.append(line)
                    continue

                if in_section and level <= section_level:
                    break

            if in_section:
                result.append(line)

        if not result:
            raise DocSectionNotFoundError(relative_path, section_title)

        return "\n".join(result)


@lru_cache(maxsize=1)
def get_doc_loader() -> DocLoader:
    """Process-wide loader rooted at MVP24H_DOCS_PATH."""
    loader = DocLoader()
    logger.info(f"Documentation root: {loader.root}")
    return loader
