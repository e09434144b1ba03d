"""Generic topic resolution: key -> fragments -> composed markdown."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from mvp24h_mcp.core.doc_loader import DocLoader
from mvp24h_mcp.schemas import TopicCatalog
from mvp24h_mcp.utils import bullet_list, join_sections, title_case


def split_fragment(ref: str) -> tuple[str, str | None]:
    """Split "path.md#Section" into its path and optional section title."""
    path, _, section = ref.partition("#")
    return path, section or None


def load_available(loader: DocLoader, refs: Iterable[str]) -> str | None:
    """Load the fragments that exist, skipping any that fail to read.

    Returns:
        Fragments joined with the loader separator, or None when nothing loaded
    """
    contents: list[str] = []
    for ref in refs:
        path, section = split_fragment(ref)
        if not loader.exists(path):
            continue
        try:
            contents.append(loader.load_section(path, section) if section else loader.load(path))
        except (OSError, LookupError, UnicodeError) as e:
            logger.warning(f"Skipping fragment {ref}: {e}")

    if not contents:
        return None
    return loader.SEPARATOR.join(contents)


class TopicResolver:
    """Compose documentation responses from a tool's TopicCatalog."""

    def __init__(self, catalog: TopicCatalog, loader: DocLoader):
        self.catalog = catalog
        self.loader = loader

    @property
    def keys(self) -> list[str]:
        return self.catalog.keys

    def is_known(self, key: str | None) -> bool:
        return key is not None and key in self.catalog.topics

    def title(self, key: str) -> str:
        return self.catalog.titles.get(key) or title_case(key)

    def fragments(self, key: str) -> list[str]:
        """Declared fragments for a key whose documents are present in the docs tree."""
        return [
            ref for ref in self.catalog.topics.get(key, [])
            if self.loader.exists(split_fragment(ref)[0])
        ]

    def load_body(self, key: str) -> str | None:
        return load_available(self.loader, self.fragments(key))

    def topic_table(self, hidden: tuple[str, ...] = ()) -> str:
        """Markdown table of described keys, in catalog order."""
        rows = [
            f"| `{key}` | {desc} |"
            for key, desc in self.catalog.descriptions.items()
            if key not in hidden
        ]
        header = f"| {title_case(self.catalog.label)} | Description |"
        return "\n".join([header, "|-------|-------------|", *rows])

    def overview(self, intro: str, reference: str = "", hidden: tuple[str, ...] = ()) -> str:
        """Inline overview page, followed by the "overview" fragments when present."""
        table = f"## Available {title_case(self.catalog.plural)}\n\n{self.topic_table(hidden)}"
        text = "\n\n".join(part for part in (intro, table, reference) if part)

        extra = self.load_body("overview")
        if extra:
            text = f"{text}{self.loader.SEPARATOR}## Additional Context\n\n{extra}"
        return text

    def related_section(self, key: str) -> str:
        related = self.catalog.related.get(key, [])
        if not related:
            return ""

        items = []
        for ref in related:
            if "/" in ref or ref.endswith(".md"):
                items.append(f"`{ref}`")
            else:
                desc = self.catalog.descriptions.get(ref)
                usage = f"`{self.catalog.usage(ref)}`"
                items.append(f"{usage} - {desc}" if desc else usage)

        section = f"## Related Topics\n\n{bullet_list(items)}"
        if self.catalog.related_footer:
            section = f"{section}\n\n{self.catalog.related_footer}"
        return section

    def not_found(self, key: str | None) -> str:
        """Catalog response listing every valid key."""
        label = self.catalog.label
        keys = self.keys
        example = keys[0] if keys else ""
        return f"""# {title_case(label)} Not Found

The {label} "{key}" was not found for `{self.catalog.tool}`.

## Available {title_case(self.catalog.plural)}

{bullet_list(keys)}

## Usage Example

```
{self.catalog.usage(example)}
```
"""

    def resolve(self, key: str | None, header: str | None = None) -> str:
        """Compose the full response for a key."""
        if not self.is_known(key):
            logger.info(f"{self.catalog.tool}: unknown {self.catalog.label} {key!r}")
            return self.not_found(key)

        body = self.load_body(key)
        if body is None:
            body = f'_Documentation not available for "{key}"._'

        return join_sections([
            header if header is not None else f"# {self.title(key)}",
            body,
            self.catalog.quick_refs.get(key, ""),
            self.related_section(key),
        ])
