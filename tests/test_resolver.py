"""Tests for topic resolution."""

from pathlib import Path

import pytest

from mvp24h_mcp.core import DocLoader, TopicResolver, load_available, split_fragment
from mvp24h_mcp.schemas import TopicCatalog

SEP = DocLoader.SEPARATOR

CATALOG = TopicCatalog(
    tool="mvp24h_demo",
    topics={
        "alpha": ["a.md"],
        "beta": ["b.md", "missing.md"],
        "gamma": ["missing.md"],
        "delta": ["s.md#Part Two"],
    },
    related={"alpha": ["beta", "docs/extra.md"]},
    descriptions={"alpha": "First topic", "beta": "Second topic"},
    titles={"delta": "Delta Section"},
    quick_refs={"alpha": "## Quick Reference\n\nalpha()"},
    related_footer="See also the other tools.",
)


@pytest.fixture
def resolver(tmp_path: Path) -> TopicResolver:
    (tmp_path / "a.md").write_text("Alpha body.", encoding="utf-8")
    (tmp_path / "b.md").write_text("Beta body.", encoding="utf-8")
    (tmp_path / "s.md").write_text("# Doc\n\n## Part One\n\none\n\n## Part Two\n\ntwo", encoding="utf-8")
    return TopicResolver(CATALOG, DocLoader(tmp_path))


def test_split_fragment() -> None:
    assert split_fragment("a/b.md#Some Section") == ("a/b.md", "Some Section")
    assert split_fragment("a/b.md") == ("a/b.md", None)


def test_fragments_keep_only_existing(resolver: TopicResolver) -> None:
    assert resolver.fragments("beta") == ["b.md"]
    assert resolver.fragments("gamma") == []
    assert resolver.fragments("delta") == ["s.md#Part Two"]


def test_resolve_composes_sections_in_order(resolver: TopicResolver) -> None:
    result = resolver.resolve("alpha")
    parts = result.split(SEP)

    assert parts[0] == "# Alpha"
    assert parts[1] == "Alpha body."
    assert parts[2] == "## Quick Reference\n\nalpha()"
    assert parts[3].startswith("## Related Topics")
    assert '- `mvp24h_demo({ topic: "beta" })` - Second topic' in parts[3]
    assert "- `docs/extra.md`" in parts[3]
    assert parts[3].endswith("See also the other tools.")


def test_resolve_skips_missing_fragments(resolver: TopicResolver) -> None:
    assert resolver.resolve("beta") == "# Beta" + SEP + "Beta body."


def test_resolve_without_documents(resolver: TopicResolver) -> None:
    assert resolver.resolve("gamma") == "# Gamma" + SEP + '_Documentation not available for "gamma"._'


def test_resolve_loads_section_fragment(resolver: TopicResolver) -> None:
    result = resolver.resolve("delta")
    assert result.startswith("# Delta Section")
    assert "two" in result
    assert "one" not in result


def test_unknown_key_lists_every_key(resolver: TopicResolver, listed) -> None:
    result = resolver.resolve("omega")

    assert result.startswith("# Topic Not Found")
    assert '"omega"' in result
    assert listed(result, "## Available Topics") == CATALOG.keys
    assert 'mvp24h_demo({ topic: "alpha" })' in result


def test_resolve_is_idempotent(resolver: TopicResolver) -> None:
    assert resolver.resolve("alpha") == resolver.resolve("alpha")


def test_topic_table_hides_keys(resolver: TopicResolver) -> None:
    table = resolver.topic_table(hidden=("beta",))
    assert "| `alpha` | First topic |" in table
    assert "beta" not in table


def test_load_available_skips_missing_sections(tmp_path: Path) -> None:
    (tmp_path / "s.md").write_text("# Doc\n\n## Part One\n\none", encoding="utf-8")
    loader = DocLoader(tmp_path)

    assert load_available(loader, ["s.md#Part Nine"]) is None
    assert load_available(loader, ["s.md#Part Nine", "s.md#Part One"]) == "## Part One\n\none"
