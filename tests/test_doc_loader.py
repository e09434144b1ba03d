"""Tests for the documentation loader."""

from pathlib import Path

import pytest

from mvp24h_mcp.core import DocLoader, DocNotFoundError, DocSectionNotFoundError


def test_load_returns_file_text(loader: DocLoader) -> None:
    assert loader.load("cqrs/commands.md") == "# Commands\n\nIMediatorCommand body."


def test_load_many_joins_with_separator(loader: DocLoader) -> None:
    combined = loader.load_many(["cqrs/commands.md", "cqrs/queries.md"])
    assert combined == loader.load("cqrs/commands.md") + "\n\n---\n\n" + loader.load("cqrs/queries.md")


def test_load_many_keeps_duplicates_and_order(loader: DocLoader) -> None:
    combined = loader.load_many(["cqrs/queries.md", "cqrs/commands.md", "cqrs/queries.md"])
    parts = combined.split(DocLoader.SEPARATOR)
    assert parts == [loader.load("cqrs/queries.md"), loader.load("cqrs/commands.md"), loader.load("cqrs/queries.md")]


def test_load_many_empty() -> None:
    assert DocLoader(".").load_many([]) == ""


def test_missing_document(loader: DocLoader) -> None:
    assert not loader.exists("cqrs/missing.md")
    with pytest.raises(DocNotFoundError) as exc_info:
        loader.load("cqrs/missing.md")
    assert exc_info.value.path == "cqrs/missing.md"
    assert isinstance(exc_info.value, FileNotFoundError)


def test_load_many_aborts_on_first_missing(loader: DocLoader) -> None:
    with pytest.raises(DocNotFoundError):
        loader.load_many(["cqrs/commands.md", "cqrs/missing.md"])


@pytest.mark.parametrize("path", ["", "core", "../outside.md", "core/../../outside.md"])
def test_exists_rejects_directories_and_escapes(loader: DocLoader, path: str) -> None:
    assert not loader.exists(path)


def test_paths_outside_root_are_not_loaded(loader: DocLoader, docs_root: Path) -> None:
    outside = docs_root.parent / "outside.md"
    outside.write_text("secret", encoding="utf-8")

    assert not loader.exists("../outside.md")
    assert not loader.exists(str(outside))
    with pytest.raises(DocNotFoundError):
        loader.load("../outside.md")


def test_load_section_stops_at_peer_header(loader: DocLoader) -> None:
    section = loader.load_section("ai-context/testing-patterns.md", "Unit Testing")

    assert section.startswith("## Unit Testing")
    assert "### Naming" in section
    assert "Integration Testing" not in section


def test_load_section_is_case_insensitive(loader: DocLoader) -> None:
    section = loader.load_section("ai-context/testing-patterns.md", "integration testing")
    assert section == "## Integration Testing\n\nWebApplicationFactory body."


def test_load_section_missing(loader: DocLoader) -> None:
    with pytest.raises(DocSectionNotFoundError) as exc_info:
        loader.load_section("ai-context/testing-patterns.md", "Mutation Testing")
    assert exc_info.value.title == "Mutation Testing"


def test_root_from_environment(monkeypatch: pytest.MonkeyPatch, docs_root: Path) -> None:
    monkeypatch.setenv("MVP24H_DOCS_PATH", str(docs_root))
    assert DocLoader().root == docs_root.resolve()
    assert DocLoader().exists("home.md")
