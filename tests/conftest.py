"""Shared fixtures: a small documentation tree on disk."""

from pathlib import Path

import pytest

from mvp24h_mcp.core import DocLoader

DOCS = {
    "home.md": "# Mvp24Hours\n\nWelcome to the framework.",
    "core/home.md": "# Core Module\n\nCore overview body.",
    "core/guard-clauses.md": "# Guard Clauses\n\nGuard.Against.Null(value);",
    "cqrs/home.md": "# CQRS\n\nMediator overview body.",
    "cqrs/commands.md": "# Commands\n\nIMediatorCommand body.",
    "cqrs/queries.md": "# Queries\n\nIMediatorQuery body.",
    "database/relational.md": "# Relational\n\nEF Core relational body.",
    "database/nosql.md": "# NoSQL\n\nMongoDB body.",
    "database/use-repository.md": "# Repository\n\nIRepositoryAsync body.",
    "database/use-unitofwork.md": "# Unit of Work\n\nIUnitOfWorkAsync body.",
    "ai-context/database-patterns.md": "# Database Patterns Guide\n\nPatterns body.",
    "ai-context/template-cqrs.md": "# CQRS Template\n\nCQRS template body.",
    "ai-context/testing-patterns.md": (
        "# Testing Patterns\n\nIntro.\n\n"
        "## Unit Testing\n\nxUnit body.\n\n### Naming\n\nMethod_State_Result.\n\n"
        "## Integration Testing\n\nWebApplicationFactory body."
    ),
    "ai-context/ai-decision-matrix.md": (
        "# AI Decision Matrix\n\n"
        "## Semantic Kernel (Pure)\n\nSK body.\n\n"
        "## Semantic Kernel Graph\n\nSKG body.\n\n"
        "## Agent Framework\n\nAF body."
    ),
    "observability/exporters.md": "# Exporters\n\nExporter body.",
    "modernization/hybrid-cache.md": "# HybridCache\n\nHybridCache body.",
}


def write_docs(root: Path, docs: dict[str, str]) -> Path:
    for relative_path, text in docs.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    return write_docs(tmp_path / "docs", DOCS)


@pytest.fixture
def loader(docs_root: Path) -> DocLoader:
    return DocLoader(docs_root)


@pytest.fixture
def empty_loader(tmp_path: Path) -> DocLoader:
    """Loader over an empty tree: every fragment is missing."""
    root = tmp_path / "empty"
    root.mkdir()
    return DocLoader(root)


@pytest.fixture
def listed() -> object:
    """Extract the bullet items under a markdown heading."""
    def _listed(text: str, heading: str) -> list[str]:
        block = text.split(heading, 1)[1].split("\n## ", 1)[0].split("\n---", 1)[0]
        return [line[2:] for line in block.splitlines() if line.startswith("- ")]
    return _listed
