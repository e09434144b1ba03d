"""Topic catalog schema shared by every documentation tool."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TopicCatalog(BaseModel):
    """Static lookup tables for one tool.

    ``topics`` order is significant: it is the advertised enum order, the
    order of the "not found" listing, and fragments load in list order.
    """
    model_config = ConfigDict(frozen=True)

    tool: str  # MCP tool name, e.g. mvp24h_core_patterns
    argument: str = "topic"  # name of the selector argument
    label: str = "topic"  # how a key is called in messages
    label_plural: str | None = None
    topics: dict[str, list[str]]
    related: dict[str, list[str]] = Field(default_factory=dict)
    descriptions: dict[str, str] = Field(default_factory=dict)
    titles: dict[str, str] = Field(default_factory=dict)
    quick_refs: dict[str, str] = Field(default_factory=dict)
    related_footer: str | None = None  # appended under every related section

    @property
    def keys(self) -> list[str]:
        return list(self.topics)

    @property
    def plural(self) -> str:
        return self.label_plural or f"{self.label}s"

    def usage(self, key: str) -> str:
        """Invocation hint for a key, as shown to agents."""
        return f'{self.tool}({{ {self.argument}: "{key}" }})'


class ArchitectureTemplate(BaseModel):
    """Summary card for one architecture template."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    structure: str
    characteristics: list[str]
    packages: list[str]  # NuGet package ids, rendered as PackageReference lines
    alternatives: list[str] = Field(default_factory=list)

    def package_references(self, versions: dict[str, str], default: str = "9.*") -> str:
        """Render packages as csproj PackageReference lines."""
        return "\n".join(
            f'<PackageReference Include="{package}" Version="{versions.get(package, default)}" />'
            for package in self.packages
        )
