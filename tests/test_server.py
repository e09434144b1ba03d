"""Tests for MCP server wiring."""

import pytest
from mcp.types import (
    CallToolRequest,
    CallToolRequestParams,
    GetPromptRequest,
    GetPromptRequestParams,
    ListPromptsRequest,
    ListResourcesRequest,
    ListResourceTemplatesRequest,
    ListToolsRequest,
)
from pydantic import ValidationError

from mvp24h_mcp.catalogs import cqrs_guide, database_advisor, messaging_patterns, templates
from mvp24h_mcp.core import DocLoader, get_doc_loader
from mvp24h_mcp.core.prompts import PROMPTS
from mvp24h_mcp.core.resources import STATIC_RESOURCES, TEMPLATE_CATEGORIES, category_uris
from mvp24h_mcp.server import TOOLS, create_server, dispatch_tool


def _enum(tool: str, argument: str) -> list[str]:
    prop = TOOLS[tool]["inputSchema"]["properties"][argument]
    return prop["enum"] if "enum" in prop else prop["items"]["enum"]


def test_tool_registry() -> None:
    assert len(TOOLS) == 16
    assert all(name.startswith("mvp24h_") for name in TOOLS)
    for config in TOOLS.values():
        assert {"description", "inputSchema", "args_model", "handler"} <= set(config)


def test_enums_follow_catalogs() -> None:
    assert _enum("mvp24h_cqrs_guide", "topic") == cqrs_guide.CATALOG.keys
    assert _enum("mvp24h_messaging_patterns", "pattern") == messaging_patterns.CATALOG.keys
    assert _enum("mvp24h_get_template", "template_name") == templates.CATALOG.keys
    assert _enum("mvp24h_database_advisor", "requirements") == database_advisor.REQUIREMENTS


def test_required_arguments() -> None:
    assert TOOLS["mvp24h_get_template"]["inputSchema"]["required"] == ["template_name"]
    assert TOOLS["mvp24h_build_context"]["inputSchema"]["required"] == ["architecture"]


@pytest.mark.asyncio
async def test_dispatch_passes_loader(loader: DocLoader) -> None:
    result = await dispatch_tool("mvp24h_cqrs_guide", {"topic": "queries"}, loader=loader)
    assert "IMediatorQuery body." in result


@pytest.mark.asyncio
async def test_dispatch_applies_handler_defaults(loader: DocLoader) -> None:
    result = await dispatch_tool("mvp24h_cqrs_guide", {}, loader=loader)
    assert result.startswith("# CQRS/Mediator Overview")


@pytest.mark.asyncio
async def test_dispatch_ignores_unknown_arguments(loader: DocLoader) -> None:
    result = await dispatch_tool("mvp24h_core_patterns", {"topic": "guard-clauses", "verbose": True}, loader=loader)
    assert "Guard.Against.Null(value);" in result


@pytest.mark.asyncio
async def test_dispatch_without_loader_parameter(loader: DocLoader) -> None:
    result = await dispatch_tool("mvp24h_architecture_advisor", {"complexity": "low"}, loader=loader)
    assert "**Minimal API**" in result


@pytest.mark.asyncio
async def test_dispatch_rejects_wrong_types(loader: DocLoader) -> None:
    with pytest.raises(ValidationError):
        await dispatch_tool("mvp24h_database_advisor", {"requirements": "caching"}, loader=loader)


async def _call(name: str, arguments: dict) -> str:
    server = create_server()
    request = CallToolRequest(method="tools/call", params=CallToolRequestParams(name=name, arguments=arguments))
    result = await server.request_handlers[CallToolRequest](request)
    return result.root.content[0].text


@pytest.mark.asyncio
async def test_list_tools() -> None:
    server = create_server()
    result = await server.request_handlers[ListToolsRequest](ListToolsRequest(method="tools/list"))

    assert [tool.name for tool in result.root.tools] == list(TOOLS)


@pytest.mark.asyncio
async def test_call_unknown_tool() -> None:
    assert await _call("mvp24h_teleport", {}) == "Unknown tool: mvp24h_teleport"


@pytest.mark.asyncio
async def test_call_reports_validation_errors() -> None:
    text = await _call("mvp24h_get_template", {})

    assert text.startswith("Error: ")
    assert "template_name" in text


@pytest.mark.asyncio
async def test_call_accepts_keys_outside_advertised_enum(monkeypatch, docs_root) -> None:
    monkeypatch.setenv("MVP24H_DOCS_PATH", str(docs_root))
    get_doc_loader.cache_clear()
    try:
        text = await _call("mvp24h_cqrs_guide", {"topic": "sagas-and-more"})
    finally:
        get_doc_loader.cache_clear()

    assert text.startswith("# Topic Not Found")


@pytest.mark.asyncio
async def test_list_resources() -> None:
    server = create_server()
    result = await server.request_handlers[ListResourcesRequest](ListResourcesRequest(method="resources/list"))

    uris = [str(resource.uri) for resource in result.root.resources]
    assert len(uris) == len(STATIC_RESOURCES) + len(category_uris())
    assert "mvp24hours://docs/overview" in uris


@pytest.mark.asyncio
async def test_list_resource_templates() -> None:
    server = create_server()
    result = await server.request_handlers[ListResourceTemplatesRequest](
        ListResourceTemplatesRequest(method="resources/templates/list")
    )

    templates_by_name = {t.uriTemplate for t in result.root.resourceTemplates}
    assert len(templates_by_name) == len(TEMPLATE_CATEGORIES)
    assert "mvp24hours://docs/ai-template/{templateName}" in templates_by_name


@pytest.mark.asyncio
async def test_prompts() -> None:
    server = create_server()
    listed = await server.request_handlers[ListPromptsRequest](ListPromptsRequest(method="prompts/list"))
    assert [prompt.name for prompt in listed.root.prompts] == list(PROMPTS)

    request = GetPromptRequest(
        method="prompts/get",
        params=GetPromptRequestParams(name="containerize-app", arguments={"target": "kubernetes"}),
    )
    result = await server.request_handlers[GetPromptRequest](request)

    assert result.root.description == "Containerize app with kubernetes"
    assert result.root.messages[0].role == "user"
    assert "using kubernetes" in result.root.messages[0].content.text
