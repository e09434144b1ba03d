"""Template catalog for mvp24h_get_template."""

from mvp24h_mcp.schemas import TopicCatalog

# group title -> {template name: (doc path, description)}
TEMPLATE_GROUPS: dict[str, dict[str, tuple[str, str]]] = {
    "Architecture Templates": {
        "minimal-api": ("ai-context/structure-minimal-api.md", "Single project, lightweight microservices"),
        "simple-nlayers": ("ai-context/structure-simple-nlayers.md", "3-layer architecture (Core, Infrastructure, WebAPI)"),
        "complex-nlayers": ("ai-context/structure-complex-nlayers.md", "4-layer with Application layer"),
        "cqrs": ("ai-context/template-cqrs.md", "Command Query Responsibility Segregation"),
        "event-driven": ("ai-context/template-event-driven.md", "Event sourcing and domain events"),
        "hexagonal": ("ai-context/template-hexagonal.md", "Ports & Adapters pattern"),
        "clean-architecture": ("ai-context/template-clean-architecture.md", "Uncle Bob's Clean Architecture"),
        "ddd": ("ai-context/template-ddd.md", "Domain-Driven Design"),
        "microservices": ("ai-context/template-microservices.md", "Distributed services"),
    },
    "AI Templates - Semantic Kernel": {
        "sk-chat-completion": ("ai-context/template-sk-chat-completion.md", "Basic chat/completion"),
        "sk-plugins": ("ai-context/template-sk-plugins.md", "Tool integration"),
        "sk-rag": ("ai-context/template-sk-rag-basic.md", "Retrieval Augmented Generation"),
        "sk-planners": ("ai-context/template-sk-planners.md", "Task decomposition"),
    },
    "AI Templates - Semantic Kernel Graph": {
        "skg-graph-executor": ("ai-context/template-skg-graph-executor.md", "Workflow orchestration"),
        "skg-react-agent": ("ai-context/template-skg-react-agent.md", "ReAct pattern"),
        "skg-chain-of-thought": ("ai-context/template-skg-chain-of-thought.md", "Step-by-step reasoning"),
        "skg-chatbot-memory": ("ai-context/template-skg-chatbot-memory.md", "Contextual conversations"),
        "skg-multi-agent": ("ai-context/template-skg-multi-agent.md", "Agent coordination"),
        "skg-document-pipeline": ("ai-context/template-skg-document-pipeline.md", "Document processing"),
        "skg-human-in-loop": ("ai-context/template-skg-human-in-loop.md", "Approval workflows"),
        "skg-checkpointing": ("ai-context/template-skg-checkpointing.md", "State persistence"),
        "skg-streaming": ("ai-context/template-skg-streaming.md", "Real-time events"),
        "skg-observability": ("ai-context/template-skg-observability.md", "Metrics and monitoring"),
    },
    "AI Templates - Agent Framework": {
        "agent-framework-basic": ("ai-context/template-agent-framework-basic.md", "Simple agent setup"),
        "agent-framework-workflows": ("ai-context/template-agent-framework-workflows.md", "Workflow-based agents"),
        "agent-framework-multi-agent": ("ai-context/template-agent-framework-multi-agent.md", "Agent orchestration"),
        "agent-framework-middleware": ("ai-context/template-agent-framework-middleware.md", "Request/response processing"),
    },
}

CATALOG = TopicCatalog(
    tool="mvp24h_get_template",
    argument="template_name",
    label="template",
    topics={
        name: [path]
        for group in TEMPLATE_GROUPS.values()
        for name, (path, _) in group.items()
    },
    descriptions={
        name: description
        for group in TEMPLATE_GROUPS.values()
        for name, (_, description) in group.items()
    },
)

RELATED_TOOLS = """## Related Tools

- `mvp24h_architecture_advisor`: Get architecture recommendations
- `mvp24h_database_advisor`: Configure database layer
- `mvp24h_observability_setup`: Add telemetry"""
