"""Lookup tables for mvp24h_ai_implementation."""

from mvp24h_mcp.schemas import AiApproach, TopicCatalog

DECISION_DOC = "ai-context/ai-decision-matrix.md"

APPROACH_NAMES: dict[AiApproach, str] = {
    AiApproach.SEMANTIC_KERNEL: "Semantic Kernel",
    AiApproach.SK_GRAPH: "Semantic Kernel Graph",
    AiApproach.AGENT_FRAMEWORK: "Microsoft Agent Framework",
}

TEMPLATES = TopicCatalog(
    tool="mvp24h_ai_implementation",
    argument="template",
    label="template",
    topics={
        "chat-completion": ["ai-context/template-sk-chat-completion.md"],
        "plugins": ["ai-context/template-sk-plugins.md"],
        "rag-basic": ["ai-context/template-sk-rag-basic.md"],
        "planners": ["ai-context/template-sk-planners.md"],
        "graph-executor": ["ai-context/template-skg-graph-executor.md"],
        "react-agent": ["ai-context/template-skg-react-agent.md"],
        "chain-of-thought": ["ai-context/template-skg-chain-of-thought.md"],
        "chatbot-memory": ["ai-context/template-skg-chatbot-memory.md"],
        "multi-agent": ["ai-context/template-skg-multi-agent.md"],
        "document-pipeline": ["ai-context/template-skg-document-pipeline.md"],
        "human-in-loop": ["ai-context/template-skg-human-in-loop.md"],
        "checkpointing": ["ai-context/template-skg-checkpointing.md"],
        "streaming": ["ai-context/template-skg-streaming.md"],
        "observability": ["ai-context/template-skg-observability.md"],
        "agent-basic": ["ai-context/template-agent-framework-basic.md"],
        "agent-workflows": ["ai-context/template-agent-framework-workflows.md"],
        "agent-multi": ["ai-context/template-agent-framework-multi-agent.md"],
        "agent-middleware": ["ai-context/template-agent-framework-middleware.md"],
    },
    related={
        "chat-completion": ["plugins", "rag-basic"],
        "plugins": ["chat-completion", "planners"],
        "rag-basic": ["chat-completion", "document-pipeline"],
        "planners": ["plugins", "react-agent"],
        "graph-executor": ["checkpointing", "streaming"],
        "react-agent": ["chain-of-thought", "plugins"],
        "chain-of-thought": ["react-agent", "graph-executor"],
        "chatbot-memory": ["chat-completion", "checkpointing"],
        "multi-agent": ["graph-executor", "agent-multi"],
        "document-pipeline": ["rag-basic", "graph-executor"],
        "human-in-loop": ["graph-executor", "checkpointing"],
        "checkpointing": ["graph-executor", "human-in-loop"],
        "streaming": ["graph-executor", "observability"],
        "observability": ["streaming", "ai-context/observability-patterns.md"],
        "agent-basic": ["agent-workflows", "agent-middleware"],
        "agent-workflows": ["agent-basic", "agent-multi"],
        "agent-multi": ["agent-workflows", "multi-agent"],
        "agent-middleware": ["agent-basic"],
    },
    descriptions={
        "chat-completion": "Basic chat/completion with Semantic Kernel",
        "plugins": "Plugins and functions for tool-augmented AI",
        "rag-basic": "Retrieval Augmented Generation over documents",
        "planners": "Task decomposition with planners",
        "graph-executor": "Graph-based workflow orchestration",
        "react-agent": "ReAct reasoning and acting agent",
        "chain-of-thought": "Step-by-step reasoning",
        "chatbot-memory": "Conversations with persistent memory",
        "multi-agent": "Coordination of multiple agents",
        "document-pipeline": "Document ingestion and processing",
        "human-in-loop": "Approval workflows with human oversight",
        "checkpointing": "Execution state persistence",
        "streaming": "Real-time execution events",
        "observability": "Graph metrics and monitoring",
        "agent-basic": "Simple Microsoft Agent Framework setup",
        "agent-workflows": "Workflow-based agents",
        "agent-multi": "Agent orchestration",
        "agent-middleware": "Request/response processing middleware",
    },
)

APPROACHES = TopicCatalog(
    tool="mvp24h_ai_implementation",
    argument="approach",
    label="approach",
    topics={
        AiApproach.SEMANTIC_KERNEL.value: [f"{DECISION_DOC}#Semantic Kernel (Pure)"],
        AiApproach.SK_GRAPH.value: [f"{DECISION_DOC}#Semantic Kernel Graph"],
        AiApproach.AGENT_FRAMEWORK.value: [f"{DECISION_DOC}#Agent Framework"],
    },
    titles={approach.value: name for approach, name in APPROACH_NAMES.items()},
    quick_refs={
        AiApproach.SEMANTIC_KERNEL.value: """## Templates

- `mvp24h_ai_implementation({ template: "chat-completion" })`
- `mvp24h_ai_implementation({ template: "plugins" })`
- `mvp24h_ai_implementation({ template: "rag-basic" })`
- `mvp24h_ai_implementation({ template: "planners" })`""",
        AiApproach.SK_GRAPH.value: """## Templates

- `mvp24h_ai_implementation({ template: "graph-executor" })`
- `mvp24h_ai_implementation({ template: "react-agent" })`
- `mvp24h_ai_implementation({ template: "chain-of-thought" })`
- `mvp24h_ai_implementation({ template: "multi-agent" })`
- `mvp24h_ai_implementation({ template: "human-in-loop" })`""",
        AiApproach.AGENT_FRAMEWORK.value: """## Templates

- `mvp24h_ai_implementation({ template: "agent-basic" })`
- `mvp24h_ai_implementation({ template: "agent-workflows" })`
- `mvp24h_ai_implementation({ template: "agent-multi" })`
- `mvp24h_ai_implementation({ template: "agent-middleware" })`""",
    },
)

# use case -> (approach, template, reason)
USE_CASES: dict[str, tuple[AiApproach, str, str]] = {
    "chatbot": (AiApproach.SEMANTIC_KERNEL, "chat-completion", "Simple chatbot → Semantic Kernel Chat Completion"),
    "qa-documents": (AiApproach.SEMANTIC_KERNEL, "rag-basic", "Document Q&A → Semantic Kernel RAG"),
    "tool-augmented": (AiApproach.SEMANTIC_KERNEL, "plugins", "Tool-augmented AI → Semantic Kernel Plugins"),
    "complex-reasoning": (AiApproach.SK_GRAPH, "chain-of-thought", "Complex reasoning → SK Graph Chain of Thought"),
    "multi-agent": (AiApproach.SK_GRAPH, "multi-agent", "Multiple agents → SK Graph Multi-Agent"),
    "workflow": (AiApproach.SK_GRAPH, "graph-executor", "Workflow orchestration → SK Graph Executor"),
    "human-oversight": (AiApproach.SK_GRAPH, "human-in-loop", "Human oversight needed → SK Graph Human-in-the-Loop"),
    "enterprise": (AiApproach.AGENT_FRAMEWORK, "agent-basic", "Enterprise grade → Microsoft Agent Framework"),
}

DEFAULT_RECOMMENDATION = (
    AiApproach.SEMANTIC_KERNEL,
    "chat-completion",
    "No specific use case → Default to Semantic Kernel",
)

DECISION_MATRIX = """## AI Decision Matrix

### By Use Case

| Use Case | Recommended Approach | Template |
|----------|---------------------|----------|
| Simple chatbot | Semantic Kernel | Chat Completion |
| Q&A over documents | Semantic Kernel | RAG Basic |
| Tool-augmented AI | Semantic Kernel | Plugins & Functions |
| Complex reasoning | SK Graph | Chain of Thought |
| Agent with tools | SK Graph | ReAct Agent |
| Multi-step workflows | SK Graph | Graph Executor |
| Multiple AI agents | SK Graph | Multi-Agent |
| Human oversight needed | SK Graph | Human-in-the-Loop |
| Enterprise agents | Agent Framework | Agent Framework Basic |

### Complexity vs Capability

| Approach | Complexity | Flexibility | State Management | Production Ready |
|----------|-----------|-------------|------------------|------------------|
| SK Chat Completion | Low | Low | None | ✅ Yes |
| SK Plugins | Low-Medium | Medium | None | ✅ Yes |
| SK RAG | Medium | Medium | None | ✅ Yes |
| SKG Graph Executor | Medium | High | ✅ Full | ✅ Yes |
| SKG Multi-Agent | Very High | Very High | ✅ Full | ✅ Yes |
| Agent Framework | Medium | High | Limited | ⚠️ Preview |"""

PACKAGES = """## Required Packages

### Semantic Kernel (Pure)
```xml
<PackageReference Include="Microsoft.SemanticKernel" Version="1.*" />
<PackageReference Include="Microsoft.SemanticKernel.Connectors.OpenAI" Version="1.*" />
```

### Semantic Kernel Graph
```xml
<PackageReference Include="Microsoft.SemanticKernel" Version="1.*" />
<PackageReference Include="SemanticKernel.Graph" Version="1.*" />
```

### Microsoft Agent Framework
```xml
<PackageReference Include="Microsoft.Extensions.AI" Version="9.*-*" />
<PackageReference Include="Microsoft.Extensions.AI.OpenAI" Version="9.*-*" />
```"""

CONFIGURATION = """## Configuration

### appsettings.json

```json
{
  "AI": {
    "Provider": "OpenAI",
    "OpenAI": {
      "ApiKey": "${OPENAI_API_KEY}",
      "ModelId": "gpt-4o",
      "EmbeddingModelId": "text-embedding-3-small"
    },
    "AzureOpenAI": {
      "Endpoint": "${AZURE_OPENAI_ENDPOINT}",
      "ApiKey": "${AZURE_OPENAI_API_KEY}",
      "DeploymentName": "gpt-4o"
    }
  }
}
```"""
