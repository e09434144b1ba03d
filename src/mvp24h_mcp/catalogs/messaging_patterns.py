"""Lookup tables for mvp24h_messaging_patterns."""

from mvp24h_mcp.schemas import TopicCatalog

PATTERNS_DOC = "ai-context/messaging-patterns.md"

CATALOG = TopicCatalog(
    tool="mvp24h_messaging_patterns",
    argument="pattern",
    label="pattern",
    topics={
        "overview": [PATTERNS_DOC],
        "rabbitmq": ["broker.md", "broker-advanced.md"],
        "hosted-service": [f"{PATTERNS_DOC}#Hosted Service"],
        "outbox": [f"{PATTERNS_DOC}#Outbox"],
        "channels": ["modernization/channels.md"],
    },
    related={
        "rabbitmq": ["outbox", "cqrs/integration-events.md"],
        "hosted-service": ["channels", "cronjob.md"],
        "outbox": ["rabbitmq", "cqrs/integration-events.md"],
        "channels": ["hosted-service"],
    },
    descriptions={
        "rabbitmq": "Inter-service communication, event-driven",
        "hosted-service": "Background tasks, scheduled jobs",
        "outbox": "Reliable event publishing",
        "channels": "In-process async queues",
    },
    titles={
        "rabbitmq": "RabbitMQ Integration",
        "hosted-service": "Hosted Service Pattern",
        "outbox": "Outbox Pattern",
        "channels": "Channels (Producer/Consumer)",
    },
)

OVERVIEW_INTRO = """# Messaging Patterns

## Overview

Patterns for asynchronous communication and background processing."""

OVERVIEW_REFERENCE = """## Quick Decision Guide

### Need inter-service messaging?
→ Use `mvp24h_messaging_patterns({ pattern: "rabbitmq" })`

### Need background processing?
→ Use `mvp24h_messaging_patterns({ pattern: "hosted-service" })`

### Need guaranteed event delivery?
→ Use `mvp24h_messaging_patterns({ pattern: "outbox" })`

### Need in-process producer/consumer?
→ Use `mvp24h_messaging_patterns({ pattern: "channels" })`

## Comparison

| Feature | Direct API | RabbitMQ | Hosted Service |
|---------|:----------:|:--------:|:--------------:|
| Synchronous | ✅ | ❌ | ❌ |
| Fire & forget | ❌ | ✅ | ✅ |
| Guaranteed delivery | ✅ | ✅ | ⚠️ |
| Load balancing | ❌ | ✅ | ❌ |"""
