"""Lookup tables for mvp24h_security_patterns."""

from mvp24h_mcp.schemas import TopicCatalog

PATTERNS_DOC = "ai-context/security-patterns.md"

CATALOG = TopicCatalog(
    tool="mvp24h_security_patterns",
    topics={
        "overview": [PATTERNS_DOC],
        "authentication": [f"{PATTERNS_DOC}#Authentication"],
        "authorization": [f"{PATTERNS_DOC}#Authorization"],
        "jwt": [f"{PATTERNS_DOC}#JWT"],
        "data-protection": [f"{PATTERNS_DOC}#Data Protection"],
        "input-validation": [f"{PATTERNS_DOC}#Input Validation"],
        "secrets-management": [f"{PATTERNS_DOC}#Secrets Management"],
    },
    related={
        "authentication": ["jwt", "authorization"],
        "authorization": ["authentication", "jwt"],
        "jwt": ["authentication", "secrets-management"],
        "data-protection": ["secrets-management"],
        "input-validation": ["validation.md", "cqrs/validation-behavior.md"],
        "secrets-management": ["data-protection", "ai-context/containerization-patterns.md"],
    },
    descriptions={
        "authentication": "Identity, cookie auth, external providers",
        "authorization": "Roles, policies, resource-based",
        "jwt": "JWT token implementation",
        "data-protection": "Encryption, key management",
        "input-validation": "Validation, sanitization",
        "secrets-management": "Azure Key Vault, User Secrets",
    },
    titles={"jwt": "JWT Authentication"},
)

OVERVIEW_INTRO = """# Security Patterns

## Overview

Security best practices for .NET applications.

## OWASP Top 10 Coverage

| Risk | Mitigation |
|------|------------|
| Injection | Input validation, parameterized queries |
| Broken Auth | JWT, Identity, MFA |
| Sensitive Data | Encryption, Data Protection API |
| XXE | Disable DTD processing |
| Broken Access | RBAC, Policy-based auth |
| Security Misconfig | Secure defaults, headers |
| XSS | Output encoding, CSP |
| Insecure Deserialization | Type validation |
| Vulnerable Components | NuGet auditing |
| Insufficient Logging | Structured logging, audit |"""

OVERVIEW_REFERENCE = 'Use `mvp24h_security_patterns({ topic: "..." })` for detailed documentation.'
