"""Core documentation components."""

from mvp24h_mcp.core.doc_loader import (
    DocLoader,
    DocNotFoundError,
    DocSectionNotFoundError,
    get_doc_loader,
)
from mvp24h_mcp.core.resolver import TopicResolver, load_available, split_fragment

__all__ = [
    "DocLoader",
    "DocNotFoundError",
    "DocSectionNotFoundError",
    "TopicResolver",
    "get_doc_loader",
    "load_available",
    "split_fragment",
]
