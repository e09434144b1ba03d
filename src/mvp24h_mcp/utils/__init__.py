"""Utility functions."""


def title_case(name: str) -> str:
    """Turn a kebab-case key into a title: "clean-architecture" -> "Clean Architecture"."""
    return " ".join(word[:1].upper() + word[1:] for word in name.replace("-", " ").split())


def bullet_list(items: list[str]) -> str:
    """Render items as a markdown bullet list."""
    return "\n".join(f"- {item}" for item in items)


def join_sections(sections: list[str], separator: str = "\n\n---\n\n") -> str:
    """Join non-empty markdown sections."""
    return separator.join(s for s in sections if s)
