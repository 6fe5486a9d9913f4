"""Placeholder substitution in template storage bodies."""


def count_placeholders(body: str, placeholder: str) -> int:
    """Number of non-overlapping literal occurrences of ``placeholder``."""
    if not placeholder:
        raise ValueError("placeholder must not be empty")
    return body.count(placeholder)


def substitute_version(body: str, placeholder: str, version: str) -> str:
    """Replace every literal occurrence of ``placeholder`` with ``version``.

    Matching is plain substring matching, so regex metacharacters in the
    placeholder carry no special meaning.
    """
    if not placeholder:
        raise ValueError("placeholder must not be empty")
    return body.replace(placeholder, version)
