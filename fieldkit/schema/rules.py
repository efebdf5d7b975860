"""
Display helpers for rule strings such as "nullable|min:3|max:200".

Rules belong to the host system's validation engine; nothing here decides whether a
value satisfies them.
"""

RULE_SEPARATOR = "|"
ARGUMENT_SEPARATOR = ","


def split_rules(rules: str) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """
    Split a rule string into (name, arguments) pairs.

    >>> split_rules("nullable|min:3|in:a,b")
    (('nullable', ()), ('min', ('3',)), ('in', ('a', 'b')))
    """
    parsed = []
    for chunk in rules.split(RULE_SEPARATOR):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, _, raw_args = chunk.partition(":")
        args = tuple(arg.strip() for arg in raw_args.split(ARGUMENT_SEPARATOR)) if raw_args else ()
        parsed.append((name.strip(), args))
    return tuple(parsed)


def rule_names(rules: str) -> list[str]:
    return [name for name, _ in split_rules(rules)]


def format_rules(rules: str) -> str:
    """Human readable form used in field listings."""
    parts = []
    for name, args in split_rules(rules):
        parts.append(f"{name}({', '.join(args)})" if args else name)
    return ", ".join(parts)
