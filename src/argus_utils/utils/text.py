"""Trivial string predicates used when parsing service responses."""


def str_to_bool(value: str) -> bool:
    """Return True only for the exact string ``"True"``.

    The service serializes booleans .NET-style; anything else, including
    ``"true"`` and ``"1"``, is False.
    """
    return value == "True"


def starts_with(full: str, prefix: str) -> bool:
    return full.startswith(prefix)


def ends_with(full: str, suffix: str) -> bool:
    return full.endswith(suffix)
