"""JSON path construction helpers.

Builds location strings such as ``meta.publication[2].citation`` that key
the errors recorded in a ValidationErrors instance.
"""

from __future__ import annotations

__all__ = ["append", "append_index", "append_key", "child_key", "join", "resolve"]


def append_key(parent: str, key: str) -> str:
    """Append an object key to a JSON path.

    Args:
        parent: JSON path to the parent object.
        key: Name of the object key to append.

    Returns:
        New JSON path in the format ``parent.key``.

    Example:
        append_key("meta", "title")  # "meta.title"
    """
    return f"{parent}.{key}"


def append_index(parent: str, index: int) -> str:
    """Append an array index to a JSON path.

    Args:
        parent: JSON path to the parent array.
        index: Index of the element in the parent array.

    Returns:
        New JSON path in the format ``parent[index]``.

    Example:
        append_index("options.fields", 3)  # "options.fields[3]"
    """
    return f"{parent}[{index}]"


def append(parent: str, child: str | int) -> str:
    """Append either an object key or an array index to a JSON path.

    Raises:
        TypeError: If ``child`` is neither a str nor an int. Booleans are
            rejected even though they are ints.
    """
    if isinstance(child, bool):
        raise TypeError("JSON path index must be an int, not bool")
    if isinstance(child, int):
        return append_index(parent, child)
    if isinstance(child, str):
        return append_key(parent, child)
    raise TypeError(f"JSON path segment must be str or int, not {type(child).__name__}")


def child_key(parent: str, key: str) -> str:
    """Like append_key(), but an empty parent yields the bare key.

    Lets a validator that may run at the document root or under a parent
    path build ``name`` at the root and ``parent.name`` elsewhere.
    """
    if not parent:
        return key
    return append_key(parent, key)


def join(root: str, *parts: str | int) -> str:
    """Fold a sequence of keys and indices onto a root path.

    Example:
        join("a", "b", 3, "c")  # "a.b[3].c"
    """
    path = root
    for part in parts:
        path = append(path, part)
    return path


def resolve(jpath: str, index: int | None = None) -> str:
    """Return ``jpath`` with ``index`` appended when one is given.

    Lets the check functions take an optional element index instead of
    requiring callers to build the indexed path inside a loop.
    """
    if index is None:
        return jpath
    return append_index(jpath, index)
