"""
route_request/arguments/path_resolver.py

Purpose:
    Recursive dotted-path lookup over a partially populated argument tree.

Notes:
    - The tree is converted once into a tagged union of Branch/Leaf nodes. Lookups then
      dispatch on the node (Branch.descend / Leaf.descend) instead of inspecting raw types.
    - `null` values are dropped while building, so "explicit null" and "absent" are the
      same thing for every lookup.
    - A missing segment is never an error. Walking *through* a scalar is (InvalidArgument).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from route_request.contracts.errors import InvalidArgument

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class Resolved:
    value: Any = None
    present: bool = False


ABSENT = Resolved()


@dataclass(frozen=True)
class Leaf:
    value: Any

    def unwrap(self) -> Any:
        return self.value

    def descend(self, path: str, *, full_key: str) -> Resolved:
        raise InvalidArgument(
            argument=full_key,
            message=f"cannot look up '{path}' inside a non-object value",
        )


@dataclass(frozen=True)
class Branch:
    children: Mapping[str, "Node"] = field(default_factory=dict)

    def unwrap(self) -> dict[str, Any]:
        return {k: child.unwrap() for k, child in self.children.items()}

    def descend(self, path: str, *, full_key: str) -> Resolved:
        head, _, rest = path.partition(PATH_SEPARATOR)
        if not head or (PATH_SEPARATOR in path and not rest):
            raise InvalidArgument(argument=full_key, message="empty path segment")

        child = self.children.get(head)
        if child is None:
            return ABSENT
        if not rest:
            return Resolved(value=child.unwrap(), present=True)
        return child.descend(rest, full_key=full_key)


Node = Union[Branch, Leaf]


def to_node(value: Any) -> Node | None:
    """Build a node from a raw value; returns None for null so callers can drop it."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        children: dict[str, Node] = {}
        for key, raw in value.items():
            child = to_node(raw)
            if child is not None:
                children[str(key)] = child
        return Branch(children=children)
    return Leaf(value=value)


def resolve(tree: Branch, key: str) -> Resolved:
    """Resolve a dotted key against a tree. Missing or null segments report absent."""
    if not key:
        raise InvalidArgument(argument=key, message="empty argument path")
    return tree.descend(key, full_key=key)


class ArgumentTree:
    """
    Read-only view over the external request arguments.

    This is the whole capability the mapper needs from the transport layer:
    `has(key)` and `get(key)` over dotted paths.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Branch) -> None:
        self._root = root

    @classmethod
    def of(cls, arguments: "ArgumentTree | Mapping[str, Any] | None") -> "ArgumentTree":
        if isinstance(arguments, ArgumentTree):
            return arguments
        if arguments is None:
            return cls(Branch())
        if not isinstance(arguments, Mapping):
            raise InvalidArgument(argument="<root>", message="arguments must be an object")
        root = to_node(arguments)
        return cls(root if isinstance(root, Branch) else Branch())

    def resolve(self, key: str) -> Resolved:
        return resolve(self._root, key)

    def has(self, key: str) -> bool:
        return self.resolve(key).present

    def get(self, key: str, default: Any = None) -> Any:
        r = self.resolve(key)
        return r.value if r.present else default

    def keys(self) -> list[str]:
        return sorted(self._root.children)

    def __repr__(self) -> str:
        return f"ArgumentTree(keys={self.keys()!r})"
