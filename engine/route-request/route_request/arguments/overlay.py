"""
route_request/arguments/overlay.py

Purpose:
    "Apply only if present" overlay of argument values onto a mutable request.

Notes:
    - A Binding pairs one dotted argument key with a setter. apply_all() processes a list of
      bindings uniformly, so there is no per-field branching in the mapper.
    - Precedence(legacy, current) groups a deprecated argument with its replacement. The
      legacy binding is always applied first so the replacement wins when both are sent.
    - Errors raised by setters are normalized:
        TypeError, pydantic type errors    -> SchemaContractViolation (wrong leaf type)
        ValueError, pydantic bound errors  -> InvalidArgument (bad token, out of range value)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union

from pydantic import BaseModel, ValidationError

from route_request.arguments.path_resolver import ArgumentTree
from route_request.contracts.errors import InvalidArgument, RouteRequestError, SchemaContractViolation
from route_request.utils.logging import get_logger, is_trace_enabled

logger = get_logger(__name__)

Setter = Callable[[Any], None]


@dataclass(frozen=True)
class Binding:
    key: str
    setter: Setter


@dataclass(frozen=True)
class Precedence:
    """A deprecated argument and the argument that supersedes it."""

    legacy: Binding
    current: Binding

    def ordered(self) -> tuple[Binding, Binding]:
        return (self.legacy, self.current)


Overlay = Union[Binding, Precedence]


def assign(target: BaseModel, attribute: str, convert: Callable[[Any], Any] | None = None) -> Setter:
    """
    Build a setter that assigns `attribute` on a pydantic model.

    Models are declared with validate_assignment=True, so a wrong runtime type fails here
    instead of leaking into the search layer.
    """

    def _setter(value: Any) -> None:
        setattr(target, attribute, convert(value) if convert is not None else value)

    return _setter


def apply(tree: ArgumentTree, key: str, setter: Setter) -> bool:
    """
    Call setter(value) iff `key` is present in the tree. Returns True when applied.
    """
    resolved = tree.resolve(key)
    if not resolved.present:
        return False

    try:
        setter(resolved.value)
    except RouteRequestError:
        raise
    except ValidationError as e:
        if _is_type_mismatch(e):
            raise SchemaContractViolation(argument=key, message=_first_error(e)) from e
        raise InvalidArgument(argument=key, message=_first_error(e), value=resolved.value) from e
    except ValueError as e:
        raise InvalidArgument(argument=key, message=str(e), value=resolved.value) from e
    except TypeError as e:
        raise SchemaContractViolation(argument=key, message=str(e)) from e

    if is_trace_enabled(logger):
        logger.debug("override applied argument=%s", key)
    return True


def apply_all(tree: ArgumentTree, overlays: Iterable[Overlay]) -> list[str]:
    """
    Apply bindings in declaration order; Precedence entries expand legacy-then-current.
    Returns the keys that were applied.
    """
    applied: list[str] = []
    for overlay in overlays:
        bindings = overlay.ordered() if isinstance(overlay, Precedence) else (overlay,)
        for binding in bindings:
            if apply(tree, binding.key, binding.setter):
                applied.append(binding.key)
    return applied


def _first_error(e: ValidationError) -> str:
    errors = e.errors()
    if not errors:
        return str(e)
    first = errors[0]
    return f"{first.get('msg')} (got {type(first.get('input')).__name__})"


def _is_type_mismatch(e: ValidationError) -> bool:
    # "float_parsing", "bool_type", "int_from_float" ... versus bounds like "greater_than_equal"
    for err in e.errors():
        kind = str(err.get("type", ""))
        if kind.endswith(("_type", "_parsing")) or kind in _TYPE_MISMATCH_KINDS:
            return True
    return False


_TYPE_MISMATCH_KINDS = frozenset({"int_from_float", "model_type", "dataclass_type", "is_instance_of"})
