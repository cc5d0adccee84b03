"""Classified mapping entry values.

A mapping spec value is classified exactly once into one of the variants
below; the resolver and interpreter then match on the variant instead of
probing the raw JSON shape again.
"""

import copy
from dataclasses import dataclass
from typing import Any, Tuple, Union

LITERAL_KEY = "$literal"
TRANSFORM_KEY = "$transform"
PATH_KEY = "$path"
ARGS_KEY = "$args"


@dataclass(frozen=True)
class Skip:
    """Entry intentionally left empty (null or empty string)."""


@dataclass(frozen=True)
class Literal:
    """Value taken verbatim from the mapping spec."""
    value: Any

    def materialize(self) -> Any:
        """Return a private copy of the literal value."""
        if isinstance(self.value, (dict, list)):
            return copy.deepcopy(self.value)
        return self.value


@dataclass(frozen=True)
class PathRef:
    """Reference to a source path in the input record."""
    path: str


@dataclass(frozen=True)
class TransformDirective:
    """Named transform invocation with unresolved argument specs."""
    name: Any
    args: Tuple["ArgumentEntry", ...] = ()


ArgumentEntry = Union[Skip, Literal, PathRef]
MappingEntry = Union[Skip, Literal, PathRef, TransformDirective]


def _is_object_with(value: Any, key: str) -> bool:
    return isinstance(value, dict) and key in value


def classify_entry(value: Any, allow_transform: bool = True) -> MappingEntry:
    """
    Classify a raw mapping value.

    Args:
        value: Raw value from the mapping spec
        allow_transform: Recognise ``$transform`` objects. Argument specs are
            classified with this off, so a nested directive is just an object.

    Returns:
        One of Skip, Literal, PathRef or TransformDirective
    """
    if value is None or value == "":
        return Skip()

    if allow_transform and _is_object_with(value, TRANSFORM_KEY):
        return TransformDirective(
            name=value[TRANSFORM_KEY],
            args=_classify_arguments(value),
        )

    if _is_object_with(value, LITERAL_KEY):
        return Literal(value[LITERAL_KEY])

    if not isinstance(value, str):
        return Literal(value)

    if value.startswith("="):
        # only the first '=' is consumed so '==x' yields '=x'
        return Literal(value[1:])

    return PathRef(value)


def _classify_arguments(directive: dict) -> Tuple[ArgumentEntry, ...]:
    if ARGS_KEY in directive:
        raw_args = directive[ARGS_KEY]
        if not isinstance(raw_args, list):
            raw_args = [raw_args]
        return tuple(classify_entry(arg, allow_transform=False) for arg in raw_args)

    if PATH_KEY in directive:
        return (classify_entry(directive[PATH_KEY], allow_transform=False),)

    return ()
