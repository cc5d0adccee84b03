"""Registry of named transform functions."""

from collections import abc
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Optional
from .country import country_from_iso

TransformFunction = Callable[..., Any]

BUILTIN_TRANSFORMS: Mapping[str, TransformFunction] = MappingProxyType({
    "countryFromISO": country_from_iso,
})


class TransformRegistry(abc.Mapping):
    """
    Immutable lookup table from transform name to function.

    The table is fixed when the registry is built and handed to the
    interpreter; nothing is looked up from ambient scope.
    """

    def __init__(self, functions: Optional[Mapping[str, TransformFunction]] = None):
        self._functions = MappingProxyType(dict(functions or {}))

    @classmethod
    def default(cls) -> "TransformRegistry":
        """Registry holding the built-in transforms."""
        return cls(BUILTIN_TRANSFORMS)

    def with_functions(self, extra: Mapping[str, TransformFunction]) -> "TransformRegistry":
        """
        Build a new registry with additional or replaced transforms.

        Args:
            extra: Mapping of name to callable

        Returns:
            New TransformRegistry; this one is left unchanged
        """
        for name, function in extra.items():
            if not callable(function):
                raise TypeError(f"Transform {name!r} is not callable")
        return TransformRegistry({**self._functions, **extra})

    def lookup(self, name: Any) -> Optional[TransformFunction]:
        """Return the function registered under name, or None."""
        if not isinstance(name, str):
            return None
        return self._functions.get(name)

    def __getitem__(self, name: str) -> TransformFunction:
        return self._functions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"TransformRegistry({sorted(self._functions)})"
