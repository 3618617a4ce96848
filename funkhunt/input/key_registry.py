"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeyComboBinding(Generic[T]):
    """Mapping from one or more key tokens to a single callback."""

    combos: tuple[str, ...]
    handler: Callable[[], T | None]


class KeyComboRegistry(Generic[T]):
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[], T | None]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> T | None:
        """Invoke the handler bound to ``key``; unbound keys return ``None``."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler()
