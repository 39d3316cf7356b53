"""Shortcut registry mapping chords to toolbar commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional

from markdown_live.runtime.telemetry import span

from .models import Binding, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    binding_count: int
    chords: tuple[str, ...]


class ShortcutConflictError(RuntimeError):
    """Raised when a new binding reuses a chord under overlapping conditions."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        super().__init__(
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        self.binding = binding
        self.conflicts = conflicts_tuple


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    left_map, right_map = left.when_map, right.when_map
    for flag, expected in left_map.items():
        if flag in right_map and right_map[flag] != expected:
            return False
    return True


class ShortcutRegistry:
    """Owns bindings indexed by chord token."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._by_chord: Dict[str, list[str]] = {}
        self._logger_name = logger_name

    def __len__(self) -> int:
        return len(self._bindings)

    def register(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "chord": binding.stroke.token},
        ) as handle:
            conflicts = self.detect_conflicts(binding)
            if conflicts and not replace:
                handle.add_metadata("conflicts", ",".join(c.id for c in conflicts))
                raise ShortcutConflictError(binding, conflicts)
            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self.unregister(binding.id)
            for conflict in conflicts:
                self.unregister(conflict.id)
            self._bindings[binding.id] = binding
            self._by_chord.setdefault(binding.stroke.token, []).append(binding.id)
            return binding

    def unregister(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is None:
            return None
        bucket = self._by_chord.get(binding.stroke.token, [])
        if binding_id in bucket:
            bucket.remove(binding_id)
        if not bucket:
            self._by_chord.pop(binding.stroke.token, None)
        return binding

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        return [
            self._bindings[other_id]
            for other_id in self._by_chord.get(binding.stroke.token, [])
            if other_id != binding.id
            and _contexts_overlap(binding, self._bindings[other_id])
        ]

    def resolve(
        self,
        stroke: KeyStroke | str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> Optional[Binding]:
        """Return the binding for ``stroke`` whose ``when`` flags allow it."""

        if isinstance(stroke, str):
            stroke = KeyStroke.parse(stroke)
        flags = context or {}
        for binding_id in self._by_chord.get(stroke.token, []):
            binding = self._bindings[binding_id]
            if binding.allows(flags):
                return binding
        return None

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            chords=tuple(sorted(self._by_chord)),
        )


__all__ = ["ShortcutRegistry", "ShortcutConflictError", "RegistryStats"]
