# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class InMemoryKeyValueStore:
    """
    Dict-backed KeyValueStore for unit tests.

    Records every write so tests can assert on persistence side effects.
    """

    data: dict[str, bytes] = field(default_factory=dict)
    writes: list[tuple[str, bytes]] = field(default_factory=list)

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class FailingKeyValueStore(InMemoryKeyValueStore):
    """Reads work, every write raises."""

    def set(self, key: str, value: bytes) -> None:
        raise OSError("disk full")


class SequentialIds:
    """Deterministic id factory: id-1, id-2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}-{self.n}"
