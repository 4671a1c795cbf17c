from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class MessageBundle:
    """
    Named table of message templates keyed by message id.

    Templates use {N} positional placeholders. Lookups of unknown keys
    return the key itself so a missing translation still logs something.
    """

    name: str
    messages: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze a private copy; the caller's dict may keep changing.
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get(self, key: str) -> str:
        return self.messages.get(key, key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> "MessageBundle":
        return cls(name=name, messages={str(k): str(v) for k, v in data.items()})
