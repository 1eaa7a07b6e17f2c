"""Core data structures shared by the loader, classifier and aggregator."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

from .constants import REFERENCE_DELIMITER


class PortProtocol(NamedTuple):
    """Normalized ``(destination port, protocol name)`` pair."""

    port: str
    protocol: str

    @classmethod
    def normalized(cls, port: str, protocol: str) -> "PortProtocol":
        return cls(port.strip().lower(), protocol.strip().lower())

    @classmethod
    def from_string(cls, value: str) -> "PortProtocol":
        """Parse the ``"port,protocol"`` form used in reports, e.g. ``"25,tcp"``."""
        port, sep, protocol = value.partition(REFERENCE_DELIMITER)
        if not sep:
            raise ValueError(f"Expected 'port{REFERENCE_DELIMITER}protocol', got {value!r}")
        return cls.normalized(port, protocol)

    def __str__(self) -> str:
        return f"{self.port}{REFERENCE_DELIMITER}{self.protocol}"


@dataclass(frozen=True)
class ReferenceTables:
    """Read-only bundle of the tag table and the protocol-number table."""

    tags: Mapping[PortProtocol, str]
    protocols: Mapping[str, str]

    @classmethod
    def from_dicts(
        cls, tags: Mapping[PortProtocol, str], protocols: Mapping[str, str]
    ) -> "ReferenceTables":
        return cls(MappingProxyType(dict(tags)), MappingProxyType(dict(protocols)))


@dataclass
class FlowCounts:
    """Counters produced by one pass over a flow log."""

    tag_counts: Counter[str] = field(default_factory=Counter)
    port_protocol_counts: Counter[PortProtocol] = field(default_factory=Counter)
    lines_read: int = 0
    skipped: Counter[str] = field(default_factory=Counter)

    @property
    def records_counted(self) -> int:
        return sum(self.tag_counts.values())

    def record(self, tag: str, key: PortProtocol) -> None:
        self.tag_counts[tag] += 1
        self.port_protocol_counts[key] += 1

    def skip(self, reason: str) -> None:
        self.skipped[reason] += 1
