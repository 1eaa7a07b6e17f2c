"""Map destination port and protocol number to a tag."""

from __future__ import annotations

from typing import Optional

from ..core.constants import UNKNOWN_PROTOCOL, UNTAGGED
from ..core.models import PortProtocol, ReferenceTables


class Classifier:
    """Lookup API over loaded :class:`ReferenceTables`.

    ``lookup_*`` methods return ``None`` when nothing matches; the
    ``resolve_protocol_name`` and ``classify`` methods translate a miss into
    the ``"unknown"`` and ``"Untagged"`` sentinels used in reports.
    """

    def __init__(self, tables: ReferenceTables) -> None:
        self._tables = tables

    @property
    def tables(self) -> ReferenceTables:
        return self._tables

    def lookup_protocol(self, protocol_number: str) -> Optional[str]:
        return self._tables.protocols.get(protocol_number)

    def lookup_tag(self, dest_port: str, protocol_name: str) -> Optional[str]:
        return self._tables.tags.get(PortProtocol.normalized(dest_port, protocol_name))

    def resolve_protocol_name(self, protocol_number: str) -> str:
        """Return the protocol name for ``protocol_number`` or ``"unknown"``."""
        name = self.lookup_protocol(protocol_number)
        return UNKNOWN_PROTOCOL if name is None else name

    def classify(self, dest_port: str, protocol_name: str) -> str:
        """Return the tag for the port/protocol pair or ``"Untagged"``."""
        tag = self.lookup_tag(dest_port, protocol_name)
        return UNTAGGED if tag is None else tag
