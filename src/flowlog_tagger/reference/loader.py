"""Load the tag lookup table and the protocol-number table.

Both files are plain comma separated text. Malformed rows are skipped with a
warning, except protocol numbers that are not numeric which are dropped
silently (the IANA registry export contains ranges such as ``146-252`` and
continuation lines of quoted references).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Union

from ..core.constants import (
    LOOKUP_FIELD_COUNT,
    MIN_PROTOCOL_FIELDS,
    PROTOCOL_NUMBER_PATTERN,
    REFERENCE_DELIMITER,
)
from ..core.decorators import reraise_io_errors
from ..core.models import PortProtocol, ReferenceTables
from ..exceptions import ReferenceFileError
from ..logging import get_logger
from ..utils import normalize_field

logger = get_logger(__name__)

PathLike = Union[str, Path]


def is_valid_protocol_number(value: str) -> bool:
    """Return True for non-negative integer or decimal strings like ``6`` or ``17.0``."""
    return PROTOCOL_NUMBER_PATTERN.fullmatch(value) is not None


@reraise_io_errors(ReferenceFileError, "Failed to load lookup table from {path}")
def load_tag_table(path: PathLike) -> Dict[PortProtocol, str]:
    """Parse ``dstport,protocol,tag`` rows (no header) into a tag table.

    Port and protocol are trimmed and lowercased, the tag keeps its case.
    A repeated key overwrites the earlier tag.
    """
    table: Dict[PortProtocol, str] = {}
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        for line_number, line in enumerate(fh, start=1):
            parts = line.rstrip("\r\n").split(REFERENCE_DELIMITER)
            if len(parts) != LOOKUP_FIELD_COUNT:
                logger.warning(
                    "Invalid format in lookup file at line %d: %r", line_number, line.rstrip("\r\n")
                )
                continue

            port = normalize_field(parts[0])
            protocol = normalize_field(parts[1])
            tag = parts[2].strip()
            if not port or not protocol or not tag:
                logger.warning("Missing data at line %d in lookup file", line_number)
                continue

            table[PortProtocol(port, protocol)] = tag

    logger.info("Loaded %d tag mappings from %s", len(table), path)
    return table


@reraise_io_errors(ReferenceFileError, "Failed to load protocol numbers from {path}")
def load_protocol_table(path: PathLike) -> Dict[str, str]:
    """Parse ``number,name,...`` rows into a protocol-number table.

    The first line is a header and is always skipped.
    """
    table: Dict[str, str] = {}
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        for line_number, line in enumerate(fh, start=1):
            if line_number == 1:
                continue
            parts = line.rstrip("\r\n").split(REFERENCE_DELIMITER)
            if len(parts) < MIN_PROTOCOL_FIELDS:
                logger.warning(
                    "Invalid format in protocol numbers file at line %d: %r",
                    line_number,
                    line.rstrip("\r\n"),
                )
                continue

            number = parts[0].strip()
            name = normalize_field(parts[1])
            if not number or not name:
                logger.warning("Missing data in protocol numbers file at line %d", line_number)
                continue

            if not is_valid_protocol_number(number):
                continue

            table[number] = name

    logger.info("Loaded %d protocol numbers from %s", len(table), path)
    return table


def load_reference_tables(lookup_path: PathLike, protocol_path: PathLike) -> ReferenceTables:
    """Load both reference files into a read-only :class:`ReferenceTables`."""
    tags = load_tag_table(lookup_path)
    protocols = load_protocol_table(protocol_path)
    return ReferenceTables.from_dicts(tags, protocols)
