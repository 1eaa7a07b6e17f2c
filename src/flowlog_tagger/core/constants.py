"""Centralized constant definitions for flowlog_tagger."""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Lookup sentinels
# ---------------------------------------------------------------------------
UNKNOWN_PROTOCOL: str = "unknown"
UNTAGGED: str = "Untagged"

# ---------------------------------------------------------------------------
# Flow log layout (AWS VPC flow log, version 2 default format)
# ---------------------------------------------------------------------------
DSTPORT_FIELD_INDEX: int = 6
PROTOCOL_FIELD_INDEX: int = 7
MIN_FLOW_LOG_FIELDS: int = max(DSTPORT_FIELD_INDEX, PROTOCOL_FIELD_INDEX) + 1
MISSING_VALUE: str = "-"

# ---------------------------------------------------------------------------
# Reference file layout
# ---------------------------------------------------------------------------
REFERENCE_DELIMITER: str = ","
LOOKUP_FIELD_COUNT: int = 3
MIN_PROTOCOL_FIELDS: int = 2
# Non-negative integer or decimal, ASCII digits only
PROTOCOL_NUMBER_PATTERN: re.Pattern[str] = re.compile(r"\d+(\.\d+)?", re.ASCII)

# ---------------------------------------------------------------------------
# Skip reasons recorded per flow log line
# ---------------------------------------------------------------------------
SKIP_INCOMPLETE: str = "incomplete"
SKIP_MISSING: str = "missing"
SKIP_UNKNOWN_PROTOCOL: str = "unknown_protocol"

# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------
TAG_COUNTS_FILENAME: str = "tag_counts.txt"
PORT_PROTOCOL_COUNTS_FILENAME: str = "port_protocol_counts.txt"
TAG_COUNTS_CSV_FILENAME: str = "tag_counts.csv"
PORT_PROTOCOL_COUNTS_CSV_FILENAME: str = "port_protocol_counts.csv"
TAG_COUNTS_TITLE: str = "Tag Counts:"
PORT_PROTOCOL_COUNTS_TITLE: str = "Port/Protocol Combination Counts:"

__all__ = [
    "UNKNOWN_PROTOCOL",
    "UNTAGGED",
    "DSTPORT_FIELD_INDEX",
    "PROTOCOL_FIELD_INDEX",
    "MIN_FLOW_LOG_FIELDS",
    "MISSING_VALUE",
    "REFERENCE_DELIMITER",
    "LOOKUP_FIELD_COUNT",
    "MIN_PROTOCOL_FIELDS",
    "PROTOCOL_NUMBER_PATTERN",
    "SKIP_INCOMPLETE",
    "SKIP_MISSING",
    "SKIP_UNKNOWN_PROTOCOL",
    "TAG_COUNTS_FILENAME",
    "PORT_PROTOCOL_COUNTS_FILENAME",
    "TAG_COUNTS_CSV_FILENAME",
    "PORT_PROTOCOL_COUNTS_CSV_FILENAME",
    "TAG_COUNTS_TITLE",
    "PORT_PROTOCOL_COUNTS_TITLE",
]
