"""Stream a flow log and count tags and port/protocol combinations."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Tuple, Union

from ..classify.classifier import Classifier
from ..core.constants import (
    DSTPORT_FIELD_INDEX,
    MIN_FLOW_LOG_FIELDS,
    MISSING_VALUE,
    PROTOCOL_FIELD_INDEX,
    SKIP_INCOMPLETE,
    SKIP_MISSING,
    SKIP_UNKNOWN_PROTOCOL,
)
from ..core.decorators import reraise_io_errors
from ..core.models import FlowCounts, PortProtocol
from ..exceptions import FlowLogReadError
from ..logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


@reraise_io_errors(FlowLogReadError, "Failed to process flow log from {path}")
def iter_flow_log_lines(path: PathLike) -> Iterator[Tuple[int, str]]:
    """Lazily yield ``(line_number, line)`` pairs from the flow log.

    Memory use does not grow with the size of the file.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        for line_number, line in enumerate(fh, start=1):
            yield line_number, line.rstrip("\r\n")


class FlowLogAggregator:
    """Apply a :class:`Classifier` to every flow log record and count results."""

    def __init__(self, classifier: Classifier, *, include_line_text: bool = True) -> None:
        self.classifier = classifier
        self.include_line_text = include_line_text

    def _where(self, line_number: int, line: str) -> str:
        if self.include_line_text:
            return f"line {line_number}: {line!r}"
        return f"line {line_number}"

    def add_line(self, counts: FlowCounts, line_number: int, line: str) -> None:
        """Update ``counts`` from a single flow log line."""
        counts.lines_read += 1
        fields = line.split()
        if len(fields) < MIN_FLOW_LOG_FIELDS:
            logger.warning("Incomplete data in flow log file at %s", self._where(line_number, line))
            counts.skip(SKIP_INCOMPLETE)
            return

        dest_port = fields[DSTPORT_FIELD_INDEX]
        protocol_number = fields[PROTOCOL_FIELD_INDEX]
        if dest_port == MISSING_VALUE or protocol_number == MISSING_VALUE:
            logger.warning("Missing data in flow log file at %s", self._where(line_number, line))
            counts.skip(SKIP_MISSING)
            return

        protocol_name = self.classifier.lookup_protocol(protocol_number)
        if protocol_name is None:
            logger.warning(
                "Missing protocol name for protocol number %s at line %d",
                protocol_number,
                line_number,
            )
            counts.skip(SKIP_UNKNOWN_PROTOCOL)
            return

        tag = self.classifier.classify(dest_port, protocol_name)
        counts.record(tag, PortProtocol.normalized(dest_port, protocol_name))

    def process(self, path: PathLike) -> FlowCounts:
        """Return fresh counts for the flow log at ``path``."""
        counts = FlowCounts()
        for line_number, line in iter_flow_log_lines(path):
            self.add_line(counts, line_number, line)
        logger.info(
            "Processed %d flow log lines from %s, %d counted",
            counts.lines_read,
            path,
            counts.records_counted,
        )
        return counts


def process_flow_log(
    path: PathLike, classifier: Classifier, *, include_line_text: bool = True
) -> FlowCounts:
    """Count tags and port/protocol pairs for every valid record in ``path``."""
    return FlowLogAggregator(classifier, include_line_text=include_line_text).process(path)
