"""Render tag and port/protocol counts as text reports and DataFrames."""

from __future__ import annotations

from pathlib import Path
from typing import List, Mapping, Union

import pandas as pd

from ..core.constants import (
    PORT_PROTOCOL_COUNTS_CSV_FILENAME,
    PORT_PROTOCOL_COUNTS_FILENAME,
    PORT_PROTOCOL_COUNTS_TITLE,
    TAG_COUNTS_CSV_FILENAME,
    TAG_COUNTS_FILENAME,
    TAG_COUNTS_TITLE,
)
from ..core.decorators import reraise_io_errors
from ..core.models import FlowCounts, PortProtocol
from ..exceptions import ReportGenerationError
from ..logging import get_logger
from ..utils import export_to_csv

logger = get_logger(__name__)

PathLike = Union[str, Path]

TAG_COLUMNS = ["tag", "count"]
PORT_PROTOCOL_COLUMNS = ["port", "protocol", "count"]


def tag_counts_frame(tag_counts: Mapping[str, int]) -> pd.DataFrame:
    """Return tag counts ordered by count (descending) then tag."""
    df = pd.DataFrame(list(tag_counts.items()), columns=TAG_COLUMNS)
    return df.sort_values(
        ["count", "tag"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)


def port_protocol_counts_frame(counts: Mapping[PortProtocol, int]) -> pd.DataFrame:
    """Return port/protocol counts ordered by count (descending) then port and protocol."""
    rows = [(key.port, key.protocol, count) for key, count in counts.items()]
    df = pd.DataFrame(rows, columns=PORT_PROTOCOL_COLUMNS)
    return df.sort_values(
        ["count", "port", "protocol"], ascending=[False, True, True], kind="mergesort"
    ).reset_index(drop=True)


@reraise_io_errors(ReportGenerationError, "Failed to write tag counts output to {path}")
def write_tag_counts_report(path: PathLike, tag_counts: Mapping[str, int]) -> Path:
    df = tag_counts_frame(tag_counts)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f"{TAG_COUNTS_TITLE}\n\n")
        fh.write("Tag\t\tCount\n")
        for tag, count in df.itertuples(index=False, name=None):
            fh.write(f"{tag}\t\t{count}\n")
    return Path(path)


@reraise_io_errors(
    ReportGenerationError, "Failed to write port/protocol counts output to {path}"
)
def write_port_protocol_counts_report(
    path: PathLike, counts: Mapping[PortProtocol, int]
) -> Path:
    df = port_protocol_counts_frame(counts)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f"{PORT_PROTOCOL_COUNTS_TITLE}\n\n")
        fh.write("Port\tProtocol\tCount\n")
        for port, protocol, count in df.itertuples(index=False, name=None):
            fh.write(f"{port}\t{protocol}\t\t{count}\n")
    return Path(path)


@reraise_io_errors(ReportGenerationError, "Failed to create output directory {path}")
def _ensure_output_dir(path: PathLike) -> Path:
    output_dir = Path(path)
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


@reraise_io_errors(ReportGenerationError, "Failed to export CSV counts to {path}")
def export_counts_csv(path: PathLike, counts: FlowCounts) -> List[Path]:
    """Write both count tables as CSV files into the directory ``path``."""
    output_dir = _ensure_output_dir(path)
    tag_csv = output_dir / TAG_COUNTS_CSV_FILENAME
    port_protocol_csv = output_dir / PORT_PROTOCOL_COUNTS_CSV_FILENAME
    export_to_csv(tag_counts_frame(counts.tag_counts), tag_csv)
    export_to_csv(port_protocol_counts_frame(counts.port_protocol_counts), port_protocol_csv)
    return [tag_csv, port_protocol_csv]


def generate_reports(
    counts: FlowCounts,
    output_dir: PathLike = ".",
    *,
    tag_filename: str = TAG_COUNTS_FILENAME,
    port_protocol_filename: str = PORT_PROTOCOL_COUNTS_FILENAME,
    export_csv: bool = False,
) -> List[Path]:
    """Write both text reports (and optionally CSV copies) and return their paths."""
    directory = _ensure_output_dir(output_dir)
    written = [
        write_tag_counts_report(directory / tag_filename, counts.tag_counts),
        write_port_protocol_counts_report(
            directory / port_protocol_filename, counts.port_protocol_counts
        ),
    ]
    if export_csv:
        written.extend(export_counts_csv(directory, counts))
    logger.info("Wrote %d report files to %s", len(written), directory)
    return written
