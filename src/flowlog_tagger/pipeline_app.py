"""Run the load, aggregate and report stages end to end."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .aggregate.aggregator import FlowLogAggregator
from .classify.classifier import Classifier
from .core.config import Settings, get_settings
from .core.decorators import log_performance
from .core.models import FlowCounts
from .logging import get_logger
from .reference.loader import load_reference_tables
from .reporting.report import generate_reports

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class TaggingResult:
    """Counts from one run and the report files written for them."""

    counts: FlowCounts
    report_paths: List[Path] = field(default_factory=list)


@log_performance
def run_tagging(
    lookup_path: PathLike,
    flow_log_path: PathLike,
    protocol_path: PathLike,
    *,
    settings: Optional[Settings] = None,
) -> TaggingResult:
    """Load reference tables, count the flow log and write both reports."""
    settings = settings or get_settings()

    tables = load_reference_tables(lookup_path, protocol_path)
    aggregator = FlowLogAggregator(
        Classifier(tables), include_line_text=settings.log_skipped_lines
    )
    counts = aggregator.process(flow_log_path)
    if counts.skipped:
        logger.info(
            "Skipped flow log lines: %s",
            ", ".join(f"{reason}={n}" for reason, n in sorted(counts.skipped.items())),
        )

    report_paths = generate_reports(
        counts,
        settings.output_dir,
        tag_filename=settings.tag_counts_filename,
        port_protocol_filename=settings.port_protocol_counts_filename,
        export_csv=settings.export_csv,
    )
    return TaggingResult(counts=counts, report_paths=report_paths)
