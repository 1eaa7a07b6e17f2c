# src/flowlog_tagger/__init__.py
from .core.models import FlowCounts, PortProtocol, ReferenceTables
from .core.constants import UNKNOWN_PROTOCOL, UNTAGGED
from .reference import load_protocol_table, load_reference_tables, load_tag_table
from .classify import Classifier
from .aggregate import FlowLogAggregator, process_flow_log
from .reporting import generate_reports, port_protocol_counts_frame, tag_counts_frame
from .pipeline_app import TaggingResult, run_tagging
from .exceptions import (
    ConfigurationError,
    FlowLogReadError,
    FlowLogTaggerError,
    ReferenceFileError,
    ReportGenerationError,
)


__all__ = [
    "FlowCounts",
    "PortProtocol",
    "ReferenceTables",
    "UNKNOWN_PROTOCOL",
    "UNTAGGED",
    "load_protocol_table",
    "load_reference_tables",
    "load_tag_table",
    "Classifier",
    "FlowLogAggregator",
    "process_flow_log",
    "generate_reports",
    "port_protocol_counts_frame",
    "tag_counts_frame",
    "TaggingResult",
    "run_tagging",
    "ConfigurationError",
    "FlowLogReadError",
    "FlowLogTaggerError",
    "ReferenceFileError",
    "ReportGenerationError",
]
