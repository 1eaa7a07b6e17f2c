"""Report generation helpers."""

from .report import (
    export_counts_csv,
    generate_reports,
    port_protocol_counts_frame,
    tag_counts_frame,
    write_port_protocol_counts_report,
    write_tag_counts_report,
)

__all__ = [
    "export_counts_csv",
    "generate_reports",
    "port_protocol_counts_frame",
    "tag_counts_frame",
    "write_port_protocol_counts_report",
    "write_tag_counts_report",
]
