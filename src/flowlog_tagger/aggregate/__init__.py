"""Flow log aggregation."""

from .aggregator import FlowLogAggregator, iter_flow_log_lines, process_flow_log

__all__ = ["FlowLogAggregator", "iter_flow_log_lines", "process_flow_log"]
