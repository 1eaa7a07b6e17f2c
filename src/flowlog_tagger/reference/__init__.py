"""Reference table loading."""

from .loader import (
    is_valid_protocol_number,
    load_protocol_table,
    load_reference_tables,
    load_tag_table,
)

__all__ = [
    "is_valid_protocol_number",
    "load_protocol_table",
    "load_reference_tables",
    "load_tag_table",
]
