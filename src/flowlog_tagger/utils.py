from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd


def normalize_field(value: str) -> str:
    """Return ``value`` trimmed and lowercased."""
    return value.strip().lower()


def export_to_csv(data_to_export: pd.DataFrame, filename: Union[str, Path]) -> None:
    """Write ``data_to_export`` to ``filename`` as CSV without index."""
    data_to_export.to_csv(filename, index=False)
