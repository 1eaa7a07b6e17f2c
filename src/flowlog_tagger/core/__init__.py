from .config import Settings, get_settings, load_settings
from .constants import *  # noqa: F401,F403
from .models import FlowCounts, PortProtocol, ReferenceTables
from .decorators import log_performance, reraise_io_errors

__all__ = [
    "Settings",
    "get_settings",
    "load_settings",
    "FlowCounts",
    "PortProtocol",
    "ReferenceTables",
    "log_performance",
    "reraise_io_errors",
] + [name for name in globals().keys() if name.isupper()]
