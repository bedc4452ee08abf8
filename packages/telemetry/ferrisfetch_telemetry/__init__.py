"""System fact collection for ferris-fetch."""

from .collector import Collector, collect
from .models import UNKNOWN, SystemInfo, format_gb, format_uptime
from .sources import (
    DarwinFactSource,
    FactSource,
    GenericFactSource,
    LinuxFactSource,
    WindowsFactSource,
    detect_fact_source,
)

__all__ = [
    "Collector",
    "DarwinFactSource",
    "FactSource",
    "GenericFactSource",
    "LinuxFactSource",
    "SystemInfo",
    "UNKNOWN",
    "WindowsFactSource",
    "collect",
    "detect_fact_source",
    "format_gb",
    "format_uptime",
]
