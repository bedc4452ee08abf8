"""Typed system snapshot models."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "Unknown"

_GIB = 1024**3


def format_uptime(seconds: int) -> str:
    seconds = max(int(seconds), 0)
    hours, remainder = divmod(seconds, 3600)
    return f"{hours}h {remainder // 60}m"


def format_gb(num_bytes: int) -> str:
    return f"{max(int(num_bytes), 0) / _GIB:.1f}"


@dataclass(frozen=True)
class SystemInfo:
    os_name: str = UNKNOWN
    os_version: str = UNKNOWN
    kernel: str = UNKNOWN
    uptime_seconds: int = 0
    shell: str = UNKNOWN
    cpu_name: str = UNKNOWN
    cpu_cores: int = 0
    mem_used_bytes: int = 0
    mem_total_bytes: int = 0
    hostname: str = UNKNOWN
    username: str = UNKNOWN

    @property
    def uptime(self) -> str:
        return format_uptime(self.uptime_seconds)

    @property
    def mem_used_gb(self) -> str:
        return format_gb(self.mem_used_bytes)

    @property
    def mem_total_gb(self) -> str:
        return format_gb(self.mem_total_bytes)

    @property
    def os_display(self) -> str:
        if self.os_version == UNKNOWN or self.os_version in self.os_name:
            return self.os_name
        return f"{self.os_name} {self.os_version}"

    def cpu_display(self, max_len: int = 35) -> str:
        """CPU descriptor joined with the core count, truncated to ``max_len``."""
        name = self.cpu_name
        if len(name) > max_len:
            name = name[: max_len - 3] + "..."
        return f"{name} ({self.cpu_cores} cores)"
