"""Collector that turns raw platform facts into a stable SystemInfo record."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .models import UNKNOWN, SystemInfo
from .sources import FactSource, detect_fact_source

T = TypeVar("T")

logger = logging.getLogger("ferrisfetch.collector")


class Collector:
    """Queries every fact independently; any failure degrades to Unknown or 0."""

    def __init__(self, source: FactSource | None = None) -> None:
        self._source = source or detect_fact_source()

    @property
    def source(self) -> FactSource:
        return self._source

    def collect(self) -> SystemInfo:
        s = self._source
        used, total = self._memory()
        return SystemInfo(
            os_name=self._text("os_name", s.os_name),
            os_version=self._text("os_version", s.os_version),
            kernel=self._text("kernel", s.kernel),
            uptime_seconds=self._count("uptime_seconds", s.uptime_seconds),
            shell=self._text("shell", s.shell),
            cpu_name=self._text("cpu_name", s.cpu_name),
            cpu_cores=self._count("cpu_cores", s.cpu_cores),
            mem_used_bytes=used,
            mem_total_bytes=total,
            hostname=self._text("hostname", s.hostname),
            username=self._text("username", s.username),
        )

    def _query(self, fact: str, fn: Callable[[], T | None]) -> T | None:
        try:
            return fn()
        except Exception as exc:
            logger.debug("fact %s unavailable on %s: %r", fact, self._source.name, exc)
            return None

    def _text(self, fact: str, fn: Callable[[], str | None]) -> str:
        value = self._query(fact, fn)
        if value is None:
            return UNKNOWN
        value = " ".join(str(value).split())
        return value or UNKNOWN

    def _count(self, fact: str, fn: Callable[[], int | None]) -> int:
        value = self._query(fact, fn)
        try:
            return max(int(value), 0) if value is not None else 0
        except (TypeError, ValueError):
            logger.debug("fact %s returned non-numeric %r", fact, value)
            return 0

    def _memory(self) -> tuple[int, int]:
        pair = self._query("memory", self._source.memory)
        try:
            used, total = (int(v) for v in pair)  # type: ignore[union-attr]
        except (TypeError, ValueError):
            return 0, 0
        if used < 0 or total <= 0:
            return 0, 0
        return min(used, total), total


def collect(source: FactSource | None = None) -> SystemInfo:
    return Collector(source).collect()
