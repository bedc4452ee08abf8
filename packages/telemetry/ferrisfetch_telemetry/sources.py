"""Per-platform fact sources backed by psutil and the platform module."""

from __future__ import annotations

import getpass
import os
import platform
import socket
import subprocess
import time
from pathlib import Path

import psutil


def _shell_from_env() -> str | None:
    raw = os.environ.get("SHELL") or os.environ.get("COMSPEC")
    if not raw:
        return None
    return raw.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1] or None


def _read_key_values(path: Path, sep: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8", errors="replace").splitlines():
        if sep not in line:
            continue
        key, value = line.split(sep, 1)
        out.setdefault(key.strip(), value.strip().strip('"'))
    return out


def _check_output(args: list[str]) -> str:
    return subprocess.run(args, capture_output=True, text=True, timeout=2, check=True).stdout.strip()


class FactSource:
    """Raw fact accessors; each returns None when the fact is unavailable.

    Accessors are allowed to raise. The collector guards every call, so a
    variant only needs to express where a fact lives on its platform.
    """

    name = "generic"

    def hostname(self) -> str | None:
        return socket.gethostname()

    def username(self) -> str | None:
        return getpass.getuser()

    def os_name(self) -> str | None:
        return platform.system()

    def os_version(self) -> str | None:
        return platform.release()

    def kernel(self) -> str | None:
        return platform.release()

    def uptime_seconds(self) -> int | None:
        return int(time.time() - psutil.boot_time())

    def shell(self) -> str | None:
        return _shell_from_env()

    def cpu_name(self) -> str | None:
        return platform.processor()

    def cpu_cores(self) -> int | None:
        return psutil.cpu_count(logical=True)

    def memory(self) -> tuple[int, int] | None:
        vm = psutil.virtual_memory()
        return int(vm.used), int(vm.total)


class GenericFactSource(FactSource):
    pass


class LinuxFactSource(FactSource):
    name = "linux"

    def __init__(self, os_release: Path = Path("/etc/os-release"), cpuinfo: Path = Path("/proc/cpuinfo")) -> None:
        self._os_release = os_release
        self._cpuinfo = cpuinfo

    def os_name(self) -> str | None:
        return _read_key_values(self._os_release, "=").get("NAME") or "Linux"

    def os_version(self) -> str | None:
        return _read_key_values(self._os_release, "=").get("VERSION_ID")

    def cpu_name(self) -> str | None:
        info = _read_key_values(self._cpuinfo, ":")
        # ARM kernels expose "Hardware" or "Model" instead of "model name".
        return info.get("model name") or info.get("Hardware") or info.get("Model")


class DarwinFactSource(FactSource):
    name = "darwin"

    def os_name(self) -> str | None:
        return _check_output(["sw_vers", "-productName"]) or "macOS"

    def os_version(self) -> str | None:
        return platform.mac_ver()[0] or _check_output(["sw_vers", "-productVersion"])

    def cpu_name(self) -> str | None:
        return _check_output(["sysctl", "-n", "machdep.cpu.brand_string"])


class WindowsFactSource(FactSource):
    name = "windows"

    def os_name(self) -> str | None:
        return "Windows"

    def os_version(self) -> str | None:
        version = platform.version()
        build = int(version.rsplit(".", 1)[-1]) if "." in version else 0
        # Windows 11 still reports release "10"; the build number tells them apart.
        if platform.release() == "10" and build >= 22000:
            return "11"
        return platform.release()

    def kernel(self) -> str | None:
        return platform.version()


_SOURCES: dict[str, type[FactSource]] = {
    "Linux": LinuxFactSource,
    "Darwin": DarwinFactSource,
    "Windows": WindowsFactSource,
}


def detect_fact_source(system: str | None = None) -> FactSource:
    system = system if system is not None else platform.system()
    return _SOURCES.get(system, GenericFactSource)()
