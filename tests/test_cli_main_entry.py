from __future__ import annotations

import io
import runpy
from pathlib import Path

import ferrisfetch_app.__main__ as cli_entry
from ferrisfetch_app import cli
from ferrisfetch_telemetry import Collector, FactSource, SystemInfo

GIB = 1024**3


class _FixedCollector:
    class source:
        name = "fixed"

    def collect(self) -> SystemInfo:
        return SystemInfo(
            os_name="Arch Linux",
            kernel="6.7.4-arch1-1",
            uptime_seconds=19920,
            shell="fish",
            cpu_name="Apple M2",
            cpu_cores=8,
            mem_used_bytes=int(12.3 * GIB),
            mem_total_bytes=32 * GIB,
            hostname="crabby",
            username="ferris",
        )


def _denied(*_args):
    raise PermissionError("denied")


class _BrokenSource(FactSource):
    name = "broken"
    hostname = username = os_name = os_version = kernel = _denied
    uptime_seconds = shell = cpu_name = cpu_cores = memory = _denied


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    rc = cli.main(argv, stream=out)
    return rc, out.getvalue()


def test_renders_and_exits_zero(monkeypatch) -> None:
    monkeypatch.setattr(cli, "Collector", _FixedCollector)
    rc, text = _run(["--no-color"])
    assert rc == 0
    assert text.endswith("\n") and not text.endswith("\n\n")
    assert "\x1b" not in text
    assert "Memory: 12.3 GB / 32.0 GB [████░░░░░░] 38%" in text
    assert "Uptime: 5h 32m" in text


def test_unknown_theme_matches_default(monkeypatch) -> None:
    monkeypatch.setattr(cli, "Collector", _FixedCollector)
    assert _run(["--theme", "neon"]) == _run(["--theme", "rust"])
    assert _run(["--theme", "neon"]) == _run([])


def test_failing_facts_still_render(monkeypatch) -> None:
    monkeypatch.setattr(cli, "Collector", lambda: Collector(_BrokenSource()))
    rc, text = _run(["--no-color", "--no-art"])
    assert rc == 0
    lines = text.rstrip("\n").split("\n")
    assert lines[0] == "Unknown@Unknown"
    assert lines[-1] == "Memory: 0.0 GB / 0.0 GB [░░░░░░░░░░] 0%"


def test_list_themes(monkeypatch) -> None:
    rc, text = _run(["--list-themes"])
    assert rc == 0
    assert text.split() == ["forest", "mono", "ocean", "rust", "sunset"]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_entry, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = cli_entry.main(["--theme", "ocean", "--minimal"])
    assert rc == 0
    assert calls == [["--theme", "ocean", "--minimal"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = Path(__file__).resolve().parents[1] / "apps" / "cli" / "ferrisfetch_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
