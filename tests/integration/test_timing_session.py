"""
Integration tests exercising SplitTimer with the real monotonic clock.
"""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from pathlib import Path

import pytest

from split_timer import SplitTimer, config

SPLIT_LINE = re.compile(r"^TAG, methodA:       (\d+) ms, (.*)$")
END_LINE = re.compile(r"^TAG, methodA: end, (\d+) ms$")


@pytest.fixture(autouse=True)
def _enabled(monkeypatch):
    monkeypatch.delenv(config.ENV_DISABLE, raising=False)
    config.set_gating_policy(None)
    yield
    config.set_gating_policy(None)


def test_real_clock_session():
    lines: list[str] = []
    timings = SplitTimer("TAG", "methodA", sink=lines.append)
    for name, pause in (("work A", 0.009), ("work B", 0.001), ("work C", 0.006)):
        time.sleep(pause)
        timings.add_split(name)
    timings.dump_report()

    assert lines[0] == "TAG, methodA: begin"
    deltas = []
    for line, name in zip(lines[1:4], ("work A", "work B", "work C")):
        match = SPLIT_LINE.match(line)
        assert match, line
        assert match.group(2) == name
        deltas.append(int(match.group(1)))

    end = END_LINE.match(lines[4])
    assert end, lines[4]
    assert int(end.group(1)) == sum(deltas)
    assert int(end.group(1)) >= 15
    assert len(lines) == 5


def test_environment_disables_new_sessions(monkeypatch):
    lines: list[str] = []
    monkeypatch.setenv(config.ENV_DISABLE, "1")
    timings = SplitTimer("TAG", "methodA", sink=lines.append)
    timings.add_split("work")
    timings.dump_report()
    assert lines == []

    monkeypatch.delenv(config.ENV_DISABLE)
    timings.reset()
    timings.add_split("work")
    timings.dump_report()
    assert lines[0] == "TAG, methodA: begin"
    assert len(lines) == 3


def test_default_sink_prints_without_logging_setup():
    src_dir = Path(__file__).resolve().parents[2] / "src"
    env = dict(os.environ)
    env.pop(config.ENV_DISABLE, None)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src_dir), env.get("PYTHONPATH")]))
    script = (
        "from split_timer import SplitTimer\n"
        "timings = SplitTimer('TAG', 'methodA')\n"
        "timings.add_split('work A')\n"
        "timings.dump_report()\n"
    )
    completed = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, env=env, check=True
    )

    lines = completed.stdout.splitlines()
    assert lines[0] == "TAG, methodA: begin"
    assert SPLIT_LINE.match(lines[1]).group(2) == "work A"
    assert END_LINE.match(lines[2])
