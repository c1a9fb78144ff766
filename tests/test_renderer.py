import subprocess

from sparkgraph.core import renderer as renderer_mod
from sparkgraph.core.renderer import LevelRenderer, format_number, render_window


def value_of(args):
    return args[args.index("-c") + 1]


def test_format_number():
    assert format_number(0.0) == "0"
    assert format_number(100.0) == "100"
    assert format_number(2.5) == "2.5"


def test_build_args():
    r = LevelRenderer(["level"], 0.0, 100.0, "vbars_8")
    assert r.build_args("42") == [
        "level", "-n", "-m", "0", "-x", "100", "-p", "-c", "42", "-t", "vbars_8",
    ]


def test_build_args_keeps_renderer_prefix():
    r = LevelRenderer(["env", "level"], -5.0, 5.0, "blocks")
    assert r.build_args("1")[:2] == ["env", "level"]
    assert r.build_args("1")[-2:] == ["-t", "blocks"]


def test_call_runs_once_per_value(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(renderer_mod.subprocess, "run", fake_run)
    r = LevelRenderer(["level"], 0.0, 10.0, "vbars_8")
    assert render_window(["1", "2", "3"], r) == 3
    assert [value_of(c) for c in calls] == ["1", "2", "3"]


def test_failures_do_not_stop_later_samples(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(value_of(args))
        if value_of(args) == "bad":
            return subprocess.CompletedProcess(args, 2)
        if value_of(args) == "gone":
            raise FileNotFoundError("level")
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(renderer_mod.subprocess, "run", fake_run)
    r = LevelRenderer(["level"], 0.0, 10.0, "vbars_8")
    assert render_window(["1", "bad", "gone", "4"], r) == 2
    assert calls == ["1", "bad", "gone", "4"]
