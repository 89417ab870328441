# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import os
import pathlib
import subprocess
import sys

import pytest

from click.testing import CliRunner

from fibresolve import cli
from fibresolve.__main__ import main
from fibresolve.pretty import console


def test_default_invocation() -> None:
    result = CliRunner().invoke(main, [])
    assert result.exit_code == 0
    assert result.output == "144\n"


def test_resolve() -> None:
    result = CliRunner().invoke(main, ["resolve", "5"])
    assert result.exit_code == 0
    assert result.output == "8\n"


def test_resolve_failure_is_silent() -> None:
    result = CliRunner().invoke(main, ["resolve", "abc"])
    assert result.exit_code == 0
    assert result.output == ""


def test_resolve_failure_strict() -> None:
    result = CliRunner().invoke(main, ["resolve", "--strict", "abc"])
    assert result.exit_code == 1
    assert "144" not in result.output
    assert "not a base-10 integer" in result.output


def test_resolve_unbounded() -> None:
    result = CliRunner().invoke(main, ["--width", "unbounded", "resolve", "100"])
    assert result.exit_code == 0
    assert result.output == "573147844013817084101\n"


def test_wraparound_warns() -> None:
    with pytest.warns(cli.WraparoundWarning):
        result = CliRunner().invoke(main, ["--width", "8", "resolve", "11"])
    assert result.exit_code == 0
    assert result.output == "-112\n"


def test_width_from_environment() -> None:
    with pytest.warns(cli.WraparoundWarning):
        result = CliRunner().invoke(main, [], env={"FIBRESOLVE_WIDTH": "8"})
    assert result.output == "-112\n"


def test_invalid_width() -> None:
    result = CliRunner().invoke(main, ["--width", "7"])
    assert result.exit_code == 2


def test_trace() -> None:
    result = CliRunner().invoke(main, ["trace", "3"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split() == ["index", "current", "previous"]
    assert [line.split() for line in lines[1:]] == [
        ["0", "1", "0"],
        ["1", "1", "1"],
        ["2", "2", "1"],
        ["3", "3", "2"],
    ]


def test_trace_marks_wrapped_pairs() -> None:
    result = CliRunner().invoke(main, ["--width", "8", "trace", "11"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[-2].split() == ["10", "89", "55"]
    assert lines[-1].split() == ["11", "-112", "89", console.WRAPPED_MARKER]


def test_trace_failure() -> None:
    result = CliRunner().invoke(main, ["trace", "--", "-1"])
    assert result.exit_code == 1
    assert "index must not be negative" in result.output


def test_console_colors() -> None:
    assert console.paint("x", console.Color.RED, enabled=False) == "x"
    assert console.paint("x", None) == "x"
    assert console.paint("x", console.Color.RED) != "x"


def test_module_entry_point() -> None:
    env = dict(os.environ)
    env.pop("FIBRESOLVE_WIDTH", None)
    process = subprocess.run(
        [sys.executable, "-m", "fibresolve"],
        cwd=pathlib.Path(__file__).parent.parent,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert process.returncode == 0
    assert process.stdout == b"144" + os.linesep.encode()
    assert process.stderr == b""
