"""Tests for the command-line entry point (headless only)."""

from __future__ import annotations

from main import build_config, main, parse_args


def test_headless_run_reports_status(capsys) -> None:
    code = main(["--headless", "--ticks", "5", "--count", "20", "--seed", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "[Headless] 20 boids, 5 ticks" in out
    assert "tick     5" in out


def test_invalid_override_exits_with_error(capsys) -> None:
    code = main(["--headless", "--view-range", "0.1"])
    assert code == 2
    assert "Invalid configuration" in capsys.readouterr().out


def test_no_cone_flag() -> None:
    args = parse_args(["--no-cone", "--count", "9"])
    settings = build_config(args)
    assert settings.use_view_cone is False
    assert settings.agent_count == 9


def test_cone_defaults_to_config() -> None:
    settings = build_config(parse_args([]))
    assert settings.use_view_cone is True
