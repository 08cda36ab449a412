from __future__ import annotations

import runpy
from pathlib import Path

import panefetch_app.__main__ as app_main
from panefetch_app import cli


def _capture(monkeypatch) -> list[list[str]]:
    calls: list[list[str]] = []
    monkeypatch.setattr(app_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)
    return calls


def test_main_defaults_to_render(monkeypatch) -> None:
    calls = _capture(monkeypatch)

    assert app_main.main([]) == 0
    assert app_main.main(["-n", "-o", "2"]) == 0
    assert calls == [["render"], ["render", "-n", "-o", "2"]]


def test_global_options_in_any_position(monkeypatch) -> None:
    calls = _capture(monkeypatch)

    app_main.main(["--debug", "-C", "cfg.toml", "-g"])
    app_main.main(["-n", "-C", "cfg.toml"])
    app_main.main(["--config=cfg.toml"])
    assert calls == [
        ["render", "--debug", "-C", "cfg.toml", "-g"],
        ["render", "-n", "-C", "cfg.toml"],
        ["render", "--config=cfg.toml"],
    ]


def test_implicit_render_parses_trailing_config(monkeypatch) -> None:
    seen = []
    monkeypatch.setattr(app_main, "_cli_main", lambda argv=None: seen.append(cli.build_parser().parse_args(argv)) or 0)

    assert app_main.main(["-n", "-C", "cfg.toml", "--debug"]) == 0
    assert app_main.main(["--config=other.toml"]) == 0
    assert (seen[0].command, seen[0].no_logo, seen[0].config, seen[0].debug) == ("render", True, "cfg.toml", True)
    assert (seen[1].config, seen[1].debug) == ("other.toml", False)


def test_main_passes_through_args(monkeypatch) -> None:
    calls = _capture(monkeypatch)

    assert app_main.main(["gen-config", "--force"]) == 0
    assert app_main.main(["--version"]) == 0
    assert calls == [["gen-config", "--force"], ["--version"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = Path(__file__).resolve().parents[1] / "apps" / "cli" / "panefetch_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result
