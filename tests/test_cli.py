from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from p9k.cli import build_parser, main


def test_parser_accepts_short_aliases():
    args = build_parser().parse_args(["demo", "-c", "-f", "-i", "-m", "-p", "-r", "-s", "-t"])
    assert args.input == "demo"
    assert all(
        getattr(args, name)
        for name in ("constant", "function", "interface", "module", "package", "repository", "script", "type")
    )


def test_cli_creates_files_in_relative_directory(tmp_path: Path):
    exit_code = main(["my-tool", "--package", "--script", "--function"], cwd=tmp_path)
    assert exit_code == 0

    target = tmp_path / "my-tool"
    manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
    assert manifest["bin"] == {"my-tool": "main.ts"}
    assert "myTool();" in (target / "main.ts").read_text(encoding="utf-8")
    assert (target / "my-tool.function.ts").exists()


def test_cli_defaults_to_current_directory(tmp_path: Path):
    target = tmp_path / "widget"
    target.mkdir()
    assert main(["-r"], cwd=target) == 0
    assert (target / ".gitignore").exists()


def test_cli_prints_help_without_arguments(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main([], cwd=tmp_path) == 0
    output = capsys.readouterr().out
    assert "usage: p9k" in output
    assert "--repository" in output
    assert list(tmp_path.iterdir()) == []


def test_cli_does_not_print_help_with_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    main(["-m"], cwd=tmp_path)
    assert "usage" not in capsys.readouterr().out
    assert (tmp_path / "index.ts").read_text(encoding="utf-8") == ""


def test_cli_joins_absolute_input_onto_cwd(tmp_path: Path):
    assert main(["/foo-bar", "-c"], cwd=tmp_path) == 0
    assert (tmp_path / "foo-bar" / "foo-bar.constant.ts").exists()


def test_cli_root_input_targets_cwd(tmp_path: Path):
    target = tmp_path / "widget"
    target.mkdir()
    assert main(["/", "-r"], cwd=target) == 0
    assert (target / ".gitignore").exists()


def test_cli_rejects_empty_directory_name():
    with pytest.raises(SystemExit) as excinfo:
        main(["-c"], cwd="/")
    assert excinfo.value.code == 2


@pytest.fixture()
def restore_package_logger():
    logger = logging.getLogger("p9k")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_cli_verbose_logs_derived_names_and_writes(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, restore_package_logger
):
    assert main(["foo-bar", "-c", "--verbose"], cwd=tmp_path) == 0
    messages = [record.getMessage() for record in caplog.records if record.levelno == logging.DEBUG]
    assert any(message.startswith("derived names for 'foo-bar'") for message in messages)
    assert any(message.startswith("wrote ") and message.endswith("foo-bar.constant.ts") for message in messages)
