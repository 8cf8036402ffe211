from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from suitegen.cli import _copyright_path, _script_filename, build_parser, main


def test_script_filename_validation():
    assert _script_filename(" invoice.js ") == "invoice.js"

    for value in ["invoice", "invoice.ts", "  "]:
        with pytest.raises(argparse.ArgumentTypeError):
            _script_filename(value)


def test_copyright_path_requires_txt():
    assert _copyright_path("LICENSE.txt") == Path("LICENSE.txt")
    with pytest.raises(argparse.ArgumentTypeError):
        _copyright_path("LICENSE.md")


def test_parser_accepts_option_aliases():
    parser = build_parser()
    long_form = parser.parse_args(
        ["--filename", "a.js", "--scripttype", "Client", "--apiversion", "2.0", "--modules", "record"]
    )
    short_form = parser.parse_args(["-f", "a.js", "-t", "Client", "-v", "2.0", "-m", "record"])

    for args in (long_form, short_form):
        assert args.script_type == "Client"
        assert args.api_version == "2.0"
        assert args.modules == ["record"]


def test_parser_collects_repeated_modules():
    args = build_parser().parse_args(["-f", "a.js", "-m", "record", "search", "-m", "log"])
    assert args.modules == ["record", "search", "log"]


def test_cli_creates_script(tmp_path: Path):
    license_path = tmp_path / "license.txt"
    license_path.write_text("Copyright (c) Example\nAll Rights Reserved.", encoding="utf-8")

    exit_code = main(
        [
            "-f",
            "sync.js",
            "-c",
            str(license_path),
            "-s",
            "mApReDuCe",
            "-m",
            "record",
            "search",
            "-d",
            str(tmp_path),
        ]
    )

    assert exit_code == 0
    assert (tmp_path / "sync.js").read_text(encoding="utf-8") == (
        "/*\n"
        "Copyright (c) Example\n"
        "All Rights Reserved.\n"
        "*/\n"
        "\n"
        "/**\n"
        " * @NScriptType MapReduceScript\n"
        " * @NApiVersion 2.1\n"
        " */\n"
        "\n"
        "define([\n"
        "  'N/record',\n"
        "  'N/search',\n"
        "], (record, search) => {\n"
        "\n"
        "});\n"
    )


def test_cli_stdout(capsys: pytest.CaptureFixture[str], tmp_path: Path):
    exit_code = main(["-f", "basic.js", "--stdout", "-d", str(tmp_path)])
    assert exit_code == 0
    assert capsys.readouterr().out == "/**\n * @NApiVersion 2.1\n */\n\ndefine([], () => {\n\n});\n"
    assert not (tmp_path / "basic.js").exists()


def test_cli_unknown_module_writes_nothing(capsys: pytest.CaptureFixture[str], tmp_path: Path):
    exit_code = main(["-f", "basic.js", "-m", "record", "bogus", "-d", str(tmp_path)])
    assert exit_code == 1
    assert "unknown module 'bogus'" in capsys.readouterr().err
    assert not (tmp_path / "basic.js").exists()


def test_cli_unknown_version(capsys: pytest.CaptureFixture[str], tmp_path: Path):
    exit_code = main(["-f", "basic.js", "-v", "3.0", "-d", str(tmp_path)])
    assert exit_code == 1
    assert "'3.0'" in capsys.readouterr().err


def test_cli_legacy_version_opt_in(tmp_path: Path):
    assert main(["-f", "old.js", "-v", "2", "-d", str(tmp_path)]) == 1
    assert main(["-f", "old.js", "-v", "2", "--legacy-api", "-d", str(tmp_path)]) == 0
    assert " * @NApiVersion 2\n" in (tmp_path / "old.js").read_text(encoding="utf-8")


def test_cli_refuses_overwrite_without_force(tmp_path: Path):
    assert main(["-f", "basic.js", "-d", str(tmp_path)]) == 0
    assert main(["-f", "basic.js", "-d", str(tmp_path)]) == 1
    assert main(["-f", "basic.js", "-d", str(tmp_path), "--force"]) == 0


def test_cli_missing_copyright_file(tmp_path: Path):
    exit_code = main(["-f", "basic.js", "-c", str(tmp_path / "absent.txt"), "-d", str(tmp_path)])
    assert exit_code == 1
    assert not (tmp_path / "basic.js").exists()


def test_cli_requires_filename():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_cli_rejects_bad_extension():
    with pytest.raises(SystemExit) as excinfo:
        main(["-f", "basic.ts"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "kind, present, absent",
    [
        ("types", "MapReduce", "mapreduce"),
        ("versions", "2.1", "1"),
        ("modules", "N/ui/serverWidget", "serverwidget"),
    ],
)
def test_cli_list(capsys: pytest.CaptureFixture[str], kind, present, absent):
    assert main(["--list", kind]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert present in lines
    assert absent not in lines


def test_cli_copyright_file_not_utf8(capsys: pytest.CaptureFixture[str], tmp_path: Path):
    license_path = tmp_path / "license.txt"
    license_path.write_bytes(b"Copyright \xff\xfe Example")

    exit_code = main(["-f", "basic.js", "-c", str(license_path), "-d", str(tmp_path)])

    assert exit_code == 1
    assert "not valid UTF-8" in capsys.readouterr().err
    assert not (tmp_path / "basic.js").exists()


def test_cli_target_is_directory(capsys: pytest.CaptureFixture[str], tmp_path: Path):
    (tmp_path / "basic.js").mkdir()

    exit_code = main(["-f", "basic.js", "-d", str(tmp_path), "--force"])

    assert exit_code == 1
    assert "is a directory" in capsys.readouterr().err
    assert (tmp_path / "basic.js").is_dir()


def test_cli_success_prints_single_message(capsys: pytest.CaptureFixture[str], tmp_path: Path):
    assert main(["-f", "basic.js", "-d", str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == f"Script created at {tmp_path / 'basic.js'}\n"
    assert "wrote" not in captured.err
