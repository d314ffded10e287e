"""Unit tests for the CLI main module."""

from unittest.mock import patch

import pytest

from project_tree.cli.main import main


def run_cli(args):
    """Run the CLI and return its exit code (0 when it returns normally)."""
    try:
        main(args)
    except SystemExit as e:
        return e.code
    return 0


def test_main_writes_outline(test_dir, output_file, capsys):
    code = run_cli(["--path", str(test_dir), "--output", str(output_file), "--ignore", "cache"])

    assert code == 0
    assert output_file.read_text(encoding="utf-8").splitlines() == [
        "test-dir/",
        "├── src/",
        "│   └── app.js",
        "├── package.json",
        "└── README.md",
    ]
    assert f"Project structure has been written to {output_file}" in capsys.readouterr().out


def test_main_extension_options(test_dir, output_file):
    code = run_cli(["--path", str(test_dir), "--output", str(output_file), "--only-ext", ".JS,.md"])

    assert code == 0
    content = output_file.read_text(encoding="utf-8")
    assert "app.js" in content
    assert "README.md" in content
    assert "package.json" not in content


def test_main_dirs_only(test_dir, output_file):
    assert run_cli(["--path", str(test_dir), "--output", str(output_file), "--dirs-only"]) == 0
    assert output_file.read_text(encoding="utf-8") == "test-dir/\n├── cache/\n└── src/"


def test_main_missing_directory(tmp_path, output_file, capsys):
    code = run_cli(["--path", str(tmp_path / "nonexistent"), "--output", str(output_file)])

    assert code == 1
    assert "Error: Directory does not exist" in capsys.readouterr().err
    assert not output_file.exists()


def test_main_invalid_ignore_directory(test_dir, output_file, capsys):
    code = run_cli(["--path", str(test_dir), "--output", str(output_file), "--ignore", "invalid/path"])

    assert code == 1
    err = capsys.readouterr().err
    assert "Error: Invalid ignore directories" in err
    assert "invalid/path" in err


def test_main_invalid_extensions(test_dir, output_file, capsys):
    code = run_cli(["--path", str(test_dir), "--output", str(output_file), "--ignore-ext", "js"])

    assert code == 1
    assert "Error: Invalid ignore extensions" in capsys.readouterr().err


def test_main_missing_output_directory(test_dir, tmp_path, capsys):
    code = run_cli(["--path", str(test_dir), "--output", str(tmp_path / "missing" / "out.md")])

    assert code == 1
    assert "Error: Output directory does not exist" in capsys.readouterr().err


def test_main_keyboard_interrupt(test_dir, output_file):
    with patch("project_tree.cli.main.generate_project_tree", side_effect=KeyboardInterrupt):
        assert run_cli(["--path", str(test_dir), "--output", str(output_file)]) == 130


def test_main_defaults_to_current_directory(test_dir, monkeypatch):
    monkeypatch.chdir(test_dir)
    assert run_cli([]) == 0
    content = (test_dir / "project_structure.md").read_text(encoding="utf-8")
    assert content.startswith("test-dir/\n")


def test_main_argument_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["--dirs-only=yes"])
    assert exc_info.value.code == 2
