"""Unit tests for the CLI main module."""

import logging

import pytest

from gtree.cli.main import main
from gtree.config import BASE_PATH_ENV_VAR


def test_main_prints_tree(project_dir, capsys):
    main([str(project_dir), "-L", "1"])
    out = capsys.readouterr().out
    assert out == "project\n├── docs\n├── src\n├── README.md\n└── setup.py\n"


def test_main_defaults_to_current_directory(project_dir, monkeypatch, capsys):
    monkeypatch.chdir(project_dir)
    main([])
    assert capsys.readouterr().out.startswith("project\n")


def test_main_report(project_dir, capsys):
    main(["-r", str(project_dir)])
    out = capsys.readouterr().out
    assert out.endswith("└── setup.py\n\n3 directories, 5 files\n")


def test_main_show_hidden(project_dir, capsys):
    main(["-a", "--noreport", str(project_dir)])
    out = capsys.readouterr().out
    assert ".env" in out
    assert "node_modules" not in out


def test_main_writes_output_file(project_dir, tmp_path, capsys):
    output = tmp_path / "tree.txt"
    main(["-o", str(output), str(project_dir)])
    assert capsys.readouterr().out == ""
    assert output.read_text(encoding="utf-8").startswith("project\n├── docs\n")


def test_main_honours_base_path(project_dir, monkeypatch, capsys):
    monkeypatch.setenv(BASE_PATH_ENV_VAR, str(project_dir))
    main(["src"])
    assert capsys.readouterr().out == "src\n├── utils\n│   └── helpers.py\n└── main.py\n"


def test_main_missing_path(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["does-not-exist"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == "Error: Path does not exist: does-not-exist\n"


def test_main_path_is_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "file.txt").touch()
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["file.txt"])
    assert excinfo.value.code == 1
    assert "Path is not a directory: file.txt" in capsys.readouterr().err


def test_main_verbose_configures_logging(project_dir, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    main(["-v", str(project_dir)])
    assert calls and calls[0]["level"] == logging.DEBUG


def test_main_keyboard_interrupt(project_dir, monkeypatch):
    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr("gtree.cli.main.FileSystemTree.get_tree_representation", interrupted)
    with pytest.raises(SystemExit) as excinfo:
        main([str(project_dir)])
    assert excinfo.value.code == 130
