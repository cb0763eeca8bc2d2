"""Tests for the gtree tool entry point."""

from unittest.mock import patch

from gtree.tools import TOOL_NAME, TOOL_SCHEMA, gtree_tool


def test_tool_schema():
    assert TOOL_NAME == "gtree"
    assert TOOL_SCHEMA["name"] == "gtree"
    assert set(TOOL_SCHEMA["parameters"]["properties"]) == {"path", "maxDepth", "showHidden", "args"}


def test_tool_renders_tree(project_dir):
    result = gtree_tool(path=str(project_dir), max_depth=1)
    assert result == "project\n├── docs\n├── src\n├── README.md\n└── setup.py\n"


def test_tool_defaults_to_current_directory(project_dir, monkeypatch):
    monkeypatch.chdir(project_dir)
    assert gtree_tool().startswith("project\n")


def test_tool_args_override_parameters(project_dir):
    with patch("gtree.tools.generate_tree", return_value="tree") as mock_generate:
        assert gtree_tool(path="ignored", max_depth=5, show_hidden=False, args=["-L", "2", "-a", "src"]) == "tree"
    mock_generate.assert_called_once_with("src", max_depth=2, show_hidden=True)


def test_tool_args_without_path_keep_parameter_path():
    with patch("gtree.tools.generate_tree", return_value="tree") as mock_generate:
        gtree_tool(path="project", args=["--noreport"])
    mock_generate.assert_called_once_with("project", max_depth=None, show_hidden=False)


def test_tool_reports_missing_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert gtree_tool(path="nonexistent") == "Error: Path does not exist: nonexistent"


def test_tool_reports_file_path(tmp_path, monkeypatch):
    (tmp_path / "file.txt").touch()
    monkeypatch.chdir(tmp_path)
    assert gtree_tool(args=["file.txt"]) == "Error: Path is not a directory: file.txt"


def test_tool_never_raises():
    with patch("gtree.tools.generate_tree", side_effect=RuntimeError("boom")):
        assert gtree_tool() == "Error: boom"
