"""Tests for environment configuration."""

from gtree.config import BASE_PATH_ENV_VAR, get_base_path


def test_env_var_name():
    assert BASE_PATH_ENV_VAR == "GTREE_BASE_PATH"


def test_get_base_path_unset():
    assert get_base_path({}) is None


def test_get_base_path_empty():
    assert get_base_path({BASE_PATH_ENV_VAR: ""}) is None


def test_get_base_path_set():
    assert get_base_path({BASE_PATH_ENV_VAR: "/workspace"}) == "/workspace"


def test_get_base_path_reads_os_environ(monkeypatch):
    monkeypatch.setenv(BASE_PATH_ENV_VAR, "/from/env")
    assert get_base_path() == "/from/env"
