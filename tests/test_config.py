"""
Tests for environment-driven configuration.
"""

import pytest

from pathsearch import config


class TestEnvHelpers:
    def test_int_default(self, monkeypatch):
        monkeypatch.delenv("PATHSEARCH_TEST_INT", raising=False)
        assert config._env_int("PATHSEARCH_TEST_INT", 3) == 3

    def test_int_blank_is_default(self, monkeypatch):
        monkeypatch.setenv("PATHSEARCH_TEST_INT", " ")
        assert config._env_int("PATHSEARCH_TEST_INT", None) is None

    def test_int_value(self, monkeypatch):
        monkeypatch.setenv("PATHSEARCH_TEST_INT", "42")
        assert config._env_int("PATHSEARCH_TEST_INT", None) == 42

    def test_int_none(self, monkeypatch):
        monkeypatch.setenv("PATHSEARCH_TEST_INT", "None")
        assert config._env_int("PATHSEARCH_TEST_INT", 7) is None

    def test_int_invalid(self, monkeypatch):
        monkeypatch.setenv("PATHSEARCH_TEST_INT", "many")
        with pytest.raises(ValueError):
            config._env_int("PATHSEARCH_TEST_INT", None)

    @pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("off", False), ("0", False)])
    def test_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("PATHSEARCH_TEST_BOOL", raw)
        assert config._env_bool("PATHSEARCH_TEST_BOOL", not expected) is expected


def test_engine_reads_config_defaults(monkeypatch):
    from pathsearch import Search
    from pathsearch.adaptors import GridAdaptor, open_grid

    monkeypatch.setattr(config, "MAX_EXPANSIONS", 1)
    search = Search((0, 0), (4, 4), GridAdaptor(open_grid(5)))
    assert search.expansions == 1
    assert search.stats.exhausted_budget
