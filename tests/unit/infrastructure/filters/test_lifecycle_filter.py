"""Tests for infrastructure/filters/lifecycle.py."""

import pytest

from patchscan.infrastructure.filters.lifecycle import should_exclude_handler, should_exclude_target


class TestShouldExcludeTarget:
    """Tests for should_exclude_target."""

    def test_lifecycle_name_excluded(self) -> None:
        assert should_exclude_target("OnGameStart", filter_enabled=True) is True

    def test_other_name_kept(self) -> None:
        assert should_exclude_target("GetDamage", filter_enabled=True) is False

    def test_filter_disabled_never_excludes(self) -> None:
        assert should_exclude_target("OnGameStart", filter_enabled=False) is False

    @pytest.mark.parametrize("name", ["ongamestart", "OnGameStart2", "MyOnGameStart", ""])
    def test_exact_match_only(self, name: str) -> None:
        """No case folding, no substrings."""
        assert should_exclude_target(name, filter_enabled=True) is False

    def test_custom_names(self) -> None:
        names = frozenset({"Tick"})

        assert should_exclude_target("Tick", True, names) is True
        assert should_exclude_target("OnGameStart", True, names) is False


class TestShouldExcludeHandler:
    """Tests for should_exclude_handler."""

    def test_postfix_named_handler_excluded(self) -> None:
        assert should_exclude_handler("OnSubModuleLoadPostfix", filter_enabled=True) is True

    def test_regular_handler_kept(self) -> None:
        assert should_exclude_handler("Prefix", filter_enabled=True) is False

    def test_filter_disabled_never_excludes(self) -> None:
        assert should_exclude_handler("OnSubModuleLoadPostfix", filter_enabled=False) is False
