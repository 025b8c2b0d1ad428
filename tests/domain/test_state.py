"""Tests for QueryState."""

from __future__ import annotations

from folioctl.domain.state import QueryState
from folioctl.domain.types import SortKey


class TestDefaults:
    def test_default_state(self) -> None:
        s = QueryState()
        assert s.selected_techs == set()
        assert s.sort_key is SortKey.COMMITS
        assert s.search_query == ""
        assert s.is_default
        assert not s.has_filters

    def test_instances_do_not_share_selection(self) -> None:
        a, b = QueryState(), QueryState()
        a.selected_techs.add("java")
        assert b.selected_techs == set()


class TestBuild:
    def test_build_from_loose_inputs(self) -> None:
        s = QueryState.build(techs=["java", "", "kotlin"], sort="Recent", search="sso")
        assert s.selected_techs == {"java", "kotlin"}
        assert s.sort_key is SortKey.RECENT
        assert s.search_query == "sso"

    def test_build_unknown_sort(self) -> None:
        assert QueryState.build(sort="bogus").sort_key is SortKey.COMMITS


class TestFilters:
    def test_whitespace_search_is_not_a_filter(self) -> None:
        assert not QueryState(search_query="   ").has_filters

    def test_sort_alone_is_not_a_filter(self) -> None:
        s = QueryState(sort_key=SortKey.ALPHA)
        assert not s.has_filters
        assert not s.is_default

    def test_normalized_query(self) -> None:
        assert QueryState(search_query="  KeyCloak ").normalized_query == "keycloak"


class TestMutation:
    def test_toggle_twice_restores(self) -> None:
        s = QueryState()
        assert s.toggle_tech("java") is True
        assert s.selected_techs == {"java"}
        assert s.toggle_tech("java") is False
        assert s.selected_techs == set()

    def test_clear_returns_to_default(self) -> None:
        s = QueryState({"java", "kotlin"}, SortKey.ALPHA, "billing")
        s.clear()
        assert s == QueryState()
        assert s.is_default

    def test_canonical_trims_search(self) -> None:
        s = QueryState({"java"}, SortKey.RECENT, "  sso ")
        c = s.canonical()
        assert c.search_query == "sso"
        assert c.selected_techs == {"java"}
        assert c.selected_techs is not s.selected_techs

    def test_to_dict(self) -> None:
        s = QueryState({"kotlin", "java"}, SortKey.ALPHA, " q ")
        assert s.to_dict() == {"techs": ["java", "kotlin"], "sort": "alpha", "search": "q"}
