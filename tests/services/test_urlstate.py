"""Tests for the URL state contract."""

from __future__ import annotations

import pytest

from folioctl.controllers.location import InMemoryHistory, Location
from folioctl.data.catalog import Catalog
from folioctl.domain.state import QueryState
from folioctl.domain.types import SortKey
from folioctl.services.query import query
from folioctl.services.urlstate import (
    build_url,
    deserialize,
    extract_query,
    record_id_from_path,
    serialize,
    split_location,
    sync_location,
)


class TestSerialize:
    def test_default_state_is_empty(self) -> None:
        assert serialize(QueryState()) == ""

    def test_full_state(self) -> None:
        state = QueryState({"kotlin", "java"}, SortKey.ALPHA, " sso ")
        assert serialize(state) == "tech=java,kotlin&sort=alpha&q=sso"

    def test_default_sort_omitted(self) -> None:
        assert serialize(QueryState({"java"})) == "tech=java"

    def test_blank_search_omitted(self) -> None:
        assert serialize(QueryState(search_query="   ")) == ""

    def test_search_is_escaped(self) -> None:
        assert serialize(QueryState(search_query="a&b c")) == "q=a%26b+c"


class TestDeserialize:
    def test_empty(self) -> None:
        assert deserialize("") == QueryState()
        assert deserialize("?") == QueryState()

    def test_full(self) -> None:
        state = deserialize("?tech=java,kotlin&sort=recent&q=single%20sign")
        assert state == QueryState({"java", "kotlin"}, SortKey.RECENT, "single sign")

    def test_unknown_sort_falls_back(self) -> None:
        assert deserialize("sort=popular").sort_key is SortKey.COMMITS

    def test_filters_to_available_techs(self) -> None:
        state = deserialize("tech=java,cobol,,kotlin", ["java", "kotlin"])
        assert state.selected_techs == {"java", "kotlin"}

    def test_none_available_accepts_all(self) -> None:
        assert deserialize("tech=cobol").selected_techs == {"cobol"}

    def test_first_value_wins(self) -> None:
        assert deserialize("sort=alpha&sort=recent").sort_key is SortKey.ALPHA

    def test_unknown_keys_ignored(self) -> None:
        assert deserialize("utm_source=x") == QueryState()


class TestMalformedQueryStrings:
    @pytest.mark.parametrize(
        "query_string",
        [
            "tech=%2C%2C",
            "q=%ff",
            "&&==",
            "sort=%00",
            "tech=&sort=&q=",
            "?tech=java%00,%E2%98%83&sort=ALPHA%20",
            "%%%",
            "tech=" + "java," * 200,
        ],
    )
    def test_pipeline_never_raises(self, catalog: Catalog, query_string: str) -> None:
        state = deserialize(query_string, catalog.all_technologies())
        results = query(catalog.domains, state, technologies=catalog.technologies)
        assert len(results) <= len(catalog.domains)
        assert state.sort_key in SortKey
        assert state.selected_techs <= set(catalog.all_technologies())

    def test_empty_tag_list_is_no_filter(self) -> None:
        assert deserialize("tech=%2C%2C") == QueryState()

    def test_undecodable_search_is_kept_as_text(self) -> None:
        assert deserialize("q=%ff").search_query == "\ufffd"

    def test_control_character_sort_falls_back(self) -> None:
        assert deserialize("sort=%00").sort_key is SortKey.COMMITS


class TestRoundTrip:
    @pytest.mark.parametrize(
        "state",
        [
            QueryState(),
            QueryState({"java"}),
            QueryState({"kotlin", "java"}, SortKey.RECENT),
            QueryState(set(), SortKey.ALPHA, "billing & payments"),
        ],
    )
    def test_semantic_round_trip(self, state: QueryState) -> None:
        assert deserialize(serialize(state)) == state.canonical()

    def test_reserialize_is_canonical(self) -> None:
        s = "q=sso&tech=kotlin,java"
        assert serialize(deserialize(s)) == "tech=java,kotlin&q=sso"


class TestLocation:
    def test_build_url(self) -> None:
        assert build_url("domains.html", QueryState()) == "domains.html"
        assert build_url("domains.html", QueryState({"java"})) == "domains.html?tech=java"

    def test_sync_replaces_entry(self) -> None:
        history = InMemoryHistory(Location("domains.html"))
        url = sync_location(history, "domains.html", QueryState(sort_key=SortKey.ALPHA))
        assert url == "domains.html?sort=alpha"
        assert history.entries == ["domains.html?sort=alpha"]
        assert history.replacements == 1
        assert history.location.search == "sort=alpha"

    def test_split_location(self) -> None:
        assert split_location("/a/domains.html?tech=java") == ("/a/domains.html", "tech=java")

    def test_extract_query(self) -> None:
        assert extract_query("domains.html?q=x") == "q=x"
        assert extract_query("q=x") == "q=x"


class TestRecordIdFromPath:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/site/domain/sso.html", "sso"),
            ("domain/billing", "billing"),
            ("permissions", "permissions"),
            ("/domain/api.html?x=1", "api"),
            ("/domain/workspace/", "workspace"),
        ],
    )
    def test_paths(self, path: str, expected: str) -> None:
        assert record_id_from_path(path) == expected
