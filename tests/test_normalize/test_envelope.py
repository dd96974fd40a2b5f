"""Tests for response-envelope unwrapping."""

from __future__ import annotations

import pytest

from bobcli.normalize.envelope import (
    PEOPLE_LIST_KEYS,
    extract_item,
    extract_list,
    extract_people,
    extract_person,
    extract_timeoff,
)


class TestExtractList:
    def test_bare_list_returned_as_is(self) -> None:
        payload = [{"id": "1"}, {"id": "2"}]
        assert extract_list(payload, PEOPLE_LIST_KEYS) is payload

    def test_first_matching_key_wins(self) -> None:
        payload = {"people": [{"id": "p"}], "employees": [{"id": "e"}]}
        assert extract_list(payload, PEOPLE_LIST_KEYS) == [{"id": "e"}]

    def test_non_list_key_is_skipped(self) -> None:
        payload = {"employees": {"count": 2}, "results": [{"id": "r"}]}
        assert extract_list(payload, PEOPLE_LIST_KEYS) == [{"id": "r"}]

    @pytest.mark.parametrize("payload", [None, "text", 42, {}, {"data": [1, 2]}])
    def test_unrecognised_payload_is_empty(self, payload: object) -> None:
        assert extract_list(payload, PEOPLE_LIST_KEYS) == []


class TestExtractPeople:
    @pytest.mark.parametrize("key", ["employees", "people", "results", "items"])
    def test_each_wrapper_key(self, key: str) -> None:
        assert extract_people({key: [{"id": "1"}]}) == [{"id": "1"}]

    def test_timeoff_keys_not_used_for_people(self) -> None:
        assert extract_people({"outs": [{"id": "1"}]}) == []


class TestExtractTimeoff:
    @pytest.mark.parametrize(
        "key", ["results", "items", "timeOff", "timeoff", "outs", "people", "employees"]
    )
    def test_each_wrapper_key(self, key: str) -> None:
        assert extract_timeoff({key: [{"id": "1"}]}) == [{"id": "1"}]

    def test_results_before_outs(self) -> None:
        payload = {"outs": [{"id": "o"}], "results": [{"id": "r"}]}
        assert extract_timeoff(payload) == [{"id": "r"}]

    def test_bare_list(self) -> None:
        assert extract_timeoff([{"id": "1"}]) == [{"id": "1"}]


class TestExtractItem:
    def test_employee_wrapper(self) -> None:
        assert extract_person({"employee": {"id": "1"}}) == {"id": "1"}

    def test_person_wrapper(self) -> None:
        assert extract_person({"person": {"id": "2"}}) == {"id": "2"}

    def test_employee_before_person(self) -> None:
        payload = {"person": {"id": "p"}, "employee": {"id": "e"}}
        assert extract_person(payload) == {"id": "e"}

    def test_unwrapped_record(self) -> None:
        payload = {"id": "3", "displayName": "Ava"}
        assert extract_person(payload) is payload

    def test_non_dict_wrapper_value_ignored(self) -> None:
        payload = {"employee": "3"}
        assert extract_item(payload) == {"employee": "3"}

    @pytest.mark.parametrize("payload", [None, {}, "", []])
    def test_empty_payload(self, payload: object) -> None:
        assert extract_person(payload) == {}
