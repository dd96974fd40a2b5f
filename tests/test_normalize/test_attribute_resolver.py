"""Tests for canonical attribute resolution from candidate paths."""

from __future__ import annotations

import copy

import pytest

from bobcli.normalize.record import RawRecord
from bobcli.normalize.resolver import (
    UNKNOWN_NAME,
    person_department,
    person_display_name,
    person_email,
    person_id,
    person_is_active,
    person_site,
    person_title,
    timeoff_balances,
    timeoff_date_range,
    timeoff_display_name,
    timeoff_email,
    timeoff_type,
)


# ---------------------------------------------------------------------------
# Person
# ---------------------------------------------------------------------------


class TestPersonDisplayName:
    def test_display_name_first(self) -> None:
        person = {"displayName": "Ava T", "fullName": "Ava Test", "name": "ava"}
        assert person_display_name(person) == "Ava T"

    def test_falls_back_to_full_name(self) -> None:
        assert person_display_name({"displayName": "", "fullName": "Ava Test"}) == "Ava Test"

    def test_falls_back_to_name(self) -> None:
        assert person_display_name({"displayName": 42, "name": "ava"}) == "ava"

    @pytest.mark.parametrize(
        "person",
        [
            {},
            {"displayName": "", "fullName": None, "name": 5},
            {"id": "1", "email": "x@example.com"},
        ],
    )
    def test_unknown_when_no_candidate(self, person: dict) -> None:
        assert person_display_name(person) == UNKNOWN_NAME == "Unknown"

    def test_accepts_raw_record(self) -> None:
        assert person_display_name(RawRecord({"name": "Ava"})) == "Ava"

    def test_non_dict_payload(self) -> None:
        assert person_display_name(None) == "Unknown"


class TestPersonWorkFields:
    def test_email_top_level_wins(self) -> None:
        person = {"email": "a@example.com", "work": {"email": "w@example.com"}}
        assert person_email(person) == "a@example.com"

    def test_email_from_work(self) -> None:
        assert person_email({"work": {"email": "w@example.com"}}) == "w@example.com"

    def test_email_default(self) -> None:
        assert person_email({}) == ""

    def test_department_nested_wins(self) -> None:
        person = {"department": "Flat", "work": {"department": "Nested"}}
        assert person_department(person) == "Nested"

    def test_department_flat_fallback(self) -> None:
        assert person_department({"department": "Flat", "work": "n/a"}) == "Flat"

    def test_title_and_site(self) -> None:
        person = {"title": "Flat", "work": {"title": "Eng", "site": "Lisbon"}}
        assert person_title(person) == "Eng"
        assert person_site(person) == "Lisbon"
        assert person_site({"site": "Porto"}) == "Porto"

    def test_id_only_strings(self) -> None:
        assert person_id({"id": "123"}) == "123"
        assert person_id({"id": 123}) == ""

    def test_resolution_does_not_mutate(self) -> None:
        person = {"work": {"department": "Ops"}, "fullName": "Ava"}
        snapshot = copy.deepcopy(person)
        person_display_name(person)
        person_department(person)
        person_is_active(person)
        assert person == snapshot


class TestPersonIsActive:
    def test_boolean_active(self) -> None:
        assert person_is_active({"active": False, "status": "active"}) is False

    def test_boolean_is_active(self) -> None:
        assert person_is_active({"isActive": True}) is True

    @pytest.mark.parametrize(
        ("status", "expected"),
        [("Active", True), ("INACTIVE", False), ("terminated", False)],
    )
    def test_status_string(self, status: str, expected: bool) -> None:
        assert person_is_active({"status": status}) is expected

    def test_employment_status(self) -> None:
        assert person_is_active({"employmentStatus": "Terminated"}) is False

    def test_unrecognised_status_falls_through(self) -> None:
        person = {"status": "pending", "employmentStatus": "active"}
        assert person_is_active(person) is True

    def test_unknown(self) -> None:
        assert person_is_active({"status": "on leave"}) is None
        assert person_is_active({}) is None

    def test_non_boolean_flag_ignored(self) -> None:
        assert person_is_active({"active": "yes"}) is None


# ---------------------------------------------------------------------------
# Time off
# ---------------------------------------------------------------------------


class TestTimeoffNames:
    def test_employee_display_name_first(self) -> None:
        entry = {"employeeDisplayName": "Ava", "displayName": "Other"}
        assert timeoff_display_name(entry) == "Ava"

    def test_nested_employee(self) -> None:
        assert timeoff_display_name({"employee": {"name": "Bo"}}) == "Bo"

    def test_order_flat_before_nested(self) -> None:
        entry = {"employeeName": "Flat", "employee": {"displayName": "Nested"}}
        assert timeoff_display_name(entry) == "Flat"

    def test_unknown(self) -> None:
        assert timeoff_display_name({"employee": {}}) == "Unknown"

    def test_email(self) -> None:
        assert timeoff_email({"employeeEmail": "e@example.com"}) == "e@example.com"
        assert timeoff_email({"employee": {"email": "n@example.com"}}) == "n@example.com"
        assert timeoff_email({}) == ""


class TestTimeoffType:
    def test_policy_type_display_name_first(self) -> None:
        entry = {"policyTypeDisplayName": "Holiday", "type": "hol"}
        assert timeoff_type(entry) == "Holiday"

    def test_policy_name(self) -> None:
        assert timeoff_type({"policy": {"name": "Sick"}}) == "Sick"

    def test_reason(self) -> None:
        assert timeoff_type({"type": "", "reason": "Doctor"}) == "Doctor"

    def test_default(self) -> None:
        assert timeoff_type({}) == ""


class TestTimeoffDateRange:
    def test_start_and_end(self) -> None:
        entry = {"startDate": "2024-01-01", "endDate": "2024-01-05"}
        assert timeoff_date_range(entry) == "2024-01-01 - 2024-01-05"

    def test_single_date_not_duplicated(self) -> None:
        assert timeoff_date_range({"date": "2024-01-01"}) == "2024-01-01"

    def test_equal_start_and_end(self) -> None:
        entry = {"startDate": "2024-01-01", "endDate": "2024-01-01"}
        assert timeoff_date_range(entry) == "2024-01-01"

    def test_empty(self) -> None:
        assert timeoff_date_range({}) == ""

    def test_only_start(self) -> None:
        assert timeoff_date_range({"from": "2024-02-01"}) == "2024-02-01"

    def test_only_end(self) -> None:
        assert timeoff_date_range({"to": "2024-02-03"}) == "2024-02-03"

    def test_nested_objects(self) -> None:
        entry = {"start": {"date": "2024-03-01"}, "end": {"date": "2024-03-04"}}
        assert timeoff_date_range(entry) == "2024-03-01 - 2024-03-04"

    def test_time_block(self) -> None:
        entry = {"time": {"startDate": "2024-04-01", "endDate": "2024-04-02"}}
        assert timeoff_date_range(entry) == "2024-04-01 - 2024-04-02"

    def test_independent_resolution(self) -> None:
        entry = {"start": "2024-05-01", "end": {"date": "2024-05-03"}}
        assert timeoff_date_range(entry) == "2024-05-01 - 2024-05-03"


class TestTimeoffBalances:
    def test_labels_and_amounts(self) -> None:
        entry = {
            "balances": [
                {"policyType": "Holiday", "balance": 12.5},
                {"type": "Sick", "days": 3},
                {"name": "Parental", "hours": "40"},
                {"amount": 2},
            ]
        }
        assert timeoff_balances(entry) == [
            ("Holiday", 12.5),
            ("Sick", 3),
            ("Parental", "40"),
            ("Balance", 2),
        ]

    def test_skips_entries_without_amount(self) -> None:
        entry = {"balances": [{"policyType": "Holiday", "balance": 0}, "junk", None]}
        assert timeoff_balances(entry) == []

    def test_zero_falls_through_to_next_amount(self) -> None:
        entry = {"balances": [{"policyType": "Holiday", "balance": 0, "days": 4}]}
        assert timeoff_balances(entry) == [("Holiday", 4)]

    def test_no_balances(self) -> None:
        assert timeoff_balances({}) == []
        assert timeoff_balances({"balances": {"not": "a list"}}) == []
