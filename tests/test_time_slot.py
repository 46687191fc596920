import pytest

from claimstatus.scenarios.time_slot import (
    TimeSlot,
    describe_time_slot,
    is_first_time_slot_earlier,
    parse_time_slot,
    same_period,
)

BAD = "not a time slot"
EARLIER = "10-12"
LATER = "1-3"


def test_parse_time_slot_with_multiple_and_single_digits() -> None:
    assert parse_time_slot("10-12") == TimeSlot(range_start=10, range_end=12)
    assert parse_time_slot("1-3") == TimeSlot(range_start=1, range_end=3)


@pytest.mark.parametrize("text", ["10–12", "10—12", " 10-12 "])
def test_parse_time_slot_accepts_dashes_and_outer_whitespace(text: str) -> None:
    assert parse_time_slot(text) == TimeSlot(range_start=10, range_end=12)


@pytest.mark.parametrize(
    "text",
    [BAD, "", None, "10 - 12", "10-12 a.m.", "10:12", "100-12", "0-3", "10-13", "-12", "10-"],
)
def test_parse_time_slot_rejects_other_shapes(text: str | None) -> None:
    assert parse_time_slot(text) is None


def test_comparing_two_unparseable_slots_is_undecidable() -> None:
    assert is_first_time_slot_earlier(BAD, BAD) is None
    assert is_first_time_slot_earlier(None, None) is None


def test_parseable_slot_is_treated_as_earlier() -> None:
    assert is_first_time_slot_earlier(EARLIER, BAD) is True
    assert is_first_time_slot_earlier(BAD, EARLIER) is False


def test_morning_slot_is_earlier_than_afternoon_slot() -> None:
    assert is_first_time_slot_earlier(EARLIER, LATER) is True
    assert is_first_time_slot_earlier(LATER, EARLIER) is False


def test_same_period_slots_compare_numerically() -> None:
    assert is_first_time_slot_earlier("8-10", "10-12") is True
    assert is_first_time_slot_earlier("3-5", "1-3") is False


def test_identical_start_is_not_earlier() -> None:
    assert is_first_time_slot_earlier(EARLIER, EARLIER) is False


def test_same_period() -> None:
    assert same_period(8, 10) is True
    assert same_period(1, 3) is True
    assert same_period(8, 3) is False


def test_describe_time_slot_labels() -> None:
    assert describe_time_slot(TimeSlot(8, 10)) == "8-10 a.m."
    assert describe_time_slot(TimeSlot(1, 3)) == "1-3 p.m."
    assert describe_time_slot(TimeSlot(8, 3)) == "8 a.m.-3 p.m."
    assert describe_time_slot(TimeSlot(10, 12)) == "10 a.m.-12 p.m."
