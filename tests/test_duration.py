"""Tests for duration assertions."""

from datetime import timedelta

import pytest

from fluentcheck import NOTHING, AndConstraint, AssertionFailure, Some
from fluentcheck.config import AssertionConfig, configure
from fluentcheck.primitives.duration import DurationAssertions


def ms(value: int) -> timedelta:
    return timedelta(milliseconds=value)


# --- construction ---


def test_construction_wraps_subject_in_option():
    assert DurationAssertions(timedelta(0)).subject == Some(timedelta(0))
    assert DurationAssertions(None).subject is NOTHING
    assert DurationAssertions(NOTHING).subject is NOTHING


# --- be_positive / be_negative ---


def test_positive_duration_passes_and_chains():
    helper = DurationAssertions(timedelta(seconds=5))
    result = helper.be_positive()
    assert isinstance(result, AndConstraint)
    assert result.and_ is helper


def test_negative_duration_is_not_positive():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(timedelta(seconds=-5)).be_positive()
    assert exc_info.value.message == "Expected positive value, but found -00:00:05"


def test_zero_is_neither_positive_nor_negative():
    with pytest.raises(AssertionFailure):
        DurationAssertions(timedelta(0)).be_positive()
    with pytest.raises(AssertionFailure):
        DurationAssertions(timedelta(0)).be_negative()


def test_be_negative_with_reason():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(timedelta(seconds=1)).be_negative("the clock runs {0}", "backwards")
    assert exc_info.value.message == (
        "Expected negative value because the clock runs backwards, but found 00:00:01"
    )


def test_absent_duration_is_not_positive():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(None).be_positive()
    assert exc_info.value.message == "Expected positive value, but found <null>"


# --- be / not_be ---


def test_be_equal_durations():
    DurationAssertions(timedelta(minutes=1)).be(timedelta(seconds=60))


def test_be_reports_expected_then_actual():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(timedelta(seconds=2)).be(timedelta(seconds=3))
    assert exc_info.value.message == "Expected 00:00:03, but found 00:00:02."


def test_be_absent_against_present():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(None).be(timedelta(seconds=3))
    assert exc_info.value.message == "Expected 00:00:03, but found <null>."


def test_be_absent_matches_absent():
    DurationAssertions(None).be(None)


def test_absent_is_not_zero():
    with pytest.raises(AssertionFailure):
        DurationAssertions(None).be(timedelta(0))


def test_not_be():
    DurationAssertions(timedelta(seconds=1)).not_be(timedelta(seconds=2))
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(timedelta(seconds=1)).not_be(timedelta(seconds=1))
    assert exc_info.value.message == "Did not expect 00:00:01."


# --- ordering ---


def test_ordering_assertions_pass():
    helper = DurationAssertions(timedelta(seconds=10))
    helper.be_less_than(timedelta(seconds=11))
    helper.be_less_or_equal_to(timedelta(seconds=10))
    helper.be_greater_than(timedelta(seconds=9))
    helper.be_greater_or_equal_to(timedelta(seconds=10))


@pytest.mark.parametrize(
    "method, expected, message",
    [
        (
            "be_less_than",
            timedelta(seconds=10),
            "Expected a value less than 00:00:10, but found 00:00:10.",
        ),
        (
            "be_less_or_equal_to",
            timedelta(seconds=9),
            "Expected a value less or equal to 00:00:09, but found 00:00:10.",
        ),
        (
            "be_greater_than",
            timedelta(seconds=10),
            "Expected a value greater than 00:00:10, but found 00:00:10.",
        ),
        (
            "be_greater_or_equal_to",
            timedelta(seconds=11),
            "Expected a value greater or equal to 00:00:11, but found 00:00:10.",
        ),
    ],
)
def test_ordering_failures(method, expected, message):
    helper = DurationAssertions(timedelta(seconds=10))
    with pytest.raises(AssertionFailure) as exc_info:
        getattr(helper, method)(expected)
    assert exc_info.value.message == message


def test_ordering_against_absent_subject_fails():
    with pytest.raises(AssertionFailure, match="but found <null>"):
        DurationAssertions(None).be_greater_than(timedelta(0))


# --- be_close_to ---


def test_close_to_within_default_precision():
    DurationAssertions(ms(100)).be_close_to(ms(110))
    DurationAssertions(ms(100)).be_close_to(ms(120))


def test_close_to_within_explicit_precision():
    DurationAssertions(ms(100)).be_close_to(ms(110), 20)


def test_close_to_outside_precision():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(ms(100)).be_close_to(ms(110), 5)
    assert exc_info.value.message == (
        "Expected time to be within 5 ms from 00:00:00.110000, "
        "but found 00:00:00.100000."
    )


def test_close_to_bounds_are_inclusive():
    DurationAssertions(ms(95)).be_close_to(ms(100), 5)
    DurationAssertions(ms(105)).be_close_to(ms(100), 5)
    with pytest.raises(AssertionFailure):
        DurationAssertions(ms(106)).be_close_to(ms(100), 5)


def test_close_to_absent_subject_fails_with_null():
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(None).be_close_to(ms(110), 5, "it was measured")
    assert exc_info.value.message == (
        "Expected time to be within 5 ms from 00:00:00.110000 "
        "because it was measured, but found <null>."
    )


def test_close_to_uses_context_label():
    helper = DurationAssertions(ms(0), context={"time": "the elapsed time"})
    with pytest.raises(AssertionFailure, match="^Expected the elapsed time to be"):
        helper.be_close_to(ms(500), 10)


def test_close_to_default_precision_is_configurable():
    configure(AssertionConfig(default_precision_ms=50))
    DurationAssertions(ms(100)).be_close_to(ms(140))
    with pytest.raises(AssertionFailure, match="within 50 ms"):
        DurationAssertions(ms(100)).be_close_to(ms(151))


def test_close_to_millisecond_field_may_overflow():
    # 999 ms + 20 ms carries into the seconds field of the rebuilt bound
    DurationAssertions(timedelta(seconds=2, milliseconds=10)).be_close_to(
        timedelta(seconds=1, milliseconds=999)
    )


def test_close_to_millisecond_field_may_underflow():
    # 5 ms - 20 ms borrows from the seconds field of the rebuilt bound
    nearby = timedelta(seconds=1, milliseconds=5)
    DurationAssertions(ms(985)).be_close_to(nearby, 20)
    with pytest.raises(AssertionFailure) as exc_info:
        DurationAssertions(ms(984)).be_close_to(nearby, 20)
    assert exc_info.value.message == (
        "Expected time to be within 20 ms from 00:00:01.005000, "
        "but found 00:00:00.984000."
    )


def test_close_to_negative_nearby_value():
    DurationAssertions(ms(-1010)).be_close_to(ms(-1000), 10)
    with pytest.raises(AssertionFailure):
        DurationAssertions(ms(-1011)).be_close_to(ms(-1000), 10)


def test_close_to_drops_sub_millisecond_part_of_nearby():
    # Rebuilt bounds are 99..101 ms, not 99.9..101.9 ms
    nearby = timedelta(milliseconds=100, microseconds=900)
    DurationAssertions(ms(99)).be_close_to(nearby, 1)
    with pytest.raises(AssertionFailure):
        DurationAssertions(timedelta(milliseconds=101, microseconds=500)).be_close_to(
            nearby, 1
        )


def test_close_to_negative_sub_millisecond_truncates_toward_zero():
    # -100.9 ms has a -100 ms field, so bounds are -101..-99 ms
    nearby = -timedelta(milliseconds=100, microseconds=900)
    DurationAssertions(ms(-99)).be_close_to(nearby, 1)
    with pytest.raises(AssertionFailure):
        DurationAssertions(timedelta(milliseconds=-101, microseconds=-500)).be_close_to(
            nearby, 1
        )
