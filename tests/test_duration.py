import math
import sys

import pytest

from floatduration import FloatDuration, sum_durations


def test_construct() -> None:
    duration1 = FloatDuration.hours(3.0)
    assert duration1.as_hours() == 3.0
    assert duration1.as_minutes() == 180.0
    assert duration1.as_seconds() == 180.0 * 60.0
    assert duration1.as_days() == 3.0 / 24.0
    assert duration1.as_milliseconds() == 180.0 * 60.0 * 1000.0
    assert duration1.is_positive()

    duration2 = FloatDuration.milliseconds(55.0)
    assert duration2.as_seconds() == 0.055
    assert duration2.as_milliseconds() == 55.0
    assert duration2.as_microseconds() == 55000.0
    assert duration2.as_nanoseconds() == 55000000.0
    assert not duration2.is_zero()

    duration3 = FloatDuration.zero()
    assert duration3.is_zero()
    assert duration3.as_minutes() == 0.0
    assert duration3.as_nanoseconds() == 0.0

    duration4 = FloatDuration.minutes(-3.0)
    assert duration4.as_minutes() == -3.0
    assert duration4.as_hours() == -0.05
    assert duration4.is_negative()


def test_unit_equivalences() -> None:
    assert FloatDuration.days(1.5) == FloatDuration.hours(36.0)
    assert FloatDuration.minutes(30.0) == FloatDuration.hours(0.5)
    assert FloatDuration.seconds(180.0) == FloatDuration.minutes(3.0)
    assert FloatDuration.seconds(3.5) == FloatDuration.milliseconds(3500.0)
    assert FloatDuration.microseconds(300.0) == FloatDuration.milliseconds(0.30)
    assert FloatDuration.nanoseconds(1000.0) == FloatDuration.microseconds(1.0)


def test_year_is_365_days() -> None:
    assert FloatDuration.years(2.0) == FloatDuration.days(365.0 * 2.0)
    assert FloatDuration.days(365.0).as_years() == 1.0


def test_default_is_zero() -> None:
    assert FloatDuration() == FloatDuration.zero()
    assert FloatDuration().as_seconds() == 0.0


def test_integers_are_coerced_to_float() -> None:
    duration = FloatDuration.seconds(3)
    assert isinstance(duration.as_seconds(), float)
    assert duration == FloatDuration.seconds(3.0)


def test_rejects_non_numbers() -> None:
    with pytest.raises(TypeError, match="real number of seconds"):
        FloatDuration("3")  # type: ignore[arg-type]


def test_constructors_accept_non_finite_values() -> None:
    assert math.isinf(FloatDuration.hours(math.inf).as_seconds())
    assert math.isnan(FloatDuration.minutes(math.nan).as_seconds())
    assert FloatDuration.days(-math.inf).is_negative()


class TestSign:
    def test_zero_and_negative_zero(self):
        negative_zero = FloatDuration.seconds(-0.0)
        assert negative_zero.is_zero()
        assert negative_zero == FloatDuration.zero()
        # Sign-bit based: -0.0 reports negative, +0.0 positive
        assert negative_zero.is_negative()
        assert not negative_zero.is_positive()
        assert FloatDuration.zero().is_positive()

    def test_abs(self):
        assert FloatDuration.minutes(-5.0).abs() == FloatDuration.minutes(5.0)
        assert abs(FloatDuration.minutes(-5.0)) == FloatDuration.minutes(5.0)
        assert abs(FloatDuration.minutes(5.0)) == FloatDuration.minutes(5.0)

    def test_extremes(self):
        assert FloatDuration.max_value().as_seconds() == sys.float_info.max
        assert FloatDuration.min_value().as_seconds() == -sys.float_info.max
        assert FloatDuration.min_value() < FloatDuration.zero() < FloatDuration.max_value()


def test_arithmetic() -> None:
    assert (
        FloatDuration.minutes(5.0) + FloatDuration.seconds(30.0)
        == FloatDuration.seconds(330.0)
    )
    assert FloatDuration.hours(3.0) * 2.5 == FloatDuration.hours(7.5)
    assert (
        FloatDuration.days(3.0) / 3.0 - FloatDuration.hours(2.0)
        == FloatDuration.hours(22.0)
    )
    assert (
        FloatDuration.zero()
        + FloatDuration.milliseconds(500.0)
        + FloatDuration.microseconds(500.0)
        == FloatDuration.microseconds(500500.0)
    )
    assert 2.0 * FloatDuration.milliseconds(150.0) == FloatDuration.milliseconds(300.0)
    assert FloatDuration.minutes(10.0) / FloatDuration.seconds(60.0) == 10.0
    assert FloatDuration.minutes(5.0) == (-FloatDuration.minutes(5.0)) * -1.0
    assert (
        FloatDuration.seconds(10.0) - FloatDuration.minutes(1.0)
        == FloatDuration.seconds(-50.0)
    )
    assert +FloatDuration.seconds(4.0) == FloatDuration.seconds(4.0)


def test_division_by_zero_follows_ieee() -> None:
    inf = FloatDuration.seconds(10.0) / 0.0
    assert math.isinf(inf.as_seconds())
    assert math.isinf(inf.as_years())
    assert math.isinf(inf.as_microseconds())
    assert inf.is_positive()

    assert (FloatDuration.seconds(-10.0) / 0.0).as_seconds() == -math.inf
    assert (FloatDuration.seconds(10.0) / -0.0).as_seconds() == -math.inf
    assert FloatDuration.hours(10.0) / FloatDuration.minutes(0.0) == math.inf
    assert math.isnan(FloatDuration.zero() / FloatDuration.zero())
    assert math.isnan((FloatDuration.zero() / 0).as_seconds())


def test_nan_propagates() -> None:
    nan = FloatDuration.zero() / 0.0
    result = (nan + FloatDuration.seconds(1.0)) * 2.0
    assert math.isnan(result.as_seconds())
    assert nan != nan
    assert not (nan == nan)
    assert not (nan < FloatDuration.zero())
    assert not (nan >= FloatDuration.zero())


def test_augmented_assignment_rebinds() -> None:
    duration = FloatDuration.seconds(1.0)
    original = duration

    duration += FloatDuration.seconds(2.0)
    assert duration == FloatDuration.seconds(3.0)
    duration -= FloatDuration.seconds(1.0)
    assert duration == FloatDuration.seconds(2.0)
    duration *= 3
    assert duration == FloatDuration.seconds(6.0)
    duration /= 4.0
    assert duration == FloatDuration.seconds(1.5)

    assert original == FloatDuration.seconds(1.0)


class TestUnsupportedOperands:
    def test_add_number(self):
        with pytest.raises(TypeError):
            FloatDuration.seconds(1.0) + 1.0  # type: ignore[operator]

    def test_multiply_durations(self):
        with pytest.raises(TypeError):
            FloatDuration.seconds(1.0) * FloatDuration.seconds(2.0)  # type: ignore[operator]

    def test_divide_number_by_duration(self):
        with pytest.raises(TypeError):
            1.0 / FloatDuration.seconds(2.0)  # type: ignore[operator]

    def test_equality_with_number_is_false(self):
        assert FloatDuration.seconds(1.0) != 1.0


def test_ordering() -> None:
    durations = [
        FloatDuration.hours(1.0),
        FloatDuration.seconds(-3.0),
        FloatDuration.minutes(2.0),
    ]
    assert sorted(durations) == [
        FloatDuration.seconds(-3.0),
        FloatDuration.minutes(2.0),
        FloatDuration.hours(1.0),
    ]
    assert FloatDuration.minutes(1.0) <= FloatDuration.seconds(60.0)
    assert FloatDuration.minutes(1.0) >= FloatDuration.seconds(60.0)
    assert FloatDuration.minutes(1.0) > FloatDuration.seconds(59.0)
    assert max(durations) == FloatDuration.hours(1.0)


def test_hash_is_consistent_with_equality() -> None:
    assert hash(FloatDuration.seconds(0.0)) == hash(FloatDuration.seconds(-0.0))
    assert len({FloatDuration.minutes(1.0), FloatDuration.seconds(60.0)}) == 1


def test_float_conversion() -> None:
    assert float(FloatDuration.minutes(2.0)) == 120.0


def test_is_close() -> None:
    a = FloatDuration.seconds(0.1) + FloatDuration.seconds(0.2)
    b = FloatDuration.seconds(0.3)
    assert a != b
    assert a.is_close(b)
    assert not FloatDuration.seconds(1.0).is_close(FloatDuration.seconds(1.1))
    assert FloatDuration.zero().is_close(FloatDuration.nanoseconds(1.0), abs_tol=1e-6)


def test_display() -> None:
    assert str(FloatDuration.minutes(3.5)) == "3.5 minutes"
    assert str(FloatDuration.days(3.0) + FloatDuration.hours(12.0)) == "3.5 days"
    assert str(FloatDuration.seconds(12.7)) == "12.7 seconds"
    assert str(FloatDuration()) == "0 nanoseconds"
    assert str(FloatDuration.microseconds(100.0)) == "100 microseconds"
    assert str(FloatDuration.milliseconds(12.5)) == "12.5 milliseconds"
    assert str(FloatDuration.days(325.0) + FloatDuration.hours(6.0)) == "325.25 days"
    assert (
        str(FloatDuration.milliseconds(50.0) + FloatDuration.microseconds(500.0))
        == "50.5 milliseconds"
    )
    assert str(FloatDuration.nanoseconds(25.25)) == "25.25 nanoseconds"
    assert str(FloatDuration.minutes(90.0)) == "1.5 hours"
    assert str(FloatDuration.years(2.5)) == "2.5 years"


def test_display_thresholds_are_strict() -> None:
    assert str(FloatDuration.days(1.0)) == "24 hours"
    assert str(FloatDuration.hours(1.0)) == "60 minutes"
    assert str(FloatDuration.seconds(1.0)) == "1000 milliseconds"
    assert str(FloatDuration.days(365.0)) == "365 days"


def test_display_negative_and_non_finite() -> None:
    assert str(FloatDuration.minutes(-3.0)) == "-180000000000 nanoseconds"
    assert str(FloatDuration.seconds(math.inf)) == "inf years"
    assert str(FloatDuration.seconds(math.nan)) == "nan nanoseconds"


def test_repr() -> None:
    assert repr(FloatDuration.seconds(1.5)) == "FloatDuration(secs=1.5)"


def test_sum() -> None:
    assert sum_durations([]) == FloatDuration.zero()
    assert (
        sum_durations(
            [
                FloatDuration.milliseconds(50.0),
                FloatDuration.milliseconds(30.0),
                FloatDuration.zero(),
            ]
        )
        == FloatDuration.milliseconds(80.0)
    )
    assert sum_durations([FloatDuration.days(2.0)]) == FloatDuration.days(2.0)


def test_builtin_sum() -> None:
    durations = [FloatDuration.minutes(1.0), FloatDuration.seconds(30.0)]
    assert sum(durations) == FloatDuration.seconds(90.0)
    assert sum(durations, FloatDuration.zero()) == FloatDuration.seconds(90.0)
    assert sum_durations(iter(durations)) == sum(durations)


def test_sum_rejects_mixed_items() -> None:
    with pytest.raises(TypeError):
        sum_durations([FloatDuration.seconds(1.0), 2.0])  # type: ignore[list-item]
