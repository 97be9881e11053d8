import pytest

from serialros.duration import NSEC_PER_SEC, Duration
from serialros.rostime import Time, normalize_sec_nsec


@pytest.mark.parametrize("sec, nsec", [(0, 0), (5, 2_500_000_000), (1, 999_999_999), (2, NSEC_PER_SEC)])
def test_normalize_keeps_total(sec, nsec):
    s, n = normalize_sec_nsec(sec, nsec)
    assert 0 <= n < NSEC_PER_SEC
    assert s * NSEC_PER_SEC + n == sec * NSEC_PER_SEC + nsec


def test_normalize_wraps_seconds():
    assert normalize_sec_nsec(0xFFFFFFFF, NSEC_PER_SEC) == (0, 0)


def test_constructor_normalizes():
    t = Time(1, 3 * NSEC_PER_SEC + 7)
    assert t == Time(4, 7)


def test_difference_wraps_around():
    assert Time(0, 0) - Time(0xFFFFFFFF, 0) == Duration(1, 0)


@pytest.mark.parametrize(
    "t, d",
    [
        (Time(100, 900_000_000), Duration(2, 300_000_000)),
        (Time(100, 900_000_000), Duration(-3, 500_000_000)),
        (Time(5, 0), Duration(0, NSEC_PER_SEC - 1)),
    ],
)
def test_add_then_subtract_duration(t, d):
    assert (t + d) - d == t
    assert (t + d) - t == d
    assert d + t == t + d


def test_difference_added_back():
    t1 = Time(1234, 100)
    t2 = Time(1200, 999_999_999)
    assert t2 + (t1 - t2) == t1


def test_subtract_below_zero_wraps():
    t = Time(0, 0) - Duration(1, 0)
    assert t.sec == 0xFFFFFFFF
    assert t.nsec == 0


@pytest.mark.parametrize("n", [0, 123_456_789, 2_000_000_000])
def test_nsec_round_trip(n):
    assert Time.from_nsec(n).to_nsec() == n


def test_from_nsec_negative_stays_normalized():
    t = Time.from_nsec(-1)
    assert 0 <= t.nsec < NSEC_PER_SEC
    assert 0 <= t.sec <= 0xFFFFFFFF


@pytest.mark.parametrize("value", [1.5, 0.0, 42.25])
def test_sec_round_trip(value):
    assert Time.from_sec(value).to_sec() == pytest.approx(value, abs=1e-9)


def test_from_sec_negative_raises():
    with pytest.raises(ValueError):
        Time.from_sec(-1.0)


def test_add_rejects_int():
    with pytest.raises(TypeError):
        Time(1, 0) + 1