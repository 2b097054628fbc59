import itertools

import pytest

from hotel_booking_client.services.booking.counter import BoundedCounter


def test_decrement_at_floor_is_noop():
    counter = BoundedCounter()
    assert counter.decrement() is False
    assert counter.value == 0


def test_increment_and_decrement():
    counter = BoundedCounter()
    assert counter.increment() is True
    assert counter.increment() is True
    assert counter.decrement() is True
    assert counter.value == 1


def test_delta_crossing_floor_is_refused_whole():
    counter = BoundedCounter(2)
    assert counter.adjust(-3) is False
    assert counter.value == 2


def test_ceiling():
    counter = BoundedCounter(minimum=0, maximum=2)
    assert counter.increment() and counter.increment()
    assert counter.increment() is False
    assert counter.value == 2


def test_custom_floor():
    counter = BoundedCounter(1, minimum=1)
    assert counter.decrement() is False
    assert counter.value == 1


def test_set_respects_bounds():
    counter = BoundedCounter(maximum=5)
    assert counter.set(4) is True
    assert counter.set(6) is False
    assert counter.set(-1) is False
    assert counter.value == 4


@pytest.mark.parametrize(
    "kwargs",
    [
        {"value": -1},
        {"value": 3, "maximum": 2},
        {"value": 0, "minimum": 2, "maximum": 1},
    ],
)
def test_invalid_construction(kwargs):
    with pytest.raises(ValueError):
        BoundedCounter(**kwargs)


def test_no_sequence_goes_below_floor():
    """Every ordering of up/down steps keeps the counter at or above zero."""
    for steps in itertools.product((-1, 1, -2), repeat=6):
        counter = BoundedCounter()
        for delta in steps:
            counter.adjust(delta)
            assert counter.value >= 0
