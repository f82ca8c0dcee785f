from __future__ import annotations

import time

import pytest

from shifumi.exceptions.base import AppError
from shifumi.exceptions.game import ArithmeticOverflow, InvalidArgument
from shifumi.utils import timestamp as mod


def test_now_ts_is_current_unix_seconds():
    out = mod.now_ts()

    assert isinstance(out, int)
    assert abs(out - int(time.time())) <= 2


def test_add_duration_adds_seconds():
    assert mod.add_duration(100, 25) == 125
    assert mod.add_duration(100, 0) == 100


def test_add_duration_rejects_negative_as_app_error():
    with pytest.raises(InvalidArgument) as ei:
        mod.add_duration(100, -1)
    assert isinstance(ei.value, AppError)


def test_add_duration_overflow():
    assert mod.add_duration(mod.MAX_TIMESTAMP - 1, 1) == mod.MAX_TIMESTAMP

    with pytest.raises(ArithmeticOverflow) as ei:
        mod.add_duration(mod.MAX_TIMESTAMP, 1)
    assert ei.value.value == mod.MAX_TIMESTAMP + 1
