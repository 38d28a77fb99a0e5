import numpy as np

import src.api.forecast_utils as fu


def test_as_float_various_inputs():
    assert fu.as_float(10) == 10.0
    assert fu.as_float("12,5") == 12.5
    assert fu.as_float(" 3.25 ") == 3.25
    assert fu.as_float(np.float64(1.5)) == 1.5
    assert fu.as_float(None) is None
    assert fu.as_float(float("nan")) is None
    assert fu.as_float("abc") is None
    assert fu.as_float(True) is None


def test_as_float_rejects_infinity():
    assert fu.as_float(float("inf")) is None
    assert fu.as_float(float("-inf")) is None
    assert fu.as_float("Infinity") is None
    assert fu.as_float(np.float64("inf")) is None


def test_as_int_truncates_and_rejects_garbage():
    assert fu.as_int("12.9") == 12
    assert fu.as_int(1760594400) == 1760594400
    assert fu.as_int(np.int64(7)) == 7
    assert fu.as_int(float("inf")) is None
    assert fu.as_int(None) is None
    assert fu.as_int("x") is None


def test_as_str():
    assert fu.as_str(None) == ""
    assert fu.as_str(123) == "123"


def test_pick_prefers_first_present_key():
    raw = {"windSpeed": None, "wind_speed": 4.2}
    assert fu.pick(raw, "windSpeed", "wind_speed") == 4.2
    assert fu.pick(raw, "missing") is None
