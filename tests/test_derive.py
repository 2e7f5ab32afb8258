"""Tests for properties derived from the primary ones."""
from bobassistant.domain import MessageKind
from bobassistant.domain import properties as p
from bobassistant.parsing.derive import (
    derive,
    with_operating_time,
    with_rescaled_fft,
    with_unknown_vibration_times,
)
from bobassistant.parsing.observer import CollectingObserver


def _report_props(**overrides) -> dict:
    props = {
        p.VIBRATION_PERCENTAGE: 50.4,
        p.GOOD_VIBRATION: 64,
        p.REPORT_LENGTH: 360,
        p.BAD_VIBRATION_PERCENTAGE_10_20: 16,
        p.BAD_VIBRATION_PERCENTAGE_20_40: 32,
        p.BAD_VIBRATION_PERCENTAGE_40_60: 8,
        p.BAD_VIBRATION_PERCENTAGE_60_80: 0,
        p.BAD_VIBRATION_PERCENTAGE_80_100: 127,
    }
    props.update(overrides)
    return props


UNKNOWN_KEYS = {
    p.TOTAL_OPERATING_TIME_KNOWN,
    p.TOTAL_UNKNOWN_10_20,
    p.TOTAL_UNKNOWN_20_40,
    p.TOTAL_UNKNOWN_40_60,
    p.TOTAL_UNKNOWN_60_80,
    p.TOTAL_UNKNOWN_80_100,
}


def test_operating_time():
    props = with_operating_time(_report_props())
    assert props[p.OPERATING_TIME] == 181


def test_operating_time_rounds_half_up():
    props = with_operating_time({p.REPORT_LENGTH: 5, p.VIBRATION_PERCENTAGE: 50.0})
    assert props[p.OPERATING_TIME] == 3


def test_operating_time_needs_both_inputs():
    assert p.OPERATING_TIME not in with_operating_time({p.REPORT_LENGTH: 360})
    assert p.OPERATING_TIME not in with_operating_time({p.REPORT_LENGTH: 360, p.VIBRATION_PERCENTAGE: None})
    assert p.OPERATING_TIME not in with_operating_time({})


def test_stages_do_not_mutate_their_input():
    original = _report_props()
    snapshot = dict(original)
    with_operating_time(original)
    with_unknown_vibration_times(dict(original, **{p.OPERATING_TIME: 181}), MessageKind.REPORT)
    assert original == snapshot


def test_unknown_vibration_times():
    props = with_unknown_vibration_times(_report_props(**{p.OPERATING_TIME: 181}), MessageKind.REPORT)
    assert props[p.TOTAL_OPERATING_TIME_KNOWN] == 91
    assert props[p.TOTAL_UNKNOWN_10_20] == 11
    assert props[p.TOTAL_UNKNOWN_20_40] == 23
    assert props[p.TOTAL_UNKNOWN_40_60] == 6
    assert props[p.TOTAL_UNKNOWN_60_80] == 0
    assert props[p.TOTAL_UNKNOWN_80_100] == 90


def test_unknown_vibration_times_only_for_reports():
    observer = CollectingObserver()
    props = with_unknown_vibration_times(
        _report_props(**{p.OPERATING_TIME: 181}), MessageKind.LEARNING, observer
    )
    assert not UNKNOWN_KEYS & set(props)
    assert observer.events == []


def test_unknown_vibration_times_without_good_vibration():
    observer = CollectingObserver()
    props = _report_props(**{p.OPERATING_TIME: 181})
    del props[p.GOOD_VIBRATION]
    result = with_unknown_vibration_times(props, MessageKind.REPORT, observer)
    assert not UNKNOWN_KEYS & set(result)
    assert observer.names("ERROR") == ["unknown_vibration_times_skipped"]
    assert observer.events[0].details["missing"] == [p.GOOD_VIBRATION]


def test_unknown_vibration_times_without_operating_time():
    observer = CollectingObserver()
    result = with_unknown_vibration_times(_report_props(), MessageKind.REPORT, observer)
    assert not UNKNOWN_KEYS & set(result)
    assert p.OPERATING_TIME in observer.events[0].details["missing"]


def test_rescaled_fft():
    props = with_rescaled_fft({p.FFT: [0, 127, 254], p.VIBRATION_LEVEL: 0.5})
    assert props[p.FFT] == [0.0, 0.5, 1.0]


def test_rescaled_fft_with_zero_vibration_level():
    props = with_rescaled_fft({p.FFT: [10, 20], p.VIBRATION_LEVEL: 0.0})
    assert props[p.FFT] == [0.0, 0.0]


def test_fft_dropped_without_vibration_level():
    observer = CollectingObserver()
    props = with_rescaled_fft({p.FFT: [1, 2, 3], p.TEMPERATURE: 20}, observer)
    assert props == {p.TEMPERATURE: 20}
    assert observer.names("ERROR") == ["fft_skipped"]


def test_empty_fft_left_alone():
    observer = CollectingObserver()
    assert with_rescaled_fft({p.FFT: []}, observer) == {p.FFT: []}
    assert with_rescaled_fft({}, observer) == {}
    assert observer.events == []


def test_derive_report_chain():
    props = derive(_report_props(), MessageKind.REPORT)
    assert props[p.OPERATING_TIME] == 181
    assert props[p.TOTAL_OPERATING_TIME_KNOWN] == 91
    assert props[p.TOTAL_UNKNOWN_80_100] == 90
    assert list(props)[-7:] == [
        p.OPERATING_TIME,
        p.TOTAL_OPERATING_TIME_KNOWN,
        p.TOTAL_UNKNOWN_10_20,
        p.TOTAL_UNKNOWN_20_40,
        p.TOTAL_UNKNOWN_40_60,
        p.TOTAL_UNKNOWN_60_80,
        p.TOTAL_UNKNOWN_80_100,
    ]
