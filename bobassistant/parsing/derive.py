"""
Secondary properties computed from the primary ones of the same message.

Each stage takes the properties decoded so far and returns a new dict; the
stages run in a fixed order because later ones read what earlier ones add.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from bobassistant.core.binary import round_half_ceil
from bobassistant.domain import properties as p
from bobassistant.domain.messages import MessageKind
from bobassistant.parsing.fields import RATIO_FULL_SCALE, is_number
from bobassistant.parsing.observer import DecodeObserver


def _number(props: Mapping[str, Any], name: str) -> Optional[float]:
    value = props.get(name)
    return value if is_number(value) else None


def with_operating_time(props: Mapping[str, Any]) -> dict[str, Any]:
    """Operating time: the share of the report length the machine vibrated."""
    result = dict(props)
    length = _number(props, p.REPORT_LENGTH)
    vibration = _number(props, p.VIBRATION_PERCENTAGE)
    if length is not None and vibration is not None:
        result[p.OPERATING_TIME] = round_half_ceil(length * vibration / 100)
    return result


def with_unknown_vibration_times(
    props: Mapping[str, Any],
    kind: MessageKind,
    observer: Optional[DecodeObserver] = None,
) -> dict[str, Any]:
    """
    Split the operating time not covered by known vibrations into the five
    bad vibration buckets. Report messages only.
    """
    result = dict(props)
    if kind is not MessageKind.REPORT:
        return result

    inputs = [p.GOOD_VIBRATION, p.OPERATING_TIME] + [bucket for bucket, _ in p.UNKNOWN_VIBRATION_BUCKETS]
    missing = [name for name in inputs if _number(props, name) is None]
    if missing:
        (observer or DecodeObserver()).error("unknown_vibration_times_skipped", {"missing": missing})
        return result

    operating_time = props[p.OPERATING_TIME]
    known = round_half_ceil(props[p.GOOD_VIBRATION] * operating_time / RATIO_FULL_SCALE)
    result[p.TOTAL_OPERATING_TIME_KNOWN] = known
    for bucket, total in p.UNKNOWN_VIBRATION_BUCKETS:
        result[total] = round_half_ceil((operating_time - known) * props[bucket] / RATIO_FULL_SCALE)
    return result


def with_rescaled_fft(
    props: Mapping[str, Any],
    observer: Optional[DecodeObserver] = None,
) -> dict[str, Any]:
    result = dict(props)
    fft = props.get(p.FFT)
    if not fft:
        return result

    level = _number(props, p.VIBRATION_LEVEL)
    if level is None:
        del result[p.FFT]
        (observer or DecodeObserver()).error(
            "fft_skipped", {"reason": "cannot calculate fft without vibration level"}
        )
        return result

    result[p.FFT] = [value * level / RATIO_FULL_SCALE for value in fft]
    return result


def derive(
    props: Mapping[str, Any],
    kind: MessageKind,
    observer: Optional[DecodeObserver] = None,
) -> dict[str, Any]:
    props = with_operating_time(props)
    props = with_unknown_vibration_times(props, kind, observer)
    return with_rescaled_fft(props, observer)
