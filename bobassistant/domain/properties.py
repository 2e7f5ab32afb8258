"""
Names of the properties found in decoded BoB Assistant messages.
"""
from __future__ import annotations

# Learning
LEARNING_FROM_SCRATCH = "learning_from_scratch"
LEARNING_PERCENTAGE = "learning_percentage"
TEMPERATURE = "temperature"
VIBRATION_LEVEL = "vibration_level"
PEAK_FREQUENCY_INDEX = "peak_frequency_index"
FFT = "fft"

# Report
ANOMALY_LEVEL = "anomaly_level"
VIBRATION_PERCENTAGE = "vibration_percentage"
GOOD_VIBRATION = "good_vibration"  # undocumented, feeds the unknown vibration times
NB_ALARM_REPORT = "nb_alarm_report"
REPORT_LENGTH = "report_length"
REPORT_ID = "report_id"  # undocumented
BATTERY_PERCENTAGE = "battery_percentage"
BAD_VIBRATION_PERCENTAGE_10_20 = "bad_vibration_percentage_10_20"
BAD_VIBRATION_PERCENTAGE_20_40 = "bad_vibration_percentage_20_40"
BAD_VIBRATION_PERCENTAGE_40_60 = "bad_vibration_percentage_40_60"
BAD_VIBRATION_PERCENTAGE_60_80 = "bad_vibration_percentage_60_80"
BAD_VIBRATION_PERCENTAGE_80_100 = "bad_vibration_percentage_80_100"
ANOMALY_LEVEL_TO_20_LAST_24H = "anomaly_level_to_20_last_24h"
ANOMALY_LEVEL_TO_50_LAST_24H = "anomaly_level_to_50_last_24h"
ANOMALY_LEVEL_TO_80_LAST_24H = "anomaly_level_to_80_last_24h"
ANOMALY_LEVEL_TO_20_LAST_30D = "anomaly_level_to_20_last_30d"
ANOMALY_LEVEL_TO_50_LAST_30D = "anomaly_level_to_50_last_30d"
ANOMALY_LEVEL_TO_80_LAST_30D = "anomaly_level_to_80_last_30d"
ANOMALY_LEVEL_TO_20_LAST_6MO = "anomaly_level_to_20_last_6mo"
ANOMALY_LEVEL_TO_50_LAST_6MO = "anomaly_level_to_50_last_6mo"
ANOMALY_LEVEL_TO_80_LAST_6MO = "anomaly_level_to_80_last_6mo"

# Start / stop
STATE = "state"

# Derived
OPERATING_TIME = "operating_time"
TOTAL_OPERATING_TIME_KNOWN = "total_operating_time_known"
TOTAL_UNKNOWN_10_20 = "total_unknown_10_20"
TOTAL_UNKNOWN_20_40 = "total_unknown_20_40"
TOTAL_UNKNOWN_40_60 = "total_unknown_40_60"
TOTAL_UNKNOWN_60_80 = "total_unknown_60_80"
TOTAL_UNKNOWN_80_100 = "total_unknown_80_100"

# Bad vibration percentage bucket -> total unknown operating time bucket.
UNKNOWN_VIBRATION_BUCKETS: tuple[tuple[str, str], ...] = (
    (BAD_VIBRATION_PERCENTAGE_10_20, TOTAL_UNKNOWN_10_20),
    (BAD_VIBRATION_PERCENTAGE_20_40, TOTAL_UNKNOWN_20_40),
    (BAD_VIBRATION_PERCENTAGE_40_60, TOTAL_UNKNOWN_40_60),
    (BAD_VIBRATION_PERCENTAGE_60_80, TOTAL_UNKNOWN_60_80),
    (BAD_VIBRATION_PERCENTAGE_80_100, TOTAL_UNKNOWN_80_100),
)
