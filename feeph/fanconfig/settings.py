#!/usr/bin/env python3

from attrs import field, frozen, validators

_non_negative = [validators.instance_of((int, float)), validators.ge(0)]
_positive = [validators.instance_of((int, float)), validators.gt(0)]


@frozen
class CalibrationSettings:
    """
    timing and search parameters used during discovery

    The defaults reflect what works for typical desktop fans. All durations
    are in seconds.
    """
    ramp_settle:        float = field(default=3.0,  validator=_non_negative)  # wait for the fan to reach full speed
    undulate_period:    float = field(default=10.0, validator=_positive)      # duration of each identification half-cycle
    stop_poll_interval: float = field(default=1.0,  validator=_non_negative)  # wait between RPM reads while stopping
    stop_poll_attempts: int   = field(default=30,   validator=[validators.instance_of(int), validators.ge(1)])
    min_search_settle:  float = field(default=0.5,  validator=_non_negative)  # wait after each step of the minimum search
    max_search_step:    int   = field(default=5,    validator=[validators.instance_of(int), validators.ge(1)])
    default_set_point:  float = field(default=60.0, validator=validators.instance_of((int, float)))  # °C


DEFAULT_SETTINGS = CalibrationSettings()
