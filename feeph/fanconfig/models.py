#!/usr/bin/env python3
"""
the entities produced by a discovery run

A fan references its heat sources by name only. The names are resolved by
whoever consumes the configuration, there is no integrity check here.
"""

from attrs import field, frozen, validators

PWM_MIN = 0
PWM_MAX = 255


def _validate_pwm(instance, attribute, value):
    if not PWM_MIN <= value <= PWM_MAX:
        raise ValueError(f"{attribute.name} must be in range {PWM_MIN}..{PWM_MAX} (got {value})")


def _validate_name(instance, attribute, value):
    if not value.strip():
        raise ValueError(f"{attribute.name} can't be empty")


@frozen(eq=True)
class PidGains:
    """
    set point (°C) and controller gains for a heat source

    the gains are not tuned during discovery and start out as zero
    """
    set_point: float = field(converter=float)
    p:         float = field(default=0.0, converter=float)
    i:         float = field(default=0.0, converter=float)
    d:         float = field(default=0.0, converter=float)


@frozen(eq=True)
class HeatSrc:
    name:        str = field(validator=[validators.instance_of(str), _validate_name])
    sensor_path: str = field(validator=validators.instance_of(str))  # resolved path
    pid:         PidGains = field(validator=validators.instance_of(PidGains))


@frozen(eq=True)
class Fan:
    """
    a calibrated fan

    The enable file (pwmN_enable) and the tachometer (fanN_input) are
    derived from 'control_path' and therefore not stored.
    """
    name:         str = field(validator=[validators.instance_of(str), _validate_name])
    control_path: str = field(validator=validators.instance_of(str))  # resolved path
    min_pwm:      int = field(validator=_validate_pwm)
    max_pwm:      int = field(default=PWM_MAX, validator=_validate_pwm)
    cutoff:       bool = False  # stop the fan instead of running it at min_pwm
    heat_sources: tuple[str, ...] = field(factory=tuple, converter=tuple)

    def __attrs_post_init__(self):
        if self.min_pwm > self.max_pwm:
            raise ValueError('minimum pwm must be smaller than or equal to maximum pwm')
        if len(self.heat_sources) == 0:
            raise ValueError('a fan must reference at least one heat source')
