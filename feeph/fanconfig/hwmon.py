#!/usr/bin/env python3
"""
access to the files exposed by the hwmon subsystem

naming conventions (all files of a channel live in the same directory):
  pwmN         PWM duty cycle (0..255)
  pwmN_enable  1 = manual control, 0 = automatic control
  fanN_input   tachometer reading in RPM
  tempN_input  temperature in millidegrees Celsius
  tempN_label  human-readable name of the temperature sensor

The numeric suffix of 'pwmN' and 'fanN_input' is assumed to match.
"""

import errno
import logging
import os
import re

LH = logging.getLogger('feeph.fanconfig')

PWM_ENABLE_MANUAL    = 1
PWM_ENABLE_AUTOMATIC = 0

_PWM_FILE = re.compile(r'^pwm(\d+)$')


def get_enable_path(pwm_path: str) -> str:
    """
    derive the enable file from the pwm control file
    (/sys/class/hwmon/hwmon2/pwm1 -> /sys/class/hwmon/hwmon2/pwm1_enable)
    """
    directory, filename = os.path.split(pwm_path)
    return os.path.join(directory, f'{filename}_enable')


def get_rpm_path(pwm_path: str) -> str | None:
    """
    derive the tachometer file from the pwm control file
    (/sys/class/hwmon/hwmon2/pwm1 -> /sys/class/hwmon/hwmon2/fan1_input)

    returns 'None' if the file name does not follow the 'pwmN' convention
    """
    directory, filename = os.path.split(pwm_path)
    match = _PWM_FILE.match(filename)
    if match is None:
        return None
    return os.path.join(directory, f'fan{match.group(1)}_input')


def get_label_path(temp_path: str) -> str:
    """
    derive the label file from the temperature input file
    (/sys/class/hwmon/hwmon2/temp1_input -> /sys/class/hwmon/hwmon2/temp1_label)
    """
    directory, filename = os.path.split(temp_path)
    if filename.endswith('_input'):
        filename = filename[:-len('_input')]
    return os.path.join(directory, f'{filename}_label')


def _read(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as fh:
        try:
            return fh.read()
        except UnicodeDecodeError as e:
            # report undecodable content as a read error
            raise OSError(errno.EILSEQ, f"Unable to decode content: {e.reason}", path) from e


def _write(path: str, value: int):
    with open(path, 'w') as fh:
        fh.write(str(value))


def set_manual_control(pwm_path: str, enable: bool):
    """
    switch between manual (direct PWM) and automatic (firmware) control

    raises OSError if the enable file can't be written
    """
    if enable:
        value = PWM_ENABLE_MANUAL
    else:
        value = PWM_ENABLE_AUTOMATIC
    enable_path = get_enable_path(pwm_path)
    LH.debug("Writing %i to '%s'.", value, enable_path)
    _write(enable_path, value)


def write_pwm(pwm_path: str, value: int):
    if not 0 <= value <= 255:
        raise ValueError(f"provided value {value} is out of range (0 ≤ x ≤ 255)")
    _write(pwm_path, value)


def read_rpm(pwm_path: str) -> int:
    """
    read the current fan speed of the fan driven by the provided control file

    Returns 0 if there is no tachometer (file name does not match or
    'fanN_input' does not exist) or if the reading can't be parsed. All
    other errors are propagated.
    """
    rpm_path = get_rpm_path(pwm_path)
    if rpm_path is None:
        LH.debug("'%s' does not follow the pwmN naming convention.", pwm_path)
        return 0
    try:
        content = _read(rpm_path)
    except FileNotFoundError:
        LH.debug("There is no tachometer at '%s'.", rpm_path)
        return 0
    try:
        return int(content.strip())
    except ValueError:
        LH.debug("Unable to parse tachometer reading '%s'.", content.strip())
        return 0


def read_temperature(temp_path: str) -> float:
    """
    read the temperature in °C
    ('42500\\n' -> 42.5)

    an unparsable reading is reported as 0.0, read errors are propagated
    """
    content = _read(temp_path)
    try:
        millidegrees = int(content.strip())
    except ValueError:
        LH.debug("Unable to parse temperature reading '%s'.", content.strip())
        return 0.0
    return millidegrees / 1000.0


def read_label(temp_path: str) -> str:
    return _read(get_label_path(temp_path)).strip()
