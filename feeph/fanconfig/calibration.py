#!/usr/bin/env python3

import logging
import time
from pathlib import Path

import feeph.fanconfig.hwmon
from feeph.fanconfig.heatsrc import ask_name
from feeph.fanconfig.models import PWM_MAX, PWM_MIN, Fan
from feeph.fanconfig.probing import probe
from feeph.fanconfig.prompts import Prompter
from feeph.fanconfig.settings import DEFAULT_SETTINGS, CalibrationSettings
from feeph.fanconfig.undulation import Undulator

LH = logging.getLogger('feeph.fanconfig')

FAN_PATTERNS = ['/sys/class/hwmon/hwmon*/pwm*[0-9]']


def calibrate_fan(path: str, heat_srcs: list[str], prompter: Prompter, settings: CalibrationSettings = DEFAULT_SETTINGS) -> Fan | None:
    """
    take control of the fan, let the user identify it and determine its
    usable PWM range

    Returns 'None' if the fan does not report an RPM or if the user does
    not want to keep it. Automatic control is restored before returning,
    no matter the outcome. Filesystem errors are propagated (OSError).
    """
    if not heat_srcs:
        raise ValueError('need at least one heat source to assign the fan to')
    full_path = str(Path(path).resolve(strict=True))
    # fails if the fan can't be driven at all (and leaves it untouched)
    feeph.fanconfig.hwmon.set_manual_control(path, True)
    try:
        return _calibrate_fan(path, full_path, heat_srcs, prompter, settings)
    finally:
        feeph.fanconfig.hwmon.set_manual_control(path, False)


def _calibrate_fan(path: str, full_path: str, heat_srcs: list[str], prompter: Prompter, settings: CalibrationSettings) -> Fan | None:
    # -----------------------------------------------------------------
    LH.info("Ramping fan '%s' up...", full_path)
    feeph.fanconfig.hwmon.write_pwm(path, PWM_MAX)
    time.sleep(settings.ramp_settle)
    rpm = feeph.fanconfig.hwmon.read_rpm(path)
    if rpm == 0:
        LH.info("Fan RPM reads 0. Skipping.")
        return None
    LH.info("Fan reached %i RPM.", rpm)
    # -----------------------------------------------------------------
    with Undulator(path, period=settings.undulate_period):
        keep = prompter.confirm("Do you want to add this fan to the config?")
    if not keep:
        return None
    # -----------------------------------------------------------------
    name = ask_name(prompter, "Enter fan name")
    selected = select_heat_srcs(prompter, heat_srcs)
    min_pwm = search_min_pwm(path, settings)
    max_pwm = search_max_pwm(path, prompter, min_pwm, settings)
    cutoff = prompter.confirm("Should the fan be stopped when minimum pwm is reached?")
    return Fan(
        name=name,
        control_path=full_path,
        min_pwm=min_pwm,
        max_pwm=max_pwm,
        cutoff=cutoff,
        heat_sources=selected,
    )


def select_heat_srcs(prompter: Prompter, heat_srcs: list[str]) -> list[str]:
    """
    ask until at least one heat source was selected

    the selected names are returned in the order they were offered in
    """
    while True:
        indices = prompter.multi_select("Select heat pressure sources", heat_srcs)
        selected = [name for index, name in enumerate(heat_srcs) if index in indices]
        if selected:
            return selected
        LH.warning("You must select at least one heat pressure source!")


def search_min_pwm(path: str, settings: CalibrationSettings = DEFAULT_SETTINGS) -> int:
    """
    determine the smallest PWM value which starts the fan from standstill

    returns 0 if the fan can't be stopped
    """
    LH.info("Searching minimum pwm value. This can take a while.")
    feeph.fanconfig.hwmon.write_pwm(path, PWM_MIN)
    LH.info("Waiting for fan to stop.")
    rpm = None
    for _ in range(settings.stop_poll_attempts):
        time.sleep(settings.stop_poll_interval)
        rpm = feeph.fanconfig.hwmon.read_rpm(path)
        if rpm == 0:
            break
    if rpm != 0:
        LH.warning("Fan seems to be unable to stop. Selecting %i as min pwm.", PWM_MIN)
        return PWM_MIN
    LH.info("Fan stopped. Searching the start pwm value of the fan.")
    for pwm in range(PWM_MIN + 1, PWM_MAX + 1):
        feeph.fanconfig.hwmon.write_pwm(path, pwm)
        time.sleep(settings.min_search_settle)
        rpm = feeph.fanconfig.hwmon.read_rpm(path)
        if rpm != 0:
            LH.info("Fan starts spinning at %i (%i RPM).", pwm, rpm)
            return pwm
    LH.warning("Fan did not start spinning at all! Selecting %i as min pwm.", PWM_MAX)
    return PWM_MAX


def search_max_pwm(path: str, prompter: Prompter, min_pwm: int, settings: CalibrationSettings = DEFAULT_SETTINGS) -> int:
    """
    lower the fan speed until the user considers it quiet enough

    never returns a value below 'min_pwm'
    """
    max_pwm = PWM_MAX
    while True:
        LH.info("Setting fan pwm to %i.", max_pwm)
        feeph.fanconfig.hwmon.write_pwm(path, max_pwm)
        if prompter.confirm("Is this maximum fan speed quiet enough for you?"):
            return max_pwm
        max_pwm = max(PWM_MIN, max_pwm - settings.max_search_step)
        if max_pwm <= min_pwm:
            LH.warning("Selecting min pwm (%i) as max pwm value. The fan is going to constantly run at minimum speed!", min_pwm)
            return min_pwm


def search_fans(heat_srcs: list[str], prompter: Prompter, settings: CalibrationSettings = DEFAULT_SETTINGS, patterns: list[str] | None = None) -> list[Fan]:
    if patterns is None:
        patterns = FAN_PATTERNS
    return probe(patterns, calibrate_fan, heat_srcs=heat_srcs, prompter=prompter, settings=settings)
