#!/usr/bin/env python3

import logging
from pathlib import Path

import feeph.fanconfig.hwmon
from feeph.fanconfig.models import HeatSrc, PidGains
from feeph.fanconfig.probing import probe
from feeph.fanconfig.prompts import Prompter
from feeph.fanconfig.settings import DEFAULT_SETTINGS, CalibrationSettings

LH = logging.getLogger('feeph.fanconfig')

HEAT_SRC_PATTERNS = ['/sys/class/hwmon/hwmon*/temp*_input']


def ask_name(prompter: Prompter, prompt: str) -> str:
    while True:
        name = prompter.read_text(prompt).strip()
        if name:
            return name
        LH.warning("The name can't be empty!")


def evaluate_heat_source(path: str, prompter: Prompter, settings: CalibrationSettings = DEFAULT_SETTINGS) -> HeatSrc | None:
    """
    show the sensor to the user and ask whether it should be added

    a sensor without a label file is not considered a heat source
    (raises OSError)
    """
    value = feeph.fanconfig.hwmon.read_temperature(path)
    label = feeph.fanconfig.hwmon.read_label(path)
    full_path = str(Path(path).resolve(strict=True))
    LH.info("Found heat source '%s'.", full_path)
    LH.info("Current value: %.1f°C  Label: %s", value, label)
    if not prompter.confirm("Do you want to add this heat source to the config?"):
        return None
    name = ask_name(prompter, "Enter heat pressure source name")
    set_point = prompter.read_number("Enter setpoint (°C)", default=settings.default_set_point)
    return HeatSrc(name=name, sensor_path=full_path, pid=PidGains(set_point=set_point))


def search_heat_srcs(prompter: Prompter, settings: CalibrationSettings = DEFAULT_SETTINGS, patterns: list[str] | None = None) -> list[HeatSrc]:
    if patterns is None:
        patterns = HEAT_SRC_PATTERNS
    return probe(patterns, evaluate_heat_source, prompter=prompter, settings=settings)
