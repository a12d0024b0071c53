#!/usr/bin/env python3
"""
discover the fans and temperature sensors exposed by the Linux hwmon
subsystem, calibrate each fan's usable PWM range and generate a
configuration for a fan control daemon

The main design goal is to keep the hardware interaction in one place and
keep the user interaction replaceable, so the discovery can be exercised
without real hardware.
"""

# typical usage scenarios
# =======================

# build a configuration interactively
# -> requires root privileges (writes to /sys/class/hwmon/...)
# -------------------------------------------------------------------------
# from feeph.fanconfig import ConsolePrompter, discover, save_config
#
# prompter = ConsolePrompter()
# heat_srcs, fans = discover(prompter=prompter)
# save_config('fan_config.yaml', heat_srcs=heat_srcs, fans=fans)
# -------------------------------------------------------------------------

# calibrate a single fan
# -------------------------------------------------------------------------
# from feeph.fanconfig import ConsolePrompter, CalibrationSettings, calibrate_fan
#
# settings = CalibrationSettings(undulate_period=5.0)
# fan = calibrate_fan('/sys/class/hwmon/hwmon2/pwm1', heat_srcs=['cpu'], prompter=ConsolePrompter(), settings=settings)
# -------------------------------------------------------------------------

# the following imports are provided for user convenience
# flake8: noqa: F401
from feeph.fanconfig.calibration import FAN_PATTERNS, calibrate_fan, search_fans
from feeph.fanconfig.deps import check_dependencies
from feeph.fanconfig.discovery import discover
from feeph.fanconfig.export import export_config, import_config, load_config, save_config
from feeph.fanconfig.heatsrc import HEAT_SRC_PATTERNS, evaluate_heat_source, search_heat_srcs
from feeph.fanconfig.models import Fan, HeatSrc, PidGains
from feeph.fanconfig.probing import probe
from feeph.fanconfig.prompts import ConsolePrompter, Prompter, ScriptedPrompter
from feeph.fanconfig.settings import DEFAULT_SETTINGS, CalibrationSettings
