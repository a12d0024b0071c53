#!/usr/bin/env python3

import logging

from feeph.fanconfig.calibration import search_fans
from feeph.fanconfig.heatsrc import search_heat_srcs
from feeph.fanconfig.models import Fan, HeatSrc
from feeph.fanconfig.prompts import Prompter
from feeph.fanconfig.settings import DEFAULT_SETTINGS, CalibrationSettings

LH = logging.getLogger('feeph.fanconfig')


def discover(prompter: Prompter, settings: CalibrationSettings = DEFAULT_SETTINGS, heat_src_patterns: list[str] | None = None, fan_patterns: list[str] | None = None) -> tuple[list[HeatSrc], list[Fan]]:
    """
    find and configure all heat sources, then calibrate all fans

    The heat sources must be known before the first fan is calibrated
    since each fan is assigned to one or more of them.
    """
    LH.info("Searching heat sources.")
    heat_srcs = search_heat_srcs(prompter=prompter, settings=settings, patterns=heat_src_patterns)
    LH.info("Found %i heat source(s).", len(heat_srcs))
    if not heat_srcs:
        LH.warning("No heat sources were added. Skipping fan calibration.")
        return (heat_srcs, [])
    names = [heat_src.name for heat_src in heat_srcs]
    LH.info("Searching fans.")
    fans = search_fans(heat_srcs=names, prompter=prompter, settings=settings, patterns=fan_patterns)
    LH.info("Calibrated %i fan(s).", len(fans))
    return (heat_srcs, fans)
