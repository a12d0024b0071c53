#!/usr/bin/env python3
"""
verify the preconditions for discovery

Discovery writes to files in /sys and therefore requires root privileges.
Additionally, the sensors and fans are only visible if a driver for the
mainboard's monitoring chip is loaded. Loading modules is not our business,
we only check for them.
"""

import logging
import os

from feeph.fanconfig.prompts import Prompter

LH = logging.getLogger('feeph.fanconfig')

SUPPORTED_MODULES = ('nct6775', 'nct6683', 'it87')


def get_modules(path: str = '/proc/modules') -> list[str]:
    """
    list the names of all loaded kernel modules
    """
    modules = list()
    with open(path, 'r') as fh:
        for line in fh:
            name, _, _ = line.partition(' ')
            if name:
                modules.append(name.strip())
    return modules


def is_root() -> bool:
    return os.geteuid() == 0


def check_dependencies(prompter: Prompter, modules_path: str = '/proc/modules') -> bool:
    """
    returns 'True' if discovery may proceed
    """
    if not is_root():
        LH.error("This program has to be run with root permissions!")
        return False
    modules = get_modules(modules_path)
    found = [module for module in SUPPORTED_MODULES if module in modules]
    for module in found:
        LH.info("Found module %s!", module)
    if found:
        return True
    LH.warning("No supported fan/sensor modules have been loaded! (supported: %s)", ", ".join(SUPPORTED_MODULES))
    return prompter.confirm("Do you want to continue anyway?", default=False)
