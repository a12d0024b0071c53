#!/usr/bin/env python3
"""
discover heat sources and fans and write a fan control configuration

usage:
  - sudo scripts/build_fan_config.py
  - sudo scripts/build_fan_config.py -o /etc/fan_config.json
  - sudo scripts/build_fan_config.py --undulate-period 5 -v
"""

import argparse
import logging
import sys

import colorama
import coloredlogs

from feeph.fanconfig import DEFAULT_SETTINGS, CalibrationSettings, ConsolePrompter, Prompter, check_dependencies, discover, save_config

LH = logging.getLogger('main')


def build_config(output: str, prompter: Prompter, settings: CalibrationSettings) -> int:
    """
    run the discovery and write the configuration file

    returns the exit code
    """
    try:
        if not check_dependencies(prompter=prompter):
            LH.error("Dependencies are not satisfied. Aborting.")
            return 1
        heat_srcs, fans = discover(prompter=prompter, settings=settings)
        save_config(output, heat_srcs=heat_srcs, fans=fans)
    except OSError as e:
        LH.error("Unable to build the configuration: %s", e)
        return 1
    except (KeyboardInterrupt, EOFError):
        LH.warning("Interrupted! No configuration was written.")
        return 130
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='build_fan_config', description='discover and calibrate hwmon fans')
    parser.add_argument('-o', '--output', type=str, default='fan_config.yaml', help="configuration file (YAML, or JSON if it ends with '.json')")
    parser.add_argument('--ramp-settle', type=float, default=DEFAULT_SETTINGS.ramp_settle)
    parser.add_argument('--undulate-period', type=float, default=DEFAULT_SETTINGS.undulate_period)
    parser.add_argument('--stop-poll-interval', type=float, default=DEFAULT_SETTINGS.stop_poll_interval)
    parser.add_argument('--stop-poll-attempts', type=int, default=DEFAULT_SETTINGS.stop_poll_attempts)
    parser.add_argument('--min-search-settle', type=float, default=DEFAULT_SETTINGS.min_search_settle)
    parser.add_argument('--max-search-step', type=int, default=DEFAULT_SETTINGS.max_search_step)
    parser.add_argument('--default-set-point', type=float, default=DEFAULT_SETTINGS.default_set_point)
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()

    if args.verbose:
        verbosity = 'DEBUG'
    else:
        verbosity = 'INFO'

    colorama.init()
    coloredlogs.install(level=verbosity, fmt='%(levelname).1s: %(message)s')

    try:
        settings = CalibrationSettings(
            ramp_settle=args.ramp_settle,
            undulate_period=args.undulate_period,
            stop_poll_interval=args.stop_poll_interval,
            stop_poll_attempts=args.stop_poll_attempts,
            min_search_settle=args.min_search_settle,
            max_search_step=args.max_search_step,
            default_set_point=args.default_set_point,
        )
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    sys.exit(build_config(args.output, prompter=ConsolePrompter(), settings=settings))
