#!/usr/bin/env python3
"""
convert the discovered entities into the configuration file format used
by the fan control daemon (and back)

To keep the configuration terse 'max_pwm' is omitted if it is 255 and
'cutoff' is omitted if it is false.
"""

import json
import logging
from typing import Any

import yaml

from feeph.fanconfig.models import PWM_MAX, Fan, HeatSrc, PidGains

LH = logging.getLogger('feeph.fanconfig')


def export_heat_src(heat_src: HeatSrc) -> dict[str, Any]:
    return {
        'name': heat_src.name,
        'wildcard_path': heat_src.sensor_path,
        'pid_params': {
            'set_point': heat_src.pid.set_point,
            'P': heat_src.pid.p,
            'I': heat_src.pid.i,
            'D': heat_src.pid.d,
        },
    }


def export_fan(fan: Fan) -> dict[str, Any]:
    data: dict[str, Any] = {
        'name': fan.name,
        'wildcard_path': fan.control_path,
        'min_pwm': fan.min_pwm,
    }
    if fan.max_pwm != PWM_MAX:
        data['max_pwm'] = fan.max_pwm
    if fan.cutoff:
        data['cutoff'] = True
    data['heat_pressure_srcs'] = list(fan.heat_sources)
    return data


def export_config(heat_srcs: list[HeatSrc], fans: list[Fan]) -> dict[str, list[dict[str, Any]]]:
    return {
        'heat_srcs': [export_heat_src(heat_src) for heat_src in heat_srcs],
        'fans': [export_fan(fan) for fan in fans],
    }


def import_heat_src(data: dict[str, Any]) -> HeatSrc:
    try:
        pid_params = data['pid_params']
        pid = PidGains(
            set_point=pid_params['set_point'],
            p=pid_params.get('P', 0.0),
            i=pid_params.get('I', 0.0),
            d=pid_params.get('D', 0.0),
        )
        return HeatSrc(name=data['name'], sensor_path=data['wildcard_path'], pid=pid)
    except (KeyError, TypeError) as e:
        raise ValueError(f"invalid heat source: {data!r}") from e


def import_fan(data: dict[str, Any]) -> Fan:
    try:
        return Fan(
            name=data['name'],
            control_path=data['wildcard_path'],
            min_pwm=data['min_pwm'],
            max_pwm=data.get('max_pwm', PWM_MAX),
            cutoff=data.get('cutoff', False),
            heat_sources=data['heat_pressure_srcs'],
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f"invalid fan: {data!r}") from e


def import_config(data: dict[str, Any]) -> tuple[list[HeatSrc], list[Fan]]:
    if not isinstance(data, dict):
        raise ValueError('configuration must be a mapping')
    heat_srcs = [import_heat_src(entry) for entry in data.get('heat_srcs') or []]
    fans = [import_fan(entry) for entry in data.get('fans') or []]
    return (heat_srcs, fans)


def _is_json(path: str) -> bool:
    return str(path).lower().endswith('.json')


def save_config(path: str, heat_srcs: list[HeatSrc], fans: list[Fan]):
    """
    write the configuration to disk (JSON if the file name ends with
    '.json', YAML otherwise)
    """
    data = export_config(heat_srcs=heat_srcs, fans=fans)
    with open(path, 'w') as fh:
        if _is_json(path):
            json.dump(data, fh, indent=4)
            fh.write('\n')
        else:
            yaml.safe_dump(data, fh, sort_keys=False)
    LH.info("Wrote %i heat source(s) and %i fan(s) to '%s'.", len(heat_srcs), len(fans), path)


def load_config(path: str) -> tuple[list[HeatSrc], list[Fan]]:
    with open(path, 'r') as fh:
        if _is_json(path):
            data = json.load(fh)
        else:
            data = yaml.safe_load(fh)
    return import_config(data)
