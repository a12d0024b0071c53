#!/usr/bin/env python3
# pylint: disable=missing-class-docstring,missing-function-docstring,missing-module-docstring

import json
import os
import tempfile
import unittest

import yaml

import feeph.fanconfig.export as sut  # sytem under test
from feeph.fanconfig.models import Fan, HeatSrc, PidGains

HEAT_SRCS = [
    HeatSrc(name='cpu', sensor_path='/sys/devices/platform/nct6775.656/hwmon/hwmon2/temp1_input', pid=PidGains(set_point=65.0)),
]

FANS = [
    # fmt: off
    Fan(name='front', control_path='/sys/devices/platform/nct6775.656/hwmon/hwmon2/pwm1', min_pwm=40, max_pwm=240, cutoff=True,  heat_sources=['cpu']),
    Fan(name='rear',  control_path='/sys/devices/platform/nct6775.656/hwmon/hwmon2/pwm2', min_pwm=0,  max_pwm=255, cutoff=False, heat_sources=['cpu']),
    # fmt: on
]


class TestExport(unittest.TestCase):

    def test_export_config(self):
        # -----------------------------------------------------------------
        computed = sut.export_config(heat_srcs=HEAT_SRCS, fans=FANS)
        expected = {
            'heat_srcs': [
                {
                    'name': 'cpu',
                    'wildcard_path': '/sys/devices/platform/nct6775.656/hwmon/hwmon2/temp1_input',
                    'pid_params': {'set_point': 65.0, 'P': 0.0, 'I': 0.0, 'D': 0.0},
                },
            ],
            'fans': [
                {
                    'name': 'front',
                    'wildcard_path': '/sys/devices/platform/nct6775.656/hwmon/hwmon2/pwm1',
                    'min_pwm': 40,
                    'max_pwm': 240,
                    'cutoff': True,
                    'heat_pressure_srcs': ['cpu'],
                },
                {
                    # max_pwm (255) and cutoff (false) are omitted
                    'name': 'rear',
                    'wildcard_path': '/sys/devices/platform/nct6775.656/hwmon/hwmon2/pwm2',
                    'min_pwm': 0,
                    'heat_pressure_srcs': ['cpu'],
                },
            ],
        }
        # -----------------------------------------------------------------
        self.assertEqual(computed, expected)

    def test_export_empty(self):
        # -----------------------------------------------------------------
        computed = sut.export_config(heat_srcs=[], fans=[])
        expected = {'heat_srcs': [], 'fans': []}
        # -----------------------------------------------------------------
        self.assertEqual(computed, expected)


class TestImport(unittest.TestCase):

    def test_import_compacted_fan(self):
        data = {
            'name': 'rear',
            'wildcard_path': '/sys/class/hwmon/hwmon2/pwm2',
            'min_pwm': 30,
            'heat_pressure_srcs': ['cpu', 'gpu'],
        }
        # -----------------------------------------------------------------
        computed = sut.import_fan(data)
        expected = Fan(name='rear', control_path='/sys/class/hwmon/hwmon2/pwm2', min_pwm=30, max_pwm=255, cutoff=False, heat_sources=['cpu', 'gpu'])
        # -----------------------------------------------------------------
        self.assertEqual(computed, expected)

    def test_import_heat_src_without_gains(self):
        data = {
            'name': 'cpu',
            'wildcard_path': '/sys/class/hwmon/hwmon2/temp1_input',
            'pid_params': {'set_point': 70},
        }
        # -----------------------------------------------------------------
        computed = sut.import_heat_src(data)
        expected = HeatSrc(name='cpu', sensor_path='/sys/class/hwmon/hwmon2/temp1_input', pid=PidGains(set_point=70.0, p=0.0, i=0.0, d=0.0))
        # -----------------------------------------------------------------
        self.assertEqual(computed, expected)

    def test_import_invalid(self):
        values = [
            # missing fields
            {'heat_srcs': [{'name': 'cpu'}]},
            {'fans': [{'name': 'front', 'wildcard_path': '/x/pwm1'}]},
            # min_pwm > max_pwm
            {'fans': [{'name': 'front', 'wildcard_path': '/x/pwm1', 'min_pwm': 90, 'max_pwm': 80, 'heat_pressure_srcs': ['cpu']}]},
            # no heat sources
            {'fans': [{'name': 'front', 'wildcard_path': '/x/pwm1', 'min_pwm': 20, 'heat_pressure_srcs': []}]},
            # not a mapping
            ['heat_srcs', 'fans'],
        ]
        for data in values:
            self.assertRaises(ValueError, sut.import_config, data)


class TestPersistence(unittest.TestCase):

    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self._tmpdir.cleanup()

    def test_yaml(self):
        path = os.path.join(self._tmpdir.name, 'fan_config.yaml')
        # -----------------------------------------------------------------
        sut.save_config(path, heat_srcs=HEAT_SRCS, fans=FANS)
        with open(path, 'r') as fh:
            raw = yaml.safe_load(fh)
        computed = sut.load_config(path)
        expected = (HEAT_SRCS, FANS)
        # -----------------------------------------------------------------
        self.assertEqual(raw, sut.export_config(heat_srcs=HEAT_SRCS, fans=FANS))
        self.assertEqual(computed, expected)

    def test_json(self):
        path = os.path.join(self._tmpdir.name, 'fan_config.json')
        # -----------------------------------------------------------------
        sut.save_config(path, heat_srcs=HEAT_SRCS, fans=FANS)
        with open(path, 'r') as fh:
            raw = json.load(fh)
        # -----------------------------------------------------------------
        self.assertEqual(raw['fans'][1], {'name': 'rear', 'wildcard_path': FANS[1].control_path, 'min_pwm': 0, 'heat_pressure_srcs': ['cpu']})
        self.assertEqual(sut.load_config(path), (HEAT_SRCS, FANS))
