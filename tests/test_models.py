#!/usr/bin/env python3
# pylint: disable=missing-class-docstring,missing-function-docstring,missing-module-docstring

import unittest

from attrs.exceptions import FrozenInstanceError

import feeph.fanconfig.models as sut  # sytem under test


class TestFan(unittest.TestCase):

    def _params(self, **overrides) -> dict:
        params = {
            # fmt: off
            'name':         'brown matter distribution device',
            'control_path': '/sys/class/hwmon/hwmon2/pwm1',
            'min_pwm':      40,
            'max_pwm':      240,
            'cutoff':       True,
            'heat_sources': ['cpu'],
            # fmt: on
        }
        params.update(overrides)
        return params

    def test_defaults(self):
        # -----------------------------------------------------------------
        computed = sut.Fan(name='front', control_path='/sys/class/hwmon/hwmon2/pwm1', min_pwm=40, heat_sources=['cpu'])
        # -----------------------------------------------------------------
        self.assertEqual(computed.max_pwm, 255)
        self.assertEqual(computed.cutoff, False)

    def test_min_equals_max(self):
        # -----------------------------------------------------------------
        computed = sut.Fan(**self._params(min_pwm=40, max_pwm=40))
        # -----------------------------------------------------------------
        self.assertEqual(computed.max_pwm, 40)

    def test_min_larger_than_max(self):
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(ValueError, sut.Fan, **self._params(min_pwm=120, max_pwm=100))

    def test_pwm_out_of_range(self):
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(ValueError, sut.Fan, **self._params(min_pwm=-1))
        self.assertRaises(ValueError, sut.Fan, **self._params(max_pwm=256))

    def test_without_heat_sources(self):
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(ValueError, sut.Fan, **self._params(heat_sources=[]))

    def test_empty_name(self):
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(ValueError, sut.Fan, **self._params(name='  '))

    def test_immutable(self):
        fan = sut.Fan(**self._params())
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(FrozenInstanceError, setattr, fan, 'min_pwm', 0)


class TestHeatSrc(unittest.TestCase):

    def test_gains_default_to_zero(self):
        # -----------------------------------------------------------------
        computed = sut.HeatSrc(name='cpu', sensor_path='/sys/class/hwmon/hwmon2/temp1_input', pid=sut.PidGains(set_point=60))
        # -----------------------------------------------------------------
        self.assertEqual(computed.pid, sut.PidGains(set_point=60.0, p=0.0, i=0.0, d=0.0))
        self.assertIsInstance(computed.pid.set_point, float)

    def test_empty_name(self):
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertRaises(ValueError, sut.HeatSrc, name='', sensor_path='/sys/class/hwmon/hwmon2/temp1_input', pid=sut.PidGains(set_point=60))


class TestFanHashing(unittest.TestCase):

    def test_hashable(self):
        fan1 = sut.Fan(name='front', control_path='/sys/class/hwmon/hwmon2/pwm1', min_pwm=40, heat_sources=['cpu', 'gpu'])
        fan2 = sut.Fan(name='front', control_path='/sys/class/hwmon/hwmon2/pwm1', min_pwm=40, heat_sources=('cpu', 'gpu'))
        # -----------------------------------------------------------------
        # -----------------------------------------------------------------
        self.assertEqual(fan1.heat_sources, ('cpu', 'gpu'))
        self.assertEqual(fan1, fan2)
        self.assertEqual(hash(fan1), hash(fan2))
        self.assertEqual(len({fan1, fan2}), 1)
