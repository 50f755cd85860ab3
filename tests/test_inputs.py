#!/usr/bin/env python

"""
Unit-tests for the carbon input sources.
"""

import math
import unittest
import numpy as np

from soilpools.errors import MissingParameterError
from soilpools.inputs import (ConstantInput, SeasonalInput, ZeroInput,
                              StepShiftInput, TabulatedInput,
                              make_input_source)

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


class InputSourceTests(unittest.TestCase):

    def test_constant(self):
        u = ConstantInput(0.26)
        self.assertEqual([u(t) for t in (0.0, 5.5, -1.0)], [0.26] * 3)
        self.assertEqual(u.mean, 0.26)
        self.assertTrue(u.is_static)

    def test_zero(self):
        u = ZeroInput()
        self.assertEqual(u(12.0), 0.0)
        self.assertEqual(u.mean, 0.0)

    def test_seasonal_cycle(self):
        u = SeasonalInput(2.0, amplitude=1.0)
        self.assertAlmostEqual(u(0.0), 2.0)
        self.assertAlmostEqual(u(0.25), 3.0)
        self.assertAlmostEqual(u(0.75), 1.0)
        # one cycle per unit of time
        self.assertAlmostEqual(u(0.25), u(7.25))
        self.assertFalse(u.is_static)

    def test_seasonal_never_negative(self):
        u = SeasonalInput(0.5)
        values = np.array([u(t) for t in np.linspace(0.0, 3.0, 3001)])
        self.assertTrue(np.all(values >= 0.0))
        self.assertAlmostEqual(values.min(), 0.0, places=6)
        self.assertAlmostEqual(values[:-1].mean(), 0.5, places=6)

    def test_seasonal_phase_and_period(self):
        u = SeasonalInput(1.0, amplitude=0.5, period=12.0, phase=3.0)
        self.assertAlmostEqual(u(3.0), 1.0)
        self.assertAlmostEqual(u(6.0), 1.5)
        self.assertAlmostEqual(u.max_step, 1.2)

    def test_seasonal_amplitude_too_large(self):
        self.assertRaises(ValueError, SeasonalInput, 1.0, amplitude=1.5)

    def test_step(self):
        u = StepShiftInput(1.0, cutoff=10.0, shift_factor=0.5)
        self.assertEqual(u(9.999), 1.0)
        self.assertEqual(u(10.0), 0.5)
        self.assertEqual(u(50.0), 0.5)
        self.assertEqual(u.mean, 1.0)
        self.assertEqual(u.breakpoints, (10.0,))

    def test_calls_out_of_order(self):
        u = StepShiftInput(1.0, cutoff=10.0, shift_factor=3.0)
        first = [u(t) for t in (12.0, 2.0, 12.0, 10.0, 2.0)]
        second = [u(t) for t in (12.0, 2.0, 12.0, 10.0, 2.0)]
        self.assertEqual(first, second)
        self.assertEqual(first, [3.0, 1.0, 3.0, 3.0, 1.0])

    def test_tabulated(self):
        u = TabulatedInput([0.0, 1.0, 3.0], [1.0, 2.0, 4.0])
        self.assertEqual(u(-1.0), 1.0)
        self.assertEqual(u(0.5), 1.0)
        self.assertEqual(u(1.0), 2.0)
        self.assertEqual(u(2.9), 2.0)
        self.assertEqual(u(10.0), 4.0)
        # (1 * 1 + 2 * 2) / 3
        self.assertAlmostEqual(u.mean, 5.0 / 3.0)

    def test_tabulated_bad_table(self):
        self.assertRaises(ValueError, TabulatedInput, [0.0, 0.0], [1.0, 1.0])
        self.assertRaises(ValueError, TabulatedInput, [0.0, 1.0], [1.0, -1.0])
        self.assertRaises(ValueError, TabulatedInput, [0.0, 1.0], [1.0])

    def test_negative_inputs(self):
        self.assertRaises(ValueError, ConstantInput, -0.1)
        self.assertRaises(ValueError, ConstantInput, float('nan'))

    def test_equality(self):
        self.assertEqual(ConstantInput(1.0), ConstantInput(1.0))
        self.assertNotEqual(ConstantInput(1.0), ConstantInput(2.0))
        self.assertNotEqual(ConstantInput(1.0), SeasonalInput(1.0))
        self.assertEqual(ZeroInput(), ZeroInput())


class MakeInputSourceTests(unittest.TestCase):

    def test_default_is_constant(self):
        u = make_input_source({'ave_inputs': 0.3})
        self.assertEqual(u, ConstantInput(0.3))

    def test_seasonal(self):
        u = make_input_source({'input_type': 'seasonal', 'ave_inputs': 1.0,
                               'amplitude': 0.2, 'phase': 0.1})
        self.assertEqual(u, SeasonalInput(1.0, amplitude=0.2, phase=0.1))

    def test_aliases(self):
        self.assertEqual(make_input_source({'input_type': 'incubation'}),
                         ZeroInput())
        u = make_input_source({'input_type': 'regime_shift', 'inputs': 2.0,
                               'cutoff': 5.0, 'shift_factor': 1.5})
        self.assertEqual(u, StepShiftInput(2.0, 5.0, 1.5))

    def test_missing_keys(self):
        with self.assertRaises(MissingParameterError) as cm:
            make_input_source({'input_type': 'step', 'ave_inputs': 1.0})
        self.assertEqual(cm.exception.missing, ('cutoff', 'shift_factor'))

    def test_unknown_type(self):
        self.assertRaises(ValueError, make_input_source,
                          {'input_type': 'monsoon', 'ave_inputs': 1.0})

    def test_round_trip(self):
        for u in (ConstantInput(0.4), SeasonalInput(0.4, 0.1, 2.0, 0.5),
                  ZeroInput(), StepShiftInput(0.4, 3.0, 0.0)):
            self.assertEqual(make_input_source(u.to_dict()), u)
        self.assertFalse(math.isnan(make_input_source({'inputs': 1})(0.0)))


if __name__ == "__main__":

    unittest.main()
