""" Carbon input sources u(t) driving the pool models.

Each source is a pure function of simulation time, holding no state between
calls, so the integrator is free to evaluate it at repeated or non-monotonic
times. Sources are values: they can be compared, flattened back to the named
parameter keys they were built from and shared between runs.

Input types:
------------
* constant     : fixed average input regardless of time
* seasonal     : sinusoid around the average input, one cycle per period
* zero         : no input at all, a sample removed from its carbon source
                 (incubation)
* step         : baseline input before a cutoff, baseline * shift_factor
                 after it (regime shift)
* tabulated    : piecewise-constant lookup in a table of (time, input) rows
"""

import math
import numpy as np

from soilpools.errors import MissingParameterError
from soilpools.constants import SEASONAL_PERIOD
from soilpools.utilities import float_lt, float_gt

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


class InputSource(object):
    """ Base class, subclasses implement __call__ and mean """
    input_type = None

    # a static source is one that doesn't vary with time
    is_static = False

    # times where u(t) jumps, the integrator restarts at each of these
    breakpoints = ()

    # longest step the integrator may take without skipping over structure
    # in u(t)
    max_step = np.inf

    def __call__(self, time):
        raise NotImplementedError

    @property
    def mean(self):
        """ long-run average input, used to seed runs at steady state """
        raise NotImplementedError

    def to_dict(self):
        return {'input_type': self.input_type}

    def __eq__(self, other):
        if not isinstance(other, InputSource):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        items = sorted((k, v) for k, v in self.to_dict().items()
                       if k != 'input_type')
        return "%s(%s)" % (self.__class__.__name__,
                           ", ".join("%s=%r" % kv for kv in items))


class ConstantInput(InputSource):
    input_type = 'constant'
    is_static = True

    def __init__(self, ave_inputs):
        self.ave_inputs = _non_negative('ave_inputs', ave_inputs)

    def __call__(self, time):
        return self.ave_inputs

    @property
    def mean(self):
        return self.ave_inputs

    def to_dict(self):
        return {'input_type': self.input_type, 'ave_inputs': self.ave_inputs}


class SeasonalInput(InputSource):
    """ Sinusoidal inputs, u(t) = ave + amplitude * sin(2 pi (t - phase) / period)

    The sinusoid is shifted vertically by the average input, so requiring
    amplitude <= ave_inputs keeps u(t) >= 0 and the mean over a whole cycle
    equal to ave_inputs. When the amplitude isn't given it defaults to the
    average, i.e. inputs drop to zero once a cycle.
    """
    input_type = 'seasonal'

    def __init__(self, ave_inputs, amplitude=None, period=SEASONAL_PERIOD,
                 phase=0.0):
        self.ave_inputs = _non_negative('ave_inputs', ave_inputs)
        if amplitude is None:
            amplitude = self.ave_inputs
        self.amplitude = _non_negative('amplitude', amplitude)
        if float_gt(self.amplitude, self.ave_inputs):
            raise ValueError("Seasonal amplitude (%g) exceeds the average "
                             "input (%g), inputs would go negative" %
                             (self.amplitude, self.ave_inputs))
        self.period = float(period)
        if not float_gt(self.period, 0.0):
            raise ValueError("Seasonal period must be positive: %g" %
                             self.period)
        self.phase = float(phase)

    @property
    def max_step(self):
        return self.period / 10.0

    def __call__(self, time):
        angle = 2.0 * math.pi * (time - self.phase) / self.period
        return max(0.0, self.ave_inputs + self.amplitude * math.sin(angle))

    @property
    def mean(self):
        return self.ave_inputs

    def to_dict(self):
        return {'input_type': self.input_type, 'ave_inputs': self.ave_inputs,
                'amplitude': self.amplitude, 'period': self.period,
                'phase': self.phase}


class ZeroInput(InputSource):
    """ Incubation, the sample receives no fresh carbon """
    input_type = 'zero'
    is_static = True

    def __call__(self, time):
        return 0.0

    @property
    def mean(self):
        return 0.0


class StepShiftInput(InputSource):
    """ Regime shift: ave_inputs before the cutoff, ave_inputs * shift_factor
    from the cutoff onwards. """
    input_type = 'step'

    def __init__(self, ave_inputs, cutoff, shift_factor):
        self.ave_inputs = _non_negative('ave_inputs', ave_inputs)
        self.cutoff = float(cutoff)
        self.shift_factor = _non_negative('shift_factor', shift_factor)

    @property
    def breakpoints(self):
        return (self.cutoff,)

    def __call__(self, time):
        if time < self.cutoff:
            return self.ave_inputs
        return self.ave_inputs * self.shift_factor

    @property
    def mean(self):
        # baseline regime, the system is assumed to sit at steady state
        # under it before the shift
        return self.ave_inputs

    def to_dict(self):
        return {'input_type': self.input_type, 'ave_inputs': self.ave_inputs,
                'cutoff': self.cutoff, 'shift_factor': self.shift_factor}


class TabulatedInput(InputSource):
    """ Inputs read off a table, each value holds until the next time row.

    Times before the first row take the first value, times after the last row
    take the last value.
    """
    input_type = 'tabulated'

    def __init__(self, times, values):
        times = np.asarray(times, dtype=float)
        values = np.asarray(values, dtype=float)
        if times.ndim != 1 or times.shape != values.shape or times.size == 0:
            raise ValueError("Tabulated inputs need matching, non-empty time "
                             "and value columns")
        if np.any(np.diff(times) <= 0.0):
            raise ValueError("Tabulated input times must be strictly "
                             "increasing")
        if np.any(values < 0.0):
            raise ValueError("Tabulated inputs must be non-negative")
        self.times = times
        self.values = values
        self.times.setflags(write=False)
        self.values.setflags(write=False)

    @property
    def breakpoints(self):
        return tuple(self.times)

    def __call__(self, time):
        idx = np.searchsorted(self.times, time, side='right') - 1
        idx = min(max(idx, 0), self.values.size - 1)
        return float(self.values[idx])

    @property
    def mean(self):
        """ time-weighted mean over the span of the table """
        if self.times.size == 1:
            return float(self.values[0])
        widths = np.diff(self.times)
        return float(np.sum(self.values[:-1] * widths) / np.sum(widths))

    def to_dict(self):
        return {'input_type': self.input_type, 'ave_inputs': self.mean}

    def __eq__(self, other):
        if not isinstance(other, TabulatedInput):
            return NotImplemented
        return (np.array_equal(self.times, other.times) and
                np.array_equal(self.values, other.values))


INPUT_TYPES = {
    'constant': ConstantInput,
    'seasonal': SeasonalInput,
    'zero': ZeroInput,
    'incubation': ZeroInput,
    'step': StepShiftInput,
    'regime_shift': StepShiftInput,
}

# keys each input type needs from a flat parameter mapping, and the
# optional ones
REQUIRED_KEYS = {
    ConstantInput: ('ave_inputs',),
    SeasonalInput: ('ave_inputs',),
    ZeroInput: (),
    StepShiftInput: ('ave_inputs', 'cutoff', 'shift_factor'),
}
OPTIONAL_KEYS = {
    SeasonalInput: ('amplitude', 'period', 'phase'),
}


def make_input_source(parms):
    """ Build an input source from a flat mapping of named parameters.

    Parameters:
    -----------
    parms : dictionary
        must hold the keys needed by 'input_type' (default "constant"). A
        plain 'inputs' number is accepted in place of 'ave_inputs'.

    Returns:
    --------
    source : InputSource
        the input function u(t)
    """
    input_type = parms.get('input_type', 'constant')
    if input_type is None:
        input_type = 'constant'
    try:
        klass = INPUT_TYPES[str(input_type).lower()]
    except KeyError:
        raise ValueError("Unknown input type: %s (try one of %s)" %
                         (input_type, ", ".join(sorted(INPUT_TYPES))))

    values = dict(parms)
    if 'ave_inputs' not in values and 'inputs' in values:
        values['ave_inputs'] = values['inputs']

    missing = [key for key in REQUIRED_KEYS[klass] if values.get(key) is None]
    if missing:
        raise MissingParameterError(missing)

    kwargs = {}
    for key in REQUIRED_KEYS[klass] + OPTIONAL_KEYS.get(klass, ()):
        if values.get(key) is not None:
            kwargs[key] = float(values[key])

    return klass(**kwargs)

def _non_negative(name, value):
    value = float(value)
    if float_lt(value, 0.0) or math.isnan(value):
        raise ValueError("%s must be non-negative: %g" % (name, value))
    return value
