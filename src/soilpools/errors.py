""" Exceptions raised by the soil pool models.

None of these are recovered inside the package, a failed run propagates to
the caller with enough context to diagnose the offending parameter set.
"""

import numpy as np

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


class MissingParameterError(KeyError):
    """ A required named parameter is absent from a parameter mapping """
    def __init__(self, missing):
        self.missing = tuple(missing)
        KeyError.__init__(self, "You have a parameter missing that this "
                                "model needs: %s" % ", ".join(self.missing))

    def __str__(self):
        return self.args[0]


class ConservationViolationError(ValueError):
    """ Derivatives don't balance the carbon input flux """
    def __init__(self, time, inputs, outflow, rel_error, rel_tol):
        self.time = time
        self.inputs = inputs
        self.outflow = outflow
        self.rel_error = rel_error
        self.rel_tol = rel_tol
        msg = ("Conservation of mass does not hold at t=%g: input %.17g, "
               "sum of derivatives %.17g (relative error %g > %g)" %
               (time, inputs, outflow, rel_error, rel_tol))
        ValueError.__init__(self, msg)


class SingularSystemError(np.linalg.LinAlgError):
    """ The transfer-decay system A.K can't be solved for a steady state """
    def __init__(self, msg, params=None):
        self.params = params
        if params is not None:
            msg = "%s\nParameters: %s" % (msg, params)
        np.linalg.LinAlgError.__init__(self, msg)
