"""
GNU GENERAL PUBLIC LICENSE
Copyright (C) 2025 Will D. Rust, Marko Stojanovic, Daniel M. Simms

https://github.com/dspix/laspy/blob/main/LICENSE
"""

import numpy as np
import pandas as pd

from whittaker.errors import InvalidInput
from whittaker.filters import smooth, speyediff


def smooth_series(x_time, lmbd, d=2, sparse=True):
  """Returns the Whittaker smoothed version of a time-series profile.

  The series is sorted by its index first; samples are taken to be
  equally spaced (e.g. a daily or 16-day composite profile), the index
  values themselves are not used in the fit.

  Arguments:
    x_time - a pandas series, e.g. with datetime index
    lmbd - smoothing parameter (roughness penalty)
    d - order of the smoothing
    sparse - use sparse matrices
  """
  if not isinstance(x_time, pd.Series):
    raise InvalidInput(f"expected a pandas Series, got {type(x_time).__name__}")
  x = x_time.sort_index()
  z = smooth(x.values, lmbd, d=d, sparse=sparse)
  return pd.Series(z, index=x.index, name=x.name)


def roughness(z, d):
  """Difference energy ||D z||^2 of order `d`.

  Drops as the penalty `lmbd` grows; zero for a polynomial of
  degree below `d`.
  """
  z = np.asarray(z, dtype=float)
  D = speyediff(len(z), d)
  dz = D.dot(z)
  return float(np.dot(dz, dz))


def residuals(y, z):
  """Raw minus smoothed values."""
  return np.asarray(y, dtype=float) - np.asarray(z, dtype=float)
