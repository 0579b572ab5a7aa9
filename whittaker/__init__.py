"""
GNU GENERAL PUBLIC LICENSE
Copyright (C) 2025 Will D. Rust, Marko Stojanovic, Daniel M. Simms

https://github.com/dspix/laspy/blob/main/LICENSE
"""

import logging

from whittaker.errors import InvalidInput, InvalidOrder, NumericalFailure, WhittakerError
from whittaker.filters import difference_stencil, penalty_matrix, smooth, speyediff
from whittaker.helper_funcs import residuals, roughness, smooth_series
from whittaker.linalg import solve

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "smooth",
    "smooth_series",
    "speyediff",
    "difference_stencil",
    "penalty_matrix",
    "solve",
    "roughness",
    "residuals",
    "WhittakerError",
    "InvalidOrder",
    "InvalidInput",
    "NumericalFailure",
    "__version__",
]
