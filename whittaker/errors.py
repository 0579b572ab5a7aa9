"""
GNU GENERAL PUBLIC LICENSE
Copyright (C) 2025 Will D. Rust, Marko Stojanovic, Daniel M. Simms

https://github.com/dspix/laspy/blob/main/LICENSE
"""


class WhittakerError(Exception):
    """Base class for smoothing failures."""


class InvalidOrder(WhittakerError, ValueError):
    """The difference operator cannot be built for this order and length."""


class InvalidInput(WhittakerError, ValueError):
    """Samples or penalty strength are not usable (non-finite, negative lambda)."""


class NumericalFailure(WhittakerError, ArithmeticError):
    """The linear system is singular or its decomposition broke down."""
