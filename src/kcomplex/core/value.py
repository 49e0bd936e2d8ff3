# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
The complex value type, its named constants and classification helpers.

A ``Complex`` is an immutable (re, im) pair of IEEE-754 doubles. It carries
no validity flag: either part may be any float, including +-inf and NaN.
Arithmetic lives in :mod:`kcomplex.core.arithmetic`; the operators defined
here are shorthand for those functions.
"""

import math
import re
from dataclasses import dataclass

_FORMATS = ("ALL", "RE", "IM")

_PAIR_RE = re.compile(r"^\s*\(\s*([^,\s()]+)\s*,\s*([^,\s()]+)\s*\)\s*$")


@dataclass(frozen=True, slots=True)
class Complex:
    """Complex value with real part ``re`` and imaginary part ``im``.

    Attributes
    ----------
    re : float
        Real part.
    im : float
        Imaginary part.
    """

    re: float
    im: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # Operator shorthand; every operator returns a new value

    def __add__(self, other: object) -> "Complex":
        w = _coerce(other)
        return NotImplemented if w is None else _ops.add(self, w)

    def __radd__(self, other: object) -> "Complex":
        z = _coerce(other)
        return NotImplemented if z is None else _ops.add(z, self)

    def __sub__(self, other: object) -> "Complex":
        w = _coerce(other)
        return NotImplemented if w is None else _ops.subtract(self, w)

    def __rsub__(self, other: object) -> "Complex":
        z = _coerce(other)
        return NotImplemented if z is None else _ops.subtract(z, self)

    def __mul__(self, other: object) -> "Complex":
        w = _coerce(other)
        return NotImplemented if w is None else _ops.multiply(self, w)

    def __rmul__(self, other: object) -> "Complex":
        z = _coerce(other)
        return NotImplemented if z is None else _ops.multiply(z, self)

    def __truediv__(self, other: object) -> "Complex":
        w = _coerce(other)
        return NotImplemented if w is None else _ops.divide(self, w)

    def __rtruediv__(self, other: object) -> "Complex":
        z = _coerce(other)
        return NotImplemented if z is None else _ops.divide(z, self)

    def __neg__(self) -> "Complex":
        return _ops.negate(self)

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self) -> float:
        return _ops.magnitude(self)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __format__(self, format_spec: str) -> str:
        """Format as ``"(re, im)"`` (``ALL``, default), ``RE`` or ``IM``."""
        spec = format_spec.upper() if format_spec else "ALL"
        if spec == "ALL":
            return f"({self.re!r}, {self.im!r})"
        if spec == "RE":
            return repr(self.re)
        if spec == "IM":
            return repr(self.im)
        msg = f'The "{format_spec}" format is not supported. Use one of {", ".join(_FORMATS)}.'
        raise ValueError(msg)

    def __str__(self) -> str:
        return format(self, "ALL")


def _coerce(value: object) -> Complex | None:
    """Promote builtin numbers to ``Complex``; ``None`` for anything else."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, (int, float)):
        return Complex(float(value), 0.0)
    if isinstance(value, complex):
        return Complex(value.real, value.imag)
    return None


INFINITY = Complex(math.inf, math.inf)
"""Infinity sentinel (+inf, +inf), returned by ``reciprocal`` of exact zero."""

NAN = Complex(math.nan, math.nan)
"""NaN sentinel (nan, nan)."""

ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
IMAGINARY_UNIT = Complex(0.0, 1.0)


def from_real(x: float) -> Complex:
    """Complex value on the real axis."""
    return Complex(float(x), 0.0)


def is_finite(z: Complex) -> bool:
    """True when both parts are finite."""
    return math.isfinite(z.re) and math.isfinite(z.im)


def is_infinity(z: Complex) -> bool:
    """True when either part is infinite."""
    return math.isinf(z.re) or math.isinf(z.im)


def is_nan(z: Complex) -> bool:
    """True when no part is infinite and at least one part is NaN."""
    return not is_infinity(z) and not is_finite(z)


def is_zero(z: Complex) -> bool:
    """True when both parts compare equal to zero (either sign)."""
    return z.re == 0.0 and z.im == 0.0


def parse(text: str) -> Complex:
    """Parse the ``"(re, im)"`` form produced by ``str(z)``.

    Args:
        text: String such as ``"(1.5, -2.0)"``; ``inf`` and ``nan`` are accepted.

    Returns
    -------
        Parsed complex value.

    Raises
    ------
        ValueError: If the text is not a parenthesised pair of floats.
    """
    match = _PAIR_RE.match(text)
    if match is None:
        msg = f"Cannot parse {text!r} as a complex value; expected '(re, im)'"
        raise ValueError(msg)
    try:
        return Complex(float(match.group(1)), float(match.group(2)))
    except ValueError as err:
        msg = f"Cannot parse {text!r} as a complex value: {err}"
        raise ValueError(msg) from err


from . import arithmetic as _ops  # noqa: E402
