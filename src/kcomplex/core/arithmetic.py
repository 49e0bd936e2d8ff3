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
Scalar complex arithmetic.

- add, subtract, multiply, conjugate, negate: componentwise / textbook forms.
- divide: Smith's scaled division (no intermediate overflow for operands
  whose real and imaginary parts differ by orders of magnitude).
- reciprocal: naive 1/|z|^2 form, with exact zero mapped to ``INFINITY``.
- magnitude, phase, from_polar: hypot / atan2 / cos-sin primitives.

Assumptions
- Every function is pure and never raises on any float input
- Overflow, division by zero and invalid operations follow IEEE-754
  (inf / NaN results); NumPy floating-point error reporting is suppressed
- Results carry plain Python floats
"""

import numpy as np

from kcomplex.types import FloatNP

from .value import INFINITY, Complex


def _pair(re: FloatNP, im: FloatNP) -> Complex:
    return Complex(float(re), float(im))


@np.errstate(all="ignore")
def add(z: Complex, w: Complex) -> Complex:
    """Componentwise sum z + w."""
    return _pair(FloatNP(z.re) + w.re, FloatNP(z.im) + w.im)


@np.errstate(all="ignore")
def subtract(z: Complex, w: Complex) -> Complex:
    """Componentwise difference z - w."""
    return _pair(FloatNP(z.re) - w.re, FloatNP(z.im) - w.im)


@np.errstate(all="ignore")
def multiply(z: Complex, w: Complex) -> Complex:
    """
    Complex product z * w.

    Notes
    -----
        Formula: (a+bi) * (c+di) = (ac-bd) + (ad+cb)i
        No overflow guard: large operands overflow to inf per IEEE-754.
    """
    a, b = FloatNP(z.re), FloatNP(z.im)
    c, d = FloatNP(w.re), FloatNP(w.im)
    return _pair(a * c - b * d, a * d + c * b)


def conjugate(z: Complex) -> Complex:
    """Complex conjugate (re, -im)."""
    return Complex(z.re, -z.im)


def negate(z: Complex) -> Complex:
    """Additive inverse (-re, -im)."""
    return Complex(-z.re, -z.im)


@np.errstate(all="ignore")
def divide(z: Complex, w: Complex) -> Complex:
    """
    Complex quotient z / w using Smith's algorithm.

    Args:
        z: dividend
        w: divisor

    Returns
    -------
        Quotient z / w.

    Notes
    -----
        With z = a+bi and w = c+di, scale by the larger part of w:

        - |d| <  |c|: u = d/c, re = (a + b*u) / (c + d*u), im = (b - a*u) / (c + d*u)
        - |d| >= |c|: u = c/d, re = (b + a*u) / (d + c*u), im = (b*u - a) / (d + c*u)

        The guard is strict, so |d| == |c| takes the second branch. There is
        no zero-divisor check: w = (0, 0) yields inf/NaN through the second
        branch.
    """
    a, b = FloatNP(z.re), FloatNP(z.im)
    c, d = FloatNP(w.re), FloatNP(w.im)

    if abs(d) < abs(c):
        u = d / c
        den = c + d * u
        return _pair((a + b * u) / den, (b - a * u) / den)

    u = c / d
    den = d + c * u
    return _pair((b + a * u) / den, (b * u - a) / den)


@np.errstate(all="ignore")
def reciprocal(z: Complex) -> Complex:
    """
    Complex reciprocal 1 / z.

    Exact zero (either sign) returns the ``INFINITY`` sentinel instead of a
    NaN pair. Other inputs use the unscaled form re = a/|z|^2, im = -b/|z|^2,
    which over/underflows for |z| beyond roughly 1e154 or below 1e-154.
    """
    if z.re == 0.0 and z.im == 0.0:
        return INFINITY

    a, b = FloatNP(z.re), FloatNP(z.im)
    u = a * a + b * b
    return _pair(a / u, -b / u)


@np.errstate(all="ignore")
def magnitude(z: Complex) -> float:
    """|z| via hypot, free of intermediate overflow."""
    return float(np.hypot(FloatNP(z.re), FloatNP(z.im)))


@np.errstate(all="ignore")
def phase(z: Complex) -> float:
    """arg(z) = atan2(im, re) in (-pi, pi]; phase of (0, 0) is 0."""
    return float(np.arctan2(FloatNP(z.im), FloatNP(z.re)))


@np.errstate(all="ignore")
def from_polar(magnitude: float, phase: float) -> Complex:
    """
    Build (magnitude*cos(phase), magnitude*sin(phase)).

    A negative magnitude yields the point rotated by pi.
    """
    r, theta = FloatNP(magnitude), FloatNP(phase)
    return _pair(r * np.cos(theta), r * np.sin(theta))


@np.errstate(all="ignore")
def lerp(start: Complex, end: Complex, weight: float) -> Complex:
    """Componentwise linear interpolation start + (end - start) * weight."""
    t = FloatNP(weight)
    return _pair(
        start.re + (FloatNP(end.re) - start.re) * t,
        start.im + (FloatNP(end.im) - start.im) * t,
    )


@np.errstate(all="ignore")
def inverse_lerp(start: Complex, end: Complex, weight: float) -> Complex:
    """Componentwise (1 - weight) * end + weight * start, running from end back to start."""
    t = FloatNP(weight)
    s = 1.0 - t
    return _pair(s * end.re + t * start.re, s * end.im + t * start.im)


__all__ = [
    "add",
    "conjugate",
    "divide",
    "from_polar",
    "inverse_lerp",
    "lerp",
    "magnitude",
    "multiply",
    "negate",
    "phase",
    "reciprocal",
    "subtract",
]
