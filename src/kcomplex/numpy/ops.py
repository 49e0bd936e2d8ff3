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
Vectorised complex arithmetic over packed buffers.

Each function is the elementwise counterpart of the scalar operation in
:mod:`kcomplex.core.arithmetic` and matches it bit for bit: the same
formulas, the same Smith branch selection (strict ``<``, ties to the
second branch) and the same exact-zero override in ``reciprocal``.

Assumptions
- NumPy only
- Inputs are packed buffers (``COMPLEX_PAIR_DTYPE``); binary operations
  broadcast like NumPy ufuncs
- Outputs are freshly allocated packed buffers; inputs are never written
- IEEE-754 inf/NaN results propagate silently (warnings suppressed)
"""

import numpy as np
from numpy.typing import ArrayLike

from kcomplex.types import FloatArrayNP, FloatNP, PackedComplexArrayNP

from .layout import assemble, validate_packed


def _parts(z: PackedComplexArrayNP, arg_name: str) -> tuple[FloatArrayNP, FloatArrayNP]:
    validate_packed(z, arg_name, contiguous=False)
    return z["re"], z["im"]


@np.errstate(all="ignore")
def add(z: PackedComplexArrayNP, w: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """Elementwise z + w."""
    a, b = _parts(z, "z")
    c, d = _parts(w, "w")
    return assemble(a + c, b + d)


@np.errstate(all="ignore")
def subtract(z: PackedComplexArrayNP, w: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """Elementwise z - w."""
    a, b = _parts(z, "z")
    c, d = _parts(w, "w")
    return assemble(a - c, b - d)


@np.errstate(all="ignore")
def multiply(z: PackedComplexArrayNP, w: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """
    Elementwise complex product z * w.

    Notes
    -----
        Formula: (a+bi) * (c+di) = (ac-bd) + (ad+cb)i
    """
    a, b = _parts(z, "z")
    c, d = _parts(w, "w")
    return assemble(a * c - b * d, a * d + c * b)


def conjugate(z: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """Elementwise conjugate (re, -im)."""
    a, b = _parts(z, "z")
    return assemble(a, -b)


def negate(z: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """Elementwise additive inverse (-re, -im)."""
    a, b = _parts(z, "z")
    return assemble(-a, -b)


@np.errstate(all="ignore")
def divide(z: PackedComplexArrayNP, w: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """
    Elementwise quotient z / w using Smith's algorithm.

    Args:
        z: dividend buffer
        w: divisor buffer (broadcast against ``z``)

    Returns
    -------
        quotient buffer with the broadcast shape

    Notes
    -----
        Both scalings are evaluated for every element and the result picks
        the one selected by |d| < |c| (elements with |d| >= |c|, including
        NaN comparisons, take the second scaling).
    """
    a, b = _parts(z, "z")
    c, d = _parts(w, "w")

    first = np.abs(d) < np.abs(c)

    # |d| < |c|: scale by c
    u1 = d / c
    den1 = c + d * u1
    re1 = (a + b * u1) / den1
    im1 = (b - a * u1) / den1

    # |d| >= |c|: scale by d
    u2 = c / d
    den2 = d + c * u2
    re2 = (b + a * u2) / den2
    im2 = (b * u2 - a) / den2

    return assemble(np.where(first, re1, re2), np.where(first, im1, im2))


@np.errstate(all="ignore")
def reciprocal(z: PackedComplexArrayNP) -> PackedComplexArrayNP:
    """
    Elementwise 1 / z.

    Exact-zero elements map to (+inf, +inf); the rest use the unscaled
    re = a/|z|^2, im = -b/|z|^2 form.
    """
    a, b = _parts(z, "z")
    zero = (a == 0.0) & (b == 0.0)
    u = a * a + b * b
    return assemble(np.where(zero, np.inf, a / u), np.where(zero, np.inf, -b / u))


@np.errstate(all="ignore")
def magnitude(z: PackedComplexArrayNP) -> FloatArrayNP:
    """Elementwise |z| via hypot."""
    a, b = _parts(z, "z")
    return np.hypot(a, b).astype(FloatNP, copy=False)


@np.errstate(all="ignore")
def phase(z: PackedComplexArrayNP) -> FloatArrayNP:
    """Elementwise atan2(im, re) in (-pi, pi]."""
    a, b = _parts(z, "z")
    return np.arctan2(b, a).astype(FloatNP, copy=False)


@np.errstate(all="ignore")
def from_polar(magnitude: ArrayLike, phase: ArrayLike) -> PackedComplexArrayNP:
    """Elementwise (magnitude*cos(phase), magnitude*sin(phase))."""
    r = np.asarray(magnitude, dtype=FloatNP)
    theta = np.asarray(phase, dtype=FloatNP)
    return assemble(r * np.cos(theta), r * np.sin(theta))


@np.errstate(all="ignore")
def lerp(
    start: PackedComplexArrayNP, end: PackedComplexArrayNP, weight: ArrayLike
) -> PackedComplexArrayNP:
    """Elementwise start + (end - start) * weight."""
    a, b = _parts(start, "start")
    c, d = _parts(end, "end")
    t = np.asarray(weight, dtype=FloatNP)
    return assemble(a + (c - a) * t, b + (d - b) * t)


@np.errstate(all="ignore")
def inverse_lerp(
    start: PackedComplexArrayNP, end: PackedComplexArrayNP, weight: ArrayLike
) -> PackedComplexArrayNP:
    """Elementwise (1 - weight) * end + weight * start."""
    a, b = _parts(start, "start")
    c, d = _parts(end, "end")
    t = np.asarray(weight, dtype=FloatNP)
    s = 1.0 - t
    return assemble(s * c + t * a, s * d + t * b)


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
