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
JIT-compiled complex arithmetic on stacked real/imag arrays.

Operations on arrays where axis 0 contains [real, imag] components, using
only real-valued arithmetic so the graphs lower to any accelerator
(including backends without native complex support). Semantics match
:mod:`kcomplex.numpy.ops`; float64 results require ``jax_enable_x64``.
"""

import jax
import jax.numpy as jnp
from jax import Array


def _stack(re: Array, im: Array) -> Array:
    return jnp.stack([re, im], axis=0)


@jax.jit
def add(z__ri: Array, w__ri: Array) -> Array:
    """Elementwise z + w on (2, ...) arrays."""
    return _stack(z__ri[0] + w__ri[0], z__ri[1] + w__ri[1])


@jax.jit
def subtract(z__ri: Array, w__ri: Array) -> Array:
    """Elementwise z - w on (2, ...) arrays."""
    return _stack(z__ri[0] - w__ri[0], z__ri[1] - w__ri[1])


@jax.jit
def multiply(z__ri: Array, w__ri: Array) -> Array:
    """Complex multiplication: z * w.

    Args:
        z__ri: Complex tensor with shape (2, ...)
        w__ri: Complex tensor with shape (2, ...)

    Returns
    -------
        result__ri: Complex product with shape (2, ...)

    Notes
    -----
        Formula: (a+bi) * (c+di) = (ac-bd) + (ad+cb)i
        - result[0] = real part = z[0]*w[0] - z[1]*w[1]
        - result[1] = imag part = z[0]*w[1] + w[0]*z[1]
    """
    a, b = z__ri[0], z__ri[1]
    c, d = w__ri[0], w__ri[1]
    return _stack(a * c - b * d, a * d + c * b)


@jax.jit
def conjugate(z__ri: Array) -> Array:
    """Complex conjugate on (2, ...) arrays."""
    return _stack(z__ri[0], -z__ri[1])


@jax.jit
def negate(z__ri: Array) -> Array:
    """Additive inverse on (2, ...) arrays."""
    return -z__ri


@jax.jit
def divide(z__ri: Array, w__ri: Array) -> Array:
    """Complex division z / w using Smith's algorithm.

    Args:
        z__ri: Dividend with shape (2, ...)
        w__ri: Divisor with shape (2, ...)

    Returns
    -------
        result__ri: Quotient with shape (2, ...)

    Notes
    -----
        Both scalings are traced and ``jnp.where`` selects per element:
        - |d| <  |c|: u = d/c, re = (a + b*u)/(c + d*u), im = (b - a*u)/(c + d*u)
        - |d| >= |c|: u = c/d, re = (b + a*u)/(d + c*u), im = (b*u - a)/(d + c*u)
    """
    a, b = z__ri[0], z__ri[1]
    c, d = w__ri[0], w__ri[1]

    first = jnp.abs(d) < jnp.abs(c)

    u1 = d / c
    den1 = c + d * u1
    re1 = (a + b * u1) / den1
    im1 = (b - a * u1) / den1

    u2 = c / d
    den2 = d + c * u2
    re2 = (b + a * u2) / den2
    im2 = (b * u2 - a) / den2

    return _stack(jnp.where(first, re1, re2), jnp.where(first, im1, im2))


@jax.jit
def reciprocal(z__ri: Array) -> Array:
    """Complex reciprocal 1 / z; exact zero maps to (+inf, +inf)."""
    a, b = z__ri[0], z__ri[1]
    zero = (a == 0) & (b == 0)
    u = a * a + b * b
    return _stack(jnp.where(zero, jnp.inf, a / u), jnp.where(zero, jnp.inf, -b / u))


@jax.jit
def magnitude(z__ri: Array) -> Array:
    """|z| via hypot, shape (...)."""
    return jnp.hypot(z__ri[0], z__ri[1])


@jax.jit
def phase(z__ri: Array) -> Array:
    """atan2(im, re) in (-pi, pi], shape (...)."""
    return jnp.arctan2(z__ri[1], z__ri[0])


@jax.jit
def from_polar(magnitude: Array, phase: Array) -> Array:
    """Stack (magnitude*cos(phase), magnitude*sin(phase)) on axis 0."""
    return _stack(magnitude * jnp.cos(phase), magnitude * jnp.sin(phase))


__all__ = [
    "add",
    "conjugate",
    "divide",
    "from_polar",
    "magnitude",
    "multiply",
    "negate",
    "phase",
    "reciprocal",
    "subtract",
]
