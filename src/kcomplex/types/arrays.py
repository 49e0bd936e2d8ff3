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
Centralized array type aliases and the packed complex layout.

Public API exports only the canonical choices per backend to enforce a
single dtype across the codebase and avoid accidental casting:

- NumPy: FloatNP, ComplexNP, COMPLEX_PAIR_DTYPE (always available)
- JAX: FloatJAX, ComplexJAX (only when JAX is installed)
"""

import numpy as np
import numpy.typing as npt

# NumPy scalar types (always available)
FloatNP = np.float64
"""NumPy floating-point scalar type (float64)."""

ComplexNP = np.complex128
"""NumPy complex scalar type (complex128)."""

COMPLEX_PAIR_DTYPE = np.dtype([("re", FloatNP), ("im", FloatNP)], align=False)
"""Packed {re, im} record: two float64 fields at offsets 0 and 8, itemsize 16.

Buffers of this dtype are byte-compatible with arrays of
``struct { double re; double im; }`` read and written by compute kernels.
"""

# NumPy array types for type hinting
type FloatArrayNP = npt.NDArray[FloatNP]
"""NumPy floating-point array type (NDArray[float64])."""

type ComplexArrayNP = npt.NDArray[ComplexNP]
"""NumPy complex array type (NDArray[complex128])."""

type PackedComplexArrayNP = npt.NDArray[np.void]
"""NumPy packed complex array type (NDArray with COMPLEX_PAIR_DTYPE)."""

# JAX types (only available when JAX is installed)
try:
    import jax.numpy as jnp

    FloatJAX = jnp.float64
    """JAX floating-point scalar type (float64). Requires jax_enable_x64."""

    ComplexJAX = jnp.complex128
    """JAX complex scalar type (complex128). Requires jax_enable_x64."""
except ImportError:
    # JAX not available - device backend disabled
    pass
