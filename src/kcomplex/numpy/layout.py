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
Packed complex buffers.

A packed buffer is a C-contiguous NumPy array of ``COMPLEX_PAIR_DTYPE``:
consecutive ``{double re; double im;}`` records with no padding, the layout
compute kernels read and write directly. This module converts between
packed buffers, NumPy complex arrays, raw bytes, stacked ``(2, ...)``
real/imag arrays, and sequences of scalar ``Complex`` values.
"""

import logging
from collections.abc import Iterable

import numpy as np
from numpy.typing import ArrayLike

from kcomplex.core import Complex
from kcomplex.types import (
    COMPLEX_PAIR_DTYPE,
    ComplexArrayNP,
    ComplexNP,
    FloatArrayNP,
    FloatNP,
    PackedComplexArrayNP,
)

logger = logging.getLogger(__name__)


def validate_packed(arr: object, arg_name: str = "array", *, contiguous: bool = True) -> None:
    """Validate that ``arr`` is a packed complex buffer.

    Args:
        arr: Object to validate
        arg_name: Name of the argument for error messages
        contiguous: Also require C-contiguous memory (kernels accept strided views)

    Raises
    ------
        TypeError: If ``arr`` is not a NumPy array
        ValueError: If dtype or memory layout is wrong

    Examples
    --------
        >>> validate_packed(pack([1 + 2j]), "z")  # OK
        >>> validate_packed(np.zeros(2), "w")  # Raises ValueError
    """
    if not isinstance(arr, np.ndarray):
        msg = f"{arg_name} must be a numpy.ndarray, got {type(arr).__name__}"
        raise TypeError(msg)

    if arr.dtype != COMPLEX_PAIR_DTYPE:
        raise ValueError(
            f"{arg_name} has dtype '{arr.dtype}', expected packed {COMPLEX_PAIR_DTYPE}. "
            "Convert complex data with: kcomplex.numpy.pack(array)"
        )

    if contiguous and not arr.flags.c_contiguous:
        raise ValueError(
            f"{arg_name} is not C-contiguous. "
            "Packed buffers must be C-contiguous. "
            "Convert with: np.ascontiguousarray(array)"
        )


def empty_packed(shape: int | tuple[int, ...]) -> PackedComplexArrayNP:
    """Allocate an uninitialised packed buffer."""
    return np.empty(shape, dtype=COMPLEX_PAIR_DTYPE)


def assemble(re: ArrayLike, im: ArrayLike) -> PackedComplexArrayNP:
    """Interleave real and imaginary parts into a new packed buffer.

    ``re`` and ``im`` are broadcast against each other.
    """
    re_arr, im_arr = np.broadcast_arrays(
        np.asarray(re, dtype=FloatNP), np.asarray(im, dtype=FloatNP)
    )
    out = empty_packed(re_arr.shape)
    out["re"] = re_arr
    out["im"] = im_arr
    return out


def pack(x: ArrayLike) -> PackedComplexArrayNP:
    """Convert complex array-like data to a packed buffer.

    Args:
        x: Complex (or real) array-like of any shape

    Returns
    -------
        Packed buffer with the same shape as ``x``
    """
    arr = np.array(x, dtype=ComplexNP, order="C")
    # complex128 already stores {re, im} float64 pairs; reinterpret the bytes
    return arr.view(COMPLEX_PAIR_DTYPE)


def unpack(p: PackedComplexArrayNP) -> ComplexArrayNP:
    """Convert a packed buffer to a complex128 array.

    Contiguous buffers are reinterpreted without copying, so writes to the
    result are visible in ``p``.
    """
    if p.dtype != COMPLEX_PAIR_DTYPE:
        raise ValueError(f"Expected packed {COMPLEX_PAIR_DTYPE}, got '{p.dtype}'")
    if p.flags.c_contiguous:
        return p.view(ComplexNP)
    logger.debug("unpack: non-contiguous buffer %s, copying", p.shape)
    return p.copy(order="C").view(ComplexNP)


def from_buffer(buf: bytes | bytearray | memoryview, count: int = -1) -> PackedComplexArrayNP:
    """Interpret raw bytes as a 1D packed buffer (16 bytes per element).

    Raises
    ------
        ValueError: If the byte length is not a multiple of the record size
    """
    nbytes = memoryview(buf).nbytes
    if count < 0 and nbytes % COMPLEX_PAIR_DTYPE.itemsize:
        raise ValueError(
            f"Buffer length {nbytes} is not a multiple of {COMPLEX_PAIR_DTYPE.itemsize} bytes"
        )
    return np.frombuffer(buf, dtype=COMPLEX_PAIR_DTYPE, count=count)


def to_bytes(p: PackedComplexArrayNP) -> bytes:
    """Raw bytes of a packed buffer in C order."""
    validate_packed(p, "p")
    return p.tobytes()


def to_ri(p: PackedComplexArrayNP) -> FloatArrayNP:
    """Packed buffer -> stacked real/imag array with shape (2, ...)."""
    validate_packed(p, "p", contiguous=False)
    return np.stack([p["re"], p["im"]], axis=0).astype(FloatNP, copy=False)


def from_ri(x__ri: ArrayLike) -> PackedComplexArrayNP:
    """Stacked real/imag array with shape (2, ...) -> packed buffer."""
    arr = np.asarray(x__ri, dtype=FloatNP)
    if arr.ndim < 1 or arr.shape[0] != 2:
        msg = f"Expected stacked real/imag array with shape (2, ...), got {arr.shape}"
        raise ValueError(msg)
    return assemble(arr[0], arr[1])


def from_values(values: Iterable[Complex]) -> PackedComplexArrayNP:
    """Pack a sequence of scalar ``Complex`` values into a 1D buffer."""
    return np.array([(z.re, z.im) for z in values], dtype=COMPLEX_PAIR_DTYPE).reshape(-1)


def to_values(p: PackedComplexArrayNP) -> list[Complex]:
    """Unpack a buffer (flattened in C order) into scalar ``Complex`` values."""
    flat = p.reshape(-1)
    return [Complex(float(r), float(i)) for r, i in zip(flat["re"], flat["im"], strict=True)]


__all__ = [
    "assemble",
    "empty_packed",
    "from_buffer",
    "from_ri",
    "from_values",
    "pack",
    "to_bytes",
    "to_ri",
    "to_values",
    "unpack",
    "validate_packed",
]
