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

"""Scalar complex value type and arithmetic."""

from .arithmetic import (
    add,
    conjugate,
    divide,
    from_polar,
    inverse_lerp,
    lerp,
    magnitude,
    multiply,
    negate,
    phase,
    reciprocal,
    subtract,
)
from .value import (
    IMAGINARY_UNIT,
    INFINITY,
    NAN,
    ONE,
    ZERO,
    Complex,
    from_real,
    is_finite,
    is_infinity,
    is_nan,
    is_zero,
    parse,
)

__all__ = [
    "IMAGINARY_UNIT",
    "INFINITY",
    "NAN",
    "ONE",
    "ZERO",
    "Complex",
    "add",
    "conjugate",
    "divide",
    "from_polar",
    "from_real",
    "inverse_lerp",
    "is_finite",
    "is_infinity",
    "is_nan",
    "is_zero",
    "lerp",
    "magnitude",
    "multiply",
    "negate",
    "parse",
    "phase",
    "reciprocal",
    "subtract",
]
