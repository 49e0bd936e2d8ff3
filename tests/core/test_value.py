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

"""Unit tests for `kcomplex.core.value`."""

import dataclasses
import math

import pytest

from kcomplex.core import (
    IMAGINARY_UNIT,
    INFINITY,
    NAN,
    ONE,
    ZERO,
    Complex,
    conjugate,
    from_real,
    is_finite,
    is_infinity,
    is_nan,
    is_zero,
    parse,
)


class TestConstants:
    """Named constants."""

    def test_infinity_sentinel(self) -> None:
        """INFINITY is (+inf, +inf)."""
        assert math.isinf(INFINITY.re) and INFINITY.re > 0
        assert math.isinf(INFINITY.im) and INFINITY.im > 0

    def test_nan_sentinel(self) -> None:
        """NAN is (nan, nan)."""
        assert math.isnan(NAN.re)
        assert math.isnan(NAN.im)

    def test_unit_values(self) -> None:
        """ZERO, ONE and IMAGINARY_UNIT hold the expected parts."""
        assert (ZERO.re, ZERO.im) == (0.0, 0.0)
        assert (ONE.re, ONE.im) == (1.0, 0.0)
        assert (IMAGINARY_UNIT.re, IMAGINARY_UNIT.im) == (0.0, 1.0)
        assert IMAGINARY_UNIT * IMAGINARY_UNIT == Complex(-1.0, 0.0)

    def test_from_real(self) -> None:
        """from_real places the value on the real axis."""
        assert from_real(2.5) == Complex(2.5, 0.0)
        assert isinstance(from_real(3).re, float)


class TestValueSemantics:
    """Immutability, equality and hashing."""

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        z = Complex(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            z.re = 3.0  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Equal parts compare and hash equal."""
        assert Complex(1.0, 2.0) == Complex(1.0, 2.0)
        assert Complex(1.0, 2.0) != Complex(2.0, 1.0)
        assert len({Complex(1.0, 2.0), Complex(1.0, 2.0)}) == 1

    def test_signed_zero_compares_equal(self) -> None:
        """-0.0 and 0.0 parts compare equal like floats."""
        assert Complex(-0.0, 0.0) == ZERO

    def test_no_padding_fields(self) -> None:
        """Only the two parts are stored."""
        assert Complex.__slots__ == ("re", "im")

    def test_integer_parts_stored_as_float(self) -> None:
        """Integer parts are converted to builtin floats."""
        z = Complex(1, 0)
        assert type(z.re) is float and type(z.im) is float
        assert str(z) == "(1.0, 0.0)"
        assert math.copysign(1.0, conjugate(z).im) == -1.0

    def test_non_numeric_part_raises(self) -> None:
        """Parts must be convertible to float."""
        with pytest.raises(ValueError):
            Complex("abc", 0.0)


class TestOperators:
    """Operator shorthand delegates to the arithmetic functions."""

    def test_binary_operators(self) -> None:
        """+, -, * and / on Complex operands."""
        z, w = Complex(1.0, 2.0), Complex(3.0, 4.0)
        assert z + w == Complex(4.0, 6.0)
        assert w - z == Complex(2.0, 2.0)
        assert z * w == Complex(-5.0, 10.0)
        assert Complex(1.0, 0.0) / Complex(0.0, 1.0) == Complex(0.0, -1.0)

    def test_mixed_builtin_operands(self) -> None:
        """int, float and complex operands are promoted."""
        z = Complex(1.0, 2.0)
        assert z + 1 == Complex(2.0, 2.0)
        assert 1 + z == Complex(2.0, 2.0)
        assert 2.0 * z == Complex(2.0, 4.0)
        assert z - 1.0 == Complex(0.0, 2.0)
        assert 1.0 - z == Complex(0.0, -2.0)
        assert z + (1 + 1j) == Complex(2.0, 3.0)
        assert 1 / Complex(0.0, 1.0) == Complex(0.0, -1.0)

    def test_unary_and_conversions(self) -> None:
        """Unary minus/plus, abs() and complex()."""
        z = Complex(3.0, -4.0)
        assert -z == Complex(-3.0, 4.0)
        assert +z is z
        assert abs(z) == 5.0
        assert complex(z) == 3.0 - 4.0j

    def test_unsupported_operand_raises(self) -> None:
        """Non-numeric operands are rejected by Python's operator protocol."""
        with pytest.raises(TypeError):
            _ = Complex(1.0, 2.0) + "1"  # type: ignore[operator]


class TestClassification:
    """is_finite / is_infinity / is_nan / is_zero."""

    @pytest.mark.parametrize(
        ("z", "finite", "infinite", "nan", "zero"),
        [
            (Complex(1.0, -2.0), True, False, False, False),
            (ZERO, True, False, False, True),
            (Complex(-0.0, 0.0), True, False, False, True),
            (INFINITY, False, True, False, False),
            (Complex(math.inf, math.nan), False, True, False, False),
            (Complex(1.0, math.nan), False, False, True, False),
            (NAN, False, False, True, False),
        ],
    )
    def test_predicates(
        self, z: Complex, finite: bool, infinite: bool, nan: bool, zero: bool
    ) -> None:
        """Each predicate follows the componentwise definition."""
        assert is_finite(z) is finite
        assert is_infinity(z) is infinite
        assert is_nan(z) is nan
        assert is_zero(z) is zero


class TestFormatting:
    """format() specs and parse()."""

    def test_default_and_all(self) -> None:
        """Empty spec and ALL render '(re, im)'."""
        z = Complex(1.5, -2.0)
        assert str(z) == "(1.5, -2.0)"
        assert format(z) == "(1.5, -2.0)"
        assert f"{z:all}" == "(1.5, -2.0)"

    def test_part_specs(self) -> None:
        """RE and IM render a single part, case-insensitively."""
        z = Complex(1.5, -2.0)
        assert f"{z:RE}" == "1.5"
        assert f"{z:im}" == "-2.0"

    def test_unknown_spec_raises(self) -> None:
        """Unsupported specs raise ValueError."""
        with pytest.raises(ValueError, match="not supported"):
            format(Complex(1.0, 2.0), "polar")

    def test_parse_round_trip(self) -> None:
        """parse(str(z)) == z, including full float precision."""
        z = Complex(0.1, -1e-300)
        assert parse(str(z)) == z

    def test_parse_special_values_and_whitespace(self) -> None:
        """inf/nan tokens and surrounding whitespace are accepted."""
        z = parse("  ( inf ,  nan )  ")
        assert math.isinf(z.re)
        assert math.isnan(z.im)

    @pytest.mark.parametrize("text", ["(1, 2", "1, 2", "(a, b)", "(1, 2, 3)", ""])
    def test_parse_malformed_raises(self, text: str) -> None:
        """Malformed text raises ValueError."""
        with pytest.raises(ValueError, match="Cannot parse"):
            parse(text)
