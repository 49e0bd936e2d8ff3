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
Reference case runner.

Evaluates operations on hand-picked inputs described in YAML and compares
the results with reference values. Case file layout::

    tolerance: {rtol: 1.0e-15, atol: 0.0}
    cases:
      - name: divide_wide_range
        op: divide
        z: [1.0, 1.0]
        w: [1.0e+300, 1.0e-300]
        expected: [1.0e-300, 1.0e-300]
        rtol: 1.0e-14          # optional per-case override

Complex operands are two-element lists, real operands plain numbers. Every
number goes through ``float()``, so ``1e300`` written without a dot (a
string to YAML) and ``.inf`` / ``.nan`` are all accepted.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np

from kcomplex import core
from kcomplex.core import Complex
from kcomplex.numpy import layout
from kcomplex.numpy import ops as np_ops
from kcomplex.types import COMPLEX_PAIR_DTYPE
from kcomplex.utils import load_config, max_abs_diff, trim_to_signature

logger = logging.getLogger(__name__)

REFERENCE_CASES = Path(__file__).with_name("reference_cases.yaml")

BACKENDS = ("scalar", "numpy")

_SCALAR_OPS: dict[str, Callable[..., Any]] = {
    "add": core.add,
    "subtract": core.subtract,
    "multiply": core.multiply,
    "conjugate": core.conjugate,
    "negate": core.negate,
    "divide": core.divide,
    "reciprocal": core.reciprocal,
    "magnitude": core.magnitude,
    "phase": core.phase,
    "from_polar": core.from_polar,
    "lerp": core.lerp,
    "inverse_lerp": core.inverse_lerp,
}

_NUMPY_OPS: dict[str, Callable[..., Any]] = {name: getattr(np_ops, name) for name in _SCALAR_OPS}


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one reference case.

    Attributes
    ----------
    name : str
        Case name from the file.
    op : str
        Operation name.
    actual : tuple[float, ...]
        Computed value, (re, im) for complex results.
    expected : tuple[float, ...]
        Reference value in the same form.
    passed : bool
        Whether ``actual`` matches ``expected`` within tolerance.
    """

    name: str
    op: str
    actual: tuple[float, ...]
    expected: tuple[float, ...]
    passed: bool


def _decode(value: Any) -> Complex | float:  # noqa: ANN401
    """Two-element lists become ``Complex``, scalars become ``float``."""
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            msg = f"Complex operand must have two components, got {value!r}"
            raise ValueError(msg)
        return Complex(float(value[0]), float(value[1]))
    return float(value)


def _flatten(value: Any) -> tuple[float, ...]:  # noqa: ANN401
    if isinstance(value, Complex):
        return (value.re, value.im)
    if isinstance(value, np.ndarray) and value.dtype == COMPLEX_PAIR_DTYPE:
        return (float(value["re"]), float(value["im"]))
    if isinstance(value, (list, tuple)):
        return tuple(float(v) for v in value)
    return (float(value),)


def _call(op: str, kwargs: dict[str, Any], backend: str) -> Any:  # noqa: ANN401
    if backend == "scalar":
        return _SCALAR_OPS[op](**kwargs)
    packed = {
        k: layout.from_values([v]).reshape(()) if isinstance(v, Complex) else v
        for k, v in kwargs.items()
    }
    return _NUMPY_OPS[op](**packed)


def run_case(
    case: dict[str, Any],
    rtol: float = 0.0,
    atol: float = 0.0,
    backend: str = "scalar",
) -> CaseResult:
    """Evaluate one case dict and compare against its ``expected`` value.

    Args:
        case: Case mapping (``name``, ``op``, operands, ``expected``)
        rtol: Default relative tolerance (overridden by ``case["rtol"]``)
        atol: Default absolute tolerance (overridden by ``case["atol"]``)
        backend: "scalar" for ``kcomplex.core`` or "numpy" for packed kernels

    Returns
    -------
        CaseResult with computed and expected values

    Raises
    ------
        KeyError: Unknown operation, missing operand or missing ``op``/``expected``
        ValueError: Unknown backend or malformed operand
    """
    if backend not in BACKENDS:
        msg = f"Unknown backend {backend!r}; expected one of {BACKENDS}"
        raise ValueError(msg)

    op = case["op"]
    if op not in _SCALAR_OPS:
        raise KeyError(f"Unknown operation {op!r} in case {case.get('name', '<unnamed>')!r}")

    name = str(case.get("name", op))
    kwargs = trim_to_signature(_SCALAR_OPS[op], case, strict=True)
    operands = {k: _decode(v) for k, v in kwargs.items()}
    actual = _flatten(_call(op, operands, backend))
    expected = _flatten(_decode(case["expected"]))

    case_rtol = float(case.get("rtol", rtol))
    case_atol = float(case.get("atol", atol))
    passed = len(actual) == len(expected) and bool(
        np.allclose(actual, expected, rtol=case_rtol, atol=case_atol, equal_nan=True)
    )

    if passed:
        logger.info("%s [%s]: ok %s", name, backend, actual)
    else:
        logger.warning("%s [%s]: got %s, expected %s", name, backend, actual, expected)
        max_abs_diff(actual, expected)

    return CaseResult(name=name, op=op, actual=actual, expected=expected, passed=passed)


def run_cases(cfg_path: Path | str | None = None, backend: str = "scalar") -> list[CaseResult]:
    """Run every case in a YAML case file.

    Args:
        cfg_path: Case file; defaults to the packaged reference cases
        backend: "scalar" or "numpy"

    Returns
    -------
        One CaseResult per case, in file order
    """
    cfg = load_config(REFERENCE_CASES if cfg_path is None else cfg_path)
    tolerance = cfg.get("tolerance", {})
    rtol = float(tolerance.get("rtol", 0.0))
    atol = float(tolerance.get("atol", 0.0))

    results = [
        run_case(case, rtol=rtol, atol=atol, backend=backend) for case in cfg.get("cases", [])
    ]

    n_failed = sum(not r.passed for r in results)
    logger.info("%d/%d reference cases passed [%s]", len(results) - n_failed, len(results), backend)
    return results


__all__ = [
    "BACKENDS",
    "REFERENCE_CASES",
    "CaseResult",
    "run_case",
    "run_cases",
]
