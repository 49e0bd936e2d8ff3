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

"""Filter keyword dictionaries down to what a callable accepts."""

import inspect
from collections.abc import Callable
from typing import Any


def trim_to_signature(
    func: Callable[..., Any], data: dict[str, Any], *, strict: bool = False
) -> dict[str, Any]:
    """Return the entries of ``data`` that name keyword-capable parameters of ``func``.

    Args:
        func: Callable whose signature selects the keys
        data: Mapping with operands plus unrelated keys (names, tolerances, ...)
        strict: If True, every required parameter of ``func`` must be present

    Returns
    -------
        New dict in the key order of ``data``; values are not copied

    Raises
    ------
        KeyError: ``strict`` is set and required parameters are missing
    """
    params = [
        p
        for p in inspect.signature(func).parameters.values()
        if p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
    ]
    if strict:
        missing = [p.name for p in params if p.default is p.empty and p.name not in data]
        if missing:
            raise KeyError(f"{getattr(func, '__name__', func)!s} is missing {', '.join(missing)}")

    allowed = {p.name for p in params}
    return {k: v for k, v in data.items() if k in allowed}
