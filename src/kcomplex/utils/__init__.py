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
Utility helpers: configuration, comparison, timing and HDF5 persistence.

HDF5 helpers (hdf5_load, hdf5_save) are only exported when h5py is
installed (``pip install kcomplex[hdf5]``).
"""

from ._map_keys import trim_to_signature
from ._max_abs_diff import max_abs_diff
from .config import load_config
from .timing import log_time

__all__ = [
    "load_config",
    "log_time",
    "max_abs_diff",
    "trim_to_signature",
]

# HDF5 persistence (only when h5py is installed)
try:
    from ._hdf5_load import hdf5_load  # noqa: F401
    from ._hdf5_save import hdf5_save  # noqa: F401

    __all__.extend(["hdf5_load", "hdf5_save"])
except ImportError:
    # h5py not available - HDF5 persistence disabled
    pass
