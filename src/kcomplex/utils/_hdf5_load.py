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

"""Loader for HDF5 files written by `hdf5_save`."""

import logging
from pathlib import Path
from typing import Any

import h5py  # type: ignore[import-untyped]
import numpy as np

from kcomplex.types import COMPLEX_PAIR_DTYPE, ComplexNP

logger = logging.getLogger(__name__)


def _is_struct_complex(dtype: np.dtype) -> bool:
    return dtype.names is not None and set(dtype.names) == {"re", "im"}


def hdf5_load(filename: Path | str, *, packed: bool = True) -> dict[str, Any]:
    """Load all top-level datasets of an HDF5 file into a dict.

    Parameters
    ----------
    filename : Path | str
        Input HDF5 file path
    packed : bool, optional
        If True (default), compound {re, im} datasets are returned as packed
        buffers (``COMPLEX_PAIR_DTYPE``); otherwise as complex128 arrays.

    Returns
    -------
    dict[str, Any]
        Dataset name -> numpy array (0-d datasets become numpy scalars)
    """
    path = Path(filename)
    if not path.exists():
        msg = f"HDF5 file not found: {path}"
        raise FileNotFoundError(msg)

    out: dict[str, Any] = {}
    with h5py.File(path, "r") as f:
        for key, dset in f.items():
            if not isinstance(dset, h5py.Dataset):
                logger.warning("Skipping non-dataset HDF5 node %s in %s", key, path)
                continue
            arr = dset[()]
            if _is_struct_complex(dset.dtype):
                arr = np.asarray(arr)
                re = np.asarray(arr["re"], dtype=np.float64)
                im = np.asarray(arr["im"], dtype=np.float64)
                if packed:
                    rec = np.empty(arr.shape, dtype=COMPLEX_PAIR_DTYPE)
                    rec["re"] = re
                    rec["im"] = im
                    out[key] = rec
                else:
                    cplx = np.empty(arr.shape, dtype=ComplexNP)
                    cplx.real = re
                    cplx.imag = im
                    out[key] = cplx
            else:
                out[key] = arr

    logger.debug("Loaded %d datasets from %s", len(out), path)
    return out
