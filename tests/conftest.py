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

"""Pytest configuration for kcomplex tests."""

import importlib.util
import logging
import os
from pathlib import Path

import numpy as np
import pytest

# Handle the case where python-dotenv is optional.
# Tests run during wheel testing won't have it installed.
try:
    from dotenv import load_dotenv

    DOTENV_AVAILABLE = True
except ImportError:
    DOTENV_AVAILABLE = False

logger = logging.getLogger(__name__)


def _env_file() -> tuple[Path, str]:
    """Resolve the env file: explicit path first, then the source tree default."""
    env_file_path = os.environ.get("KCOMPLEX_ENV_PYTHON_FILE")
    if env_file_path:
        return Path(env_file_path), "KCOMPLEX_ENV_PYTHON_FILE environment variable"
    return Path(__file__).parent.parent / ".env.python", "source directory"


def _jax_enabled() -> bool:
    """JAX tests run unless disabled explicitly or JAX is not installed."""
    if os.environ.get("KCOMPLEX_ENABLE_JAX", "ON").upper() == "OFF":
        return False
    return importlib.util.find_spec("jax") is not None


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest environment before tests run."""
    config.addinivalue_line("markers", "jax: test requires the JAX backend")

    # Load environment variables before any imports that need them
    env_file, _ = _env_file()
    if env_file.exists() and DOTENV_AVAILABLE:
        load_dotenv(dotenv_path=env_file)

    # Silence noisy JAX debug logs
    logging.getLogger("jax").setLevel(logging.WARNING)
    logging.getLogger("jax._src").setLevel(logging.WARNING)
    logging.getLogger("jax._src.xla_bridge").setLevel(logging.CRITICAL)

    # Silence noisy h5py debug logs
    logging.getLogger("h5py").setLevel(logging.WARNING)


def pytest_sessionstart(session: pytest.Session) -> None:
    """Log environment setup after pytest logging is initialized."""
    env_file, source = _env_file()

    if env_file.exists():
        if DOTENV_AVAILABLE:
            logger.info(f"Loaded environment from: {env_file} (via {source})")

            # Log non-sensitive variables from whitelist
            safe_vars = {
                "KCOMPLEX_ENABLE_JAX",
                "JAX_PLATFORMS",
            }
            logger.info("Environment file contents:")
            for line in env_file.read_text().splitlines():
                if line and not line.startswith("#"):
                    var_name = line.split("=")[0]
                    if var_name in safe_vars:
                        logger.info(f"  {line}")
                    else:
                        logger.info(f"  {var_name}=<value set, but not logged here>")
        else:
            logger.warning(
                f".env.python file exists at {env_file} but python-dotenv is not installed. "
                "Environment variables must be set manually or tests may fail."
            )
    else:
        logger.info(
            f"No .env.python file found at {env_file} (via {source}). "
            "Environment variables must be set manually if needed."
        )


def pytest_ignore_collect(collection_path: Path, config: pytest.Config) -> bool | None:
    """Ignore tests/jax collection when the JAX backend is unavailable.

    This hook runs before test collection, preventing import errors
    when jax is not installed.
    """
    if not _jax_enabled() and "jax" in collection_path.parts:
        logger.info(f"Ignoring {collection_path} (JAX backend disabled)")
        return True

    return None


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests marked with @pytest.mark.jax when the JAX backend is unavailable."""
    if _jax_enabled():
        return

    skip_jax = pytest.mark.skip(reason="Skipping jax tests: JAX backend disabled")
    jax_skipped_count = 0

    for item in items:
        if "jax" in item.keywords:
            item.add_marker(skip_jax)
            jax_skipped_count += 1

    if jax_skipped_count > 0:
        logger.info(
            f"JAX backend disabled: Skipping {jax_skipped_count} jax tests. "
            "To enable these tests, install kcomplex[jax] and unset KCOMPLEX_ENABLE_JAX=OFF"
        )


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator shared by property-style tests."""
    return np.random.default_rng(0)
