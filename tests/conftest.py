# Copyright 2018-2025 Xanadu Quantum Technologies Inc.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Pytest configuration file for qmux test suite.
"""
import os

import numpy as np
import pytest

import qmux

# defaults
TOL = 1e-6


@pytest.fixture(scope="session")
def tol():
    """Numerical tolerance for equality tests."""
    return float(os.environ.get("TOL", TOL))


@pytest.fixture(scope="function")
def seed():
    """Seed for the random number generators of a test."""
    return 42


@pytest.fixture(scope="function")
def rng(seed):
    """A numpy random number generator."""
    return np.random.default_rng(seed)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Run every test against the built-in device defaults, whatever the user configuration."""
    monkeypatch.setattr(qmux, "default_config", qmux.Configuration("qmux-test-config-absent.toml"))


def random_unitary(num_wires, rng):
    """A Haar-distributed random unitary matrix on ``num_wires`` qubits."""
    dim = 2**num_wires
    z = (rng.standard_normal((dim, dim)) + 1j * rng.standard_normal((dim, dim))) / np.sqrt(2)
    q, r = np.linalg.qr(z)
    d = np.diag(r)
    return q * (d / np.abs(d))


def random_state(num_wires, rng):
    """A random normalized state vector on ``num_wires`` qubits."""
    dim = 2**num_wires
    state = rng.standard_normal(dim) + 1j * rng.standard_normal(dim)
    return state / np.linalg.norm(state)


@pytest.fixture(scope="session", name="random_unitary")
def random_unitary_fixture():
    """Fixture returning the random unitary helper."""
    return random_unitary


@pytest.fixture(scope="session", name="random_state")
def random_state_fixture():
    """Fixture returning the random state helper."""
    return random_state
