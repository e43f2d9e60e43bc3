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
Unit tests for the QubitUnitary operation.
"""
import numpy as np
import pytest

import qmux
from qmux.wires import Wires


class TestQubitUnitary:
    """Tests for the QubitUnitary operation."""

    @pytest.mark.parametrize("num_wires", [1, 2, 3])
    def test_matrix(self, num_wires, random_unitary, rng, tol):
        """Test that the matrix is the given unitary."""
        U = random_unitary(num_wires, rng)
        op = qmux.QubitUnitary(U, wires=range(num_wires))

        assert op.wires == Wires(range(num_wires))
        assert np.allclose(op.matrix(), U, atol=tol)

    def test_matrix_wire_order(self, random_unitary, rng, tol):
        """Test that the matrix is expanded to a wire order."""
        U = random_unitary(1, rng)
        op = qmux.QubitUnitary(U, wires="b")
        assert np.allclose(op.matrix(wire_order=["a", "b"]), np.kron(np.eye(2), U), atol=tol)

    def test_adjoint(self, random_unitary, rng, tol):
        """Test that the adjoint holds the conjugate transpose."""
        U = random_unitary(2, rng)
        op = qmux.QubitUnitary(U, wires=[0, 1])
        adj = op.adjoint()

        assert isinstance(adj, qmux.QubitUnitary)
        assert np.allclose(adj.matrix() @ U, np.eye(4), atol=tol)

    def test_no_decomposition(self):
        """Test that an arbitrary unitary is only available as a matrix."""
        assert qmux.QubitUnitary.has_matrix
        assert not qmux.QubitUnitary.has_decomposition

    @pytest.mark.parametrize(
        "U, wires",
        [
            (np.eye(2), [0, 1]),
            (np.eye(4), [0]),
            (np.ones((2, 4)), [0]),
            (np.ones(4), [0, 1]),
        ],
    )
    def test_wrong_shape(self, U, wires):
        """Test that a matrix of the wrong shape is rejected."""
        with pytest.raises(ValueError, match="Input unitary must be of shape"):
            qmux.QubitUnitary(U, wires=wires)

    def test_unitary_check(self):
        """Test that a warning is raised for non-unitary matrices if requested."""
        with pytest.warns(UserWarning, match="may not be unitary"):
            qmux.QubitUnitary(np.array([[1, 1], [0, 1]]), wires=0, unitary_check=True)
