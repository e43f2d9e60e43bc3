# Copyright 2025 Xanadu Quantum Technologies Inc.

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
Unit tests for :func:`qmux.math.expand_matrix`.
"""
import numpy as np

from qmux.math import expand_matrix

X = np.array([[0, 1], [1, 0]])
CNOT = np.array([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]])


class TestExpandMatrix:
    """Tests for expanding matrices to a larger wire order."""

    def test_no_wire_order(self):
        """Test that the matrix is unchanged without a wire order."""
        assert expand_matrix(X, wires=[0]) is X

    def test_same_wire_order(self):
        """Test that the matrix is unchanged for its own wires."""
        assert expand_matrix(CNOT, wires=[0, 1], wire_order=[0, 1]) is CNOT

    def test_expand_first_wire(self):
        """Test that a matrix on the first wire is a left Kronecker factor."""
        res = expand_matrix(X, wires=["a"], wire_order=["a", "b"])
        assert np.allclose(res, np.kron(X, np.eye(2)))

    def test_expand_last_wire(self):
        """Test that a matrix on the last wire is a right Kronecker factor."""
        res = expand_matrix(X, wires=[1], wire_order=[0, 1])
        assert np.allclose(res, np.kron(np.eye(2), X))

    def test_permutation(self):
        """Test that reversing the wires gives the CNOT with swapped control and target."""
        res = expand_matrix(CNOT, wires=[1, 0], wire_order=[0, 1])
        expected = np.array([[1, 0, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0], [0, 1, 0, 0]])
        assert np.allclose(res, expected)

    def test_non_adjacent_wires(self):
        """Test expansion onto non-adjacent wires of a larger register."""
        res = expand_matrix(CNOT, wires=[0, 2], wire_order=[0, 1, 2])
        expected = np.eye(8)
        # |1x0> <-> |1x1>
        expected[[4, 5]] = expected[[5, 4]]
        expected[[6, 7]] = expected[[7, 6]]
        assert np.allclose(res, expected)

    def test_scalar(self):
        """Test that a matrix on no wires is a multiple of the identity."""
        res = expand_matrix(np.array([[1j]]), wires=[], wire_order=[0, 1])
        assert np.allclose(res, 1j * np.eye(4))
