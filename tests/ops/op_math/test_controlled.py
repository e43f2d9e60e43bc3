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
Unit tests for the Controlled class and the ctrl function.
"""
import numpy as np
import pytest

import qmux
from qmux.allocation import Allocate, Deallocate
from qmux.exceptions import DecompositionUndefinedError
from qmux.operation import Operation
from qmux.ops.op_math import Adjoint, Controlled
from qmux.queuing import AnnotatedQueue
from qmux.tape import QuantumScript, make_qscript
from qmux.wires import Wires


class NoRepresentation(Operation):
    """An operation with nothing to control."""

    num_wires = 1


def controlled_matrix(base_matrix, num_control, control_values=None):
    """Block-diagonal matrix of ``base_matrix`` controlled on ``num_control`` wires."""
    dim = base_matrix.shape[0]
    control_values = control_values or [True] * num_control
    index = int("".join(str(int(v)) for v in control_values), 2)
    mat = np.eye(2**num_control * dim, dtype=complex)
    mat[index * dim : (index + 1) * dim, index * dim : (index + 1) * dim] = base_matrix
    return mat


class TestInitialization:
    """Tests for constructing Controlled operators."""

    def test_properties(self):
        """Test the wires and name of a controlled operator."""
        base = qmux.RX(1.234, wires=1)
        op = Controlled(base, (0, 2, 3), control_values=[True, False, True])

        assert op.name == "C(RX)"
        assert op.wires == Wires([0, 2, 3, 1])
        assert op.control_wires == Wires([0, 2, 3])
        assert op.target_wires == Wires([1])
        assert op.control_values == [True, False, True]
        assert op.data == (1.234,)

    def test_repr(self):
        """Test the representation with and without zero control values."""
        op = qmux.ctrl(qmux.RX(0.5, 0), 1)
        assert repr(op) == "Controlled(RX(0.5, wires=[0]), control_wires=[1])"
        assert (
            repr(qmux.ctrl(qmux.X(0), [1, 2], control_values=[0, 1]))
            == "Controlled(X(0), control_wires=[1, 2], control_values=[False, True])"
        )

    def test_overlapping_wires(self):
        """Test that the control wires must differ from the base wires."""
        with pytest.raises(ValueError, match="must be different"):
            Controlled(qmux.CNOT([0, 1]), control_wires=1)

    def test_control_values_length(self):
        """Test that the number of control values must match the control wires."""
        with pytest.raises(ValueError, match="same length"):
            Controlled(qmux.X(0), control_wires=[1, 2], control_values=[True])

    def test_base_removed_from_queue(self):
        """Test that the controlled operator replaces its base in the queue."""
        with AnnotatedQueue() as q:
            op = qmux.ctrl(qmux.H(0), control=1)

        assert q.queue == [op]


class TestCtrlFunction:
    """Tests for the qmux.ctrl function."""

    def test_nested_controls_are_flattened(self):
        """Test that nested controls give a single Controlled operator."""
        with AnnotatedQueue() as q:
            op = qmux.ctrl(qmux.ctrl(qmux.S(0), control=1), control=2)

        assert isinstance(op.base, qmux.S)
        assert op.control_wires == Wires([2, 1])
        assert q.queue == [op]

    def test_no_control(self):
        """Test that an empty control register returns the operator itself."""
        base = qmux.RZ(0.1, wires=0)
        assert qmux.ctrl(base, control=[]) is base

    def test_allocations_are_not_controlled(self):
        """Test that allocation instructions are never controlled."""

        def body():
            with qmux.allocate(1, state="zero", restored=True) as aux:
                qmux.CNOT([0, aux[0]])

        tape = make_qscript(qmux.ctrl(body, control="c"))()

        assert isinstance(tape[0], Allocate)
        assert isinstance(tape[1], Controlled)
        assert tape[1].control_wires == Wires("c")
        assert isinstance(tape[2], Deallocate)

    def test_quantum_function(self, tol):
        """Test that every operation of a quantum function is controlled."""

        def body(x):
            qmux.RY(x, wires=1)
            qmux.H(1)

        tape = make_qscript(qmux.ctrl(body, control=0, control_values=0))(0.4)
        assert all(isinstance(op, Controlled) for op in tape.operations)

        base = qmux.matrix(body, wire_order=[1])(0.4)
        expected = controlled_matrix(base, 1, [False])
        assert np.allclose(qmux.matrix(tape, wire_order=[0, 1]), expected, atol=tol)

    def test_not_callable(self):
        """Test that an error is raised for objects that are not callable."""
        with pytest.raises(ValueError, match="not an Operator or callable"):
            qmux.ctrl(3, control=0)


class TestMatrix:
    """Tests for the matrix of controlled operators."""

    @pytest.mark.parametrize("control_values", [[True], [False]])
    def test_single_control(self, control_values, random_unitary, rng, tol):
        """Test the matrix of an arbitrary unitary with one control."""
        U = random_unitary(1, rng)
        op = qmux.ctrl(qmux.QubitUnitary(U, wires=1), control=0, control_values=control_values)
        assert np.allclose(op.matrix(), controlled_matrix(U, 1, control_values), atol=tol)

    def test_wire_order(self, tol):
        """Test that the matrix is expanded to a wire order."""
        op = qmux.ctrl(qmux.X(0), control=1)
        expected = np.array([[1, 0, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0], [0, 1, 0, 0]])
        assert np.allclose(op.matrix(wire_order=[0, 1]), expected, atol=tol)


class TestDecomposition:
    """Tests for the decomposition of controlled operators."""

    def test_dedicated_rule(self):
        """Test that the dedicated controlled rule of the base is used."""
        op = qmux.ctrl(qmux.CNOT([1, 2]), control=0)
        (new_op,) = op.decomposition()

        assert isinstance(new_op, qmux.MultiControlledX)
        assert new_op.wires == Wires([0, 1, 2])

    def test_zero_control_values(self):
        """Test that zero control values are flipped before and after."""
        op = qmux.ctrl(qmux.S(0), control=1, control_values=0)
        decomp = op.decomposition()

        assert [o.name for o in decomp] == ["PauliX", "C(PhaseShift)", "PauliX"]
        assert decomp[0].wires == decomp[2].wires == Wires(1)

    def test_adjoint_of_controllable_base(self, tol):
        """Test that the controlled rule of an adjointed base is inverted."""
        base = Adjoint(qmux.MultiplexZ([0.1, 0.2], control_wires=[1], target_wire=2))
        op = qmux.ctrl(base, control=0)

        decomp = op.decomposition()
        assert all(isinstance(o, (Adjoint, qmux.MultiControlledX)) for o in decomp)

        base_matrix = qmux.matrix(base.base, wire_order=[1, 2]).conj().T
        mat = qmux.matrix(QuantumScript(decomp), wire_order=[0, 1, 2])
        assert np.allclose(mat, controlled_matrix(base_matrix, 1), atol=tol)

    def test_generic_decomposition(self, tol):
        """Test that every operation of the base decomposition is controlled otherwise."""
        op = qmux.ctrl(qmux.PhaseShift(0.3, wires=1), control=0)
        decomp = op.decomposition()

        assert [o.name for o in decomp] == ["C(RZ)", "C(GlobalPhase)"]
        mat = qmux.matrix(QuantumScript(decomp), wire_order=[0, 1])
        assert np.allclose(mat, op.matrix(), atol=tol)

    def test_undefined(self):
        """Test that a base without a decomposition cannot be decomposed when controlled."""
        op = qmux.ctrl(NoRepresentation(wires=0), control=1)
        assert not op.has_decomposition
        with pytest.raises(DecompositionUndefinedError):
            op.decomposition()


class TestAdjoint:
    """Tests for the adjoint of controlled operators."""

    def test_adjoint(self, tol):
        """Test that the adjoint controls the adjoint of the base."""
        op = qmux.ctrl(qmux.RX(0.3, wires=0), control=[1, 2], control_values=[1, 0])
        adj = op.adjoint()

        assert isinstance(adj, Controlled)
        assert isinstance(adj.base, qmux.RX)
        assert adj.control_values == [True, False]
        assert np.allclose(adj.matrix() @ op.matrix(), np.eye(8), atol=tol)
