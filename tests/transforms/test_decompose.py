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
Unit tests for the decompose transform.
"""
import pytest

import qmux
from qmux.allocation import Allocate, Deallocate
from qmux.exceptions import DeviceError
from qmux.operation import Operation
from qmux.tape import QuantumScript, make_qscript
from qmux.transforms import decompose, null_postprocessing


class NoMatrixOp(Operation):
    """An operation that is neither accepted nor decomposable."""

    num_wires = 1


class InfiniteOp(Operation):
    """An operation whose decomposition never terminates."""

    num_wires = 1

    @staticmethod
    def compute_decomposition(wires):
        return [InfiniteOp(wires=wires)]


def rz_cnot(op):
    """Accept only RZ and CNOT."""
    return op.name in {"RZ", "CNOT"}


class TestDecompose:
    """Tests for the decompose transform."""

    def test_nothing_to_decompose(self):
        """Test that an accepted circuit is returned unchanged."""
        tape = QuantumScript([qmux.RZ(0.1, 0), qmux.CNOT([0, 1])])
        (new_tape,), fn = decompose(tape, rz_cnot)

        assert new_tape is tape
        assert fn is null_postprocessing

    def test_multiplex_z(self):
        """Test the decomposition of a MultiplexZ into RZ and CNOT gates."""
        tape = QuantumScript([qmux.MultiplexZ([0.1, 0.2], control_wires=[0], target_wire=1)])
        (new_tape,), _ = decompose(tape, rz_cnot)

        assert [op.name for op in new_tape] == ["RZ", "CNOT", "RZ", "CNOT"]
        assert new_tape[0].data[0] == pytest.approx(-0.3)
        assert new_tape[2].data[0] == pytest.approx(0.1)

    def test_depth_first(self):
        """Test that decompositions are spliced in place of the operator."""
        tape = QuantumScript(
            [qmux.RZ(0.5, 2), qmux.MultiplexZ([0.1, 0.2], [0], 1), qmux.CNOT([1, 2])]
        )
        (new_tape,), _ = decompose(tape, rz_cnot)
        assert [op.name for op in new_tape] == ["RZ", "RZ", "CNOT", "RZ", "CNOT", "CNOT"]

    def test_max_expansion(self):
        """Test that operators at the maximum depth are kept."""
        tape = QuantumScript([qmux.MultiplexZ([0.1, 0.2, 0.3, 0.4], [0, 1], 2)])
        (new_tape,), _ = decompose(tape, rz_cnot, max_expansion=1)
        assert [op.name for op in new_tape] == ["MultiplexZ", "CNOT", "MultiplexZ", "CNOT"]

    def test_allocations_are_kept(self):
        """Test that allocation instructions pass through unchanged."""

        def circuit():
            with qmux.allocate(1, state="zero", restored=True) as aux:
                qmux.MultiplexZ([0.1, 0.2], [0], aux[0])

        (new_tape,), _ = decompose(make_qscript(circuit)(), rz_cnot)

        assert isinstance(new_tape[0], Allocate)
        assert isinstance(new_tape[-1], Deallocate)
        assert len(new_tape) == 6

    def test_undecomposable(self):
        """Test the error raised for operators that cannot be decomposed."""
        tape = QuantumScript([NoMatrixOp(wires=0)])
        with pytest.raises(DeviceError, match="not supported with my-device"):
            decompose(tape, rz_cnot, name="my-device")

    def test_custom_error(self):
        """Test that the error type can be chosen."""
        tape = QuantumScript([NoMatrixOp(wires=0)])
        with pytest.raises(ValueError, match="does not provide a decomposition"):
            decompose(tape, rz_cnot, error=ValueError)

    def test_infinite_recursion(self):
        """Test that a decomposition that does not terminate raises an error."""
        tape = QuantumScript([InfiniteOp(wires=0)])
        with pytest.raises(DeviceError, match="did not terminate"):
            decompose(tape, rz_cnot)

    def test_null_postprocessing(self):
        """Test that the postprocessing function unpacks a batch of one result."""
        assert null_postprocessing(("result",)) == "result"
