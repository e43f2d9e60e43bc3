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
Tests for the allocation module.
"""
import pytest

import qmux
from qmux import allocate, deallocate
from qmux.allocation import Allocate, AllocateState, Deallocate, DynamicRegister
from qmux.wires import DynamicWire, Wires


class TestAllocateOp:
    """Tests for the ``Allocate`` instruction."""

    def test_initialization(self):
        """Test that the op stores the state and the restore promise."""
        wires = [DynamicWire() for _ in range(3)]
        op = Allocate(wires, state="any", restored=True)
        assert op.wires == Wires(wires)
        assert op.hyperparameters == {"state": AllocateState.ANY, "restored": True}
        assert op.state == AllocateState.ANY
        assert op.restored

    def test_default_hyperparameters(self):
        """Test that wires are borrowed in the zero state without a restore promise by default."""
        op = Allocate(DynamicWire())
        assert op.state == AllocateState.ZERO
        assert not op.restored

    def test_repr(self):
        """Test that the instruction prints its placeholder wires."""
        op = Allocate([DynamicWire(), DynamicWire()])
        assert repr(op) == "Allocate(wires=[<DynamicWire>, <DynamicWire>])"


def test_dynamic_register_repr():
    """Test the repr for the DynamicRegister."""

    reg = DynamicRegister((DynamicWire(), DynamicWire()))
    assert repr(reg) == "<DynamicRegister: size=2>"


def test_error_bad_state():
    """Test that a ValueError is raised for an unsupported state."""

    with qmux.queuing.AnnotatedQueue() as q:
        with pytest.raises(ValueError, match="is not a valid AllocateState"):
            allocate(2, state="no")
    assert len(q) == 0


def test_allocate_function():
    """Test that allocate returns dynamic wires and queues an Allocate op."""
    with qmux.queuing.AnnotatedQueue() as q:
        wires = allocate(4)
    assert isinstance(wires, DynamicRegister)
    assert len(wires) == 4
    assert isinstance(wires[:3], Wires)
    assert all(isinstance(w, DynamicWire) for w in wires)

    assert len(q) == 1
    op = q.queue[0]
    assert isinstance(op, Allocate)
    assert op.wires == Wires(wires)
    assert op.state == AllocateState.ZERO


def test_allocate_kwargs():
    """Test that the kwargs to allocate get passed to the op."""

    with qmux.queuing.AnnotatedQueue() as q:
        allocate(3, state="any", restored=True)

    op = q.queue[0]
    assert op.state == AllocateState.ANY
    assert op.restored


class TestAllocateContextManager:
    """Tests for using ``allocate`` as a context manager."""

    def test_deallocates_on_exit(self):
        """Test that leaving the block queues a matching Deallocate."""
        with qmux.queuing.AnnotatedQueue() as q:
            with allocate(2) as reg:
                qmux.CNOT([0, reg[0]])

        assert [op.name for op in q.queue] == ["Allocate", "CNOT", "Deallocate"]
        assert q.queue[0].wires == Wires(reg)
        assert q.queue[2].wires == Wires(reg)

    def test_deallocates_on_exception(self):
        """Test that the wires are deallocated when the block raises."""
        with qmux.queuing.AnnotatedQueue() as q:
            with pytest.raises(RuntimeError, match="boom"):
                with allocate(1) as reg:
                    qmux.X(reg[0])
                    raise RuntimeError("boom")

        assert [op.name for op in q.queue] == ["Allocate", "PauliX", "Deallocate"]
        assert q.queue[-1].wires == Wires(reg)

    def test_nested_registers_are_distinct(self):
        """Test that nested allocations receive different dynamic wires."""
        with qmux.queuing.AnnotatedQueue():
            with allocate(1) as outer:
                with allocate(1) as inner:
                    pass

        assert outer[0] != inner[0]


class TestDeallocate:
    """Tests for the ``deallocate`` function."""

    def test_single_dynamic_wire(self):
        """Test that deallocate can accept a single dynamic wire."""
        wire = DynamicWire()
        with qmux.queuing.AnnotatedQueue() as q:
            op = deallocate(wire)
        assert op.wires == Wires((wire,))

        assert len(q.queue) == 1
        assert op is q.queue[0]
        assert isinstance(op, Deallocate)

    def test_error_non_dynamic_wire(self):
        """Test that an error is raised if a non-dynamic wire is attempted to be deallocated."""
        with pytest.raises(ValueError, match="only accepts DynamicWire wires."):
            deallocate((DynamicWire(), 1))

    def test_multiple_dynamic_wires(self):
        """Test multiple dynamic wires can be deallocated."""

        wires = [DynamicWire(), DynamicWire()]
        with qmux.queuing.AnnotatedQueue() as q:
            op = deallocate(wires)
        assert op.wires == Wires(wires)

        assert len(q.queue) == 1
        assert op is q.queue[0]
