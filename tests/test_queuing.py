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
Unit tests for the :mod:`qmux.queuing` module.
"""
import pytest

import qmux
from qmux.exceptions import QueuingError
from qmux.queuing import AnnotatedQueue, QueuingManager, WrappedObj, process_queue, record


class TestQueuingManager:
    """Test the logic associated with the QueuingManager class."""

    def test_no_active_context(self):
        """Test the recording status when no context is active."""
        assert not QueuingManager.recording()
        assert QueuingManager.active_context() is None

    def test_nested_contexts(self):
        """Test that the innermost context is active and receives the operations."""
        with AnnotatedQueue() as q1:
            op1 = qmux.X(0)
            with AnnotatedQueue() as q2:
                assert QueuingManager.active_context() is q2
                op2 = qmux.Y(1)
            op3 = qmux.Z(2)

        assert q1.queue == [op1, op3]
        assert q2.queue == [op2]

    def test_stop_recording(self):
        """Test that no operations are queued while recording is stopped."""
        with AnnotatedQueue() as q:
            with QueuingManager.stop_recording():
                qmux.Y(1)
                assert not QueuingManager.recording()
            op = qmux.X(0)

        assert q.queue == [op]

    def test_remove_and_update_info(self):
        """Test removing objects and updating their metadata."""
        with AnnotatedQueue() as q:
            op1 = qmux.X(0)
            op2 = qmux.Y(0)
            QueuingManager.update_info(op1, owner="me")
            assert QueuingManager.get_info(op1) == {"owner": "me"}
            QueuingManager.remove(op2)
            # removing an object twice passes silently
            QueuingManager.remove(op2)

        assert q.queue == [op1]
        assert process_queue(q) == []

    def test_get_info_error(self):
        """Test that requesting the metadata of an object not in the queue raises an error."""
        q = AnnotatedQueue()
        with pytest.raises(QueuingError, match="not in the queue"):
            q.get_info(qmux.X(0))


class TestAnnotatedQueue:
    """Tests for the annotated queue."""

    def test_objects_compared_by_identity(self):
        """Test that two equal looking operators are two entries of the queue."""
        with AnnotatedQueue() as q:
            a = qmux.X(0)
            b = qmux.X(0)

        assert len(q) == 2
        assert q.queue[0] is a
        assert q.queue[1] is b

    def test_wrapped_obj(self):
        """Test that the wrapped object hashes by identity."""
        op = qmux.X(0)
        assert WrappedObj(op) == WrappedObj(op)
        assert hash(WrappedObj(op)) == id(op)

    def test_append_outside_context(self):
        """Test objects can be appended to an inactive queue."""
        q = AnnotatedQueue()
        op = qmux.X(0)
        q.append(op, owner=None)
        assert q.items() == ((op, {"owner": None}),)


class TestApply:
    """Tests for the ``apply`` function."""

    def test_apply_requeues_copy(self):
        """Test that applying an operator twice queues a copy the second time."""
        op = qmux.X(0)
        with AnnotatedQueue() as q:
            first = qmux.apply(op)
            second = qmux.apply(op)

        assert first is op
        assert second is not op
        assert q.queue == [first, second]

    def test_apply_without_context(self):
        """Test that an error is raised when no context is recording."""
        with pytest.raises(RuntimeError, match="No queuing context"):
            qmux.apply(qmux.X(0))


class TestRecord:
    """Tests for running a quantum function and collecting its operations."""

    @staticmethod
    def body(wire):
        qmux.H(wire)
        qmux.Z(wire)

    def test_record_without_context(self):
        """Test that the operations of the function are returned."""
        ops = record(self.body, 0)
        assert [op.name for op in ops] == ["Hadamard", "PauliZ"]

    def test_record_applies_to_active_context(self):
        """Test that the recorded operations are queued to the surrounding context."""
        with AnnotatedQueue() as q:
            ops = record(self.body, wire=1)

        assert q.queue == ops
