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
This module contains the base quantum script class, a sequence of operations
with wire bookkeeping.
"""
import copy
from collections.abc import Callable, Iterable, Sequence

from qmux.operation import Operator
from qmux.queuing import AnnotatedQueue, process_queue
from qmux.wires import Wires


class QuantumScript:
    r"""The operations that make up a circuit, in the order they are applied.

    Args:
        ops (Iterable[Operator]): An iterable of the operations to be performed

    **Example:**

    .. code-block:: python

        ops = [qmux.H(0), qmux.CNOT([0, "a"]), qmux.RZ(0.5, wires="a")]
        qscript = QuantumScript(ops)

    >>> qscript.wires
    Wires([0, 'a'])
    >>> qscript.num_wires
    2
    >>> list(qscript)
    [H(0), CNOT(wires=[0, 'a']), RZ(0.5, wires=['a'])]

    Dynamic wires obtained with :func:`~.allocate` are wires like any other until they are
    resolved onto concrete labels with :func:`~.transforms.resolve_dynamic_wires`.
    """

    def __init__(self, ops: Iterable[Operator] | None = None):
        self._ops = [] if ops is None else list(ops)
        self._wires = None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: wires={list(self.wires)}, ops={len(self._ops)}>"

    def __iter__(self):
        return iter(self._ops)

    def __len__(self):
        return len(self._ops)

    def __getitem__(self, idx):
        return self._ops[idx]

    @property
    def operations(self) -> list[Operator]:
        """Returns the state preparations and operations on the quantum script."""
        return self._ops

    @property
    def wires(self) -> Wires:
        """Returns the wires used in the quantum script process.

        Returns:
            ~.Wires: wires in quantum script process
        """
        if self._wires is None:
            self._wires = Wires.all_wires(op.wires for op in self._ops)
        return self._wires

    @property
    def num_wires(self) -> int:
        """Returns the number of wires in the quantum script process"""
        return len(self.wires)

    @classmethod
    def from_queue(cls, queue: AnnotatedQueue) -> "QuantumScript":
        """Construct a QuantumScript from an AnnotatedQueue."""
        return cls(process_queue(queue))

    def copy(self, copy_operations: bool = False, **update) -> "QuantumScript":
        """Returns a copy of the quantum script. If ``operations`` (or its alias ``ops``) is
        given, it replaces the copied operations on the new script.

        Args:
            copy_operations (bool): If True, the operations are also shallow copied.
                Otherwise, the copied operations will simply be references to the original
                operations.

        Keyword Args:
            operations (Iterable[Operator]): An iterable of the operations to be performed.

        Returns:
            QuantumScript : A copy of the quantum script, with modified attributes if specified
            by keyword argument.
        """
        if "ops" in update:
            update["operations"] = update.pop("ops")
        for k in update:
            if k != "operations":
                raise TypeError(
                    f"{self.__class__}.copy() got an unexpected key '{k}' in update dict"
                )

        _ops = update.get("operations", self.operations)
        if copy_operations:
            _ops = [copy.copy(op) for op in _ops]
        return self.__class__(_ops)


QuantumScriptBatch = Sequence[QuantumScript]


def make_qscript(fn: Callable) -> Callable[..., QuantumScript]:
    """Returns a function that generates a qscript from a quantum function without any
    operation queuing taking place.

    This is useful when you would like to manipulate or transform
    the qscript created by a quantum function without evaluating it.

    Args:
        fn (function): the quantum function to generate the qscript from

    Returns:
        function: The returned function takes the same arguments as the quantum
        function. When called, it returns the generated quantum script
        without any queueing occurring.

    **Example**

    Consider the following quantum function:

    .. code-block:: python

        def qfunc(x):
            qmux.Hadamard(wires=0)
            qmux.CNOT(wires=[0, 1])
            qmux.RX(x, wires=0)

    We can use ``make_qscript`` to extract the qscript generated by this
    quantum function, without any of the operations being queued by
    any existing queuing contexts:

    >>> with qmux.queuing.AnnotatedQueue() as active_queue:
    ...     _ = qmux.RY(1.0, wires=0)
    ...     qs = make_qscript(qfunc)(0.5)
    >>> qs.operations
    [H(0), CNOT(wires=[0, 1]), RX(0.5, wires=[0])]

    Note that the currently recording queue did not queue any of these quantum operations:

    >>> active_queue.queue
    [RY(1.0, wires=[0])]
    """

    def wrapper(*args, **kwargs):
        with AnnotatedQueue() as q:
            fn(*args, **kwargs)

        return QuantumScript.from_queue(q)

    return wrapper
