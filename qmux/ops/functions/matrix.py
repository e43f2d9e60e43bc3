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
This module contains the qmux.matrix function.
"""
from collections.abc import Callable, Sequence
from functools import wraps

import numpy as np

from qmux.allocation import Allocate, Deallocate
from qmux.exceptions import MatrixUndefinedError
from qmux.operation import Operator
from qmux.queuing import QueuingManager
from qmux.tape import QuantumScript, make_qscript
from qmux.wires import Wires, WiresLike


def matrix(op: Operator | QuantumScript | Callable, wire_order: WiresLike | None = None):
    r"""The dense matrix representation of an operation, a quantum script or a quantum function.

    Operators without a matrix of their own are represented by the product of the matrices of
    their decomposition, so that templates built from elementary gates have a matrix too.

    Args:
        op (Operator or QuantumScript or Callable): an operator, a quantum script or a
            quantum function that queues operators
        wire_order (Sequence[Any], optional): Order of the wires in the quantum circuit.
            Defaults to the wires of ``op`` in order of appearance.

    Returns:
        array or Callable: the matrix, or for a quantum function a function that takes the
        same arguments and returns the matrix

    Raises:
        MatrixUndefinedError: if the operator has neither a matrix nor a decomposition, or if
            the decomposition allocates dynamic wires

    **Example**

    >>> qmux.matrix(qmux.MultiplexZ([0.1, 0.2], control_wires=[0], target_wire=1))
    array([[0.99500417+0.09983342j, 0.        +0.j        , 0.        +0.j        , 0.        +0.j        ],
           [0.        +0.j        , 0.99500417-0.09983342j, 0.        +0.j        , 0.        +0.j        ],
           [0.        +0.j        , 0.        +0.j        , 0.98006658+0.19866933j, 0.        +0.j        ],
           [0.        +0.j        , 0.        +0.j        , 0.        +0.j        , 0.98006658-0.19866933j]])

    Circuits that borrow ancilla wires have no matrix on their own wires. Execute them on
    :class:`~.devices.DefaultQubit` instead.
    """
    if isinstance(op, Operator):
        return _operator_matrix(op, wire_order)

    if isinstance(op, QuantumScript):
        wire_order = op.wires if wire_order is None else wire_order
        return _operations_matrix(op.operations, Wires(wire_order))

    if callable(op):

        @wraps(op)
        def wrapper(*args, **kwargs):
            qscript = make_qscript(op)(*args, **kwargs)
            return matrix(qscript, wire_order=wire_order)

        return wrapper

    raise TypeError(f"Cannot compute the matrix of object {op} of type {type(op)}.")


def _operator_matrix(op: Operator, wire_order):
    if op.has_matrix:
        try:
            return op.matrix(wire_order=wire_order)
        except MatrixUndefinedError:
            pass

    if not op.has_decomposition:
        raise MatrixUndefinedError(f"Operator {op} defines neither a matrix nor a decomposition.")

    with QueuingManager.stop_recording():
        decomp = op.decomposition()

    wire_order = op.wires if wire_order is None else Wires(wire_order)
    return _operations_matrix(decomp, wire_order)


def _operations_matrix(operations: Sequence[Operator], wire_order: Wires):
    mat = np.eye(2 ** len(wire_order), dtype=complex)
    for op in operations:
        if isinstance(op, (Allocate, Deallocate)):
            raise MatrixUndefinedError(
                f"Cannot compute a matrix for a circuit containing {op.name}. "
                "Dynamically allocated wires are not part of the wire order."
            )
        mat = _operator_matrix(op, wire_order) @ mat
    return mat
