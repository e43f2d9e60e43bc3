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
This submodule defines the symbolic operation that indicates the adjoint of an operator.
"""
from collections.abc import Sequence
from functools import wraps

import numpy as np

from qmux.allocation import Allocate, AllocateState, Deallocate
from qmux.exceptions import AdjointUndefinedError
from qmux.operation import Operation, Operator
from qmux.queuing import AnnotatedQueue, QueuingManager, apply, process_queue

from .symbolicop import SymbolicOp


def adjoint(fn, lazy=True):
    """Create the adjoint of an Operator or a function that applies the adjoint of the provided function.

    Args:
        fn (function or :class:`~.operation.Operator`): A single operator or a quantum function
            that applies quantum operations.

    Keyword Args:
        lazy=True (bool): If the transform is behaving lazily, all operations are wrapped in an
            ``Adjoint`` class and handled later. If ``lazy=False``, operation-specific adjoint
            behavior is employed.

    Returns:
        (function or :class:`~.operation.Operator`): If an Operator is provided, returns an
        Operator that is the adjoint. If a function is provided, returns a function with the
        same call signature that returns the Adjoint of the provided function.

    .. note::

        The adjoint and inverse are identical for unitary gates, but not in general. For example,
        quantum channels and observables may have different adjoint and inverse operations.

    **Example**

    >>> qmux.adjoint(qmux.S(0))
    Adjoint(S(wires=[0]))
    >>> qmux.adjoint(qmux.RX(0.5, wires=0), lazy=False)
    RX(-0.5, wires=[0])

    The adjoint of a quantum function applies the adjoint of every operation, in reverse order:

    .. code-block:: python

        def my_ops(a, wire):
            qmux.RX(a, wires=wire)
            qmux.S(wire)

    >>> with qmux.queuing.AnnotatedQueue() as q:
    ...     qmux.adjoint(my_ops)(0.2, wire=0)
    >>> q.queue
    [Adjoint(S(wires=[0])), Adjoint(RX(0.2, wires=[0]))]

    Allocation scopes inside the function stay well formed: every ``Deallocate`` becomes the
    matching ``Allocate`` and vice versa. Only allocations made with ``restored=True`` can be
    reversed.
    """
    if isinstance(fn, Operator):
        return Adjoint(fn) if lazy else _single_op_eager(fn, update_queue=True)
    if not callable(fn):
        raise ValueError(
            f"The object {fn} of type {type(fn)} is not callable. "
            "This error might occur if you apply adjoint to a list "
            "of operations instead of a function or template."
        )

    @wraps(fn)
    def wrapper(*args, **kwargs):
        with QueuingManager.stop_recording(), AnnotatedQueue() as q:
            fn(*args, **kwargs)
        return reverse_operations(process_queue(q), lazy=lazy)

    return wrapper


def _single_op_eager(op: Operator, update_queue: bool = False) -> Operator:
    if op.has_adjoint:
        adj = op.adjoint()
        if update_queue:
            QueuingManager.remove(op)
            QueuingManager.append(adj)
        return adj
    return Adjoint(op)


def reverse_operations(operations: Sequence[Operator], lazy=True) -> list[Operator]:
    """Return the adjoint of a sequence of operations, in reverse order.

    ``Allocate`` and ``Deallocate`` swap roles so that each allocation scope is still opened
    before it is closed. The new operations are queued if a context is recording.

    Args:
        operations (Sequence[.Operator]): the operations to invert
        lazy (bool): whether to wrap the operations in :class:`~.Adjoint`

    Returns:
        list[.Operator]: the inverted sequence

    Raises:
        AdjointUndefinedError: if one of the allocations does not promise to restore its wires
    """
    states = {}
    for op in operations:
        if isinstance(op, Allocate):
            if not op.restored:
                raise AdjointUndefinedError(
                    f"Cannot invert {op}: only allocations with restored=True can be reversed."
                )
            states.update({w: op.state for w in op.wires})

    new_ops = []
    for op in reversed(operations):
        if isinstance(op, Deallocate):
            state = states.get(op.wires[0], AllocateState.ZERO)
            new_ops.append(Allocate(op.wires, state=state, restored=True))
        elif isinstance(op, Allocate):
            new_ops.append(Deallocate(op.wires))
        elif lazy:
            new_ops.append(Adjoint(op))
        else:
            new_ops.append(_single_op_eager(op))
    return new_ops


# pylint: disable=too-many-public-methods
class Adjoint(SymbolicOp, Operation):
    """
    The Adjoint of an operator.

    Args:
        base (~.operation.Operator): The operator that is adjointed.

    .. seealso:: :func:`~.adjoint`, :meth:`~.operation.Operator.adjoint`

    This is a *developer*-facing class, and the :func:`~.adjoint` transform should be used to
    construct instances of this class.

    **Example**

    >>> op = Adjoint(qmux.S(0))
    >>> op.name
    'Adjoint(S)'
    >>> qmux.matrix(op)
    array([[1.-0.j, 0.-0.j],
           [0.-0.j, 0.-1.j]])
    >>> op.decomposition()
    [Adjoint(PhaseShift(1.5707963267948966, wires=[0]))]
    """

    def __repr__(self):
        return f"Adjoint({self.base})"

    def matrix(self, wire_order=None):
        base_matrix = self.base.matrix(wire_order=wire_order)
        return np.conj(np.transpose(base_matrix))

    # pylint: disable=invalid-overridden-method
    @property
    def has_decomposition(self):
        return self.base.has_adjoint or self.base.has_decomposition

    def decomposition(self):
        if self.base.has_adjoint:
            base_adj = self.base.adjoint()
            return [base_adj]

        with QueuingManager.stop_recording():
            base_decomp = self.base.decomposition()
        return reverse_operations(base_decomp)

    def adjoint(self):
        return apply(self.base) if QueuingManager.recording() else self.base


def is_adjoint_of_controllable(op: Operator) -> bool:
    """Whether ``op`` is the adjoint of an operation with a dedicated controlled decomposition."""
    return isinstance(op, Adjoint) and getattr(op.base, "has_controlled_decomposition", False)


def controlled_adjoint_decomposition(op: Adjoint, control_wires) -> list[Operator]:
    """Controlled decomposition of the adjoint of an operation with a dedicated controlled rule.

    The controlled rule of the base is inverted, so that a control on the adjoint costs the
    same as a control on the base.
    """
    with QueuingManager.stop_recording():
        base_decomp = op.base.controlled_decomposition(control_wires)
    return reverse_operations(base_decomp)

