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
This submodule defines the symbolic operation that indicates the control of an operator.
"""
from functools import wraps

import numpy as np
from scipy.linalg import block_diag

import qmux
from qmux.allocation import Allocate, Deallocate
from qmux.exceptions import DecompositionUndefinedError
from qmux.math import expand_matrix
from qmux.operation import Operation, Operator
from qmux.queuing import AnnotatedQueue, QueuingManager, apply, process_queue
from qmux.wires import Wires, WiresLike

from .adjoint import Adjoint, controlled_adjoint_decomposition, is_adjoint_of_controllable
from .symbolicop import SymbolicOp


def ctrl(op, control: WiresLike, control_values=None):
    """Create a method that applies a controlled version of the provided op.

    Args:
        op (function or :class:`~.operation.Operator`): A single operator or a function that
            applies qmux operators.
        control (Wires): The control wire(s).
        control_values (bool or list[bool]): The value(s) the control wire(s) should take.
            Integers other than 0 or 1 will be treated as ``int(bool(x))``.

    Returns:
        function or :class:`~.operation.Operator`: If an Operator is provided, returns a
        Controlled version of the Operator. If a function is provided, returns a function with
        the same call signature that creates a controlled version of the provided function.

    **Example**

    >>> qmux.ctrl(qmux.RX(0.123, wires=0), control=1)
    Controlled(RX(0.123, wires=[0]), control_wires=[1])

    .. details::
        :title: Usage Details

        **Nesting Controls**

        Nested ``ctrl`` calls are flattened into a single :class:`~.Controlled` operator whose
        control wires are the outer controls followed by the inner ones.

        >>> qmux.ctrl(qmux.ctrl(qmux.S(0), control=1), control=2)
        Controlled(S(wires=[0]), control_wires=[2, 1])

        **Control Value Assignment**

        Zero control values are implemented by flipping the corresponding control wires
        before and after the controlled operation:

        >>> op = qmux.ctrl(qmux.S(0), control=1, control_values=0)
        >>> op.decomposition()
        [X(1), Controlled(PhaseShift(1.5707963267948966, wires=[0]), control_wires=[1]), X(1)]

        **Allocations**

        ``Allocate`` and ``Deallocate`` instructions are never controlled, since borrowing a
        wire does not depend on the state of the control register.
    """
    if isinstance(op, Operator):
        return create_controlled_op(op, control, control_values)

    if not callable(op):
        raise ValueError(
            f"The object {op} of type {type(op)} is not an Operator or callable. "
            "This error might occur if you apply ctrl to a list "
            "of operations instead of a function or Operator."
        )

    @wraps(op)
    def wrapper(*args, **kwargs):
        with QueuingManager.stop_recording(), AnnotatedQueue() as q:
            op(*args, **kwargs)
        return [_control_recorded(o, control, control_values) for o in process_queue(q)]

    return wrapper


def _process_control_values(control_values, control_wires: Wires) -> tuple[bool, ...]:
    if control_values is None:
        return (True,) * len(control_wires)
    if isinstance(control_values, (int, bool, np.integer)):
        control_values = [control_values]
    control_values = tuple(bool(value) for value in control_values)
    if len(control_values) != len(control_wires):
        raise ValueError("control_values should be the same length as control_wires")
    return control_values


def create_controlled_op(op: Operator, control: WiresLike, control_values=None) -> Operator:
    """Default ``qmux.ctrl`` implementation, allowing other implementations to call it when needed."""
    control = Wires(control)
    control_values = _process_control_values(control_values, control)

    if isinstance(op, (Allocate, Deallocate)) or len(control) == 0:
        return op

    if isinstance(op, Controlled):
        QueuingManager.remove(op)
        return Controlled(
            op.base,
            control_wires=control + op.control_wires,
            control_values=control_values + tuple(op.control_values),
        )

    return Controlled(op, control_wires=control, control_values=control_values)


def _control_recorded(op: Operator, control: WiresLike, control_values=None) -> Operator:
    """Control an operation that was recorded outside of the active queue."""
    if isinstance(op, (Allocate, Deallocate)) or len(Wires(control)) == 0:
        return apply(op) if QueuingManager.recording() else op
    return create_controlled_op(op, control, control_values)


# pylint: disable=too-many-public-methods
class Controlled(SymbolicOp, Operation):
    """Symbolic operator denoting a controlled operator.

    Args:
        base (~.operation.Operator): the operator that is controlled
        control_wires (Any): The wires to control on.

    Keyword Args:
        control_values (Iterable[Bool]): The values to control on. Must be the same
            length as ``control_wires``. Defaults to ``True`` for all control wires.
            Provided values are converted to `Bool` internally.
        id (str): custom label given to an operator instance,
            can be useful for some applications where the instance has to be identified.

    Raises:
        ValueError: if the control wires overlap with the wires of the base operator

    .. note::
        This class, ``Controlled``, denotes a controlled version of any individual operation.
        :func:`~.ctrl` is the entry point that also flattens nested controls and accepts
        quantum functions.

    **Example**

    >>> base = qmux.RX(1.234, 1)
    >>> op = Controlled(base, (0, 2, 3), control_values=[True, False, True])
    >>> op.name
    'C(RX)'
    >>> op.wires
    Wires([0, 2, 3, 1])
    >>> op.control_wires
    Wires([0, 2, 3])
    >>> op.base.wires
    Wires([1])

    The decomposition of a controlled operator uses, in order of preference:

    #. the dedicated controlled rule of the base, :meth:`~.Operation.controlled_decomposition`,
    #. the inverted controlled rule of ``base.base`` if the base is an :class:`~.Adjoint`,
    #. the base decomposition with every operation controlled.
    """

    def __init__(self, base, control_wires: WiresLike, control_values=None, id=None):
        control_wires = Wires(control_wires)
        control_values = _process_control_values(control_values, control_wires)

        if len(Wires.shared_wires([base.wires, control_wires])) != 0:
            raise ValueError("The control wires must be different from the base operation wires.")

        self.hyperparameters["control_wires"] = control_wires
        self.hyperparameters["control_values"] = control_values

        super().__init__(base, id=id)
        self._name = f"C({base.name})"

    def __repr__(self):
        params = [f"control_wires={self.control_wires.tolist()}"]
        if not all(self.control_values):
            params.append(f"control_values={list(self.control_values)}")
        return f"Controlled({self.base}, {', '.join(params)})"

    @property
    def control_wires(self) -> Wires:
        return self.hyperparameters["control_wires"]

    @property
    def control_values(self) -> list[bool]:
        """Iterable[Bool]. For each control wire, denotes whether to control on ``True`` or
        ``False``."""
        return list(self.hyperparameters["control_values"])

    @property
    def target_wires(self) -> Wires:
        """The wires of the target operator."""
        return self.base.wires

    @property
    def wires(self) -> Wires:
        return self.control_wires + self.base.wires

    def matrix(self, wire_order=None):
        base_matrix = self.base.matrix()
        num_target_states = 2 ** len(self.target_wires)

        index = 0
        for value in self.control_values:
            index = (index << 1) | int(value)

        total_size = 2 ** len(self.control_wires) * num_target_states
        padding_left = index * num_target_states
        padding_right = total_size - padding_left - num_target_states

        left_pad = np.eye(padding_left)
        right_pad = np.eye(padding_right)
        canonical_matrix = block_diag(left_pad, base_matrix, right_pad)

        if wire_order is None or self.wires == Wires(wire_order):
            return canonical_matrix

        return expand_matrix(canonical_matrix, wires=self.wires, wire_order=wire_order)

    # pylint: disable=invalid-overridden-method
    @property
    def has_decomposition(self):
        base = self.base
        if getattr(base, "has_controlled_decomposition", False):
            return True
        if is_adjoint_of_controllable(base):
            return True
        return base.has_decomposition

    def decomposition(self):
        flips = [w for w, value in zip(self.control_wires, self.control_values) if not value]

        decomp = [qmux.PauliX(w) for w in flips]
        decomp.extend(self._decomposition_all_ones())
        decomp.extend(qmux.PauliX(w) for w in flips)
        return decomp

    def _decomposition_all_ones(self) -> list[Operator]:
        base = self.base
        if getattr(base, "has_controlled_decomposition", False):
            return base.controlled_decomposition(self.control_wires)

        if is_adjoint_of_controllable(base):
            return controlled_adjoint_decomposition(base, self.control_wires)

        if not base.has_decomposition:
            raise DecompositionUndefinedError(
                f"Operator {base} does not provide a decomposition, so {self.name} cannot be "
                "decomposed either."
            )

        with QueuingManager.stop_recording():
            base_decomp = base.decomposition()
        return [_control_recorded(op, self.control_wires) for op in base_decomp]

    def adjoint(self):
        with QueuingManager.stop_recording():
            base = self.base.adjoint() if self.base.has_adjoint else Adjoint(self.base)
        return Controlled(base, self.control_wires, control_values=self.control_values)

