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
r"""
Contains the Select template and the recursive step that decomposes it.
"""
# pylint: disable=arguments-differ
import copy
import logging
from collections.abc import Sequence

import qmux
from qmux.allocation import allocate
from qmux.exceptions import InvalidArgumentError, WireError
from qmux.logging import debug_logger
from qmux.operation import Operation, Operator
from qmux.queuing import QueuingManager, record
from qmux.wires import Wires, WiresLike

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

_METHODS = ("ancilla", "brute_force")


@debug_logger
def select_step(ops: Sequence[Operator], ancilla: WiresLike, control: WiresLike):
    r"""Queue one level of the recursive decomposition of :class:`~.Select`.

    Applies ``ops[j]`` when every ``ancilla`` wire is in :math:`|1\rangle` and ``control``
    encodes :math:`j`, most significant wire first. Operations past the end of ``ops`` are
    the identity.

    The most significant control wire ``head`` splits ``ops`` in two halves: the first
    :math:`2^{n-1}` operations are selected by ``head = 0`` and the rest by ``head = 1``. With
    an empty ``ancilla`` register, ``head`` itself becomes the ancilla of the next level.
    Otherwise a zeroed work wire is borrowed for the logical AND of ``ancilla`` and ``head``,
    and released before returning.

    Args:
        ops (Sequence[.Operator]): the operations to select from
        ancilla (Sequence[int]): wires that must all be in :math:`|1\rangle` for any
            operation to be applied. May be empty.
        control (Sequence[int]): the remaining index register

    **Example**

    >>> ops = [qmux.X(2), qmux.Y(2)]
    >>> qmux.tape.make_qscript(select_step)(ops, [], [0]).operations
    [Controlled(Y(2), control_wires=[0]), X(0), Controlled(X(2), control_wires=[0]), X(0)]
    """
    ancilla, control = Wires(ancilla), Wires(control)
    if len(ops) == 0:
        return

    if len(control) == 0:
        if len(ancilla) == 0:
            qmux.apply(ops[0])
        else:
            qmux.ctrl(ops[0], control=ancilla)
        return

    num_states = 2 ** len(control)
    right_count = min(len(ops), num_states // 2)
    left_count = min(len(ops), num_states) - right_count
    right_ops = ops[:right_count]
    left_ops = ops[right_count : right_count + left_count]

    head, rest = control[0], control[1:]

    if len(ancilla) == 0:
        if left_count > 0:
            select_step(left_ops, [head], rest)
        qmux.X(head)
        select_step(right_ops, [head], rest)
        qmux.X(head)
        return

    with allocate(1, state="zero", restored=True) as aux:
        and_wires = ancilla + Wires(head) + aux
        toggle_wires = ancilla + aux

        qmux.MultiControlledX(wires=and_wires)
        if left_count > 0:
            select_step(left_ops, aux, rest)
        qmux.MultiControlledX(wires=toggle_wires)
        select_step(right_ops, aux, rest)
        qmux.MultiControlledX(wires=toggle_wires)
        qmux.MultiControlledX(wires=and_wires)


def _brute_force(ops, control: Wires, extra_control: Wires = Wires([])):
    num_control = len(control)
    for j, op in enumerate(ops):
        bits = [bool(int(b)) for b in format(j, f"0{num_control}b")]
        qmux.ctrl(
            op, control=extra_control + control, control_values=[True] * len(extra_control) + bits
        )


class Select(Operation):
    r"""The ``Select`` operator, also known as multiplexer or multiplexed operation,
    applies different operations depending on the state of designated control wires.

    .. math:: Select|i\rangle \otimes |\psi\rangle = |i\rangle \otimes U_i |\psi\rangle

    The control register is read in big-endian order: ``control[0]`` is the most significant
    bit of :math:`i`. Basis states :math:`|i\rangle` with :math:`i` beyond the last operation
    leave the target untouched.

    Args:
        ops (Sequence[.Operator]): operations to apply, ``ops[i]`` for control state :math:`i`
        control (Sequence[int]): the wires of the control register
        method (str): ``"ancilla"`` (default) decomposes the operator with a binary tree of
            logical ANDs on borrowed work wires, one per level of the tree. ``"brute_force"``
            controls every operation on the full control register and borrows no wires.
        id (str or None): String representing the operation (optional)

    Raises:
        InvalidArgumentError: if ``control`` is empty, if there are more operations than
            control states, or if ``method`` is unknown
        WireError: if the control wires overlap with the wires of the operations

    **Example**

    .. code-block:: python

        ops = [qmux.X(2), qmux.Y(2), qmux.Z(2), qmux.H(2)]
        dev = qmux.devices.DefaultQubit(wires=3, work_wires=1)

        def circuit():
            qmux.X(0)
            qmux.Select(ops, control=[0, 1])

    >>> state = dev.execute(circuit)
    >>> np.nonzero(state)[0]
    array([4])

    The control register was in state :math:`|10\rangle = |2\rangle`, so ``Z(2)`` was applied.

    .. details::
        :title: Usage Details

        The ``"ancilla"`` decomposition splits the operations at the most significant control
        wire. The upper half is applied under the control of that wire, and the lower half
        after it is flipped. Every deeper level borrows one zeroed work wire that holds the
        logical AND of the wires above it, so at most :math:`n - 1` work wires are alive at once
        for :math:`n` control wires. Each work wire is returned in :math:`|0\rangle`.

        A controlled ``Select`` reuses the same recursion with the extra control wires as the
        starting ANDed register, so it needs at most :math:`n` work wires and no
        multi-controlled version of the selected operations.
    """

    num_params = 0

    def __init__(self, ops: Sequence[Operator], control: WiresLike, method="ancilla", id=None):
        control = Wires(control)
        if len(control) == 0:
            raise InvalidArgumentError("Select requires at least one control wire; got control=[].")

        ops = tuple(ops)
        if len(ops) > 2 ** len(control):
            raise InvalidArgumentError(
                f"Select with {len(control)} control wire(s) can select from at most "
                f"{2 ** len(control)} operations; got {len(ops)}."
            )

        if method not in _METHODS:
            raise InvalidArgumentError(f"Select method must be one of {_METHODS}; got {method!r}.")

        target_wires = Wires.all_wires([op.wires for op in ops])
        if shared := Wires.shared_wires([control, target_wires]):
            raise WireError(
                f"Control wires {shared.tolist()} are also acted on by the selected operations."
            )

        for op in ops:
            QueuingManager.remove(op)

        self._hyperparameters = {
            "ops": ops,
            "control": control,
            "target_wires": target_wires,
            "method": method,
        }

        super().__init__(wires=control + target_wires, id=id)

    def __repr__(self):
        return f"Select(ops={list(self.ops)}, control={self.control.tolist()})"

    @property
    def ops(self) -> tuple[Operator, ...]:
        """The operations to select from."""
        return self.hyperparameters["ops"]

    @property
    def control(self) -> Wires:
        """The control register, most significant wire first."""
        return self.hyperparameters["control"]

    @property
    def target_wires(self) -> Wires:
        """The wires acted on by the selected operations."""
        return self.hyperparameters["target_wires"]

    # pylint: disable=unused-argument
    @staticmethod
    def compute_decomposition(ops, control, target_wires, method, wires=None):
        r"""Representation of the operator as a product of other operators.

        Args:
            ops (Sequence[.Operator]): the operations to select from
            control (Wires): the control register
            target_wires (Wires): the wires of the operations
            method (str): the decomposition method
            wires (Wires): all wires of the operator

        Returns:
            list[.Operator]: decomposition of the operator
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Decomposing Select over %s control wire(s) with %s operation(s), method=%s",
                len(control),
                len(ops),
                method,
            )

        if method == "brute_force":
            return record(_brute_force, ops, control)
        return record(select_step, ops, [], control)

    def controlled_decomposition(self, control_wires: Wires):
        if self.hyperparameters["method"] == "brute_force":
            return record(_brute_force, self.ops, self.control, control_wires)
        return record(select_step, self.ops, control_wires, self.control)

    def map_wires(self, wire_map: dict) -> "Select":
        new_op = super().map_wires(wire_map)
        new_op._hyperparameters["ops"] = tuple(op.map_wires(wire_map) for op in self.ops)
        return new_op

    def __copy__(self):
        copied_op = super().__copy__()
        copied_op._hyperparameters["ops"] = tuple(copy.copy(op) for op in self.ops)
        return copied_op
