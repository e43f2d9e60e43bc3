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
This submodule defines the operation that applies a target operator in a changed basis.
"""
import copy

import qmux
from qmux.operation import Operation, Operator
from qmux.queuing import QueuingManager, apply
from qmux.wires import Wires

from .adjoint import adjoint


def _apply_if_recording(op: Operator) -> Operator:
    return apply(op) if QueuingManager.recording() else op


def change_op_basis(compute_op: Operator, target_op: Operator, uncompute_op: Operator = None):
    r"""Construct an operator that represents the product of the
    operators provided; particularly a compute-uncompute pattern.

    Args:
        compute_op (:class:`~.operation.Operator`): A single operator or product that applies
            quantum operations.
        target_op (:class:`~.operation.Operator`): A single operator or a product that applies
            quantum operations.
        uncompute_op (None | :class:`~.operation.Operator`): An optional single operator or a
            product that applies quantum operations. ``None`` corresponds to
            ``uncompute_op=qmux.adjoint(compute_op)``.

    Returns:
        ~ops.op_math.ChangeOpBasis: the operator representing the compute-uncompute pattern.

    **Example**

    The uncompute operator defaults to the adjoint of the compute operator:

    >>> op = qmux.change_op_basis(qmux.H(0), qmux.RZ(0.3, wires=0))
    >>> op
    ChangeOpBasis(H(0), RZ(0.3, wires=[0]), Adjoint(H(0)))

    Controlling the operator only controls the target, since the compute and uncompute
    operators cancel whenever the target is not applied:

    >>> qmux.ctrl(op, control=1).decomposition()
    [H(0), Controlled(RZ(0.3, wires=[0]), control_wires=[1]), Adjoint(H(0))]
    """
    return ChangeOpBasis(compute_op, target_op, uncompute_op)


class ChangeOpBasis(Operation):
    r"""
    Composite operator representing a compute-uncompute pattern of operators.

    Args:
        compute_op (:class:`~.operation.Operator`): the operator that changes the basis
        target_op (:class:`~.operation.Operator`): the operator applied in the new basis
        uncompute_op (:class:`~.operation.Operator`): the operator that restores the basis.
            Defaults to ``qmux.adjoint(compute_op)``.

    The operator applies ``compute_op``, then ``target_op``, then ``uncompute_op``, so that its
    matrix is :math:`U \cdot T \cdot C`.
    """

    def __init__(self, compute_op, target_op, uncompute_op=None, id=None):
        if uncompute_op is None:
            with QueuingManager.stop_recording():
                uncompute_op = adjoint(compute_op)

        self.hyperparameters["compute_op"] = compute_op
        self.hyperparameters["target_op"] = target_op
        self.hyperparameters["uncompute_op"] = uncompute_op

        wires = Wires.all_wires([compute_op.wires, target_op.wires, uncompute_op.wires])
        super().__init__(wires=wires, id=id)

    def __repr__(self):
        return f"ChangeOpBasis({', '.join(repr(op) for op in self.operands)})"

    @property
    def operands(self) -> tuple[Operator, Operator, Operator]:
        """The compute, target and uncompute operators, in the order they are applied."""
        return (
            self.hyperparameters["compute_op"],
            self.hyperparameters["target_op"],
            self.hyperparameters["uncompute_op"],
        )

    def queue(self, context=QueuingManager):
        for op in self.operands:
            context.remove(op)
        context.append(self)
        return self

    def matrix(self, wire_order=None):
        wire_order = self.wires if wire_order is None else wire_order
        compute, target, uncompute = (
            qmux.matrix(op, wire_order=wire_order) for op in self.operands
        )
        return uncompute @ target @ compute

    def decomposition(self):
        return [_apply_if_recording(op) for op in self.operands]

    def adjoint(self):
        compute, target, uncompute = self.operands
        with QueuingManager.stop_recording():
            new_compute = adjoint(uncompute, lazy=False)
            new_target = adjoint(target, lazy=False)
            new_uncompute = adjoint(compute, lazy=False)
        return ChangeOpBasis(new_compute, new_target, new_uncompute)

    def controlled_decomposition(self, control_wires: Wires):
        compute, target, uncompute = self.operands
        return [
            _apply_if_recording(compute),
            qmux.ctrl(target, control=control_wires),
            _apply_if_recording(uncompute),
        ]

    def map_wires(self, wire_map: dict) -> "ChangeOpBasis":
        new_op = copy.copy(self)
        new_op._wires = Wires([wire_map.get(wire, wire) for wire in self.wires])
        for key in ("compute_op", "target_op", "uncompute_op"):
            new_op._hyperparameters[key] = self.hyperparameters[key].map_wires(wire_map)
        return new_op
