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
This submodule defines a base class for symbolic operations representing operator math.
"""
import copy

from qmux.operation import Operator
from qmux.queuing import QueuingManager
from qmux.wires import Wires


class SymbolicOp(Operator):
    """Developer-facing base class for single-operator symbolic operators.

    Args:
        base (~.operation.Operator): the base operation that is modified symbolicly
        id (str): custom label given to an operator instance,
            can be useful for some applications where the instance has to be identified

    This *developer-facing* class can serve as a parent to single base symbolic operators, such as
    :class:`~.ops.op_math.Adjoint` and :class:`~.ops.op_math.Controlled`.

    New symbolic operators can inherit from this class to receive some common default behavior,
    like deferring properties to the base class, copying the base class during a shallow copy,
    and removing the base operator from the queue.
    """

    # pylint: disable=super-init-not-called
    def __init__(self, base: Operator, id=None):
        self.hyperparameters["base"] = base
        self._id = id
        self._name = f"{self.__class__.__name__}({base.name})"
        self.queue()

    def __copy__(self):
        # this method needs to be overwritten because the base must be copied too.
        copied_op = object.__new__(type(self))
        # copied_op must maintain inheritance structure of self
        # Relevant for symbolic ops that mix in operation-specific components.

        for attr, value in vars(self).items():
            if attr not in {"_hyperparameters"}:
                setattr(copied_op, attr, value)

        copied_op._hyperparameters = copy.copy(self.hyperparameters)
        copied_op._hyperparameters["base"] = copy.copy(self.base)

        return copied_op

    @property
    def base(self) -> Operator:
        """The base operator."""
        return self.hyperparameters["base"]

    @property
    def data(self):
        """The trainable parameters"""
        return self.base.data

    @data.setter
    def data(self, new_data):
        self.base.data = new_data

    @property
    def num_params(self):
        return self.base.num_params

    @property
    def wires(self) -> Wires:
        return self.base.wires

    # pylint:disable=invalid-overridden-method
    @property
    def has_matrix(self) -> bool:
        return self.base.has_matrix

    def queue(self, context=QueuingManager):
        context.remove(self.base)
        context.append(self)
        return self

    def map_wires(self, wire_map: dict) -> "SymbolicOp":
        new_op = super().map_wires(wire_map)
        new_op.hyperparameters["base"] = self.base.map_wires(wire_map)
        return new_op
