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
Operations that act on a register without changing its populations: the identity and the
global phase.
"""
import numpy as np

import qmux
from qmux.operation import Operation
from qmux.wires import Wires, WiresLike


class Identity(Operation):
    """The identity on any number of wires, including none.

    Args:
        wires (WiresLike): the wires the identity acts on
        id (str): custom label given to an operator instance

    .. seealso:: The short-form alias :class:`~I`
    """

    num_params = 0

    def __init__(self, wires: WiresLike = (), id=None):
        super().__init__(wires=wires, id=id)
        self._hyperparameters = {"n_wires": len(self.wires)}

    def __repr__(self):
        wires = self.wires.tolist()
        return f"I({wires[0]!r})" if len(wires) == 1 else f"I({wires or ''})"

    @staticmethod
    def compute_matrix(n_wires=1):  # pylint: disable=arguments-differ
        return np.eye(2**n_wires)

    def matrix(self, wire_order=None):
        return self.compute_matrix(len(wire_order) if wire_order else len(self.wires))

    # pylint: disable=arguments-differ, unused-argument
    @staticmethod
    def compute_decomposition(wires, n_wires=1):
        return []

    def adjoint(self):
        return Identity(self.wires)


I = Identity
"""Short-form alias of :class:`~Identity`."""


class GlobalPhase(Operation):
    r"""Multiplies the state by :math:`e^{-i \phi}`.

    On its own the phase is unobservable, so the operation decomposes into nothing. The
    multiplexor decompositions emit it to keep the matrix of the expansion exact, and once
    controlled it turns into a relative phase on the control register.

    Args:
        phi (float): the phase
        wires (WiresLike): the wires the phase is attributed to. The matrix only depends on
            their number, but they decide which wires a controlled phase acts on.
        id (str): custom label given to an operator instance

    **Example**

    >>> qmux.GlobalPhase(0.5).matrix()
    array([[0.87758256-0.47942554j]])
    >>> qmux.ctrl(qmux.GlobalPhase(0.123, wires=1), control=0).decomposition()
    [PhaseShift(-0.123, wires=[0])]
    """

    num_params = 1

    def __init__(self, phi, wires: WiresLike = (), id=None):
        super().__init__(phi, wires=wires, id=id)

    @staticmethod
    def compute_matrix(phi, n_wires=1):  # pylint: disable=arguments-differ
        return np.exp(-1j * complex(phi)) * np.eye(2**n_wires, dtype=complex)

    # pylint: disable=arguments-differ, unused-argument
    @staticmethod
    def compute_decomposition(phi, wires: WiresLike = ()):
        return []

    def matrix(self, wire_order=None):
        n_wires = len(self.wires) if wire_order is None else len(wire_order)
        return self.compute_matrix(self.data[0], n_wires=n_wires)

    def adjoint(self):
        return GlobalPhase(-self.data[0], self.wires)

    def controlled_decomposition(self, control_wires: Wires):
        """A phase on the last control wire, controlled on the remaining ones."""
        phase = qmux.PhaseShift(-self.data[0], wires=control_wires[-1])
        if len(control_wires) == 1:
            return [phase]
        return [qmux.ctrl(phase, control=control_wires[:-1])]
