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
This submodule contains the discrete-variable quantum operations that do
not depend on any parameters.
"""
# pylint: disable=arguments-differ
from functools import lru_cache

import numpy as np

import qmux
from qmux.operation import Operation
from qmux.wires import Wires, WiresLike

INV_SQRT2 = 1 / np.sqrt(2)


def _single_wire_repr(label: str, wires: Wires) -> str:
    wire = wires[0]
    if isinstance(wire, str):
        return f"{label}('{wire}')"
    return f"{label}({wire})"


class Hadamard(Operation):
    r"""Hadamard(wires)
    The Hadamard operator

    .. math:: H = \frac{1}{\sqrt{2}}\begin{bmatrix} 1 & 1\\ 1 & -1\end{bmatrix}.

    .. seealso:: The equivalent short-form alias :class:`~H`

    Args:
        wires (Sequence[int] or int): the wire the operation acts on
    """

    num_wires = 1
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    def __repr__(self):
        return _single_wire_repr("H", self.wires)

    @staticmethod
    @lru_cache
    def compute_matrix():
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        >>> print(qmux.H.compute_matrix())
        [[ 0.70710678  0.70710678]
         [ 0.70710678 -0.70710678]]
        """
        return np.array([[INV_SQRT2, INV_SQRT2], [INV_SQRT2, -INV_SQRT2]])

    def adjoint(self):
        return Hadamard(wires=self.wires)


H = Hadamard
r"""H(wires)
The Hadamard operator

.. seealso:: The equivalent long-form alias :class:`~Hadamard`
"""


class PauliX(Operation):
    r"""
    The Pauli X operator

    .. math:: \sigma_x = \begin{bmatrix} 0 & 1 \\ 1 & 0\end{bmatrix}.

    .. seealso:: The equivalent short-form alias :class:`~X`

    Args:
        wires (Sequence[int] or int): the wire the operation acts on
    """

    num_wires = 1
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    def __repr__(self):
        return _single_wire_repr("X", self.wires)

    @staticmethod
    @lru_cache
    def compute_matrix():
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        >>> print(qmux.X.compute_matrix())
        [[0 1]
         [1 0]]
        """
        return np.array([[0, 1], [1, 0]])

    def adjoint(self):
        return X(wires=self.wires)

    def controlled_decomposition(self, control_wires: Wires):
        return [MultiControlledX(wires=control_wires + self.wires)]


X = PauliX
r"""The Pauli X operator

.. seealso:: The equivalent long-form alias :class:`~PauliX`
"""


class PauliY(Operation):
    r"""
    The Pauli Y operator

    .. math:: \sigma_y = \begin{bmatrix} 0 & -i \\ i & 0\end{bmatrix}.

    .. seealso:: The equivalent short-form alias :class:`~Y`

    Args:
        wires (Sequence[int] or int): the wire the operation acts on
    """

    num_wires = 1
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    def __repr__(self):
        return _single_wire_repr("Y", self.wires)

    @staticmethod
    @lru_cache
    def compute_matrix():
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        >>> print(qmux.Y.compute_matrix())
        [[ 0.+0.j -0.-1.j]
         [ 0.+1.j  0.+0.j]]
        """
        return np.array([[0, -1j], [1j, 0]])

    def adjoint(self):
        return Y(wires=self.wires)


Y = PauliY
r"""The Pauli Y operator

.. seealso:: The equivalent long-form alias :class:`~PauliY`
"""


class PauliZ(Operation):
    r"""
    The Pauli Z operator

    .. math:: \sigma_z = \begin{bmatrix} 1 & 0 \\ 0 & -1\end{bmatrix}.

    .. seealso:: The equivalent short-form alias :class:`~Z`

    Args:
        wires (Sequence[int] or int): the wire the operation acts on
    """

    num_wires = 1
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    def __repr__(self):
        return _single_wire_repr("Z", self.wires)

    @staticmethod
    @lru_cache
    def compute_matrix():
        return np.array([[1, 0], [0, -1]])

    @staticmethod
    def compute_decomposition(wires):
        r"""Representation of the operator as a product of other operators (static method).

        >>> qmux.Z.compute_decomposition(0)
        [PhaseShift(3.141592653589793, wires=[0])]
        """
        return [qmux.PhaseShift(np.pi, wires=wires)]

    def adjoint(self):
        return Z(wires=self.wires)


Z = PauliZ
r"""The Pauli Z operator

.. seealso:: The equivalent long-form alias :class:`~PauliZ`
"""


class S(Operation):
    r"""S(wires)
    The single-qubit phase gate

    .. math:: S = \begin{bmatrix}
                1 & 0 \\
                0 & i
            \end{bmatrix}.

    Args:
        wires (Sequence[int] or int): the wire the operation acts on
    """

    num_wires = 1
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    @staticmethod
    @lru_cache
    def compute_matrix():
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        >>> print(qmux.S.compute_matrix())
        [[1.+0.j 0.+0.j]
         [0.+0.j 0.+1.j]]
        """
        return np.array([[1, 0], [0, 1j]])

    @staticmethod
    def compute_decomposition(wires):
        r"""Representation of the operator as a product of other operators (static method).

        >>> qmux.S.compute_decomposition(0)
        [PhaseShift(1.5707963267948966, wires=[0])]
        """
        return [qmux.PhaseShift(np.pi / 2, wires=wires)]


class CNOT(Operation):
    r"""CNOT(wires)
    The controlled-NOT operator

    .. math:: CNOT = \begin{bmatrix}
            1 & 0 & 0 & 0 \\
            0 & 1 & 0 & 0\\
            0 & 0 & 0 & 1\\
            0 & 0 & 1 & 0
        \end{bmatrix}.

    .. note:: The first wire provided corresponds to the **control qubit**.

    Args:
        wires (Sequence[int]): the wires the operation acts on
    """

    num_wires = 2
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    @staticmethod
    @lru_cache
    def compute_matrix():
        return np.array([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]])

    @property
    def control_wires(self):
        return Wires(self.wires[0])

    def adjoint(self):
        return CNOT(wires=self.wires)

    def controlled_decomposition(self, control_wires: Wires):
        return [MultiControlledX(wires=control_wires + self.wires)]


class Toffoli(Operation):
    r"""Toffoli(wires)
    Toffoli (controlled-controlled-X) gate.

    .. note:: The first two wires provided correspond to the **control qubits**.

    Args:
        wires (Sequence[int]): the subsystem the gate acts on
    """

    num_wires = 3
    num_params = 0

    def __init__(self, wires: WiresLike, id=None):
        super().__init__(wires=wires, id=id)

    @staticmethod
    @lru_cache
    def compute_matrix():
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        The matrix is the identity with its last two rows swapped.
        """
        mat = np.eye(8)
        mat[[6, 7]] = mat[[7, 6]]
        return mat

    @property
    def control_wires(self):
        return Wires(self.wires[:2])

    def adjoint(self):
        return Toffoli(wires=self.wires)

    def controlled_decomposition(self, control_wires: Wires):
        return [MultiControlledX(wires=control_wires + self.wires)]


class MultiControlledX(Operation):
    r"""Apply a Pauli X gate controlled on an arbitrary computational basis state.

    **Details:**

    * Number of wires: Any (the operation can act on any number of wires)
    * Number of parameters: 0

    Args:
        wires (Union[Wires, Sequence[int], or int]): control wire(s) followed by a single target wire
            (the last entry of ``wires``) where the operation acts on
        control_values (Union[bool, list[bool], int, list[int]]): The value(s) the control wire(s)
            should take. Integers other than 0 or 1 will be treated as ``int(bool(x))``.

    Raises:
        ValueError: if less than two wires are given, or if the number of control values does
            not match the number of control wires

    **Example**

    >>> qmux.MultiControlledX(wires=[0, 1, 2, 3], control_values=[0, 1, 0])
    MultiControlledX(wires=[0, 1, 2, 3], control_values=[False, True, False])
    """

    def __init__(self, wires: WiresLike = (), control_values=None, id=None):
        wires = Wires(wires)
        if len(wires) < 2:
            raise ValueError(
                f"MultiControlledX: wrong number of wires. {len(wires)} wire(s) given. "
                "Need at least 2."
            )

        if control_values is None:
            control_values = [True] * (len(wires) - 1)
        elif isinstance(control_values, (int, bool)):
            control_values = [control_values]
        control_values = [bool(value) for value in control_values]

        if len(control_values) != len(wires) - 1:
            raise ValueError(
                "Length of control values must equal number of control wires. "
                f"Got {len(control_values)} control values for {len(wires) - 1} control wires."
            )

        super().__init__(wires=wires, id=id)
        self._hyperparameters = {"control_values": tuple(control_values)}

    def __repr__(self):
        return (
            f"MultiControlledX(wires={self.wires.tolist()}, "
            f"control_values={list(self.hyperparameters['control_values'])})"
        )

    @property
    def control_wires(self):
        return self.wires[:-1]

    @property
    def control_values(self) -> list[bool]:
        """The control values of the control wires."""
        return list(self.hyperparameters["control_values"])

    @staticmethod
    def compute_matrix(control_values=None):  # pylint: disable=arguments-differ
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        Args:
            control_values (Sequence[bool]): the value each control wire should take

        **Example**

        >>> print(qmux.MultiControlledX.compute_matrix([0]))
        [[0. 1. 0. 0.]
         [1. 0. 0. 0.]
         [0. 0. 1. 0.]
         [0. 0. 0. 1.]]
        """
        control_values = list(control_values or [True])
        index = 0
        for value in control_values:
            index = (index << 1) | int(bool(value))
        index <<= 1

        mat = np.eye(2 ** (len(control_values) + 1))
        mat[[index, index + 1]] = mat[[index + 1, index]]
        return mat

    def adjoint(self):
        return MultiControlledX(wires=self.wires, control_values=self.control_values)

    def controlled_decomposition(self, control_wires: Wires):
        return [
            MultiControlledX(
                wires=control_wires + self.wires,
                control_values=[True] * len(control_wires) + self.control_values,
            )
        ]
