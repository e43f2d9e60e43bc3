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
This submodule contains the discrete-variable quantum operations that are
single-qubit rotations parametrized by an angle.
"""
# pylint: disable=arguments-differ
import numpy as np

import qmux
from qmux.operation import Operation
from qmux.wires import WiresLike


class RX(Operation):
    r"""
    The single qubit X rotation

    .. math:: R_x(\phi) = e^{-i\phi\sigma_x/2} = \begin{bmatrix}
                \cos(\phi/2) & -i\sin(\phi/2) \\
                -i\sin(\phi/2) & \cos(\phi/2)
            \end{bmatrix}.

    Args:
        phi (float): rotation angle :math:`\phi`
        wires (Sequence[int] or int): the wire the operation acts on
        id (str or None): String representing the operation (optional)
    """

    num_wires = 1
    num_params = 1
    """int: Number of trainable parameters that the operator depends on."""

    def __init__(self, phi, wires: WiresLike, id=None):
        super().__init__(phi, wires=wires, id=id)

    @staticmethod
    def compute_matrix(theta):
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        **Example**

        >>> qmux.RX.compute_matrix(np.pi)
        array([[6.123234e-17+0.j, 0.000000e+00-1.j],
               [0.000000e+00-1.j, 6.123234e-17+0.j]])
        """
        c = np.cos(theta / 2)
        js = 1j * np.sin(-theta / 2)
        return np.array([[c, js], [js, c]], dtype=complex)

    def adjoint(self):
        return RX(-self.data[0], wires=self.wires)


class RY(Operation):
    r"""
    The single qubit Y rotation

    .. math:: R_y(\phi) = e^{-i\phi\sigma_y/2} = \begin{bmatrix}
                \cos(\phi/2) & -\sin(\phi/2) \\
                \sin(\phi/2) & \cos(\phi/2)
            \end{bmatrix}.

    Args:
        phi (float): rotation angle :math:`\phi`
        wires (Sequence[int] or int): the wire the operation acts on
        id (str or None): String representing the operation (optional)
    """

    num_wires = 1
    num_params = 1

    def __init__(self, phi, wires: WiresLike, id=None):
        super().__init__(phi, wires=wires, id=id)

    @staticmethod
    def compute_matrix(theta):
        c = np.cos(theta / 2)
        s = np.sin(theta / 2)
        return np.array([[c, -s], [s, c]], dtype=complex)

    def adjoint(self):
        return RY(-self.data[0], wires=self.wires)


class RZ(Operation):
    r"""
    The single qubit Z rotation

    .. math:: R_z(\phi) = e^{-i\phi\sigma_z/2} = \begin{bmatrix}
                e^{-i\phi/2} & 0 \\
                0 & e^{i\phi/2}
            \end{bmatrix}.

    Args:
        phi (float): rotation angle :math:`\phi`
        wires (Sequence[int] or int): the wire the operation acts on
        id (str or None): String representing the operation (optional)
    """

    num_wires = 1
    num_params = 1

    def __init__(self, phi, wires: WiresLike, id=None):
        super().__init__(phi, wires=wires, id=id)

    @staticmethod
    def compute_matrix(theta):
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        **Example**

        >>> qmux.RZ.compute_matrix(np.pi)
        array([[6.123234e-17-1.j, 0.000000e+00+0.j],
               [0.000000e+00+0.j, 6.123234e-17+1.j]])
        """
        p = np.exp(-0.5j * theta)
        return np.array([[p, 0], [0, np.conj(p)]], dtype=complex)

    def adjoint(self):
        return RZ(-self.data[0], wires=self.wires)


class PhaseShift(Operation):
    r"""
    Arbitrary single qubit local phase shift

    .. math:: R_\phi(\phi) = e^{i\phi/2}R_z(\phi) = \begin{bmatrix}
                1 & 0 \\
                0 & e^{i\phi}
            \end{bmatrix}.

    Args:
        phi (float): rotation angle :math:`\phi`
        wires (Sequence[int] or int): the wire the operation acts on
        id (str or None): String representing the operation (optional)
    """

    num_wires = 1
    num_params = 1

    def __init__(self, phi, wires: WiresLike, id=None):
        super().__init__(phi, wires=wires, id=id)

    @staticmethod
    def compute_matrix(phi):
        return np.array([[1, 0], [0, np.exp(1j * phi)]], dtype=complex)

    @staticmethod
    def compute_decomposition(phi, wires):
        r"""Representation of the operator as a product of other operators (static method).

        **Example:**

        >>> qmux.PhaseShift.compute_decomposition(1.234, wires=0)
        [RZ(1.234, wires=[0]), GlobalPhase(-0.617, wires=[])]
        """
        return [RZ(phi, wires=wires), qmux.GlobalPhase(-phi / 2)]

    def adjoint(self):
        return PhaseShift(-self.data[0], wires=self.wires)
