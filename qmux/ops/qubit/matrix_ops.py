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
This submodule contains the discrete-variable quantum operations that
accept a hermitian or an unitary matrix as a parameter.
"""
# pylint: disable=arguments-differ
import warnings

import numpy as np

from qmux.operation import Operation
from qmux.wires import Wires, WiresLike


class QubitUnitary(Operation):
    r"""QubitUnitary(U, wires)
    Apply an arbitrary unitary matrix with a dimension that is a power of two.

    **Details:**

    * Number of wires: Any (the operation can act on any number of wires)
    * Number of parameters: 1

    Args:
        U (array[complex]): square unitary matrix
        wires (Sequence[int] or int): the wire(s) the operation acts on
        id (str): custom label given to an operator instance,
            can be useful for some applications where the instance has to be identified.
        unitary_check (bool): check for unitarity of the given matrix

    Raises:
        ValueError: if the matrix is not square or its dimension does not match the wires

    **Example**

    >>> U = np.array([[0.98877108+0.j, 0.-0.14943813j], [0.-0.14943813j, 0.98877108+0.j]])
    >>> qmux.QubitUnitary(U, wires=0)
    QubitUnitary(array([[0.98877108+0.j        , 0.        -0.14943813j],
           [0.        -0.14943813j, 0.98877108+0.j        ]]), wires=[0])
    """

    num_params = 1
    """int: Number of trainable parameters that the operator depends on."""

    def __init__(self, U, wires: WiresLike, id=None, unitary_check=False):
        U = np.asarray(U)
        U_shape = U.shape
        wires = Wires(wires)
        dim = 2 ** len(wires)

        if len(U_shape) != 2 or U_shape[0] != U_shape[1]:
            raise ValueError(
                f"Input unitary must be of shape {(dim, dim)} "
                f"to act on {dim.bit_length() - 1} wires. Got shape {U_shape}."
            )

        if U_shape[0] != dim:
            raise ValueError(
                f"Input unitary must be of shape {(dim, dim)} "
                f"to act on {dim.bit_length() - 1} wires. Got shape {U_shape}."
            )

        if unitary_check and not np.allclose(U @ U.conj().T, np.eye(dim), atol=1e-6):
            warnings.warn(
                f"Operator {U}\n may not be unitary. "
                "Verify unitarity of operation, or use a datatype with increased precision.",
                UserWarning,
            )

        super().__init__(U, wires=wires, id=id)

    @staticmethod
    def compute_matrix(U):
        r"""Representation of the operator as a canonical matrix in the computational basis (static method).

        The canonical matrix is the input matrix itself.
        """
        return U

    def adjoint(self):
        return QubitUnitary(np.conj(np.transpose(self.data[0])), wires=self.wires)
