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
Contains the DiagonalPhase template.
"""
# pylint: disable=arguments-differ
import numpy as np

import qmux
from qmux.exceptions import InvalidArgumentError
from qmux.math import multiplexor_coefficients, pad_coefficients
from qmux.operation import Operation
from qmux.wires import Wires, WiresLike


class DiagonalPhase(Operation):
    r"""Applies a phase to each computational basis state of a register.

    .. math::

        \text{DiagonalPhase}|j\rangle = e^{i \theta_j}|j\rangle

    The register is read in big-endian order: ``wires[0]`` is the most significant bit of
    :math:`j`. The operator never changes a basis state, only its phase.

    Args:
        coeffs (tensor_like): the phases :math:`\theta_j`, padded with zeros to
            :math:`2^n` for :math:`n` wires
        wires (Sequence[int]): the wires of the register
        id (str or None): String representing the operation (optional)

    Raises:
        InvalidArgumentError: if ``wires`` is empty or more than :math:`2^n` coefficients are given

    **Example**

    >>> op = qmux.DiagonalPhase([0.1, 0.2, 0.3, 0.4], wires=[0, 1])
    >>> op.decomposition()
    [MultiplexZ(array([-0.1, -0.1]), wires=[1, 0]), DiagonalPhase(array([0.2, 0.3]), wires=[1])]

    The most significant wire becomes the target of a :class:`~.MultiplexZ` that carries the
    half-differences of the phases, and the averages are applied by a ``DiagonalPhase`` on the
    remaining wires. On a single wire, the average is a :class:`~.GlobalPhase`.
    """

    num_params = 1
    """int: Number of trainable parameters that the operator depends on."""

    def __init__(self, coeffs, wires: WiresLike, id=None):
        wires = Wires(wires)
        if len(wires) == 0:
            raise InvalidArgumentError("DiagonalPhase requires at least one wire; got wires=[].")

        coeffs = np.asarray(coeffs, dtype=float).reshape(-1)
        if len(coeffs) > 2 ** len(wires):
            raise InvalidArgumentError(
                f"DiagonalPhase over {len(wires)} wire(s) accepts at most {2 ** len(wires)} "
                f"coefficients; got {len(coeffs)}."
            )

        super().__init__(coeffs, wires=wires, id=id)

    @staticmethod
    def compute_decomposition(coeffs, wires):
        r"""Representation of the operator as a product of other operators.

        Args:
            coeffs (tensor_like): the phases
            wires (Any or Iterable[Any]): the wires of the register, most significant first

        Returns:
            list[.Operator]: decomposition of the operator
        """
        wires = Wires(wires)
        padded = pad_coefficients(coeffs, 2 ** len(wires))
        sum_coeffs, diff_coeffs = multiplexor_coefficients(padded)

        decomp = [qmux.MultiplexZ(diff_coeffs, wires[1:], wires[0])]
        if len(padded) == 2:
            decomp.append(qmux.GlobalPhase(-sum_coeffs[0], wires=wires))
        else:
            decomp.append(DiagonalPhase(sum_coeffs, wires[1:]))
        return decomp
