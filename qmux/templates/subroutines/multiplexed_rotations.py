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
Contains the multiplexed single-qubit rotation templates.
"""
# pylint: disable=arguments-differ
import numpy as np

import qmux
from qmux.exceptions import InvalidArgumentError
from qmux.math import multiplexor_coefficients, pad_coefficients
from qmux.operation import Operation
from qmux.wires import Wires, WiresLike


def _validate_coefficients(name: str, coeffs, num_index_wires: int) -> np.ndarray:
    coeffs = np.asarray(coeffs, dtype=float).reshape(-1)
    if len(coeffs) > 2**num_index_wires:
        raise InvalidArgumentError(
            f"{name} over {num_index_wires} index wire(s) accepts at most "
            f"{2**num_index_wires} coefficients; got {len(coeffs)}."
        )
    return coeffs


def _single_target(name: str, target_wire: WiresLike) -> Wires:
    target_wire = Wires(target_wire)
    if len(target_wire) != 1:
        raise ValueError(f"{name} acts on a single target wire; got {target_wire.tolist()}.")
    return target_wire


class MultiplexZ(Operation):
    r"""Applies a Z rotation on the target wire whose angle is selected by the state of the
    control register.

    For every computational basis state :math:`|j\rangle` of ``control_wires`` the operator applies

    .. math::

        e^{i \theta_j Z}

    to ``target_wire``, so that in total

    .. math::

        \text{MultiplexZ} = \sum_j |j\rangle\langle j| \otimes e^{i \theta_j Z}.

    The control register is read in big-endian order: ``control_wires[0]`` is the most
    significant bit of :math:`j`.

    Args:
        coeffs (tensor_like): the angles :math:`\theta_j`. Vectors shorter than
            :math:`2^n` for :math:`n` control wires are padded with zeros.
        control_wires (Sequence[int]): the wires of the control register
        target_wire (int): the wire the rotations act on
        id (str or None): String representing the operation (optional)

    Raises:
        InvalidArgumentError: if more than :math:`2^n` coefficients are given

    **Example**

    .. code-block:: python

        op = qmux.MultiplexZ([0.1, 0.2, 0.3, 0.4], control_wires=[0, 1], target_wire=2)

    >>> op.decomposition()
    [MultiplexZ(array([0.2, 0.3]), wires=[1, 2]),
     CNOT(wires=[0, 2]),
     MultiplexZ(array([-0.1, -0.1]), wires=[1, 2]),
     CNOT(wires=[0, 2])]

    .. details::
        :title: Usage Details

        Each level of the decomposition folds out the most significant control wire: the
        coefficients are split into their pairwise averages and half-differences (see
        :func:`~.math.multiplexor_coefficients`), which are applied as two multiplexed rotations
        over the remaining control wires, interleaved with ``CNOT`` gates. Without control wires,
        the operator is a single ``RZ(-2 * theta_0)``.

        A controlled ``MultiplexZ`` does not control every gate of the decomposition. Instead,
        the coefficients are extended by a zero block for the case in which the extra control
        register is not all ones, and the ``CNOT`` gates become ``MultiControlledX`` gates on the
        extra control register.
    """

    num_params = 1
    """int: Number of trainable parameters that the operator depends on."""

    def __init__(self, coeffs, control_wires: WiresLike, target_wire: WiresLike, id=None):
        control_wires = Wires(control_wires)
        target_wire = _single_target("MultiplexZ", target_wire)
        coeffs = _validate_coefficients("MultiplexZ", coeffs, len(control_wires))

        self._hyperparameters = {"control_wires": control_wires, "target_wire": target_wire}

        super().__init__(coeffs, wires=control_wires + target_wire, id=id)

    @property
    def control_wires(self) -> Wires:
        return self.hyperparameters["control_wires"]

    @property
    def target_wire(self) -> Wires:
        """The wire the rotations act on."""
        return self.hyperparameters["target_wire"]

    @staticmethod
    def compute_decomposition(coeffs, wires, control_wires, target_wire):
        r"""Representation of the operator as a product of other operators.

        Args:
            coeffs (tensor_like): the rotation angles
            wires (Any or Iterable[Any]): full set of wires that the operator acts on
            control_wires (Wires): the control register, most significant wire first
            target_wire (Wires): the target wire

        Returns:
            list[.Operator]: decomposition of the operator
        """
        padded = pad_coefficients(coeffs, 2 ** len(control_wires))

        if len(control_wires) == 0:
            return [qmux.RZ(-2 * padded[0], wires=target_wire)]

        sum_coeffs, diff_coeffs = multiplexor_coefficients(padded)
        head, rest = control_wires[0], control_wires[1:]
        return [
            MultiplexZ(sum_coeffs, rest, target_wire),
            qmux.CNOT(wires=[head, target_wire[0]]),
            MultiplexZ(diff_coeffs, rest, target_wire),
            qmux.CNOT(wires=[head, target_wire[0]]),
        ]

    def controlled_decomposition(self, control_wires: Wires):
        size = 2 ** len(self.control_wires)
        padded = pad_coefficients(self.data[0], size)
        padded = pad_coefficients(padded, 2 * size, head=True)
        sum_coeffs, diff_coeffs = multiplexor_coefficients(padded)

        flip_wires = control_wires + self.target_wire
        return [
            MultiplexZ(sum_coeffs, self.control_wires, self.target_wire),
            qmux.MultiControlledX(wires=flip_wires),
            MultiplexZ(diff_coeffs, self.control_wires, self.target_wire),
            qmux.MultiControlledX(wires=flip_wires),
        ]


class MultiplexPauli(Operation):
    r"""Applies a Pauli rotation on the target wire whose angle is selected by the state of the
    control register.

    For every computational basis state :math:`|j\rangle` of ``control_wires`` the operator applies
    :math:`e^{i \theta_j P}` to ``target_wire``, where :math:`P` is the Pauli operator named by
    ``pauli``. For ``pauli="I"`` the rotation is a phase :math:`e^{i\theta_j}` on the control
    register, and the target wire is left untouched.

    Args:
        coeffs (tensor_like): the angles :math:`\theta_j`, padded with zeros to :math:`2^n`
        pauli (str): the rotation axis, one of ``"X"``, ``"Y"``, ``"Z"`` or ``"I"``
        control_wires (Sequence[int]): the wires of the control register, most significant first
        target_wire (int): the wire the rotations act on
        id (str or None): String representing the operation (optional)

    Raises:
        InvalidArgumentError: if ``pauli`` is not a valid axis, if ``pauli="I"`` is combined
            with an empty control register, or if more than :math:`2^n` coefficients are given

    **Example**

    >>> op = qmux.MultiplexPauli([0.5, -0.5], "X", control_wires=[0], target_wire=1)
    >>> op.decomposition()
    [ChangeOpBasis(H(1), MultiplexZ(array([ 0.5, -0.5]), wires=[0, 1]), H(1))]

    The ``"X"`` and ``"Y"`` axes are rotated onto the ``"Z"`` axis with a change of basis on the
    target wire, so a controlled ``MultiplexPauli`` only controls the inner :class:`~.MultiplexZ`.
    """

    num_params = 1
    """int: Number of trainable parameters that the operator depends on."""

    def __init__(
        self, coeffs, pauli: str, control_wires: WiresLike, target_wire: WiresLike, id=None
    ):
        if pauli not in ("X", "Y", "Z", "I"):
            raise InvalidArgumentError(
                f"MultiplexPauli rotation axis must be one of 'X', 'Y', 'Z' or 'I'; got {pauli!r}."
            )

        control_wires = Wires(control_wires)
        target_wire = _single_target("MultiplexPauli", target_wire)
        if pauli == "I" and len(control_wires) == 0:
            raise InvalidArgumentError(
                "MultiplexPauli with pauli='I' applies a phase to the control register and "
                "requires at least one control wire; got control_wires=[]."
            )
        coeffs = _validate_coefficients("MultiplexPauli", coeffs, len(control_wires))

        self._hyperparameters = {
            "pauli": pauli,
            "control_wires": control_wires,
            "target_wire": target_wire,
        }

        super().__init__(coeffs, wires=control_wires + target_wire, id=id)

    def __repr__(self):
        return (
            f"MultiplexPauli({self.data[0]!r}, {self.hyperparameters['pauli']!r}, "
            f"wires={self.wires.tolist()})"
        )

    @property
    def control_wires(self) -> Wires:
        return self.hyperparameters["control_wires"]

    @staticmethod
    def compute_decomposition(coeffs, wires, pauli, control_wires, target_wire):
        r"""Representation of the operator as a product of other operators.

        Args:
            coeffs (tensor_like): the rotation angles
            wires (Any or Iterable[Any]): full set of wires that the operator acts on
            pauli (str): the rotation axis
            control_wires (Wires): the control register, most significant wire first
            target_wire (Wires): the target wire

        Returns:
            list[.Operator]: decomposition of the operator
        """
        if pauli == "Z":
            return [MultiplexZ(coeffs, control_wires, target_wire)]

        if pauli == "X":
            return [
                qmux.change_op_basis(
                    qmux.H(target_wire),
                    MultiplexZ(coeffs, control_wires, target_wire),
                    qmux.H(target_wire),
                )
            ]

        if pauli == "Y":
            return [
                qmux.change_op_basis(
                    qmux.adjoint(qmux.S(target_wire)),
                    MultiplexPauli(coeffs, "X", control_wires, target_wire),
                    qmux.S(target_wire),
                )
            ]

        return [qmux.DiagonalPhase(coeffs, control_wires)]
