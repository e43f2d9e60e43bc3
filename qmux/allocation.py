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
Borrowing auxiliary wires inside a decomposition.

A decomposition that needs scratch qubits asks for placeholder :class:`~.DynamicWire` labels with
:func:`allocate` and hands them back with :func:`deallocate`. The placeholders only become real
wires when a device maps them onto its work wires.
"""
from collections.abc import Sequence
from enum import StrEnum
from typing import Literal

from qmux.operation import Operator
from qmux.wires import DynamicWire, Wires


class AllocateState(StrEnum):
    """The state a borrowed wire is handed out in."""

    ZERO = "zero"
    ANY = "any"


class Allocate(Operator):
    """Marks the start of the scope in which ``wires`` are borrowed.

    Args:
        wires (Sequence[DynamicWire]): the placeholder wires

    Keyword Args:
        state (str or AllocateState): ``"zero"`` if the wires must start in :math:`|0\\rangle`,
            ``"any"`` otherwise
        restored (bool): whether the wires are back in their starting state when the scope ends
    """

    def __init__(self, wires, state: AllocateState = AllocateState.ZERO, restored=False):
        super().__init__(wires=wires)
        self._hyperparameters = {"state": AllocateState(state), "restored": restored}

    @property
    def state(self) -> AllocateState:
        """The state the wires start in."""
        return self.hyperparameters["state"]

    @property
    def restored(self) -> bool:
        """Whether the wires are returned in their starting state."""
        return self.hyperparameters["restored"]


class Deallocate(Operator):
    """Marks the end of the scope of the borrowed ``wires``."""

    def __init__(self, wires: DynamicWire | Sequence[DynamicWire]):
        super().__init__(wires=wires)


def deallocate(wires: DynamicWire | Wires | Sequence[DynamicWire]) -> Deallocate:
    """Give back wires obtained from :func:`~.allocate`.

    Args:
        wires (DynamicWire, Wires, Sequence[DynamicWire]): the wires to give back

    Returns:
        Deallocate: the queued instruction

    Raises:
        ValueError: if one of the wires was not obtained from :func:`~.allocate`

    **Example**

    .. code-block:: python

        def circuit():
            wire = qmux.allocate(1, state="zero", restored=True)[0]
            qmux.CNOT([0, wire])
            qmux.CNOT([0, wire])
            qmux.deallocate(wire)

    >>> [op.name for op in qmux.tape.make_qscript(circuit)()]
    ['Allocate', 'CNOT', 'CNOT', 'Deallocate']
    """
    wires = Wires(wires)
    if not_dynamic_wires := [w for w in wires if not isinstance(w, DynamicWire)]:
        raise ValueError(f"deallocate only accepts DynamicWire wires. Got {not_dynamic_wires}")
    return Deallocate(wires)


class DynamicRegister(Wires):
    """The wires returned by :func:`~.allocate`. Leaving a ``with`` block deallocates them."""

    def __repr__(self):
        return f"<DynamicRegister: size={len(self._labels)}>"

    def __enter__(self):
        return self

    def __exit__(self, *_):
        deallocate(self)


def allocate(
    num_wires: int,
    state: Literal["any", "zero"] | AllocateState = AllocateState.ZERO,
    restored: bool = False,
) -> DynamicRegister:
    """Borrow ``num_wires`` auxiliary wires.

    Args:
        num_wires (int): the number of wires to borrow

    Keyword Args:
        state (Literal["any", "zero"]): ``"zero"`` to receive the wires in :math:`|0\\rangle`,
            ``"any"`` to accept them in an unknown state
        restored (bool): promise that the wires are returned in the state they were received in.
            A device checks this promise for wires received in :math:`|0\\rangle`.

    Returns:
        DynamicRegister: the borrowed placeholder wires

    Raises:
        ValueError: if ``state`` is neither ``"zero"`` nor ``"any"``

    **Example**

    The cascade of :func:`~.select_step` borrows one wire per level to hold the AND of the
    control bits seen so far:

    .. code-block:: python

        def circuit():
            with qmux.allocate(1, state="zero", restored=True) as aux:
                qmux.Toffoli([0, 1, aux[0]])
                qmux.CNOT([aux[0], 2])
                qmux.Toffoli([0, 1, aux[0]])

    >>> [op.name for op in qmux.tape.make_qscript(circuit)()]
    ['Allocate', 'Toffoli', 'CNOT', 'Toffoli', 'Deallocate']

    The ``Deallocate`` is queued on every exit of the ``with`` block, including an exception.
    """
    reg = DynamicRegister([DynamicWire() for _ in range(num_wires)])
    Allocate(reg, state=AllocateState(state), restored=restored)
    return reg
