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
This submodule contains a transform for resolving dynamic wires into real wires.
"""
from collections.abc import Callable, Hashable, Sequence

from qmux.allocation import AllocateState
from qmux.exceptions import AllocationError
from qmux.tape import QuantumScript, QuantumScriptBatch

from .decompose import null_postprocessing


class _WireManager:
    """Handles converting dynamic wires into concrete values."""

    def __init__(self, zeroed=(), any_state=(), min_int=None):
        self._registers = {AllocateState.ZERO: list(zeroed), AllocateState.ANY: list(any_state)}
        self._loaned = {}  # wire to final register type
        self._stack_order = {w: i for i, w in enumerate([*any_state, *zeroed])}
        self.min_int = min_int

    @property
    def _zeroed(self):
        return self._registers[AllocateState.ZERO]

    @property
    def _any_state(self):
        return self._registers[AllocateState.ANY]

    def _get_zeroed(self, restored: bool):
        if self._zeroed:
            w = self._zeroed.pop()
            self._loaned[w] = AllocateState.ZERO if restored else AllocateState.ANY
            return w
        self._add_new_wire()
        return self._get_zeroed(restored=restored)

    def _add_new_wire(self):
        if self.min_int is None:
            raise AllocationError("no wires left to allocate.")
        self._zeroed.append(self.min_int)
        self.min_int += 1

    def _get_any(self, restored: bool):
        if self._any_state:
            w = self._any_state.pop()
            self._loaned[w] = AllocateState.ANY
            return w
        if not self._zeroed:
            self._add_new_wire()
        w = self._zeroed.pop()
        self._loaned[w] = AllocateState.ZERO if restored else AllocateState.ANY
        return w

    def get_wire(self, state: AllocateState, restored: bool):
        """Retrieve a concrete wire label from available registers."""
        if state == AllocateState.ZERO:
            return self._get_zeroed(restored)
        return self._get_any(restored)

    def loaned_as(self, wire) -> AllocateState:
        """The register a loaned wire returns to once it is deallocated."""
        return self._loaned[wire]

    def return_wire(self, wire):
        """Return a wire label back to be re-used."""
        reg_type = self._loaned.pop(wire)
        self._registers[reg_type].append(wire)

    def reclaim(self) -> list:
        """Return every wire still on loan, most recent first, and give back the registers
        as a single stack of wires.

        The stack is in the order the wires were first provided, so that the next circuit
        receives them in the same order. Wires created from ``min_int`` go on top.
        """
        for wire in reversed(list(self._loaned)):
            self.return_wire(wire)
        free = self._any_state + self._zeroed
        return sorted(free, key=lambda w: self._stack_order.get(w, len(self._stack_order)))


def _new_ops(operations, manager, wire_map, deallocated, on_deallocate: Callable | None = None):
    for op in operations:
        # check name faster than isinstance
        if op.name == "Allocate":
            for w in op.wires:
                if w in wire_map or w in deallocated:
                    raise AllocationError(f"Dynamic wire {w} was allocated more than once.")
                wire_map[w] = manager.get_wire(**op.hyperparameters)
        elif op.name == "Deallocate":
            for w in op.wires:
                if w not in wire_map:
                    raise AllocationError(f"Dynamic wire {w} was deallocated without allocation.")
                deallocated.add(w)
                wire = wire_map.pop(w)
                if on_deallocate is not None:
                    on_deallocate(wire, manager.loaned_as(wire))
                manager.return_wire(wire)
        else:
            if deallocated and (intersection := deallocated.intersection(set(op.wires))):
                raise AllocationError(
                    f"Encountered deallocated wires {intersection} in {op}. Dynamic wires cannot be used after deallocation."
                )
            if wire_map:
                op = op.map_wires(wire_map)
            yield op


def resolve_dynamic_wires(
    tape: QuantumScript,
    zeroed: Sequence[Hashable] = (),
    any_state: Sequence[Hashable] = (),
    min_int: int | None = None,
) -> tuple[QuantumScriptBatch, Callable]:
    r"""Map dynamic wires to concrete values determined by the provided ``zeroed`` and ``any_state`` registers.

    Args:
        tape (QuantumScript): A circuit that may contain dynamic wire allocations and deallocations
        zeroed (Sequence[Hashable]): a register of wires known to be in the :math:`|0\rangle` state
        any_state (Sequence[Hashable]): a register of wires with any state
        min_int (Optional[int]): If not ``None``, new wire labels can be created starting at this
            integer and incrementing whenever a new wire is needed.

    Returns:
        tuple[QuantumScript], Callable: A batch of tapes and a postprocessing function

    Raises:
        AllocationError: if no wire is left to allocate, or if a dynamic wire is used after it
            was deallocated

    .. note::

        This transform uses a "Last In, First Out" (LIFO) stack based approach to distributing
        wires. Released wires are pushed back on top of their register and handed out first.

    A wire allocated with ``state="zero"`` is taken from ``zeroed``. A wire allocated with
    ``state="any"`` is taken from ``any_state`` first and from ``zeroed`` if ``any_state`` is
    empty. When both registers are exhausted and ``min_int`` is not ``None``, a new integer wire
    label is created. A zeroed wire only returns to ``zeroed`` if it was allocated with
    ``restored=True``; otherwise it returns to ``any_state``.

    .. code-block:: python

        def circuit():
            with qmux.allocate(1, state="zero", restored=True) as wires:
                qmux.X(wires)
                qmux.X(wires)
            with qmux.allocate(1, state="zero", restored=True) as wires:
                qmux.Y(wires)
                qmux.Y(wires)

    >>> tape = qmux.tape.make_qscript(circuit)()
    >>> (new_tape,), _ = resolve_dynamic_wires(tape, zeroed=("a", "b"))
    >>> new_tape.operations
    [X('b'), X('b'), Y('b'), Y('b')]
    """
    manager = _WireManager(zeroed=zeroed, any_state=any_state, min_int=min_int)

    wire_map = {}
    deallocated = set()

    # note that manager, wire_map, and deallocated updated in place
    new_ops = list(_new_ops(tape.operations, manager, wire_map, deallocated))

    if not wire_map and not deallocated:
        return (tape,), null_postprocessing
    return (tape.copy(operations=new_ops),), null_postprocessing
