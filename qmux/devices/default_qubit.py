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
Contains the DefaultQubit device, a numpy state-vector simulator that executes circuits with
dynamically allocated work wires.
"""
import logging

import numpy as np

import qmux
from qmux.allocation import AllocateState
from qmux.exceptions import AllocationError, DeviceError
from qmux.logging import debug_logger, debug_logger_init
from qmux.operation import Operator
from qmux.tape import QuantumScript, make_qscript
from qmux.transforms import decompose
from qmux.transforms.resolve_dynamic_wires import _new_ops, _WireManager
from qmux.wires import DynamicWire, Wires

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

operations = frozenset(
    {
        "Identity",
        "GlobalPhase",
        "Hadamard",
        "PauliX",
        "PauliY",
        "PauliZ",
        "S",
        "CNOT",
        "Toffoli",
        "MultiControlledX",
        "RX",
        "RY",
        "RZ",
        "PhaseShift",
        "QubitUnitary",
    }
)


def stopping_condition(op: Operator) -> bool:
    """Specify whether or not an Operator object is supported by the device.

    Operators outside of the native gate set are accepted when they define a matrix and
    nothing else to expand into.
    """
    return op.name in operations or (op.has_matrix and not op.has_decomposition)


def apply_operation(op: Operator, state: np.ndarray, wire_order: Wires) -> np.ndarray:
    """Apply an operator to a state tensor with one axis per wire of ``wire_order``."""
    num_wires = len(op.wires)
    if num_wires == 0:
        return op.matrix()[0, 0] * state

    mat = np.reshape(op.matrix(), [2] * 2 * num_wires)
    axes = wire_order.indices(op.wires)
    state = np.tensordot(mat, state, axes=(list(range(num_wires, 2 * num_wires)), axes))
    return np.moveaxis(state, list(range(num_wires)), axes)


def _excited_probability(state: np.ndarray, axis: int) -> float:
    return float(np.sum(np.abs(np.take(state, 1, axis=axis)) ** 2))


class DefaultQubit:
    """A numpy state-vector simulator with a pool of work wires for dynamic allocations.

    Args:
        wires (int, Iterable[Number, str]): Number of wires present on the device, or iterable
            that contains unique labels for the wires as numbers (i.e., ``[-1, 0, 2]``) or strings
            (``['aux', 'q1', 'q2']``).
        work_wires (int, Iterable[Number, str]): Number of work wires, or their labels. Work wires
            start in :math:`|0\\rangle` and are handed out to :func:`~.allocate` requests during
            execution. Defaults to the ``qmux.devices.default_qubit.work_wires`` configuration
            option, or no work wires.

    **Example**

    .. code-block:: python

        dev = qmux.devices.DefaultQubit(wires=3, work_wires=1)

        def circuit():
            qmux.X(0)
            qmux.X(1)
            qmux.Select([qmux.X(2), qmux.Y(2), qmux.Z(2), qmux.X(2)], control=[0, 1])

    >>> state = dev.execute(circuit)
    >>> np.nonzero(state)[0]
    array([7])

    The device decomposes the circuit into its native gates, maps every dynamic wire onto a work
    wire in last-in, first-out order, and simulates the result. Whenever a wire that was
    allocated in :math:`|0\\rangle` with ``restored=True`` is deallocated, the device checks that
    it is back in :math:`|0\\rangle` and raises a :class:`~.DeviceError` if it is not.
    """

    name = "default.qubit"

    @debug_logger_init
    def __init__(self, wires, work_wires=None):
        options = qmux.default_config.device_options("default_qubit")
        self._wires = Wires(range(wires)) if isinstance(wires, int) else Wires(wires)
        if self._wires.has_dynamic_wires:
            raise DeviceError("Device wires cannot be dynamic wires.")

        if work_wires is None:
            work_wires = options.get("work_wires", 0)
        if isinstance(work_wires, int):
            start = max((w + 1 for w in self._wires if isinstance(w, int)), default=0)
            work_wires = range(start, start + work_wires)
        self._work_wires = Wires(work_wires)

        if shared := Wires.shared_wires([self._wires, self._work_wires]):
            raise DeviceError(f"Work wires {shared.tolist()} are also device wires.")
        # stack of free work wires, the last entry is handed out first
        self._free_pool = self._work_wires.tolist()[::-1]

        self._atol = float(options.get("atol", 1e-8))

    def __repr__(self):
        name = self.__class__.__name__
        return f"<{name} device (wires={len(self._wires)}, work_wires={len(self._work_wires)})>"

    @property
    def wires(self) -> Wires:
        """The wires that circuits act on."""
        return self._wires

    @property
    def free_work_wires(self) -> Wires:
        """The work wires that are currently free, in the order they are handed out."""
        return Wires(self._free_pool[::-1])

    @property
    def atol(self) -> float:
        """Tolerance on the probability of a restored work wire not being in :math:`|0\\rangle`."""
        return self._atol

    def _to_tape(self, circuit) -> QuantumScript:
        if isinstance(circuit, QuantumScript):
            return circuit
        if isinstance(circuit, Operator):
            return QuantumScript([circuit])
        if callable(circuit):
            return make_qscript(circuit)()
        raise TypeError(f"Cannot execute object of type {type(circuit).__name__}.")

    @debug_logger
    def preprocess(self, circuit) -> QuantumScript:
        """Decompose a circuit into operations the device can apply.

        Args:
            circuit (QuantumScript, Operator or Callable): the circuit, or a quantum function
                without arguments

        Returns:
            QuantumScript: the decomposed circuit, dynamic wires unresolved

        Raises:
            DeviceError: if an operation cannot be decomposed, or acts on a wire that is not a
                device wire
        """
        tape = self._to_tape(circuit)
        (tape,), _ = decompose(tape, stopping_condition, name=self.name)

        static_wires = Wires([w for w in tape.wires if not isinstance(w, DynamicWire)])
        if missing := [w for w in static_wires if w not in self._wires]:
            raise DeviceError(
                f"Cannot run circuit(s) on {self.name} as they contain wires "
                f"not found on the device: {set(missing)}"
            )
        return tape

    @debug_logger
    def execute(self, circuit, initial_state=None) -> np.ndarray:
        """Execute a circuit and return its final state.

        Args:
            circuit (QuantumScript, Operator or Callable): the circuit, or a quantum function
                without arguments
            initial_state (array[complex]): state vector over the device wires to start from.
                Defaults to :math:`|0\\ldots 0\\rangle`.

        Returns:
            array[complex]: the final state vector over the device wires

        Raises:
            DeviceError: if a restored work wire is not returned to :math:`|0\\rangle`, or if the
                work wires end up entangled with the device wires
            AllocationError: if the circuit requests more work wires than the device has
        """
        tape = self.preprocess(circuit)
        wire_order = self._wires + self._work_wires
        num_device_wires = len(self._wires)
        num_work_wires = len(self._work_wires)

        if initial_state is None:
            device_state = np.zeros(2**num_device_wires, dtype=complex)
            device_state[0] = 1.0
        else:
            device_state = np.asarray(initial_state, dtype=complex).reshape(-1)
            if device_state.shape != (2**num_device_wires,):
                raise ValueError(
                    f"Initial state must have {2**num_device_wires} entries; "
                    f"got {device_state.shape[0]}."
                )

        work_state = np.zeros(2**num_work_wires, dtype=complex)
        work_state[0] = 1.0
        state = np.reshape(np.kron(device_state, work_state), [2] * len(wire_order))
        norm = float(np.sum(np.abs(state) ** 2))

        current = {"state": state}

        def check_restored(wire, register):
            if register != AllocateState.ZERO:
                return
            leak = _excited_probability(current["state"], wire_order.index(wire))
            if leak > self._atol * norm:
                raise DeviceError(
                    f"Work wire {wire} was allocated with restored=True but was deallocated "
                    f"outside of |0> (excited population {leak:.3g})."
                )

        manager = _WireManager(zeroed=self._free_pool)
        self._free_pool = []
        try:
            for op in _new_ops(tape.operations, manager, {}, set(), on_deallocate=check_restored):
                current["state"] = apply_operation(op, current["state"], wire_order)
        except AllocationError as e:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Allocation failed on %s: %s", self.name, e)
            raise
        finally:
            # work wires start in |0> on every execution
            self._free_pool = manager.reclaim()

        state = current["state"]
        final = state[(Ellipsis,) + (0,) * num_work_wires]
        leak = norm - float(np.sum(np.abs(final) ** 2))
        if leak > self._atol * max(norm, 1.0):
            raise DeviceError(
                f"Work wires were not returned to |0> (population {leak:.3g} outside of |0>)."
            )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Executed %s operation(s) on %s with %s work wire(s)",
                len(tape.operations),
                self.name,
                num_work_wires,
            )
        return np.reshape(final, -1)
