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
"""Code for counting the resources of a decomposed circuit."""
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields
from typing import Any

from qmux.operation import Operator
from qmux.tape import QuantumScript, make_qscript
from qmux.transforms import decompose


@dataclass(frozen=True)
class SpecsResources:
    """
    Class for storing resource information for a quantum circuit. Contains the gate counts of the
    circuit, the number of dynamic wire allocations, and the largest number of dynamic wires
    that are allocated at the same time.

    Args:
        gate_types (dict[str, int]): A dictionary mapping gate names to their counts.
        gate_sizes (dict[int, int]): A dictionary mapping gate sizes to their counts.
        num_allocs (int): The number of dynamic wires allocated over the whole circuit.
        max_live_wires (int): The peak number of simultaneously allocated dynamic wires. This is
            the number of work wires a device needs to execute the circuit.

    Properties:
        num_gates (int): The total number of gates in the circuit (computed from `gate_types`).

    **Example**

    >>> res = SpecsResources(
    ...     gate_types={'Hadamard': 1, 'CNOT': 1},
    ...     gate_sizes={1: 1, 2: 1},
    ...     num_allocs=0,
    ...     max_live_wires=0,
    ... )
    >>> res.num_gates
    2
    >>> print(res)
    Total wire allocations: 0
    Peak live dynamic wires: 0
    Total gates: 2
    <BLANKLINE>
    Gate types:
      Hadamard: 1
      CNOT: 1
    """

    gate_types: dict[str, int]
    gate_sizes: dict[int, int]
    num_allocs: int
    max_live_wires: int

    def __post_init__(self):
        if sum(self.gate_types.values()) != sum(self.gate_sizes.values()):
            raise ValueError(
                "Inconsistent gate counts: `gate_types` and `gate_sizes` describe different amounts of gates."
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert the SpecsResources to a dictionary."""
        d = asdict(self)
        d["num_gates"] = self.num_gates
        return d

    def __getitem__(self, key):
        if key in (field.name for field in fields(self)):
            return getattr(self, key)
        if key == "num_gates":
            return self.num_gates
        raise KeyError(
            f"key '{key}' not available. Options are {[field.name for field in fields(self)]}"
        )

    @property
    def num_gates(self) -> int:
        """Total number of gates in the circuit."""
        return sum(self.gate_types.values())

    def __str__(self) -> str:
        lines = [
            f"Total wire allocations: {self.num_allocs}",
            f"Peak live dynamic wires: {self.max_live_wires}",
            f"Total gates: {self.num_gates}",
            "",
            "Gate types:",
        ]
        if not self.gate_types:
            lines.append("  No gates.")
        for gate, count in self.gate_types.items():
            lines.append(f"  {gate}: {count}")
        return "\n".join(lines)


def resources_from_tape(tape: QuantumScript) -> SpecsResources:
    """Extracts the resource information from a quantum circuit.

    Args:
        tape (.QuantumScript): The quantum circuit for which we extract resources

    Returns:
        SpecsResources: The resources associated with this tape
    """
    gate_types, gate_sizes = {}, {}
    num_allocs = live = max_live = 0

    for op in tape.operations:
        if op.name == "Allocate":
            num_allocs += len(op.wires)
            live += len(op.wires)
            max_live = max(max_live, live)
        elif op.name == "Deallocate":
            live -= len(op.wires)
        else:
            gate_types[op.name] = gate_types.get(op.name, 0) + 1
            gate_sizes[len(op.wires)] = gate_sizes.get(len(op.wires), 0) + 1

    return SpecsResources(
        gate_types=gate_types,
        gate_sizes=gate_sizes,
        num_allocs=num_allocs,
        max_live_wires=max_live,
    )


def specs(
    fn: Callable | Operator, stopping_condition: Callable[[Operator], bool] | None = None
) -> Callable[..., SpecsResources]:
    r"""Provides the resource counts of a circuit after it has been fully decomposed.

    Args:
        fn (Callable or .Operator): a quantum function, or a single operator

    Keyword Args:
        stopping_condition (Callable): a function from an operator to a boolean that says which
            operators are left undecomposed. Defaults to the gate set of
            :class:`~.devices.DefaultQubit`.

    Returns:
        A function that has the same argument signature as ``fn``. This function returns a
        :class:`~.resource.SpecsResources` object.

    **Example**

    .. code-block:: python

        ops = [qmux.X(3), qmux.Y(3), qmux.Z(3), qmux.H(3), qmux.X(3), qmux.Y(3)]

        def circuit():
            qmux.Select(ops, control=[0, 1, 2])

    >>> res = qmux.resource.specs(circuit)()
    >>> res.max_live_wires
    2

    The three control wires need two borrowed work wires, one per level below the first.
    """
    if stopping_condition is None:
        # pylint: disable=import-outside-toplevel
        from qmux.devices.default_qubit import stopping_condition

    def specs_fn(*args, **kwargs) -> SpecsResources:
        if isinstance(fn, Operator):
            tape = QuantumScript([fn])
        else:
            tape = make_qscript(fn)(*args, **kwargs)
        (tape,), _ = decompose(tape, stopping_condition, name="specs")
        return resources_from_tape(tape)

    return specs_fn
