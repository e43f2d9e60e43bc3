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
The ``decompose`` transform, which expands a circuit until a stopping condition accepts every
operation.
"""
import logging
from collections.abc import Callable, Iterator

from qmux.allocation import Allocate, Deallocate
from qmux.exceptions import DecompositionUndefinedError, DeviceError
from qmux.logging import TRACE
from qmux.operation import Operator
from qmux.tape import QuantumScript, QuantumScriptBatch

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def null_postprocessing(results):
    """Unpack the results of a batch that holds a single circuit."""
    return results[0]


def _expand(
    op: Operator,
    accept: Callable[[Operator], bool],
    max_expansion: int | None,
    name: str,
    depth: int = 0,
) -> Iterator[Operator]:
    # work-wire scopes are resolved after the expansion
    if isinstance(op, (Allocate, Deallocate)) or accept(op):
        yield op
        return

    if max_expansion is not None and depth >= max_expansion:
        yield op
        return

    if not op.has_decomposition:
        raise DecompositionUndefinedError(
            f"{op} is not supported with {name} and does not provide a decomposition."
        )

    decomp = op.decomposition()
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, "Expanding %s at depth %s into %s operation(s)", op, depth, len(decomp))

    for sub_op in decomp:
        yield from _expand(sub_op, accept, max_expansion, name, depth + 1)


def decompose(
    tape: QuantumScript,
    stopping_condition: Callable[[Operator], bool],
    max_expansion: int | None = None,
    name: str = "device",
    error: type[Exception] | None = None,
) -> tuple[QuantumScriptBatch, Callable]:
    """Expand the operations of a circuit until ``stopping_condition`` accepts each of them.

    Every rejected operation is replaced in place by its decomposition, which is expanded in turn
    before the next operation of the circuit. :class:`~.Allocate` and :class:`~.Deallocate` are
    kept as they are, so the expanded circuit holds the same work-wire scopes as the original one.

    Args:
        tape (QuantumScript): the circuit to expand
        stopping_condition (Callable): returns ``True`` for operations that are kept

    Keyword Args:
        max_expansion (int): operations this many levels deep are kept even if
            ``stopping_condition`` rejects them. Defaults to no limit.
        name (str): the name of the device or function that requested the expansion, used in
            error messages
        error (type): the exception raised when an operation cannot be expanded. Defaults to
            :class:`~.DeviceError`.

    Returns:
        tuple[QuantumScript], Callable: a batch holding the expanded circuit, and a
        postprocessing function

    Raises:
        DeviceError: if a rejected operation has no decomposition, or if an expansion does not
            terminate

    **Example**

    >>> tape = QuantumScript([qmux.MultiplexZ([0.1, 0.2], control_wires=[0], target_wire=1)])
    >>> accept = lambda op: op.name in {"RZ", "CNOT"}
    >>> (new_tape,), _ = qmux.transforms.decompose(tape, accept)
    >>> new_tape.operations
    [RZ(-0.3, wires=[1]), CNOT(wires=[0, 1]), RZ(0.1, wires=[1]), CNOT(wires=[0, 1])]
    """
    error = error or DeviceError

    if all(stopping_condition(op) for op in tape.operations):
        return (tape,), null_postprocessing

    new_ops = []
    for op in tape.operations:
        try:
            new_ops.extend(_expand(op, stopping_condition, max_expansion, name))
        except DecompositionUndefinedError as e:
            raise error(str(e)) from e
        except RecursionError as e:
            raise error(f"The expansion of {op} did not terminate.") from e

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Expanded %s operation(s) into %s for %s", len(tape.operations), len(new_ops), name
        )
    return (tape.copy(operations=new_ops),), null_postprocessing
