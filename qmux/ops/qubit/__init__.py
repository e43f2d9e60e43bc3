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
This module contains the available built-in discrete-variable
quantum operations supported by qmux, as well as their conventions.

All matrices are written in the computational basis with the first wire of an operator as
the most significant qubit.
"""
from .matrix_ops import QubitUnitary
from .non_parametric_ops import (
    CNOT,
    H,
    Hadamard,
    MultiControlledX,
    PauliX,
    PauliY,
    PauliZ,
    S,
    Toffoli,
    X,
    Y,
    Z,
)
from .parametric_ops import RX, RY, RZ, PhaseShift

ops = {
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
"""set[str]: the names of the elementary qubit gates."""
