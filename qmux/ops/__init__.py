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
This module contains the elementary gates, the identity and global phase operations,
and the operator arithmetic that builds adjoint, controlled and change-of-basis operators
from them.
"""
from .identity import GlobalPhase, I, Identity
from .qubit import (
    CNOT,
    RX,
    RY,
    RZ,
    H,
    Hadamard,
    MultiControlledX,
    PauliX,
    PauliY,
    PauliZ,
    PhaseShift,
    QubitUnitary,
    S,
    Toffoli,
    X,
    Y,
    Z,
)
from .op_math import (
    Adjoint,
    ChangeOpBasis,
    Controlled,
    SymbolicOp,
    adjoint,
    change_op_basis,
    create_controlled_op,
    ctrl,
)
from .functions import matrix
