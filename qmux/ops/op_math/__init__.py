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
This module contains classes and functions for Operator arithmetic.

.. currentmodule:: qmux

Constructor Functions
~~~~~~~~~~~~~~~~~~~~~

.. autosummary::
    :toctree: api

    ~adjoint
    ~ctrl
    ~change_op_basis

Symbolic Classes
~~~~~~~~~~~~~~~~

.. currentmodule:: qmux.ops.op_math

.. autosummary::
    :toctree: api

    ~Adjoint
    ~ChangeOpBasis
    ~Controlled
    ~SymbolicOp
"""

from .adjoint import Adjoint, adjoint
from .change_op_basis import ChangeOpBasis, change_op_basis
from .controlled import Controlled, create_controlled_op, ctrl
from .symbolicop import SymbolicOp

__all__ = [
    "Adjoint",
    "adjoint",
    "ChangeOpBasis",
    "change_op_basis",
    "Controlled",
    "create_controlled_op",
    "ctrl",
    "SymbolicOp",
]
