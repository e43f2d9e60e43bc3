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
This module contains all the custom exceptions used in qmux.

.. currentmodule:: qmux.exceptions

General Execution Errors
~~~~~~~~~~~~~~~~~~~~~~~~

.. autosummary::
    :toctree: api

    ~AllocationError
    ~DeviceError
    ~InvalidArgumentError
    ~QueuingError
    ~WireError

Operator Property Errors
~~~~~~~~~~~~~~~~~~~~~~~~

.. autosummary::
    :toctree: api

    ~OperatorPropertyUndefined
    ~DecompositionUndefinedError
    ~MatrixUndefinedError
    ~AdjointUndefinedError

"""  # pragma: no cover

# =============================================================================
# General Execution Errors
# =============================================================================


class AllocationError(RuntimeError):
    """An error arising from trying handling a dynamically allocated wire."""


class DeviceError(Exception):
    """Exception raised when it encounters an illegal operation in the quantum circuit."""


class InvalidArgumentError(ValueError):
    """Exception raised when an operator receives an argument outside of its contract,
    such as an empty index register or an unknown rotation axis."""


class QueuingError(Exception):
    """Exception that is raised when there is a queuing error"""


class WireError(Exception):
    """Exception raised by a :class:`~.qmux.wires.Wires` object when it is unable to process wires."""


# =============================================================================
# Operator Property Errors
# =============================================================================


class OperatorPropertyUndefined(Exception):
    """Generic exception to be used for undefined
    Operator properties or methods."""


class DecompositionUndefinedError(OperatorPropertyUndefined):
    """Raised when an Operator's representation as a decomposition is undefined."""


class MatrixUndefinedError(OperatorPropertyUndefined):
    """Raised when an Operator's matrix representation is undefined."""


class AdjointUndefinedError(OperatorPropertyUndefined):
    """Raised when an Operator's adjoint version is undefined."""
