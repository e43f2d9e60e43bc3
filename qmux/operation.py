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
# pylint: disable=protected-access
r"""
This module contains the abstract base classes for defining qmux operators.

Every gate, template and symbolic wrapper in qmux derives from :class:`Operator`. An operator
knows its parameters (``data``), the wires it acts on and a dictionary of non-trainable
hyperparameters. It may provide up to three representations of itself:

* a matrix in the computational basis (:meth:`~.Operator.compute_matrix`),
* a decomposition into other operators (:meth:`~.Operator.compute_decomposition`),
* its adjoint (:meth:`~.Operator.adjoint`).

Operators queue themselves into the active recording context on construction,
see :mod:`qmux.queuing`.
"""
import abc
import copy
from collections.abc import Hashable
from typing import Any

import numpy as np

from qmux.exceptions import (
    AdjointUndefinedError,
    DecompositionUndefinedError,
    MatrixUndefinedError,
)
from qmux.math import expand_matrix
from qmux.queuing import QueuingManager
from qmux.wires import Wires, WiresLike


class ClassPropertyDescriptor:  # pragma: no cover
    """Allows a class property to be defined"""

    def __init__(self, fget, fset=None):
        self.fget = fget
        self.fset = fset

    def __get__(self, obj, klass=None):
        if klass is None:
            klass = type(obj)
        return self.fget.__get__(obj, klass)()

    def __set__(self, obj, value):
        if not self.fset:
            raise AttributeError("can't set attribute")
        type_ = type(obj)
        return self.fset.__get__(obj, type_)(value)

    def setter(self, func):
        """Set the function as a class method, and store as an attribute."""
        if not isinstance(func, (classmethod, staticmethod)):
            func = classmethod(func)
        self.fset = func
        return self


def classproperty(func) -> ClassPropertyDescriptor:
    """The class property decorator"""
    if not isinstance(func, (classmethod, staticmethod)):
        func = classmethod(func)

    return ClassPropertyDescriptor(func)


class Operator(abc.ABC):
    r"""Base class representing quantum operators.

    Args:
        params (tuple[tensor_like]): trainable parameters
        wires (Iterable[Any] or Any): Wire label(s) that the operator acts on.
            If not given, the last positional argument is interpreted as the wires.
        id (str): custom label given to an operator instance

    Subclasses declare ``num_wires`` (``None`` for any number of wires) and may fix
    ``num_params``. They override ``compute_matrix``, ``compute_decomposition`` and
    ``adjoint`` to make the corresponding representation available:

    .. code-block:: python

        class FlipAndRotate(qmux.operation.Operation):
            num_wires = 2
            num_params = 1

            @staticmethod
            def compute_decomposition(angle, wires):
                return [qmux.RX(angle, wires=wires[0]), qmux.X(wires[1])]

    >>> FlipAndRotate(0.2, wires=["a", "b"]).decomposition()
    [RX(0.2, wires=['a']), X('b')]
    """

    num_wires: int | None = None
    """Number of wires the operator acts on. ``None`` means any number of wires."""

    def __init__(self, *params, wires: WiresLike | None = None, id: str | None = None):
        self._name: str = self.__class__.__name__  #: str: name of the operator
        self._id: str | None = id

        wires_from_args = False
        if wires is None:
            try:
                wires = params[-1]
                params = params[:-1]
                wires_from_args = True
            except IndexError as err:
                raise ValueError(
                    f"Must specify the wires that {type(self).__name__} acts on"
                ) from err

        self._num_params: int = len(params)

        # Subclasses may fix the expected number of parameters.
        if len(params) != self.num_params:
            if wires_from_args and len(params) == (self.num_params - 1):
                raise ValueError(f"Must specify the wires that {type(self).__name__} acts on")
            raise ValueError(
                f"{self.name}: wrong number of parameters. "
                f"{len(params)} parameters passed, {self.num_params} expected."
            )

        self._wires: Wires = Wires(wires)

        if (self.num_wires is not None) and len(self._wires) != self.num_wires:
            raise ValueError(
                f"{self.name}: wrong number of wires. "
                f"{len(self._wires)} wires given, {self.num_wires} expected."
            )

        self.data = tuple(np.array(p) if isinstance(p, (list, tuple)) else p for p in params)

        self.queue()

    def __copy__(self) -> "Operator":
        cls = self.__class__
        copied_op = cls.__new__(cls)
        copied_op.data = copy.copy(self.data)
        # pylint: disable=attribute-defined-outside-init
        if hasattr(self, "_hyperparameters"):
            copied_op._hyperparameters = copy.copy(self._hyperparameters)
        for attr, value in vars(self).items():
            if attr not in {"data", "_hyperparameters"}:
                setattr(copied_op, attr, value)

        return copied_op

    def __repr__(self) -> str:
        """Constructor-call-like representation."""
        if self.parameters:
            params = ", ".join([repr(p) for p in self.parameters])
            return f"{self.name}({params}, wires={self.wires.tolist()})"
        return f"{self.name}(wires={self.wires.tolist()})"

    @property
    def num_params(self) -> int:
        """Number of trainable parameters that the operator depends on.

        By default, this property returns as many parameters as were used for the
        operator creation. Subclasses with a fixed number of parameters overwrite it.
        """
        return self._num_params

    @property
    def name(self) -> str:
        """String for the name of the operator."""
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def id(self) -> str | None:
        """Custom string to label a specific operator instance."""
        return self._id

    @property
    def wires(self) -> Wires:
        """Wires that the operator acts on."""
        return self._wires

    @property
    def parameters(self) -> list:
        """Trainable parameters that the operator depends on."""
        return list(self.data)

    @property
    def hyperparameters(self) -> dict[str, Any]:
        """dict: Dictionary of non-trainable variables that this operation depends on."""
        # pylint: disable=attribute-defined-outside-init
        if hasattr(self, "_hyperparameters"):
            return self._hyperparameters
        self._hyperparameters = {}
        return self._hyperparameters

    # pylint: disable=no-self-argument, comparison-with-callable
    @classproperty
    def has_matrix(cls) -> bool:
        r"""Bool: Whether or not the Operator returns a defined matrix."""
        return cls.compute_matrix != Operator.compute_matrix or cls.matrix != Operator.matrix

    @staticmethod
    def compute_matrix(*params, **hyperparams) -> np.ndarray:
        r"""Representation of the operator as a canonical matrix in the computational basis
        (static method).

        The canonical matrix does not consider wires. Implicitly, this assumes that the
        wires of the operator correspond to the global wire order.

        Args:
            *params (list): trainable parameters of the operator, as stored in ``parameters``
            **hyperparams (dict): non-trainable hyperparameters of the operator

        Returns:
            array: matrix representation
        """
        raise MatrixUndefinedError

    def matrix(self, wire_order: WiresLike | None = None) -> np.ndarray:
        r"""Representation of the operator as a matrix in the computational basis.

        If ``wire_order`` is provided, the numerical representation considers the position of
        the operator's wires in the global wire order. Otherwise, the wire order defaults
        to the operator's wires.

        Args:
            wire_order (Iterable): global wire order, must contain all wire labels from the
                operator's wires

        Returns:
            array: matrix representation
        """
        canonical_matrix = self.compute_matrix(*self.parameters, **self.hyperparameters)

        if wire_order is None or self.wires == Wires(wire_order):
            return canonical_matrix

        return expand_matrix(canonical_matrix, wires=self.wires, wire_order=wire_order)

    # pylint: disable=no-self-argument, comparison-with-callable
    @classproperty
    def has_decomposition(cls) -> bool:
        r"""Bool: Whether or not the Operator returns a defined decomposition."""
        # Symbolic operators overwrite ``decomposition`` instead of ``compute_decomposition``.
        return (
            cls.compute_decomposition != Operator.compute_decomposition
            or cls.decomposition != Operator.decomposition
        )

    def decomposition(self) -> list["Operator"]:
        r"""Representation of the operator as a product of other operators.

        .. math:: O = O_1 O_2 \dots O_n

        A ``DecompositionUndefinedError`` is raised if no representation by decomposition
        is defined.

        Returns:
            list[Operator]: decomposition of the operator
        """
        return self.compute_decomposition(
            *self.parameters, wires=self.wires, **self.hyperparameters
        )

    @staticmethod
    def compute_decomposition(
        *params, wires: WiresLike | None = None, **hyperparameters
    ) -> list["Operator"]:
        r"""Representation of the operator as a product of other operators (static method).

        .. note::

            Operations making up the decomposition are queued into the active recording
            context, if any.

        Args:
            *params (list): trainable parameters of the operator
            wires (Iterable[Any], Wires): wires that the operator acts on
            **hyperparameters (dict): non-trainable hyperparameters of the operator

        Returns:
            list[Operator]: decomposition of the operator
        """
        raise DecompositionUndefinedError

    # pylint: disable=no-self-argument
    @classproperty
    def has_adjoint(cls) -> bool:
        r"""Bool: Whether or not the Operator can compute its own adjoint."""
        return cls.adjoint != Operator.adjoint

    def adjoint(self) -> "Operator":  # pylint:disable=no-self-use
        """Create an operation that is the adjoint of this one.

        ``Operator.adjoint`` can be optionally defined by operator developers, while
        :func:`~.adjoint` is the entry point for constructing generic adjoint representations.

        Returns:
            The adjointed operation.
        """
        raise AdjointUndefinedError

    def queue(self, context=QueuingManager):
        """Append the operator to the Operator queue."""
        context.append(self)
        return self

    def map_wires(self, wire_map: dict[Hashable, Hashable]) -> "Operator":
        """Returns a copy of the current operator with its wires changed according to the given
        wire map.

        Hyperparameters holding :class:`~.Wires` are mapped as well.

        Args:
            wire_map (dict): dictionary containing the old wires as keys and the new wires as values

        Returns:
            .Operator: new operator
        """
        hyperparameters = self.hyperparameters
        new_op = copy.copy(self)
        new_op._wires = Wires([wire_map.get(wire, wire) for wire in self.wires])
        for key, value in hyperparameters.items():
            if isinstance(value, Wires):
                new_op._hyperparameters[key] = value.map(wire_map)
        return new_op


class Operation(Operator):
    r"""Base class representing quantum gates.

    Gates may provide a dedicated rule for their controlled version by overriding
    :meth:`~.Operation.controlled_decomposition`. :class:`~.Controlled` uses that rule
    instead of controlling every gate of the decomposition.
    """

    @property
    def control_wires(self) -> Wires:
        r"""Control wires of the operator.

        For operations that are not controlled, this is an empty ``Wires`` object.
        """
        return Wires([])

    # pylint: disable=no-self-argument, comparison-with-callable
    @classproperty
    def has_controlled_decomposition(cls) -> bool:
        r"""Bool: Whether or not the Operation defines a dedicated controlled decomposition."""
        return cls.controlled_decomposition != Operation.controlled_decomposition

    def controlled_decomposition(self, control_wires: Wires) -> list[Operator]:
        r"""Decomposition of the operator controlled on ``control_wires`` (all in :math:`|1\rangle`).

        Args:
            control_wires (Wires): the additional control wires

        Returns:
            list[Operator]: decomposition of the controlled operator
        """
        raise DecompositionUndefinedError
