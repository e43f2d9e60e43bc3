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
This module contains the :class:`Wires` class, which takes care of wire bookkeeping,
and the :class:`DynamicWire` placeholder used for wires that are allocated mid-circuit.
"""
import itertools
import uuid
from collections.abc import Hashable, Iterable, Sequence
from typing import Union

import numpy as np

from qmux.exceptions import WireError


def _process(wires) -> tuple:
    """Converts the input to a tuple of unique, hashable wire labels.

    Strings are always a single label. Other iterables are unpacked into labels,
    anything else is treated as a single label.
    """
    if isinstance(wires, str):
        wires = [wires]

    try:
        tuple_of_wires = tuple(wires)
    except TypeError:
        try:
            hash(wires)
        except TypeError as e:
            raise WireError(f"Wires must be hashable; got object of type {type(wires)}.") from e
        return (wires,)

    # a list of Wires objects is flattened into their labels
    if tuple_of_wires and all(isinstance(w, Wires) for w in tuple_of_wires):
        tuple_of_wires = tuple(itertools.chain(*(w.labels for w in tuple_of_wires)))

    try:
        set_of_wires = set(tuple_of_wires)
    except TypeError as e:
        raise WireError(f"Wires must be hashable; got {wires}.") from e

    if len(set_of_wires) != len(tuple_of_wires):
        raise WireError(f"Wires must be unique; got {wires}.")

    return tuple_of_wires


class DynamicWire:
    """A placeholder for a wire that is requested with :func:`~.allocate` and only receives
    a concrete label when the circuit is mapped onto a device.

    Args:
        key (uuid.UUID, None): the identity of the wire. A new key is generated if not provided.
    """

    def __init__(self, key: uuid.UUID | None = None):
        self.key = key or uuid.uuid4()

    def __repr__(self):
        return "<DynamicWire>"

    def __eq__(self, other):
        return isinstance(other, DynamicWire) and self.key == other.key

    def __hash__(self):
        return hash(("DynamicWire", self.key))


class Wires(Sequence):
    r"""
    A bookkeeping class for wires, which are ordered collections of unique objects.

    If the input `wires` can be iterated over, it is interpreted as a sequence of wire labels that
    have to be unique and hashable. Else it is interpreted as a single hashable wire label. Strings
    are always interpreted as a single label.

    Position ``0`` of a register holds its most significant qubit.

    Args:
         wires (Any): the wire label(s)
    """

    def __init__(self, wires, _override=False):
        if isinstance(wires, Wires):
            self._labels = wires.labels
        elif _override:
            self._labels = wires
        else:
            self._labels = _process(wires)

        self._hash = None

    def __getitem__(self, idx):
        """Returns a Wires object if index is a slice, or a label if index is an integer."""
        if isinstance(idx, slice):
            return Wires(self._labels[idx], _override=True)
        return self._labels[idx]

    def __iter__(self):
        return iter(self._labels)

    def __len__(self):
        return len(self._labels)

    def __contains__(self, item):
        return item in self._labels

    def __repr__(self):
        return f"Wires({list(self._labels)})"

    def __eq__(self, other):
        # order matters: Wires([0, 1]) != Wires([1, 0])
        if isinstance(other, Wires):
            return self._labels == other.labels
        return self._labels == other

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(self._labels)
        return self._hash

    def __add__(self, other):
        """Returns the wires of both objects, keeping the order in which they first appear.

        >>> Wires([4, 0, 1]) + Wires([1, 2])
        Wires([4, 0, 1, 2])
        """
        return Wires.all_wires([self, Wires(other)])

    def __radd__(self, other):
        return Wires.all_wires([Wires(other), self])

    def __array__(self, dtype=None, copy=None):
        return np.array(self._labels, dtype=dtype)

    @property
    def labels(self) -> tuple:
        """Get a tuple of the labels of this Wires object."""
        return self._labels

    def tolist(self) -> list:
        """Returns a list representation of the Wires object."""
        return list(self._labels)

    def toset(self) -> set:
        """Returns a set representation of the Wires object."""
        return set(self._labels)

    def index(self, wire):  # pylint: disable=arguments-differ
        """Returns the position of ``wire`` in this register.

        Raises:
            WireError: if the wire is not present
        """
        if isinstance(wire, Wires):
            if len(wire) != 1:
                raise WireError("Can only retrieve index of a Wires object of length 1.")
            wire = wire[0]

        try:
            return self._labels.index(wire)
        except ValueError as e:
            raise WireError(f"Wire with label {wire} not found in {self}.") from e

    def indices(self, wires) -> list[int]:
        """Return the positions of several wires in this register.

        >>> Wires([4, 0, 1]).indices([1, 4])
        [2, 0]
        """
        if isinstance(wires, str) or not isinstance(wires, Iterable):
            return [self.index(wires)]
        return [self.index(w) for w in wires]

    def map(self, wire_map: dict) -> "Wires":
        """Returns a new Wires object with labels replaced according to ``wire_map``.
        Labels missing from the map are kept.

        >>> Wires(["a", "b"]).map({"a": 4})
        Wires([4, 'b'])
        """
        try:
            return Wires([wire_map.get(w, w) for w in self])
        except WireError as e:
            raise WireError(
                f"Failed to implement wire map {wire_map}. Make sure that the new labels "
                f"are unique and valid wire labels."
            ) from e

    @property
    def has_dynamic_wires(self) -> bool:
        """Whether any label of this register is a :class:`~.DynamicWire`."""
        return any(isinstance(w, DynamicWire) for w in self._labels)

    @staticmethod
    def shared_wires(list_of_wires) -> "Wires":
        """Return only the wires that appear in each Wires object in the list, in the order
        of the first object.

        >>> Wires.shared_wires([Wires([4, 0, 1]), Wires([3, 0, 4])])
        Wires([4, 0])
        """
        converted = [w if isinstance(w, Wires) else Wires(w) for w in list_of_wires]
        if not converted:
            return Wires(())
        common = set.intersection(*(w.toset() for w in converted))
        return Wires(tuple(w for w in converted[0] if w in common), _override=True)

    @staticmethod
    def all_wires(list_of_wires, sort=False) -> "Wires":
        """Return the wires that appear in any of the Wires objects in the list, in the order
        in which they first appear.

        >>> Wires.all_wires([Wires([4, 0, 1]), Wires([3, 0, 4]), Wires([5, 3])])
        Wires([4, 0, 1, 3, 5])
        """
        converted = (w if isinstance(w, Wires) else Wires(w) for w in list_of_wires)
        combined = list(dict.fromkeys(itertools.chain(*(w.labels for w in converted))))

        if sort:
            if all(isinstance(w, int) for w in combined):
                combined = sorted(combined)
            else:
                combined = sorted(combined, key=str)

        return Wires(tuple(combined), _override=True)


WiresLike = Union[Wires, Iterable[Hashable], Hashable]
