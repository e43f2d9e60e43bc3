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
"""This module contains methods that manipulate matrices."""
from collections.abc import Sequence

import numpy as np


def expand_matrix(mat, wires: Sequence, wire_order: Sequence | None = None):
    """Re-express a matrix acting on a subspace defined by a set of wire labels
    according to a global wire order.

    Args:
        mat (array): matrix to expand, of dimension :math:`2^n` for ``n = len(wires)``
        wires (Sequence): wires determining the subspace that ``mat`` acts on
        wire_order (Sequence): global wire order, which has to contain all wire labels in
            ``wires``, but can also contain additional labels

    Returns:
        array: expanded matrix

    **Example**

    >>> expand_matrix(np.array([[0, 1], [1, 0]]), wires=[1], wire_order=[0, 1])
    array([[0., 1., 0., 0.],
           [1., 0., 0., 0.],
           [0., 0., 0., 1.],
           [0., 0., 1., 0.]])
    """
    wires = list(wires)
    if wire_order is None or wires == list(wire_order):
        return mat

    wire_order = list(wire_order)
    num_wires = len(wire_order)

    if not wires:
        return mat[0, 0] * np.eye(2**num_wires, dtype=np.result_type(mat, float))

    others = [w for w in wire_order if w not in wires]
    full = np.kron(mat, np.eye(2 ** len(others)))

    current = wires + others
    perm = [current.index(w) for w in wire_order]
    tensor = np.reshape(full, [2] * (2 * num_wires))
    tensor = np.transpose(tensor, perm + [num_wires + p for p in perm])
    return np.reshape(tensor, (2**num_wires, 2**num_wires))
