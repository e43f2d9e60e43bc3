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
Classical coefficient transforms used by the multiplexor templates.

A multiplexed rotation over :math:`n` index qubits is described by :math:`2^n` angles,
one per value of the index register. Folding out the most significant index qubit
turns it into two multiplexed rotations over :math:`n - 1` qubits, whose angles are the
pairwise averages and half-differences of the original ones.
"""
import numpy as np


def pad_coefficients(coeffs, length: int, head: bool = False) -> np.ndarray:
    """Pad a coefficient vector with zeros up to ``length`` entries.

    Args:
        coeffs (Sequence[float]): coefficients to pad
        length (int): total number of entries after padding
        head (bool): If ``True``, the zeros are prepended. Otherwise they are appended.

    Returns:
        array[float]: a new array of at least ``length`` entries. Vectors that are already long
        enough are returned unchanged (as a copy).

    **Example**

    >>> pad_coefficients([0.1, 0.2, 0.3], 4)
    array([0.1, 0.2, 0.3, 0. ])
    >>> pad_coefficients([0.1, 0.2], 4, head=True)
    array([0. , 0. , 0.1, 0.2])
    """
    coeffs = np.array(coeffs, dtype=float).reshape(-1)
    missing = length - len(coeffs)
    if missing <= 0:
        return coeffs

    zeros = np.zeros(missing)
    return np.concatenate([zeros, coeffs]) if head else np.concatenate([coeffs, zeros])


def multiplexor_coefficients(coeffs) -> tuple[np.ndarray, np.ndarray]:
    r"""Split the coefficients of a multiplexed rotation into those of two half-size
    multiplexed rotations.

    For a vector :math:`c` of length :math:`2m`, this returns

    .. math::

        c^{(0)}_k = \frac{1}{2}(c_k + c_{k+m}), \qquad c^{(1)}_k = \frac{1}{2}(c_k - c_{k+m}),

    so that :math:`c_k = c^{(0)}_k + c^{(1)}_k` and :math:`c_{k+m} = c^{(0)}_k - c^{(1)}_k`.

    Args:
        coeffs (Sequence[float]): coefficients of even length

    Returns:
        tuple[array[float], array[float]]: the sum and difference halves

    Raises:
        ValueError: if the number of coefficients is odd

    **Example**

    >>> multiplexor_coefficients([1.0, 2.0, 3.0, 5.0])
    (array([2. , 3.5]), array([-1. , -1.5]))
    """
    coeffs = np.asarray(coeffs, dtype=float).reshape(-1)
    if len(coeffs) % 2:
        raise ValueError(
            f"Multiplexor coefficients must have even length; got {len(coeffs)} coefficients."
        )

    half = len(coeffs) // 2
    upper, lower = coeffs[:half], coeffs[half:]
    return 0.5 * (upper + lower), 0.5 * (upper - lower)
