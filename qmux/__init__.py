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
This is the top level module from which all basic functions and classes of
qmux can be directly imported.
"""
from qmux import exceptions
from qmux.queuing import QueuingManager, apply

from qmux import math
from qmux import operation
from qmux import allocation
from qmux.allocation import allocate, deallocate
from qmux._version import __version__
from qmux.configuration import Configuration
from qmux.ops import *
from qmux.ops import adjoint, change_op_basis, ctrl, matrix
from qmux import queuing
from qmux import tape
from qmux import templates
from qmux.templates import *
from qmux import transforms
from qmux import devices
from qmux import resource
from qmux.resource import specs
from qmux import logging
from qmux.wires import DynamicWire, Wires

# Look for an existing configuration file
default_config = Configuration("config.toml")


def version():
    """Returns the qmux version number."""
    return __version__
