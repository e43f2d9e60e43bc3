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
"""Logging support for qmux, built on the standard :mod:`logging` module.

Every qmux module logs to a logger named after itself, below the ``qmux`` logger. Nothing is
printed until :func:`enable_logging` is called or the application configures those loggers.
Circuit expansions log at the ``TRACE`` level, which is more verbose than DEBUG.
"""

from .configuration import TRACE, config_path, enable_logging, load_config
from .decorators import debug_logger, debug_logger_init
