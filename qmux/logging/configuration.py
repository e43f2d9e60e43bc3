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
Loading of the qmux logging configuration and the TRACE log level.
"""
import logging
import logging.config
import os

import tomlkit

# Define absolute path to this file in source tree
_path = os.path.dirname(__file__)

TRACE = logging.DEBUG // 2
"""int: a log level below DEBUG, used for every step of a circuit expansion."""


def _trace(self, message, *args, **kwargs):
    """Log ``message`` at the TRACE level."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # pylint: disable=protected-access


def _add_trace_level():
    """Register the TRACE level name and give every logger a ``trace`` method."""
    logging.addLevelName(TRACE, "TRACE")
    logging.getLoggerClass().trace = _trace


def config_path() -> str:
    """The absolute path to the ``log_config.toml`` file shipped with qmux.

    **Example**

    >>> qmux.logging.config_path()
    '/home/user/pyenv/lib/python3.12/site-packages/qmux/logging/log_config.toml'
    """
    return os.path.join(_path, "log_config.toml")


def load_config(path=None) -> dict:
    """Read a logging configuration from a TOML file.

    Args:
        path (str): the file to read. Defaults to :func:`config_path`.

    Returns:
        dict: the configuration, in the schema of :func:`logging.config.dictConfig`
    """
    with open(path or config_path(), "r", encoding="utf8") as f:
        return tomlkit.load(f).unwrap()


def enable_logging(level=None, path=None):
    """Configure the ``qmux`` loggers and stream their records to standard output.

    Any logging configuration made earlier for the loggers named in the file is replaced.

    Args:
        level (str or int): the level of the ``qmux`` logger, for example ``"DEBUG"`` or
            ``"TRACE"``. Defaults to the level in the configuration file.
        path (str): a configuration file to use instead of the one shipped with qmux

    **Example**

    >>> qmux.logging.enable_logging(level="TRACE")
    """
    _add_trace_level()
    log_config = load_config(path)
    if level is not None:
        log_config["loggers"]["qmux"]["level"] = level
    logging.config.dictConfig(log_config)
