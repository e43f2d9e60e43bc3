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
r"""
Read-only access to the qmux configuration file, which holds the defaults of the devices.
"""
import contextlib
import os

import tomlkit
from appdirs import user_config_dir


class Configuration:
    """The options read from a TOML configuration file.

    The file is looked up, in order, in the current directory, in the directory named by the
    ``QMUX_CONF`` environment variable and in the user configuration directory of qmux. An
    absolute path is used as is. When no file is found the configuration is empty and every
    lookup falls back on its default.

    Args:
        name (str): file name of, or path to, the configuration file

    **Example**

    A ``config.toml`` containing

    .. code-block:: toml

        [qmux.devices.default_qubit]
        atol = 1e-10
        work_wires = 4

    gives

    >>> config = qmux.Configuration("config.toml")
    >>> config.get("qmux.devices.default_qubit.work_wires", 0)
    4
    >>> config.device_options("default_qubit")
    {'atol': 1e-10, 'work_wires': 4}
    """

    def __init__(self, name):
        self._config = {}
        self._filepath = None
        self._env_config_dir = os.environ.get("QMUX_CONF", "")
        self._user_config_dir = user_config_dir("qmux", "qmux")

        for directory in (os.curdir, self._env_config_dir, self._user_config_dir, ""):
            path = os.path.join(directory, name)
            with contextlib.suppress(FileNotFoundError):
                self._load(path)
                self._filepath = path
                break

    def __repr__(self):
        return f"qmux Configuration <{self._filepath}>"

    def __bool__(self):
        return bool(self._config)

    def __getitem__(self, key):
        value = self._config
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                raise KeyError(key)
            value = value[part]
        return value

    @property
    def path(self):
        """str or None: the path of the loaded file, ``None`` if no file was found"""
        return self._filepath

    def _load(self, filepath):
        with open(filepath, "r", encoding="utf8") as f:
            self._config = tomlkit.load(f).unwrap()

    def get(self, key, default=None):
        """The value of the dotted ``key``, or ``default`` if the file does not set it."""
        try:
            return self[key]
        except KeyError:
            return default

    def device_options(self, short_name) -> dict:
        """The ``[qmux.devices.<short_name>]`` table, empty if the file has none."""
        options = self.get(f"qmux.devices.{short_name}", {})
        return dict(options) if isinstance(options, dict) else {}
