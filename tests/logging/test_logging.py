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
"""Unit tests for the :mod:`qmux.logging` module."""
import logging
import logging.config
import os

import tomlkit

import qmux
from qmux.logging import (
    TRACE,
    config_path,
    debug_logger,
    debug_logger_init,
    enable_logging,
    load_config,
)
from qmux.logging.configuration import _add_trace_level
from qmux.tape import QuantumScript
from qmux.transforms import decompose


class TestConfiguration:
    """Tests for loading the logging configuration."""

    def test_config_path(self):
        """Test that the configuration file ships inside the package."""
        path = config_path()
        assert os.path.basename(path) == "log_config.toml"
        assert os.path.isfile(path)

    def test_load_config(self):
        """Test that the shipped file is a dictConfig schema for the qmux logger."""
        log_config = load_config()

        assert log_config["version"] == 1
        assert list(log_config["loggers"]) == ["qmux"]
        assert log_config["filters"]["qmux_only"] == {"name": "qmux"}
        assert log_config["handlers"]["qmux_stream"]["filters"] == ["qmux_only"]

    def test_load_custom_file(self, tmp_path):
        """Test that another TOML file can be read."""
        path = tmp_path / "logs.toml"
        path.write_text(tomlkit.dumps({"version": 1, "loggers": {"qmux": {"level": "INFO"}}}))

        assert load_config(path) == {"version": 1, "loggers": {"qmux": {"level": "INFO"}}}

    def test_enable_logging(self, monkeypatch):
        """Test that enable_logging hands the shipped configuration to dictConfig."""
        captured = []
        monkeypatch.setattr(logging.config, "dictConfig", captured.append)

        enable_logging()

        assert captured == [load_config()]
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_enable_logging_level(self, monkeypatch):
        """Test that the level of the qmux logger can be overridden."""
        captured = []
        monkeypatch.setattr(logging.config, "dictConfig", captured.append)

        enable_logging(level="TRACE")

        assert captured[0]["loggers"]["qmux"]["level"] == "TRACE"

    def test_name_filter(self):
        """Test that the filter of the shipped configuration only passes qmux records."""
        filt = logging.Filter(**load_config()["filters"]["qmux_only"])

        def record(name):
            return logging.LogRecord(name, logging.DEBUG, __file__, 1, "message", None, None)

        assert filt.filter(record("qmux"))
        assert filt.filter(record("qmux.devices.default_qubit"))
        assert not filt.filter(record("numpy"))
        assert not filt.filter(record("qmuxer"))


class TestTraceLevel:
    """Tests for the custom TRACE level."""

    def test_trace_below_debug(self):
        """Test that TRACE is more verbose than DEBUG."""
        assert TRACE < logging.DEBUG

    def test_trace_method(self, caplog):
        """Test that loggers gain a ``trace`` method that logs at the TRACE level."""
        _add_trace_level()
        caplog.set_level(TRACE, logger="qmux.trace_test")

        logging.getLogger("qmux.trace_test").trace("very verbose")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(TRACE, "very verbose")]

    def test_trace_disabled_at_debug(self, caplog):
        """Test that TRACE messages are dropped when the logger is at DEBUG."""
        _add_trace_level()
        caplog.set_level(logging.DEBUG, logger="qmux.trace_test")

        logging.getLogger("qmux.trace_test").trace("very verbose")

        assert not caplog.records


@debug_logger
def _entry_logged(a, b=2):
    return a + b


class _Built:
    """A class with a logged constructor."""

    @debug_logger_init
    def __init__(self, size, label="x"):
        self.size = size
        self.label = label

    def __repr__(self):
        return f"<_Built size={self.size}>"


class TestDecorators:
    """Tests for the call and construction decorators."""

    def test_call(self, caplog):
        """Test that the bound arguments are logged, pointing at the caller."""
        caplog.set_level(logging.DEBUG, logger=__name__)

        assert _entry_logged(1) == 3

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.getMessage() == "Calling _entry_logged(a=1, b=2)"
        assert record.funcName == "test_call"

    def test_init(self, caplog):
        """Test that the constructed object is logged with its arguments, without ``self``."""
        caplog.set_level(logging.DEBUG, logger=__name__)

        obj = _Built(3)

        assert obj.size == 3
        assert [r.getMessage() for r in caplog.records] == [
            "Created <_Built size=3> with _Built.__init__(size=3, label='x')"
        ]

    def test_disabled(self, caplog):
        """Test that nothing is logged above DEBUG."""
        caplog.set_level(logging.INFO, logger=__name__)

        _entry_logged(1)
        _Built(1)

        assert not caplog.records

    def test_wrapped_metadata(self):
        """Test that the decorated function keeps its name."""
        assert _entry_logged.__name__ == "_entry_logged"


class TestLibraryLogging:
    """Tests for the messages emitted by qmux itself."""

    def test_select_decomposition(self, caplog):
        """Test that decomposing a Select logs the decomposition and the recursive steps."""
        caplog.set_level(logging.DEBUG, logger="qmux.templates.subroutines.select")

        op = qmux.Select([qmux.X(2), qmux.Y(2)], control=[0])
        op.decomposition()

        messages = [r.getMessage() for r in caplog.records]
        assert (
            "Decomposing Select over 1 control wire(s) with 2 operation(s), method=ancilla"
            in messages
        )
        top_call = "Calling select_step(ops=(X(2), Y(2)), ancilla=[], control=Wires([0]))"
        assert top_call in messages

    def test_device_construction(self, caplog):
        """Test that a device logs its configuration when it is created."""
        caplog.set_level(logging.DEBUG, logger="qmux.devices.default_qubit")

        qmux.devices.DefaultQubit(wires=2, work_wires=1)

        assert caplog.records[0].getMessage().startswith(
            "Created <DefaultQubit device (wires=2, work_wires=1)> with DefaultQubit.__init__("
        )

    def test_decompose_trace(self, caplog):
        """Test that every expansion step is logged at TRACE, and a summary at DEBUG."""
        _add_trace_level()
        caplog.set_level(TRACE, logger="qmux.transforms.decompose")

        tape = QuantumScript([qmux.MultiplexZ([0.1, 0.2], control_wires=[0], target_wire=1)])
        decompose(tape, lambda op: op.name in {"RZ", "CNOT"}, name="test")

        levels = [r.levelno for r in caplog.records]
        assert levels.count(TRACE) == 3
        assert caplog.records[-1].levelno == logging.DEBUG
        assert caplog.records[-1].getMessage() == "Expanded 1 operation(s) into 4 for test"

    def test_silent_by_default(self, caplog):
        """Test that no qmux records are emitted above the DEBUG level."""
        caplog.set_level(logging.INFO, logger="qmux")

        qmux.Select([qmux.X(2), qmux.Y(2)], control=[0]).decomposition()

        assert not [r for r in caplog.records if r.name.startswith("qmux")]
