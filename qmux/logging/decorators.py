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
"""Decorators that log calls of qmux functions and construction of qmux objects."""
import inspect
import logging
from functools import wraps

# records point at the caller of the decorated function
_stacklevel = 2


def _call_string(func, args, kwargs) -> str:
    """``func(name=value, ...)`` for a call, without ``self``."""
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    arguments = ", ".join(f"{k}={v!r}" for k, v in bound.arguments.items() if k != "self")
    return f"{func.__qualname__}({arguments})"


def debug_logger(func):
    """Log every call of ``func`` and its arguments at the DEBUG level.

    **Example**

    .. code-block:: python

        @debug_logger
        def select_step(ops, ancilla, control):
            ...

    logs ``Calling select_step(ops=(X(2), Y(2)), ancilla=[], control=Wires([0]))`` on the
    ``qmux.templates.subroutines.select`` logger.
    """
    lgr = logging.getLogger(func.__module__)

    @wraps(func)
    def wrapper(*args, **kwargs):
        if lgr.isEnabledFor(logging.DEBUG):
            lgr.debug("Calling %s", _call_string(func, args, kwargs), stacklevel=_stacklevel)
        return func(*args, **kwargs)

    return wrapper


def debug_logger_init(init):
    """Log the object built by a decorated ``__init__`` at the DEBUG level, together with the
    arguments it was built from."""
    lgr = logging.getLogger(init.__module__)

    @wraps(init)
    def wrapper(self, *args, **kwargs):
        init(self, *args, **kwargs)
        if lgr.isEnabledFor(logging.DEBUG):
            lgr.debug(
                "Created %r with %s",
                self,
                _call_string(init, (self, *args), kwargs),
                stacklevel=_stacklevel,
            )

    return wrapper
