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
This module contains the classes for placing objects into queues.

Operators queue themselves on construction into the *active recording context*, which is
the innermost :class:`~.AnnotatedQueue` currently entered. Templates rely on this to build
their decompositions: every gate created inside a decomposition lands in the queue that
is recording at that moment, in the order it was created.

>>> with qmux.queuing.AnnotatedQueue() as q:
...     qmux.X(0)
...     qmux.CNOT([0, 1])
>>> q.queue
[X(0), CNOT(wires=[0, 1])]

Operators built from other operators, like :class:`~.Adjoint` or :class:`~.Controlled`, remove
their constituents from the queue so that only the outermost object remains.

Use :meth:`~.QueuingManager.stop_recording` to construct operators without queuing them.
"""

import copy
from collections import OrderedDict
from contextlib import contextmanager
from threading import RLock
from typing import Optional

from qmux.exceptions import QueuingError


class WrappedObj:
    """Wraps an object to make its hash dependent on its identity"""

    def __init__(self, obj):
        self.obj = obj

    def __hash__(self):
        return id(self.obj)

    def __eq__(self, other):
        return isinstance(other, WrappedObj) and self.obj is other.obj

    def __repr__(self):
        return f"Wrapped({self.obj!r})"


class QueuingManager:
    """Singleton global entry point for managing active recording contexts.

    All methods are class methods, so every caller sees the same stack of contexts.
    Recording queues must provide ``append``, ``remove``, ``get_info`` and ``update_info``.
    """

    _active_contexts = []
    """The stack of contexts that are currently active."""

    @classmethod
    def add_active_queue(cls, queue):
        """Makes a queue the currently active recording context."""
        cls._active_contexts.append(queue)

    @classmethod
    def remove_active_queue(cls):
        """Ends recording on the currently active recording queue."""
        return cls._active_contexts.pop()

    @classmethod
    def recording(cls) -> bool:
        """Whether a queuing context is active and recording operations"""
        return bool(cls._active_contexts)

    @classmethod
    def active_context(cls) -> Optional["AnnotatedQueue"]:
        """Returns the currently active queuing context."""
        return cls._active_contexts[-1] if cls.recording() else None

    @classmethod
    @contextmanager
    def stop_recording(cls):
        """A context manager and decorator that suspends all recording contexts.

        >>> with qmux.queuing.AnnotatedQueue() as q:
        ...     with qmux.QueuingManager.stop_recording():
        ...         qmux.Y(1)
        >>> q.queue
        []
        """
        previously_active_contexts = cls._active_contexts
        cls._active_contexts = []
        try:
            yield
        finally:
            cls._active_contexts = previously_active_contexts

    @classmethod
    def append(cls, obj, **kwargs):
        """Append an object to the active queue, if any."""
        if cls.recording():
            cls.active_context().append(obj, **kwargs)

    @classmethod
    def remove(cls, obj):
        """Remove an object from the active queue if it is in it."""
        if cls.recording():
            cls.active_context().remove(obj)

    @classmethod
    def update_info(cls, obj, **kwargs):
        """Updates the metadata of an object already in the active queue."""
        if cls.recording():
            cls.active_context().update_info(obj, **kwargs)

    @classmethod
    def get_info(cls, obj):
        """Retrieves the metadata of an object in the active queue."""
        return cls.active_context().get_info(obj) if cls.recording() else None


class AnnotatedQueue(OrderedDict):
    """Lightweight class that maintains a basic queue of operations, in addition
    to metadata annotations."""

    _lock = RLock()
    """threading.RLock: Used to synchronize appending to/popping from global QueueingContext."""

    def __enter__(self):
        AnnotatedQueue._lock.acquire()
        QueuingManager.add_active_queue(self)
        return self

    def __exit__(self, exception_type, exception_value, traceback):
        QueuingManager.remove_active_queue()
        AnnotatedQueue._lock.release()

    def append(self, obj, **kwargs):
        """Append ``obj`` into the queue with ``kwargs`` metadata."""
        self[obj] = kwargs

    def remove(self, obj):
        """Remove ``obj`` from the queue. Passes silently if the object is not in the queue."""
        if obj in self:
            del self[obj]

    def update_info(self, obj, **kwargs):
        """Update ``obj``'s metadata with ``kwargs`` if it exists in the queue."""
        if obj in self:
            self[obj].update(kwargs)

    def get_info(self, obj):
        """Retrieve the metadata for ``obj``.  Raises a ``QueuingError`` if obj is not in the queue."""
        if obj not in self:
            raise QueuingError(f"Object {obj} not in the queue.")
        return self[obj]

    def items(self):
        return tuple((key.obj, value) for key, value in super().items())

    @property
    def queue(self) -> list:
        """Returns a list of objects in the annotated queue"""
        return [key.obj for key in self.keys()]

    def __setitem__(self, key, value):
        key = key if isinstance(key, WrappedObj) else WrappedObj(key)
        return super().__setitem__(key, value)

    def __getitem__(self, key):
        key = key if isinstance(key, WrappedObj) else WrappedObj(key)
        return super().__getitem__(key)

    def __delitem__(self, key):
        key = key if isinstance(key, WrappedObj) else WrappedObj(key)
        return super().__delitem__(key)

    def __contains__(self, key):
        key = key if isinstance(key, WrappedObj) else WrappedObj(key)
        return super().__contains__(key)


def apply(op, context=QueuingManager):
    """Apply an instantiated operator to a queuing context.

    If the operator is already in the queue, a copy of it is queued instead, since a queue
    contains each object at most once.

    Args:
        op (.Operator): the operator to apply/queue
        context (.QueuingManager, .AnnotatedQueue): the queuing context to queue the operator to.
            Defaults to the currently active context.

    Returns:
        .Operator: the queued operator

    **Example**

    >>> op = qmux.X(0)
    >>> with qmux.queuing.AnnotatedQueue() as q:
    ...     qmux.apply(op)
    ...     qmux.apply(op)
    >>> q.queue
    [X(0), X(0)]
    """
    if not QueuingManager.recording():
        raise RuntimeError("No queuing context available to append operation to.")

    active = context if isinstance(context, AnnotatedQueue) else QueuingManager.active_context()
    if op in active:
        op = copy.copy(op)

    if hasattr(op, "queue"):
        op.queue(context=context)
    else:
        context.append(op)

    return op


def process_queue(queue: AnnotatedQueue) -> list:
    """Process the annotated queue into the list of operations it records.

    Objects annotated with an ``owner`` have been absorbed into another operator and are skipped.

    Args:
        queue (.AnnotatedQueue): the queue to be processed

    Returns:
        list[.Operator]: the recorded operations
    """
    return [obj for obj, info in queue.items() if "owner" not in info]


def record(qfunc, *args, **kwargs) -> list:
    """Run a quantum function and return the operations it queues.

    The operations are recorded into a fresh :class:`~.AnnotatedQueue`. If another context is
    recording at call time, they are applied to it afterwards, so that ``record`` behaves like
    calling ``qfunc`` directly while also returning its operations.

    Args:
        qfunc (Callable): function that queues operators
        *args: positional arguments passed to ``qfunc``
        **kwargs: keyword arguments passed to ``qfunc``

    Returns:
        list[.Operator]: the queued operations, in order

    **Example**

    >>> def body(wire):
    ...     qmux.H(wire)
    ...     qmux.Z(wire)
    >>> qmux.queuing.record(body, 0)
    [H(0), Z(0)]
    """
    with AnnotatedQueue() as q:
        qfunc(*args, **kwargs)

    ops = process_queue(q)
    if QueuingManager.recording():
        ops = [apply(op) for op in ops]
    return ops
