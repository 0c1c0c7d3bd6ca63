# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Explicit Euler Trajectory Stream

Produces the unbounded sequence of Euler iterates of the inverted Duffing
oscillator:

    x_{n+1} = x_n + dt * y_n
    y_{n+1} = y_n + dt * (F cos(t_n) - 0.5 y_n + x_n - x_n³)
    t_{n+1} = t_n + dt

starting from (x_0, y_0, t_0) = (x0, y0, 0). The first point produced is
the initial condition itself.

Two forms are provided:

- euler_points(): a plain, pull-based Python generator. Nothing is computed
  ahead of the consumer.
- TrajectoryGenerator: runs euler_points() on its own thread and pushes
  points into a bounded FIFO queue. Production runs at most `capacity`
  points ahead of consumption before blocking. A stop token is checked on
  every production step, so stop() always ends the thread even though the
  sequence itself never terminates.

Usage
-----
>>> with start(x0=0.0, y0=0.0, F=0.24, dt=1e-3) as generator:
...     first = generator.get()
...     second = generator.get()
>>> first
Point(x=0.0, y=0.0, blowup=False)
"""

import logging
import math
import queue
import threading
import warnings
from typing import Iterator, Optional

from iduffing.config import QUEUE_CAPACITY
from iduffing.systems.inverted_duffing import InvertedDuffingOscillator
from iduffing.types.core import ScalarLike
from iduffing.types.trajectories import GeneratorStats, Point

logger = logging.getLogger(__name__)


def _validate_dt(dt: ScalarLike) -> float:
    dt = float(dt)
    if not dt > 0:
        raise ValueError(f"Time step dt must be positive, got {dt}")
    return dt


def euler_points(
    x0: ScalarLike,
    y0: ScalarLike,
    F: ScalarLike,
    dt: ScalarLike,
    system: Optional[InvertedDuffingOscillator] = None,
) -> Iterator[Point]:
    """
    Unterminated generator of explicit Euler iterates.

    Parameters
    ----------
    x0, y0 : float
        Initial position and velocity
    F : float
        Forcing amplitude
    dt : float
        Time step, must be > 0
    system : Optional[InvertedDuffingOscillator]
        Vector field to integrate. Built from F if None; when given, its
        own forcing amplitude is used.

    Yields
    ------
    Point
        (x_n, y_n) for n = 0, 1, 2, ... The blowup marker is set from the
        first non-finite point onward.

    Raises
    ------
    ValueError
        If dt <= 0 (raised on the first next(), as for any generator)

    Examples
    --------
    >>> from itertools import islice
    >>> points = list(islice(euler_points(0.0, 0.0, 0.24, 1e-3), 2))
    >>> round(points[1].y, 10)
    0.00024
    """
    dt = _validate_dt(dt)
    f = system if system is not None else InvertedDuffingOscillator(F)

    x, y, t = float(x0), float(y0), 0.0
    diverged = False
    while True:
        if not diverged and not (math.isfinite(x) and math.isfinite(y)):
            diverged = True
        yield Point(x, y, diverged)

        dx, dy = f(x, y, t)
        x, y, t = float(x + dt * dx), float(y + dt * dy), t + dt


class TrajectoryGenerator:
    """
    Threaded producer of Euler iterates behind a bounded queue.

    Owns its integration state exclusively; the queue is the only structure
    shared with the consumer. Each generator has exactly one producer thread
    and is meant to have exactly one consumer.

    Lifecycle
    ---------
    created -> start() -> running -> stop() -> stopped

    A stopped generator cannot be restarted; create a new one. Points still
    buffered when stop() is called remain available to get().

    Parameters
    ----------
    x0, y0 : float
        Initial position and velocity
    F : float
        Forcing amplitude
    dt : float
        Time step, must be > 0
    capacity : int
        Maximum number of buffered points (default 400)
    poll_interval : float
        Seconds a blocked put/get waits before re-checking the stop token
    name : Optional[str]
        Thread name, for debugging

    Raises
    ------
    ValueError
        If dt <= 0 or capacity < 1

    Examples
    --------
    >>> generator = TrajectoryGenerator(0.0, 0.0, F=0.35, dt=1e-3).start()
    >>> points = [generator.get() for _ in range(1000)]
    >>> generator.stop()
    >>>
    >>> # Or with a context manager
    >>> with TrajectoryGenerator(0.0, 0.0, F=0.35, dt=1e-3) as generator:
    ...     points = [generator.get() for _ in range(1000)]
    """

    def __init__(
        self,
        x0: ScalarLike,
        y0: ScalarLike,
        F: ScalarLike,
        dt: ScalarLike,
        capacity: int = QUEUE_CAPACITY,
        poll_interval: float = 0.05,
        name: Optional[str] = None,
    ):
        self.dt = _validate_dt(dt)
        if capacity < 1:
            raise ValueError(f"Queue capacity must be at least 1, got {capacity}")

        self.x0 = float(x0)
        self.y0 = float(y0)
        self.F = float(F)
        self.capacity = int(capacity)
        self.poll_interval = poll_interval
        self.name = name or f"euler-F{self.F}"

        self.system = InvertedDuffingOscillator(self.F)

        self._queue: "queue.Queue[Point]" = queue.Queue(maxsize=self.capacity)
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._error: Optional[BaseException] = None

        self._stats = {
            "produced": 0,
            "consumed": 0,
            "blowup": False,
        }

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def start(self) -> "TrajectoryGenerator":
        """
        Launch the producer thread.

        Returns
        -------
        TrajectoryGenerator
            self, for chaining

        Raises
        ------
        RuntimeError
            If the generator was already started
        """
        if self._thread is not None:
            raise RuntimeError(f"Generator '{self.name}' has already been started")

        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.debug(
            "Started generator %s (x0=%s, y0=%s, F=%s, dt=%s, capacity=%d)",
            self.name, self.x0, self.y0, self.F, self.dt, self.capacity,
        )
        return self

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Signal the producer to stop and wait for its thread to exit.

        Safe to call more than once, and before start().

        Parameters
        ----------
        timeout : Optional[float]
            Maximum seconds to wait for the thread; None waits until it exits
        """
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            logger.debug(
                "Stopped generator %s after %d points (%d consumed)",
                self.name, self._stats["produced"], self._stats["consumed"],
            )

    @property
    def is_running(self) -> bool:
        """True while the producer thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    @property
    def stopped(self) -> bool:
        """True once stop() has been requested."""
        return self._stop_event.is_set()

    def _run(self) -> None:
        try:
            for point in euler_points(self.x0, self.y0, self.F, self.dt, self.system):
                if point.blowup and not self._stats["blowup"]:
                    self._stats["blowup"] = True
                    warnings.warn(
                        f"Trajectory {self.name} diverged after "
                        f"{self._stats['produced']} steps (x={point.x}, y={point.y})",
                        RuntimeWarning,
                    )
                if not self._put(point):
                    return
                self._stats["produced"] += 1
        except Exception as e:
            self._error = e
            logger.debug("Generator %s failed: %r", self.name, e)

    def _put(self, point: Point) -> bool:
        # Returns False once the stop token is set.
        while not self._stop_event.is_set():
            try:
                self._queue.put(point, timeout=self.poll_interval)
                return True
            except queue.Full:
                continue
        return False

    # ========================================================================
    # Consumption
    # ========================================================================

    def get(self, timeout: Optional[float] = None) -> Point:
        """
        Pull the next point in generation order, blocking while the queue is empty.

        Parameters
        ----------
        timeout : Optional[float]
            Maximum seconds to wait; None waits indefinitely

        Returns
        -------
        Point
            Next point

        Raises
        ------
        RuntimeError
            If the generator was never started, was stopped and has no
            buffered points left, or its producer thread failed
        TimeoutError
            If no point arrived within timeout
        """
        if self._thread is None:
            raise RuntimeError(f"Generator '{self.name}' has not been started")

        waited = 0.0
        while True:
            wait = self.poll_interval
            if timeout is not None:
                wait = min(wait, max(timeout - waited, 0.0))
            try:
                point = self._queue.get(timeout=wait) if wait > 0 else self._queue.get_nowait()
            except queue.Empty:
                if self._error is not None:
                    raise RuntimeError(
                        f"Generator '{self.name}' failed: {self._error}"
                    ) from self._error
                if self.stopped and not self.is_running:
                    raise RuntimeError(f"Generator '{self.name}' has been stopped")
                waited += wait
                if timeout is not None and waited >= timeout:
                    raise TimeoutError(
                        f"No point from generator '{self.name}' within {timeout} s"
                    )
                continue

            self._stats["consumed"] += 1
            return point

    def __iter__(self) -> Iterator[Point]:
        while True:
            yield self.get()

    def __enter__(self) -> "TrajectoryGenerator":
        if self._thread is None:
            self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    # ========================================================================
    # Diagnostics
    # ========================================================================

    def get_stats(self) -> GeneratorStats:
        """
        Production statistics.

        Returns
        -------
        GeneratorStats
            produced, consumed, buffered, capacity, running, blowup
        """
        return {
            "produced": self._stats["produced"],
            "consumed": self._stats["consumed"],
            "buffered": self._queue.qsize(),
            "capacity": self.capacity,
            "running": self.is_running,
            "blowup": self._stats["blowup"],
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"x0={self.x0}, y0={self.y0}, F={self.F}, dt={self.dt}, "
            f"capacity={self.capacity})"
        )


def start(
    x0: ScalarLike,
    y0: ScalarLike,
    F: ScalarLike,
    dt: ScalarLike,
    capacity: int = QUEUE_CAPACITY,
) -> TrajectoryGenerator:
    """
    Create and start a trajectory generator.

    Parameters
    ----------
    x0, y0 : float
        Initial position and velocity
    F : float
        Forcing amplitude
    dt : float
        Time step, must be > 0
    capacity : int
        Maximum number of buffered points

    Returns
    -------
    TrajectoryGenerator
        Running generator. The caller owns it and must stop() it (or use it
        as a context manager).

    Raises
    ------
    ValueError
        If dt <= 0 or capacity < 1
    """
    return TrajectoryGenerator(x0, y0, F, dt, capacity=capacity).start()


__all__ = [
    "euler_points",
    "TrajectoryGenerator",
    "start",
]
