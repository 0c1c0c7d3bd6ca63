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
Numerical Integration
=====================

Explicit Euler integration of the inverted Duffing oscillator, exposed as an
unbounded stream of points.

>>> from iduffing.integration import start, euler_points
>>>
>>> # Threaded producer with a bounded queue
>>> with start(0.0, 0.0, F=0.24, dt=1e-3) as generator:
...     p = generator.get()
>>>
>>> # Plain pull-based generator
>>> stream = euler_points(0.0, 0.0, F=0.24, dt=1e-3)
>>> p = next(stream)
"""

from .euler_stream import TrajectoryGenerator, euler_points, start

__all__ = [
    "TrajectoryGenerator",
    "euler_points",
    "start",
]
