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
Core Scalar and State Types

Defines the basic numeric aliases shared across the package:
- Scalars (forcing amplitude, time step, coordinates)
- Phase-plane states (position, velocity)
- Step counts

Usage
-----
>>> from iduffing.types.core import ScalarLike, PhaseState
>>>
>>> def energy(state: PhaseState) -> float:
...     x, y = state
...     return 0.5 * y**2 - 0.5 * x**2 + 0.25 * x**4
"""

from typing import Tuple, Union

import numpy as np

# ============================================================================
# Scalar Types
# ============================================================================

ScalarLike = Union[float, int, np.floating, np.integer]
"""
Real scalar accepted wherever a single number is expected.

Examples
--------
>>> F: ScalarLike = 0.24
>>> dt: ScalarLike = 1e-3
"""

StepCount = Union[int, np.integer]
"""
Non-negative number of integration steps (points) to sample.

Booleans are rejected by validators even though ``bool`` subclasses ``int``.
"""

# ============================================================================
# State Types
# ============================================================================

PhaseState = Tuple[float, float]
"""
Phase-plane state (x, y) with y = dx/dt.

Examples
--------
>>> state: PhaseState = (0.0, 0.0)
"""


__all__ = [
    "ScalarLike",
    "StepCount",
    "PhaseState",
]
