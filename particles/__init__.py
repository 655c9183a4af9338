"""
Starfield particle simulation: storage, projection, respawning and the tick loop.
"""

from .store import Particle, PointStore
from .projection import perspective, project_points
from .recycler import Recycler, needs_recycle, needs_recycle_mask
from .simulation import StarfieldSimulation, TickTimer
