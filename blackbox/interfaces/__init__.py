"""Interface abstractions for the simulator.

- AtomGrid: read-only board contract (abstract base class)
- Outcome, Interaction, RayResult: what a fired ray produces
"""

from blackbox.interfaces.board import AtomGrid
from blackbox.interfaces.ray import Interaction, Outcome, RayResult

__all__ = [
    "AtomGrid",
    "Interaction",
    "Outcome",
    "RayResult",
]
