"""Pet model: the gamified companion that levels up with experience."""

from __future__ import annotations

from listify_client.models.base import ListifyModel


class Pet(ListifyModel):
    """Pet state. Leveling is computed by the backend."""

    id: int
    name: str
    level: int
    experience: int
    unlocked: bool
