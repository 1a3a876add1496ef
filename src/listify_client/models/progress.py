"""User progress model."""

from __future__ import annotations

from typing import Optional

from listify_client.models.base import ListifyModel


class UserProgress(ListifyModel):
    """
    Aggregate experience and level of the user.

    Tracked independently of the pet. The backend does not send an id for
    this singleton, but one is accepted if present.
    """

    id: Optional[int] = None
    experience: int
    level: int
    pet_unlocked: Optional[bool] = None
