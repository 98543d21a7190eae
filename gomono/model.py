"""Read model of a training, as handed out by queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class TrainingModel:
    """A flat view of a training for reading."""

    uuid: str
    user_uuid: str
    user: str
    time: datetime
    notes: str = ""
    proposed_time: Optional[datetime] = None
    move_proposed_by: Optional[str] = None
    can_be_cancelled: bool = False