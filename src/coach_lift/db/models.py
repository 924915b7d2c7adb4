"""Stored record types."""

from dataclasses import dataclass
from datetime import datetime

from ..models.program import Program


@dataclass
class StoredProgram:
    """A generated program as kept in `training_programs`."""

    id: str
    user_id: str
    program: Program
    duration_weeks: int | None = None
    days_per_week: int | None = None
    program_name: str | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "user_id": self.user_id,
            "program": self.program.to_dict(),
            "duration_weeks": self.duration_weeks,
            "days_per_week": self.days_per_week,
            "program_name": self.program_name,
        }
