"""Player model for mock draft events."""

from typing import Optional

from pydantic import BaseModel


class Player(BaseModel):
    """A player in an event's draft pool."""

    id: str
    name: str
    position: Optional[str] = None
    team: Optional[str] = None  # grouping tag, e.g. origin team
    notes: Optional[str] = None

    def __str__(self) -> str:
        """String representation showing name and grouping where known."""
        details = " - ".join(part for part in (self.position, self.team) if part)
        if details:
            return f"{self.name} ({details})"
        return self.name
