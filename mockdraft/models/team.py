"""Team model for mock draft events."""

from typing import List

from pydantic import BaseModel, Field


class Team(BaseModel):
    """A drafting team and the handles of the captains allowed to pick for it."""

    id: str
    name: str
    captains: List[str] = Field(default_factory=list)  # external handles, in order added

    def __str__(self) -> str:
        return self.name

    def has_captain(self, handle: str) -> bool:
        """Check whether a handle belongs to one of this team's captains (case-insensitive)."""
        if not handle:
            return False
        handle = handle.strip().lower()
        return any(captain.lower() == handle for captain in self.captains)
