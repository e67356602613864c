"""Result models produced by prediction scoring."""

from typing import List, Optional

from pydantic import BaseModel, Field


class PlacementResult(BaseModel):
    """How one placed player compared with the actual draft."""

    player_id: str
    player_name: str
    predicted: int  # 1-based slot
    actual: Optional[int] = None  # None if the player was never drafted
    difference: Optional[int] = None
    points: int = 0
    actual_team_id: Optional[str] = None
    actual_team: Optional[str] = None
    predicted_team_id: Optional[str] = None
    predicted_team: Optional[str] = None
    actual_round: Optional[int] = None
    predicted_round: Optional[int] = None
    correct_team: Optional[bool] = None  # None without a complete team order
    correct_round: Optional[bool] = None


class CategoryScores(BaseModel):
    player_slot: int = 0
    team_order: int = 0
    correct_team: int = 0
    correct_round: int = 0

    @property
    def total(self) -> int:
        return self.player_slot + self.team_order + self.correct_team + self.correct_round


class SubmissionScore(BaseModel):
    """Score breakdown for a single submission."""

    user_id: str
    exact_matches: int = 0
    close_matches: int = 0  # off by 1 to 3
    team_order_exact_matches: int = 0
    correct_team_matches: int = 0
    correct_round_matches: int = 0
    category_scores: CategoryScores = Field(default_factory=CategoryScores)
    score: int = 0
    total_players: int = 0
    match_details: List[PlacementResult] = Field(default_factory=list)


class RankedSubmission(SubmissionScore):
    rank: int


class PlayerAccuracy(BaseModel):
    player_id: str
    player_name: str
    team_name: Optional[str] = None
    actual_pick: int
    exact_count: int
    total_predicted: int
    pct_exact: int
    avg_predicted: Optional[float] = None
    avg_error: Optional[float] = None


class TeamOrderAccuracy(BaseModel):
    team_id: str
    team_name: str
    actual_position: int  # 1-based position in round 1
    correct_count: int
    total_submissions: int
    pct: int


class CorrectTeamAccuracy(BaseModel):
    team_id: str
    team_name: str
    correct_count: int
    total_possible: int
    pct: int


class PlayerAccuracyLists(BaseModel):
    most_accurately_predicted: List[PlayerAccuracy] = Field(default_factory=list)
    least_accurately_predicted: List[PlayerAccuracy] = Field(default_factory=list)
    biggest_surprises: List[PlayerAccuracy] = Field(default_factory=list)


class TeamOrderAccuracyLists(BaseModel):
    most_accurately_predicted: List[TeamOrderAccuracy] = Field(default_factory=list)
    least_accurately_predicted: List[TeamOrderAccuracy] = Field(default_factory=list)


class CorrectTeamAccuracyLists(BaseModel):
    most_accurately_predicted: List[CorrectTeamAccuracy] = Field(default_factory=list)
    least_accurately_predicted: List[CorrectTeamAccuracy] = Field(default_factory=list)


class AggregateReport(BaseModel):
    """Prediction accuracy across all participants of a completed event."""

    event_id: str
    total_submissions: int = 0
    total_with_team_order: int = 0
    players: PlayerAccuracyLists = Field(default_factory=PlayerAccuracyLists)
    team_order: TeamOrderAccuracyLists = Field(default_factory=TeamOrderAccuracyLists)
    correct_team: CorrectTeamAccuracyLists = Field(default_factory=CorrectTeamAccuracyLists)
