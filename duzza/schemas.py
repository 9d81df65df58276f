"""Pydantic schemas for JSON data validation."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, RootModel, field_validator


class SelectionEntry(BaseModel):
    """One slot of a team selection, as stored by the team-selection page."""

    position: str | None = None
    player_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices('player_name', 'playerName'),
    )
    backup_position: str | None = Field(
        default=None,
        validation_alias=AliasChoices('backup_position', 'backupPosition', 'bench_position'),
    )

    @field_validator('position', 'player_name', 'backup_position', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty or whitespace-only strings as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    class Config:
        extra = 'ignore'


class RoundSelectionsFile(BaseModel):
    """Complete selections file for one round.

    Each team is either a list of entries carrying their own position,
    or a mapping of position label to entry. A null entry is a slot
    nobody has picked yet.
    """

    round: int = Field(..., ge=0, le=30)
    teams: dict[str, list[dict[str, Any] | None] | dict[str, dict[str, Any] | None]]

    class Config:
        extra = 'forbid'


class DeadCertScores(RootModel[dict[str, int]]):
    """Dead-cert bonus per team id, supplied by the tipping module."""


class LeagueConfig(BaseModel):
    """League configuration settings."""

    current_year: int = Field(..., ge=2020, le=2100)
    team_names: dict[str, str] = Field(default_factory=dict)

    @field_validator('team_names')
    @classmethod
    def validate_team_names(cls, v):
        """Ensure no team name is blank."""
        for team_id, name in v.items():
            if not name or not name.strip():
                raise ValueError(f'Blank name for team {team_id}')
        return v

    class Config:
        extra = 'forbid'
