"""Pydantic schemas for cricketer data validation."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


VALID_ROLES = ["Batter", "Bowler", "All-rounder", "Wicketkeeper"]


class CricketerBase(BaseModel):
    """Base cricketer schema with common fields."""

    name: str = Field(..., min_length=1, max_length=100, description="Player name")
    country: Optional[str] = Field(None, max_length=50, description="Country represented")
    role: Optional[str] = Field(None, description="Playing role")

    matches: Optional[int] = Field(0, ge=0, description="Matches played")
    innings_batted: Optional[int] = Field(0, ge=0, description="Innings batted")
    not_out: Optional[int] = Field(0, ge=0, description="Innings not out")
    runs_scored: Optional[int] = Field(0, ge=0, description="Career runs")
    balls_faced: Optional[int] = Field(0, ge=0, description="Career balls faced")
    fours_scored: Optional[int] = Field(0, ge=0, description="Career fours")
    sixes_scored: Optional[int] = Field(0, ge=0, description="Career sixes")
    high_score: Optional[int] = Field(0, ge=0, description="Highest innings score")
    centuries: Optional[int] = Field(0, ge=0, description="Innings of 100 or more")
    half_centuries: Optional[int] = Field(0, ge=0, description="Innings of 50 to 99")
    innings_bowled: Optional[int] = Field(0, ge=0, description="Innings bowled")
    balls_bowled: Optional[int] = Field(0, ge=0, description="Career balls bowled")
    runs_given: Optional[int] = Field(0, ge=0, description="Career runs conceded")
    wickets_taken: Optional[int] = Field(0, ge=0, description="Career wickets")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v

    @field_validator("role")
    @classmethod
    def validate_role(cls, v):
        if v is not None and v not in VALID_ROLES:
            raise ValueError(f'Role must be one of: {", ".join(VALID_ROLES)}')
        return v


class CricketerCreate(CricketerBase):
    """Schema for creating a new cricketer."""

    @model_validator(mode="after")
    def validate_not_out(self):
        if (
            self.not_out is not None
            and self.innings_batted is not None
            and self.not_out > self.innings_batted
        ):
            raise ValueError("Not outs cannot exceed innings batted")
        return self


class CricketerResponse(CricketerBase):
    """Schema for cricketer response data, with derived metrics."""

    id: int = Field(..., description="Cricketer ID")
    batting_average: Optional[Union[int, float]] = Field(None, description="Batting average")
    batting_strike_rate: Optional[float] = Field(None, description="Batting strike rate")

    model_config = ConfigDict(from_attributes=True)
