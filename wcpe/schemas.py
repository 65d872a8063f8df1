from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LookupRequest(BaseModel):
    """Point-in-time playlist lookup"""
    model_config = ConfigDict(frozen=True)

    time: datetime = Field(..., description="Moment to look up, timezone-aware")

    @field_validator("time")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Reject naive datetimes; the station and caller timezones differ"""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("time must be timezone-aware")
        return v


class ResolvedEntry(BaseModel):
    """The piece airing at the requested moment"""
    model_config = ConfigDict(frozen=True)

    program: str = Field(..., description="Program name, e.g. 'Sleepers, Awake!'")
    start_time: datetime = Field(..., description="When the piece started, caller-local")
    end_time: datetime = Field(..., description="When the piece stops, caller-local")
    composer: str
    title: str
    performers: str
    record_label: str
