from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

NANOSECONDS_PER_MICROSECOND = 1000


class PingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    successful: bool = False
    time: int = Field(0, ge=0)  # elapsed nanoseconds
    packets: int = Field(0, ge=0)  # echo replies received

    @field_validator("time", mode="before")
    @classmethod
    def _time_from_timedelta(cls, v):
        if isinstance(v, timedelta):
            return (v // timedelta(microseconds=1)) * NANOSECONDS_PER_MICROSECOND
        return v

    @property
    def elapsed(self) -> timedelta:
        return timedelta(microseconds=self.time / NANOSECONDS_PER_MICROSECOND)
