from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    status: str = "ok"


class SystemInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    hostname: str
    ip_address: str  # first non-loopback IPv4
