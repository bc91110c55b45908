from pingtest.schemas.ping import PingResult
from pingtest.schemas.system import HealthResponse, SystemInfo

__all__ = ["PingResult", "HealthResponse", "SystemInfo"]
