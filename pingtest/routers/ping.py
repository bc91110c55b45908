import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pingtest.errors import InvalidHostError, PingError
from pingtest.schemas.ping import PingResult
from pingtest.services.commands import Commands, get_commands
from pingtest.utils.hosts import validate_host

router = APIRouter(tags=["ping"])
logger = logging.getLogger(__name__)

HOST_MISSING = "Host parameter not found in query string"
HOST_INVALID = "Invalid host parameter"
PING_FAILED = "Error Running Ping Request"


@router.get("/ping", response_model=PingResult)
def ping(
    host: Optional[str] = Query(None),
    commands: Commands = Depends(get_commands),
):
    if not host or not host.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=HOST_MISSING)
    try:
        host = validate_host(host)
    except InvalidHostError as e:
        logger.warning("Rejected ping host: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=HOST_INVALID)
    try:
        return commands.ping(host)
    except PingError as e:
        logger.warning("Error pinging server %s: %s (packets=%d)", host, e, e.result.packets)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PING_FAILED)
