import logging

from fastapi import APIRouter, Depends, HTTPException, status

from pingtest.errors import SystemInfoError
from pingtest.schemas.system import HealthResponse, SystemInfo
from pingtest.services.commands import Commands, get_commands

router = APIRouter(tags=["system"])
logger = logging.getLogger(__name__)

SYSTEM_INFO_FAILED = "Error retrieving system info"


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse()


@router.get("/", response_model=SystemInfo)
def system_info(commands: Commands = Depends(get_commands)):
    try:
        return commands.get_system_info()
    except SystemInfoError:
        logger.exception("Error retrieving system info")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SYSTEM_INFO_FAILED)
