"""
Animal Type Routes
"""

from fastapi import APIRouter, Depends

from ..client import PetfinderClient
from ..dependencies import get_petfinder_client
from ..errors import APIError
from ..models import AnimalType

router = APIRouter(tags=["Types"])


@router.get("/types", response_model=list[AnimalType], responses={500: {"model": APIError}})
async def list_types(client: PetfinderClient = Depends(get_petfinder_client)):
    """List animal types."""
    return await client.list_types()
