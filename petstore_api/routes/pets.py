"""
Pet Routes

Reads are proxied to Petfinder. Writes are non-persistent stubs that
echo the request body.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from ..client import PetfinderClient
from ..dependencies import PetIdSequence, get_id_sequence, get_petfinder_client
from ..errors import APIError
from ..models import Pagination, Pet, PetCreate, PetUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pets"])


@router.get("/pets", response_model=list[Pet], responses={500: {"model": APIError}})
async def list_pets(
    response: Response,
    type: str | None = Query(None, description="Animal type, e.g. dog"),
    breed: str | None = Query(None),
    size: str | None = Query(None),
    gender: str | None = Query(None),
    age: str | None = Query(None),
    status_: str | None = Query(None, alias="status"),
    name: str | None = Query(None),
    page: int | None = Query(None, ge=1),
    limit: int | None = Query(None, ge=1, le=100),
    client: PetfinderClient = Depends(get_petfinder_client),
):
    """
    Returns all pets.

    Filters are passed through to Petfinder; pagination is reported in the
    X-Total-Count, X-Current-Page and X-Total-Pages headers.
    """
    result = await client.list_animals(
        type=type,
        breed=breed,
        size=size,
        gender=gender,
        age=age,
        status=status_,
        name=name,
        page=page,
        limit=limit,
    )
    pagination = Pagination.model_validate(result.get("pagination") or {})
    response.headers.update(pagination.headers())
    return result.get("animals") or []


@router.get(
    "/pets/{pet_id}",
    response_model=Pet,
    responses={404: {"model": APIError, "description": "Pet not found"}, 500: {"model": APIError}},
)
async def get_pet(pet_id: int, client: PetfinderClient = Depends(get_petfinder_client)):
    """Get a pet by id."""
    return await client.get_animal(pet_id)


@router.post(
    "/pets",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": Pet, "description": "Pet created successfully"}},
)
async def create_pet(pet: PetCreate, ids: PetIdSequence = Depends(get_id_sequence)):
    """Create a new pet. Nothing is stored; the body comes back with a new id."""
    created = {**pet.model_dump(exclude_unset=True), "id": ids.next_id()}
    logger.info(f"Created pet {created['id']} ({pet.species})")
    return created


@router.put("/pets/{pet_id}", responses={200: {"model": Pet, "description": "Updated pet"}})
async def update_pet(pet_id: int, pet: PetUpdate):
    """Update a pet. The body comes back with the path id; existence is not checked."""
    return {**pet.model_dump(exclude_unset=True), "id": pet_id}


@router.delete("/pets/{pet_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_pet(pet_id: int):
    """Delete a pet. Always succeeds; existence is not checked."""
    logger.info(f"Delete requested for pet {pet_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
