"""
FastAPI dependencies.

Process-wide objects are built once in the application lifespan and kept
on app.state; routes receive them through these providers.
"""

import itertools

from fastapi import Request

from .client import PetfinderClient


class PetIdSequence:
    """Process-local id source for pets created through the echo stub."""

    def __init__(self, start: int = 1):
        self._ids = itertools.count(start)

    def next_id(self) -> int:
        return next(self._ids)


def get_petfinder_client(request: Request) -> PetfinderClient:
    return request.app.state.petfinder


def get_id_sequence(request: Request) -> PetIdSequence:
    return request.app.state.pet_ids
