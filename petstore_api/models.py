"""
Pet Store Pydantic Models

Request and response schemas for the pet and type endpoints.
Upstream records pass through untyped: every model accepts extra fields,
and sub-objects also accept the bare strings some listings carry.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Pet Models
# =============================================================================


class Breeds(BaseModel):
    """Breed sub-object as reported upstream."""

    model_config = ConfigDict(extra="allow")

    primary: str | None = None
    secondary: str | None = None
    mixed: bool | None = None
    unknown: bool | None = None


class Pet(BaseModel):
    """A pet record."""

    model_config = ConfigDict(extra="allow")

    id: int | None = Field(None, description="Auto-generated ID")
    name: str | None = Field(None, description="Pet name")
    type: str | None = Field(None, description="Animal type, e.g. Dog")
    species: str | None = Field(None, description="Pet species")
    breeds: Breeds | str | None = None
    age: int | str | None = Field(None, description="Pet age")
    gender: str | None = None
    size: str | None = None
    status: str | None = Field(None, description="Listing status, e.g. adoptable or available")


class PetCreate(BaseModel):
    """Create a new Pet."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Pet name")
    species: str = Field(..., min_length=1, description="Pet species")
    age: int | None = Field(None, ge=0, description="Pet age")


class PetUpdate(BaseModel):
    """Update an existing Pet. All fields optional."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    species: str | None = None
    age: int | None = Field(None, ge=0)


# =============================================================================
# Type Models
# =============================================================================


class AnimalType(BaseModel):
    """An animal type (Dog, Cat, Rabbit, ...)."""

    model_config = ConfigDict(extra="allow")

    name: str
    coats: list[str] = []
    colors: list[str] = []
    genders: list[str] = []


class Pagination(BaseModel):
    """Upstream pagination block."""

    model_config = ConfigDict(extra="allow")

    count_per_page: int | None = None
    total_count: int | None = None
    current_page: int | None = None
    total_pages: int | None = None

    def headers(self) -> dict[str, str]:
        """Render as response headers, skipping unknown values."""
        values: dict[str, Any] = {
            "X-Total-Count": self.total_count,
            "X-Current-Page": self.current_page,
            "X-Total-Pages": self.total_pages,
        }
        return {name: str(value) for name, value in values.items() if value is not None}
