"""
Pydantic schemas for property listings.
Handles listing creation input and the property search filters.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Mapping, Optional
from lightbnb.utils.query_builder import normalize_filters


class PropertyCreate(BaseModel):
    """Schema for creating a new property listing."""
    
    owner_id: int = Field(..., gt=0, description="ID of the owning user")
    title: str = Field(..., min_length=1, max_length=255, examples=["Speed lamp"])
    description: Optional[str] = Field(None, description="Free-text description")
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)
    cost_per_night: int = Field(..., ge=0, description="Nightly cost", examples=[93061])
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)
    country: str = Field(..., max_length=255, examples=["Canada"])
    street: str = Field(..., max_length=255, examples=["536 Namsub Highway"])
    city: str = Field(..., max_length=255, examples=["Sotboske"])
    province: str = Field(..., max_length=255, examples=["Quebec"])
    post_code: str = Field(..., max_length=255, examples=["28142"])
    
    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        """Validate and clean title."""
        if not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip()
    
    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class PropertySearchFilters(BaseModel):
    """
    Optional filters for the property search listing.
    Accepts both snake_case names and the camelCase names used by the
    browser client (ownerId, minimumPricePerNight, ...).
    """
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    owner_id: Optional[int] = Field(None, gt=0, description="Only listings owned by this user")
    city: Optional[str] = Field(None, description="Case-sensitive substring of the city")
    minimum_price_per_night: Optional[int] = Field(None, ge=0)
    maximum_price_per_night: Optional[int] = Field(None, ge=0)
    minimum_rating: Optional[float] = Field(None, ge=0, le=5)
    
    @model_validator(mode="before")
    @classmethod
    def normalize_key_spelling(cls, data):
        """Fold camelCase keys onto snake_case names; snake_case wins when both are given."""
        if isinstance(data, Mapping):
            return normalize_filters(data)
        return data
    
    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        """Blank form fields mean the filter was not used."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
    
    @model_validator(mode="after")
    def validate_price_range(self):
        """Validate that the price bounds do not cross."""
        if (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
            and self.minimum_price_per_night > self.maximum_price_per_night
        ):
            raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self
    
    def to_filter_mapping(self) -> Dict[str, Any]:
        """Return only the filters that were supplied, keyed by snake_case name."""
        return self.model_dump(exclude_none=True)
