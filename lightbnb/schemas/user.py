"""
Pydantic schemas for user input.
Validates registration data before it reaches the users table.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Schema for registering a new user."""
    
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )
    
    email: EmailStr = Field(
        ...,
        description="User's email address, unique across users",
        examples=["devin.sanders@example.com"]
    )
    
    password: str = Field(
        ...,
        min_length=1,
        description="Already-hashed password; stored as given",
        examples=["$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."]
    )
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()
