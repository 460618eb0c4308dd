"""
Shared input types.
"""

from pydantic import Field, TypeAdapter
from typing import Annotated

ResultLimit = Annotated[int, Field(ge=1, description="Maximum number of rows to return")]

_result_limit_adapter = TypeAdapter(ResultLimit)


def validate_limit(limit) -> int:
    """
    Validate a row limit.
    
    Raises:
        pydantic.ValidationError: If the limit is not a positive integer
    """
    return _result_limit_adapter.validate_python(limit)
