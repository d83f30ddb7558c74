"""Schemas shared by several endpoints."""
from typing import Any

from pydantic import BaseModel, model_validator


class ResponseModel(BaseModel):
    """Base for models decoded from API responses.
    
    A null value is read as if the key were absent, so every field falls
    back to its default ("" / [] / {} / nested model / False).
    """
    
    @model_validator(mode="before")
    @classmethod
    def null_as_default(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class DeleteResult(ResponseModel):
    """Body returned by every delete endpoint."""
    deleted: bool = False
