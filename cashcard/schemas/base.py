"""Base DTOs for API endpoints"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    # needed for ORM
    model_config = ConfigDict(from_attributes=True)


class BaseReadSchema(BaseSchema):
    id: int
