from pydantic import BaseModel, ConfigDict, Field
from typing import Dict


# Request schema for creating a cart, optionally pre-filled
class CartCreate(BaseModel):
    username: str
    contents: Dict[int, int] = Field(default_factory=dict)


# Request schema for replacing an existing cart
class CartUpdate(CartCreate):
    id: int


# Response schema for a cart, also the record written to the data file.
# JSON object keys are strings, so disc ids come back as "1", "2", ...
class CartResponse(BaseModel):
    id: int
    username: str
    contents: Dict[int, int]

    model_config = ConfigDict(from_attributes=True)
