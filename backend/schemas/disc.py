from pydantic import BaseModel, ConfigDict


# Base configuration for reading domain objects
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Shared attributes of a disc
class DiscBase(ORMBase):
    color: str
    weight: int
    type: str
    price: float
    quantity: int


# Schema for creating a disc; an id sent by the client is ignored
class DiscCreate(DiscBase):
    pass


# Schema for replacing an existing disc
class DiscUpdate(DiscBase):
    id: int


# Full disc representation, also the record written to the data file
class DiscResponse(DiscBase):
    id: int
