from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# Schema for user registration requests
class UserCreate(BaseModel):
    username: str
    password: str


# Schema for replacing an existing user
class UserUpdate(UserCreate):
    id: int


# Stored form of a user; login state is not persisted
class UserRecord(BaseModel):
    id: int
    username: str
    password: str

    model_config = ConfigDict(from_attributes=True)


# Output schema for user details (no password)
class UserResponse(BaseModel):
    id: int
    username: str
    admin: bool = Field(validation_alias=AliasChoices("admin", "is_admin"))
    logged_in: bool = Field(
        default=False,
        validation_alias=AliasChoices("loggedIn", "logged_in"),
        serialization_alias="loggedIn",
    )

    model_config = ConfigDict(from_attributes=True)
