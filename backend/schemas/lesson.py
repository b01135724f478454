from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from exceptions import InvalidLessonDateException
from models.lesson import parse_date


# Shared attributes of a lesson; dates travel as "startDate"/"endDate"
class LessonBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    username: Optional[str] = None
    title: str
    description: Optional[str] = None
    days: str
    start_date: str = Field(
        validation_alias=AliasChoices("startDate", "start_date"),
        serialization_alias="startDate",
    )
    end_date: str = Field(
        validation_alias=AliasChoices("endDate", "end_date"),
        serialization_alias="endDate",
    )
    price: float


# Schema for creating a lesson; the date range must be valid
class LessonCreate(LessonBase):
    @model_validator(mode="after")
    def check_date_range(self):
        try:
            start = parse_date(self.start_date)
            end = parse_date(self.end_date)
        except InvalidLessonDateException as e:
            raise ValueError(str(e))
        if start > end:
            raise ValueError("startDate must not be after endDate")
        return self


# Schema for replacing an existing lesson
class LessonUpdate(LessonCreate):
    id: int


# Full lesson representation, also the record written to the data file
class LessonResponse(LessonBase):
    id: int
