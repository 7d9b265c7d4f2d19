"""Patient schemas. Patients are only read and mutated, never created via the API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Patient(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = Field(default="", alias="pname")
    schedule: list[str] = Field(default_factory=list)

    @field_validator("schedule", mode="before")
    @classmethod
    def null_schedule_is_empty(cls, v):
        return [] if v is None else v
