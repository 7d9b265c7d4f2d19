"""Doctor schemas.

Invariants:
    - Wire and stored name field is "dname"; Python attribute is `name`
    - A missing or null schedule becomes []
    - Unknown fields are dropped, never stored
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Doctor(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = Field(default="", alias="dname")
    schedule: list[str] = Field(default_factory=list)

    @field_validator("schedule", mode="before")
    @classmethod
    def null_schedule_is_empty(cls, v):
        return [] if v is None else v

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)
