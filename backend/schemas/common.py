from typing import ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """
    Body of a PUT: omitted fields keep their stored value.
    Fields named in `not_null` back NOT NULL columns, so an explicit null is
    rejected (422) instead of reaching the database.
    """

    not_null: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_nulls(self):
        nulled = [
            name
            for name in self.not_null
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"{', '.join(nulled)} cannot be null")
        return self
