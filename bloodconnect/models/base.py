from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Required text field; empty strings count as missing
RequiredStr = Annotated[str, Field(min_length=1)]


class CamelModel(BaseModel):
    """Base for records exchanged as camelCase JSON and stored as camelCase documents."""
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
