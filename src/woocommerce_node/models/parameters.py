"""Tagged node inputs that come either as raw JSON text or as UI field rows."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter


class JsonLineItems(BaseModel):
    """Order line items supplied as a JSON array string."""

    kind: Literal["json"] = "json"
    raw: str = Field(default="", description="JSON array of line item objects")


class StructuredLineItems(BaseModel):
    """Order line items collected from the UI, one mapping per line."""

    kind: Literal["fields"] = "fields"
    items: list[dict[str, Any]] | None = Field(default=None)


LineItemsInput = Annotated[
    JsonLineItems | StructuredLineItems,
    Field(discriminator="kind"),
]


class JsonParameters(BaseModel):
    """Custom request query/body supplied as JSON object strings."""

    kind: Literal["json"] = "json"
    query: str = Field(default="", description="JSON object of query parameters")
    body: str = Field(default="", description="JSON object of body parameters")


class FieldParameters(BaseModel):
    """Custom request query/body supplied as name/value rows."""

    kind: Literal["fields"] = "fields"
    query: list[dict[str, Any]] | None = Field(default=None)
    body: list[dict[str, Any]] | None = Field(default=None)


CustomParameters = Annotated[
    JsonParameters | FieldParameters,
    Field(discriminator="kind"),
]

line_items_adapter: TypeAdapter[JsonLineItems | StructuredLineItems] = TypeAdapter(LineItemsInput)
custom_parameters_adapter: TypeAdapter[JsonParameters | FieldParameters] = TypeAdapter(
    CustomParameters
)
