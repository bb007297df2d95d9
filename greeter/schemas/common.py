"""Shared lightweight schemas."""

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """Immutable greeting text; any string, including empty, is accepted as-is."""

    model_config = ConfigDict(frozen=True)

    value: str
