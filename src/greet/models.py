"""Pydantic models for greet"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class QuoteStyle(str, Enum):
    """Character used to wrap the greeting"""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def mark(self) -> str:
        if self is QuoteStyle.SINGLE:
            return "'"
        if self is QuoteStyle.DOUBLE:
            return '"'
        return ""


class GreetRequest(BaseModel):
    """Inputs for a single greeting"""

    model_config = ConfigDict(frozen=True)

    content: List[str] = Field(
        default_factory=list, description="Words of the introductory text"
    )
    name: List[str] = Field(
        default_factory=list, description="Words of the name to greet"
    )
    quote_style: QuoteStyle = Field(
        default=QuoteStyle.NONE, description="Quote wrapped around the output"
    )
    points: Optional[int] = Field(
        default=None, description="Number of exclamation points"
    )
