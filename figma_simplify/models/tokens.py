from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TokenType(str, Enum):
    COLOR = "color"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    EFFECT = "effect"
    LAYOUT = "layout"
    COMPONENT = "component"


class DesignToken(BaseModel):
    id: str
    name: str
    value: Any
    type: TokenType
    css_variable: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True, use_enum_values=True
    )


class DesignTokens(BaseModel):
    colors: list[DesignToken] = Field(default_factory=list)
    typography: list[DesignToken] = Field(default_factory=list)
    spacing: list[DesignToken] = Field(default_factory=list)
    effects: list[DesignToken] = Field(default_factory=list)
    layout: list[DesignToken] = Field(default_factory=list)
    components: list[DesignToken] = Field(default_factory=list)

    def all(self) -> list[DesignToken]:
        return [
            *self.colors, *self.typography, *self.spacing,
            *self.effects, *self.layout, *self.components,
        ]


class StoreStatistics(BaseModel):
    total_variables: int = 0
    variables_by_type: dict[str, int] = Field(default_factory=dict)
    duplicates_found: int = 0
    memory_usage: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
