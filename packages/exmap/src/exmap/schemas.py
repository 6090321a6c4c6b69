"""
Command Table Schemas

Pydantic models for declarative command tables (YAML).
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, model_validator


class CommandEntrySchema(BaseModel):
    """Schema for a single command in a command table."""

    names: Union[str, List[str]] = Field(
        ..., description="Primary name, or primary name followed by aliases"
    )
    action: str = Field(..., min_length=1, description="Name of the action implementing the command")
    syntax: str = Field(default="", description="Syntax flag string")
    scope: Optional[str] = Field(default=None, description="Scope selector restricting the command")
    parameter_names: Optional[List[str]] = Field(
        default=None,
        description="Display labels for the register, line and argument parameters",
    )
    documentation: str = Field(default="", description="Command documentation")

    @model_validator(mode="after")
    def normalize_names(self) -> "CommandEntrySchema":
        """Turn a single name into a list and reject empty names."""
        if isinstance(self.names, str):
            self.names = [self.names]
        if not self.names:
            raise ValueError("names must not be empty")
        if any(not name for name in self.names):
            raise ValueError(f"names must not contain empty strings: {self.names}")
        return self


class CommandTableSchema(BaseModel):
    """Schema for a command table document."""

    commands: List[Any] = Field(default_factory=list, description="Command entries, validated one by one")
