"""
Shapes of structured element attributes read by the compartment builders.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ParameterDirection(str, Enum):
    """Direction of an action/calculation parameter."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"


class Parameter(BaseModel):
    """Typed, directed parameter of an action or calculation."""

    model_config = ConfigDict(extra="allow")

    name: str
    direction: ParameterDirection | None = None
    type: str | None = None
    inherited: bool = False

    @property
    def is_input(self) -> bool:
        return self.direction in (ParameterDirection.IN, ParameterDirection.INOUT)

    @property
    def is_output(self) -> bool:
        return self.direction in (ParameterDirection.OUT, ParameterDirection.INOUT)


class PropertySpec(BaseModel):
    """Attribute, item, end or pin listed in a compartment."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str | None = None
    multiplicity: str | None = None
    value: str | None = None


class PortSpec(BaseModel):
    """Port listed on a part or interface."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str | None = None
    direction: ParameterDirection | None = None


class OwnedMember(BaseModel):
    """Owned part or state derived from composition/aggregation."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: str
    definition_id: str | None = Field(default=None, alias="definitionId")
    definition_name: str | None = Field(default=None, alias="definitionName")
    multiplicity: str | None = None
    relationship_type: str | None = Field(default=None, alias="relationshipType")
