"""
Family Member Models

A household is a fixed set of roles. Display names are NOT part of the
role definition: they are resolved at read time from the name store,
so a FamilyMember is a snapshot built on every directory call.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FamilyRole(str, Enum):
    """The supported household roles."""
    FATHER = "father"   # Primary user
    MOTHER = "mother"   # Second adult
    CHILD = "child"     # Dependent


class RoleDefinition(BaseModel):
    """Static definition of a role as shown on the family settings page."""
    model_config = ConfigDict(frozen=True)

    id: FamilyRole
    role: str = Field(
        ...,
        min_length=1,
        description="Human-readable role label"
    )
    color: str = Field(
        ...,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Avatar color"
    )
    default_name: str = Field(
        ...,
        min_length=1,
        description="Name shown when the user has not set one"
    )


class FamilyMember(BaseModel):
    """
    A family member with the display name resolved.

    `icon_initial` is the uppercased first character of `current_name`
    and is used for avatar badges.
    """
    model_config = ConfigDict(frozen=True)

    id: FamilyRole
    role: str
    color: str
    current_name: str = Field(..., min_length=1)
    icon_initial: str = Field(..., min_length=1)
