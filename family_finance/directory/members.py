"""
Family Member Directory

Resolves display names from the name store and builds the member list
the analytics screens render.

GUARANTEES:
- Always returns a usable, non-empty name
- Never caches; a renamed member shows up on the next call
"""

from typing import Sequence

import structlog

from family_finance.data.seed import FAMILY_ROLES, GUEST_NAME
from family_finance.models.family import FamilyMember, RoleDefinition
from family_finance.services.storage import NameStoreInterface


class NameResolver:
    """Looks up a member's display name, falling back to role defaults."""

    def __init__(
        self,
        store: NameStoreInterface,
        key_prefix: str = "member_name_",
        roles: Sequence[RoleDefinition] = FAMILY_ROLES,
    ):
        self._store = store
        self._key_prefix = key_prefix
        self._defaults = {role.id.value: role.default_name for role in roles}
        self._logger = structlog.get_logger(__name__)

    def store_key(self, member_id: str) -> str:
        """Get the store key holding a member's name override."""
        return f"{self._key_prefix}{member_id}"

    def default_name(self, member_id: str) -> str:
        """Get the built-in name for a role, or the guest name."""
        return self._defaults.get(member_id, GUEST_NAME)

    def get_display_name(self, member_id: str) -> str:
        """
        Get the name to show for a member.

        A non-empty stored override wins. Otherwise the role default is
        used, and unrecognized ids get the guest name.
        """
        stored = self._store.get_item(self.store_key(member_id))
        if stored:
            return stored

        if member_id not in self._defaults:
            self._logger.debug("unknown_member_id", member_id=member_id)
        return self.default_name(member_id)


class MemberDirectory:
    """Builds the family member list with names and initials resolved."""

    def __init__(
        self,
        resolver: NameResolver,
        roles: Sequence[RoleDefinition] = FAMILY_ROLES,
    ):
        self._resolver = resolver
        self._roles = tuple(roles)

    def list_family_members(self) -> list[FamilyMember]:
        """Get every family member in role order."""
        members = []
        for role in self._roles:
            name = self._resolver.get_display_name(role.id.value)
            members.append(
                FamilyMember(
                    id=role.id,
                    role=role.role,
                    color=role.color,
                    current_name=name,
                    icon_initial=name[0].upper(),
                )
            )
        return members
