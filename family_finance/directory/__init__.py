"""Member and category directories."""

from family_finance.directory.categories import CategoryDirectory
from family_finance.directory.members import MemberDirectory, NameResolver

__all__ = ["CategoryDirectory", "MemberDirectory", "NameResolver"]
