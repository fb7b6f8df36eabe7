"""Tests for name resolution, the member directory and the category directory."""

import pytest

from family_finance.directory import CategoryDirectory, MemberDirectory, NameResolver
from family_finance.models import Category, FamilyRole
from family_finance.services.storage import InMemoryNameStore


class TestNameResolver:
    """Tests for display-name lookup."""

    @pytest.mark.parametrize(
        "member_id, expected",
        [
            ("father", "Папа"),
            ("mother", "Мама"),
            ("child", "Ребенок"),
        ],
    )
    def test_defaults_without_override(self, member_id, expected):
        """Test role defaults when the store is empty."""
        resolver = NameResolver(InMemoryNameStore())
        assert resolver.get_display_name(member_id) == expected

    @pytest.mark.parametrize("member_id", ["father", "mother", "child"])
    def test_override_wins(self, member_id):
        """Test that a stored name replaces the default."""
        store = InMemoryNameStore({f"member_name_{member_id}": "Алекс"})
        resolver = NameResolver(store)
        assert resolver.get_display_name(member_id) == "Алекс"

    def test_unknown_member_gets_guest_name(self):
        """Test the generic fallback for unrecognized ids."""
        resolver = NameResolver(InMemoryNameStore())
        assert resolver.get_display_name("grandma") == "Гость"

    def test_unknown_member_override(self):
        """Test that even unknown ids can be named through the store."""
        store = InMemoryNameStore({"member_name_grandma": "Бабушка"})
        assert NameResolver(store).get_display_name("grandma") == "Бабушка"

    def test_empty_override_falls_back(self):
        """Test that an empty stored string counts as absent."""
        store = InMemoryNameStore({"member_name_father": ""})
        assert NameResolver(store).get_display_name("father") == "Папа"

    def test_custom_key_prefix(self):
        """Test reading overrides under a different key prefix."""
        store = InMemoryNameStore({"name.mother": "Ольга"})
        resolver = NameResolver(store, key_prefix="name.")
        assert resolver.store_key("mother") == "name.mother"
        assert resolver.get_display_name("mother") == "Ольга"


class TestMemberDirectory:
    """Tests for the family member list."""

    def test_lists_members_in_role_order(self):
        """Test the fixed list with defaults applied."""
        directory = MemberDirectory(NameResolver(InMemoryNameStore()))
        members = directory.list_family_members()

        assert [m.id for m in members] == [
            FamilyRole.FATHER,
            FamilyRole.MOTHER,
            FamilyRole.CHILD,
        ]
        assert [m.current_name for m in members] == ["Папа", "Мама", "Ребенок"]
        assert [m.icon_initial for m in members] == ["П", "М", "Р"]
        assert members[0].role == "Основной пользователь"
        assert members[0].color == "#EE3124"

    def test_initial_is_uppercased(self):
        """Test the initial of a lowercase override."""
        store = InMemoryNameStore({"member_name_child": "маша"})
        directory = MemberDirectory(NameResolver(store))
        child = directory.list_family_members()[2]
        assert child.current_name == "маша"
        assert child.icon_initial == "М"

    def test_recomputed_on_every_call(self):
        """Test that renaming shows up without rebuilding the directory."""
        store = InMemoryNameStore()
        directory = MemberDirectory(NameResolver(store))
        assert directory.list_family_members()[1].current_name == "Мама"

        store.set_item("member_name_mother", "Ирина")
        assert directory.list_family_members()[1].current_name == "Ирина"


class TestCategoryDirectory:
    """Tests for the category directory."""

    def test_lists_all_categories(self):
        """Test the six static categories."""
        categories = CategoryDirectory().list_categories()
        assert len(categories) == 6
        assert categories[0].name == "Продукты"

    def test_list_is_a_copy(self):
        """Test that callers can't change the directory through the list."""
        directory = CategoryDirectory()
        directory.list_categories().clear()
        assert len(directory.list_categories()) == 6

    def test_name_by_id(self):
        """Test name lookup."""
        directory = CategoryDirectory()
        assert directory.category_name_by_id("cafes") == "Кафе и рестораны"
        assert directory.category_name_by_id("salary") == "Зарплата"

    def test_unknown_category_name(self):
        """Test the 'unknown' label for missing ids."""
        assert CategoryDirectory().category_name_by_id("pets") == "Неизвестно"

    def test_get_category(self):
        """Test raw lookup."""
        directory = CategoryDirectory()
        assert directory.get_category("transport").icon == "fa-bus"
        assert directory.get_category("pets") is None

    def test_custom_categories(self):
        """Test a directory over a different table."""
        directory = CategoryDirectory(
            [Category(id="pets", name="Питомцы", icon="fa-paw", color="#123456")]
        )
        assert directory.category_name_by_id("pets") == "Питомцы"
        assert directory.category_name_by_id("products") == "Неизвестно"
