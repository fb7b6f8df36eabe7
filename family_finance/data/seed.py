"""
Static Seed Data

The fixed tables the UI is developed against: family roles, categories
and transactions. Dates are kept recent so the dashboard charts have
something to show for late November 2025.

These are module level constants. Callers get tuples of frozen models
and cannot change them.
"""

from datetime import date

from family_finance.models.family import FamilyRole, RoleDefinition
from family_finance.models.transaction import (
    Category,
    Transaction,
    TransactionType,
)


# =============================================================================
# FALLBACKS - used whenever a lookup misses
# =============================================================================

GUEST_NAME = "Гость"
UNKNOWN_CATEGORY_NAME = "Неизвестно"
UNKNOWN_CATEGORY_ICON = "fa-question-circle"
UNKNOWN_CATEGORY_COLOR = "#95A5A6"


# =============================================================================
# FAMILY ROLES
# =============================================================================

# Colors match the avatars on the family settings page
FAMILY_ROLES: tuple[RoleDefinition, ...] = (
    RoleDefinition(
        id=FamilyRole.FATHER,
        role="Основной пользователь",
        color="#EE3124",
        default_name="Папа",
    ),
    RoleDefinition(
        id=FamilyRole.MOTHER,
        role="Взрослый",
        color="#C02929",
        default_name="Мама",
    ),
    RoleDefinition(
        id=FamilyRole.CHILD,
        role="Ребенок",
        color="#801818",
        default_name="Ребенок",
    ),
)


# =============================================================================
# CATEGORIES
# =============================================================================

MOCK_CATEGORIES: tuple[Category, ...] = (
    Category(id="products", name="Продукты", icon="fa-shopping-basket", color="#54A8C7"),
    Category(id="transport", name="Транспорт", icon="fa-bus", color="#8E44AD"),
    Category(id="house", name="Дом", icon="fa-home", color="#1ABC9C"),
    Category(id="cafes", name="Кафе и рестораны", icon="fa-utensils", color="#F39C12"),
    Category(id="salary", name="Зарплата", icon="fa-hand-holding-usd", color="#27AE60"),
    Category(id="other", name="Прочее", icon="fa-ellipsis-h", color="#95A5A6"),
)


# =============================================================================
# TRANSACTIONS
# =============================================================================

_INCOME = TransactionType.INCOME
_EXPENSE = TransactionType.EXPENSE

MOCK_TRANSACTIONS: tuple[Transaction, ...] = (
    # Income
    Transaction(id=1, type=_INCOME, amount=150000, category_id="salary",
                description="Зарплата (Папа)", date=date(2025, 11, 25), member_id="father"),
    # Father
    Transaction(id=2, type=_EXPENSE, amount=3500, category_id="products",
                description="Супермаркет", date=date(2025, 11, 28), member_id="father"),
    Transaction(id=3, type=_EXPENSE, amount=1200, category_id="transport",
                description="Бензин", date=date(2025, 11, 27), member_id="father"),
    Transaction(id=4, type=_EXPENSE, amount=4500, category_id="house",
                description="Квартплата", date=date(2025, 11, 20), member_id="father"),
    # Mother
    Transaction(id=5, type=_EXPENSE, amount=2500, category_id="products",
                description="Продуктовый рынок", date=date(2025, 11, 28), member_id="mother"),
    Transaction(id=6, type=_EXPENSE, amount=1800, category_id="cafes",
                description="Обед с коллегами", date=date(2025, 11, 26), member_id="mother"),
    Transaction(id=7, type=_EXPENSE, amount=500, category_id="transport",
                description="Такси", date=date(2025, 11, 26), member_id="mother"),
    # Child
    Transaction(id=8, type=_EXPENSE, amount=700, category_id="cafes",
                description="Мороженое", date=date(2025, 11, 28), member_id="child"),
    Transaction(id=9, type=_EXPENSE, amount=300, category_id="other",
                description="Игровая валюта", date=date(2025, 11, 27), member_id="child"),
    # Earlier in the month
    Transaction(id=10, type=_EXPENSE, amount=1500, category_id="products",
                description="Продукты", date=date(2025, 11, 25), member_id="father"),
    Transaction(id=11, type=_EXPENSE, amount=900, category_id="transport",
                description="Метро", date=date(2025, 11, 24), member_id="mother"),
    Transaction(id=12, type=_EXPENSE, amount=1800, category_id="cafes",
                description="Ужин в ресторане", date=date(2025, 11, 23), member_id="father"),
    Transaction(id=13, type=_EXPENSE, amount=400, category_id="other",
                description="Книжный магазин", date=date(2025, 11, 22), member_id="mother"),
)
