"""
Tests for the development seed.
"""

from lunch_api.models import Category, DayMenu, Item, Organization, User
from lunch_api.seed import seed
from lunch_api.services.domain import MenuService


class TestSeed:

    def test_seeds_catalog_and_week(self, db_session):
        seed(db_session)

        assert db_session.query(Organization).count() == 1
        assert db_session.query(Category).count() == 3
        assert db_session.query(Item).count() == 9
        assert db_session.query(DayMenu).count() == 7
        assert db_session.query(User).count() == 0

    def test_idempotent(self, db_session):
        seed(db_session)
        seed(db_session)

        assert db_session.query(Organization).count() == 1
        assert db_session.query(DayMenu).count() == 7

    def test_todays_menu_resolves(self, db_session):
        """Every day of the current week has a menu with one dish per course."""
        seed(db_session)

        week = MenuService(db_session).week()

        assert all(menu is not None for _, menu in week)
        assert all(len(menu.items) == 3 for _, menu in week)
