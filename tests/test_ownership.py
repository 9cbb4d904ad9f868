"""Owner-scoping helpers against a real (in-memory SQLite) session."""

import unittest
from datetime import UTC, datetime, timedelta

from api_base import make_session_factory

from app.core.errors import NotFoundError
from app.models import Category, Expense, User
from app.schemas.auth import RequestIdentity
from app.services.ownership import delete_owned, get_owned_or_404, owned, update_owned


def _identity(user_id: int) -> RequestIdentity:
    now = datetime.now(UTC)
    return RequestIdentity(
        user_id=user_id, role="user", issued_at=now, expires_at=now + timedelta(hours=1)
    )


class OwnershipTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        alice = User(username="alice", password_hash="x")
        bob = User(username="bob", password_hash="x")
        self.db.add_all([alice, bob])
        self.db.flush()
        self.alice = _identity(alice.id)
        self.bob = _identity(bob.id)
        self.alice_food = Category(user_id=alice.id, name="Food")
        self.bob_rent = Category(user_id=bob.id, name="Rent")
        self.db.add_all([self.alice_food, self.bob_rent])
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()


class TestOwnedQuery(OwnershipTestCase):
    def test_only_own_rows(self) -> None:
        names = [c.name for c in owned(self.db, Category, self.alice).all()]
        self.assertEqual(names, ["Food"])


class TestGetOwnedOr404(OwnershipTestCase):
    def test_own_row(self) -> None:
        row = get_owned_or_404(self.db, Category, self.alice_food.id, self.alice, "Category")
        self.assertEqual(row.name, "Food")

    def test_foreign_row_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            get_owned_or_404(self.db, Category, self.bob_rent.id, self.alice, "Category")
        self.assertEqual(ctx.exception.message, "Category not found")
        self.assertEqual(ctx.exception.status_code, 404)

    def test_missing_row_gives_identical_error(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            get_owned_or_404(self.db, Category, 9999, self.alice, "Category")
        self.assertEqual(ctx.exception.message, "Category not found")


class TestUpdateOwned(OwnershipTestCase):
    def test_updates_own_row(self) -> None:
        row = update_owned(
            self.db, Category, self.alice_food.id, self.alice, "Category", {"name": "Groceries"}
        )
        self.assertEqual(row.name, "Groceries")

    def test_foreign_row_untouched(self) -> None:
        with self.assertRaises(NotFoundError):
            update_owned(
                self.db, Category, self.bob_rent.id, self.alice, "Category", {"name": "Hacked"}
            )
        self.db.expire_all()
        self.assertEqual(self.db.get(Category, self.bob_rent.id).name, "Rent")


class TestDeleteOwned(OwnershipTestCase):
    def test_deletes_own_row_and_its_expenses(self) -> None:
        self.db.add(
            Expense(
                user_id=self.alice.user_id,
                category_id=self.alice_food.id,
                item="Milk",
                quantity=2,
                price=1.5,
            )
        )
        self.db.commit()
        delete_owned(self.db, Category, self.alice_food.id, self.alice, "Category")
        self.assertIsNone(self.db.get(Category, self.alice_food.id))
        self.assertEqual(self.db.query(Expense).count(), 0)

    def test_foreign_row_survives(self) -> None:
        with self.assertRaises(NotFoundError):
            delete_owned(self.db, Category, self.bob_rent.id, self.alice, "Category")
        self.assertIsNotNone(self.db.get(Category, self.bob_rent.id))


if __name__ == "__main__":
    unittest.main()
