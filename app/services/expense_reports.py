"""Spend aggregation: per-category totals for one user and the admin cross-user view."""

from collections.abc import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Category, Expense, User
from app.schemas.auth import RequestIdentity
from app.schemas.categories import CategoryTotal, CategoryTotalsResponse
from app.schemas.expenses import AdminExpenseRow, ExpensesByUserResponse, UserExpenseGroup


def _money(value: object) -> float:
    return round(float(value or 0), 2)


def category_totals(db: Session, identity: RequestIdentity) -> CategoryTotalsResponse:
    """
    Sum price * quantity per category for the caller.

    Categories without expenses are included with a zero total.
    """
    rows = (
        db.query(
            Category.id,
            Category.name,
            func.count(Expense.id),
            func.coalesce(func.sum(Expense.price * Expense.quantity), 0),
        )
        .outerjoin(
            Expense,
            (Expense.category_id == Category.id) & (Expense.user_id == identity.user_id),
        )
        .filter(Category.user_id == identity.user_id)
        .group_by(Category.id, Category.name)
        .order_by(Category.id)
        .all()
    )
    categories = [
        CategoryTotal(id=cid, name=name, expense_count=count, total=_money(total))
        for cid, name, count, total in rows
    ]
    return CategoryTotalsResponse(
        categories=categories,
        total=_money(sum(c.total for c in categories)),
    )


def all_expense_rows(db: Session) -> list[AdminExpenseRow]:
    """Every user's expenses with owner and category names. No owner filter: admin only."""
    rows = (
        db.query(Expense, User.username, Category.name)
        .join(User, User.id == Expense.user_id)
        .join(Category, Category.id == Expense.category_id)
        .order_by(User.username, Expense.id)
        .all()
    )
    return [
        AdminExpenseRow(
            id=expense.id,
            user_id=expense.user_id,
            username=username,
            category_id=expense.category_id,
            category_name=category_name,
            item=expense.item,
            quantity=expense.quantity,
            price=_money(expense.price),
            total_cost=_money(expense.price * expense.quantity),
        )
        for expense, username, category_name in rows
    ]


def group_by_user(rows: Iterable[AdminExpenseRow]) -> ExpensesByUserResponse:
    """Group admin rows by username (first-seen order) with per-user totals."""
    groups: dict[str, list[AdminExpenseRow]] = {}
    for row in rows:
        groups.setdefault(row.username, []).append(row)
    users = [
        UserExpenseGroup(
            username=username,
            expenses=expenses,
            total=_money(sum(e.total_cost for e in expenses)),
        )
        for username, expenses in groups.items()
    ]
    return ExpensesByUserResponse(
        users=users,
        total=_money(sum(u.total for u in users)),
    )
