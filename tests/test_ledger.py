import pytest
from flatshare.extension import db
from flatshare.exceptions import ValidationError, NotFoundError
from flatshare.models import Debt
from flatshare.service.ledger import LedgerService


def test_create_debt_requires_two_different_users(make_group):
    group, (a, _) = make_group(2)
    with pytest.raises(ValidationError):
        LedgerService.create_debt(a, a, 10.0, "Pizza", group.id)


@pytest.mark.parametrize("amount", [0, -5.0, None])
def test_create_debt_requires_positive_amount(make_group, amount):
    group, (a, b) = make_group(2)
    with pytest.raises(ValidationError):
        LedgerService.create_debt(a, b, amount, "Pizza", group.id)


def test_settle_between_removes_both_directions_only(make_group):
    group, (a, b, c) = make_group(3)
    LedgerService.create_debt(a, b, 10.0, "Groceries", group.id)
    LedgerService.create_debt(b, a, 4.0, "Coffee", group.id)
    LedgerService.create_debt(c, a, 7.0, "Cinema", group.id)
    db.session.commit()

    removed = LedgerService.settle_between(b.id, a.id)
    db.session.commit()

    assert removed == 2
    remaining = Debt.query.all()
    assert len(remaining) == 1
    assert (remaining[0].from_user_id, remaining[0].to_user_id) == (c.id, a.id)


def test_settle_between_without_debts_is_a_no_op(make_group):
    _, (a, b) = make_group(2)
    assert LedgerService.settle_between(a.id, b.id) == 0


def test_debts_involving_lists_both_sides(make_group):
    group, (a, b, c) = make_group(3)
    LedgerService.create_debt(a, b, 1.0, "first", group.id)
    LedgerService.create_debt(c, a, 2.0, "second", group.id)
    LedgerService.create_debt(b, c, 3.0, "unrelated", group.id)
    db.session.commit()

    reasons = {debt.reason for debt in LedgerService.debts_involving(a.id)}
    assert reasons == {"first", "second"}


def test_delete_by_id(make_group):
    group, (a, b) = make_group(2)
    debt = LedgerService.create_debt(a, b, 5.0, "Taxi", group.id)
    db.session.commit()

    LedgerService.delete_by_id(debt.id)
    db.session.commit()

    assert Debt.query.count() == 0
    with pytest.raises(NotFoundError):
        LedgerService.get(debt.id)
