from datetime import date
import pytest
from flatshare.extension import db
from flatshare.exceptions import ConflictError
from flatshare.models import (
    User, Payment, PaymentShare, Debt, ChatMessage, ShoppingList, Item, ProductSuggestion
)
from flatshare.service.account_deletion import (
    AccountDeletionService, DeletionStatus, MESSAGE_OK, MESSAGE_YOU_OWE
)
from flatshare.service.chat_service import ChatService
from flatshare.service.ledger import LedgerService
from flatshare.service.payment_splitter import PaymentSplitter
from flatshare.service.shopping_list_service import ShoppingListService
from flatshare.utils.roles import PERMISSION_ADMIN, ITEM_BOUGHT


def add_debt(debtor, creditor, amount):
    LedgerService.create_debt(debtor, creditor, amount, "test", debtor.group_id)
    db.session.commit()


def test_user_without_group_can_always_be_deleted(make_user):
    check = AccountDeletionService.check_deletion_status(make_user())

    assert check.status == DeletionStatus.OK
    assert check.message == MESSAGE_OK


def test_debtor_is_blocked_until_settled(make_group):
    _, (a, b) = make_group(2)
    add_debt(a, b, 20.0)

    check = AccountDeletionService.check_deletion_status(a)
    assert check.status == DeletionStatus.BLOCKED
    assert check.message == MESSAGE_YOU_OWE

    LedgerService.settle_between(a.id, b.id)
    db.session.commit()

    assert AccountDeletionService.check_deletion_status(a).status == DeletionStatus.OK


def test_creditor_is_blocked_with_amount_in_message(make_group):
    _, (c, d) = make_group(2)
    add_debt(d, c, 15.0)

    check = AccountDeletionService.check_deletion_status(c)

    assert check.status == DeletionStatus.BLOCKED
    assert "15.00" in check.message
    assert check.to_dict() == {"status": "BLOCKED", "message": check.message}


def test_blocked_stays_blocked_while_debts_grow(make_group):
    _, (a, b, c) = make_group(3)
    add_debt(a, b, 5.0)
    assert AccountDeletionService.check_deletion_status(a).blocked

    add_debt(c, a, 8.0)
    assert AccountDeletionService.check_deletion_status(a).blocked

    LedgerService.settle_between(a.id, b.id)
    db.session.commit()
    assert AccountDeletionService.check_deletion_status(a).blocked

    LedgerService.settle_between(a.id, c.id)
    db.session.commit()
    assert not AccountDeletionService.check_deletion_status(a).blocked


def test_rounding_noise_does_not_block(make_group):
    _, (a, b) = make_group(2)
    add_debt(a, b, 0.004)

    assert AccountDeletionService.check_deletion_status(a).status == DeletionStatus.OK


def test_delete_account_refused_when_blocked(make_group):
    _, (a, b) = make_group(2)
    add_debt(a, b, 20.0)

    with pytest.raises(ConflictError):
        AccountDeletionService.delete_account(a)

    assert db.session.get(User, a.id) is not None
    assert Debt.query.count() == 1


def test_delete_account_cascade(make_group):
    group, (admin, member) = make_group(2)
    admin_id = admin.id

    payment = PaymentSplitter.create_payment(
        admin, "Groceries", 40.0, date(2024, 5, 1), [admin.id, member.id]
    )
    LedgerService.settle_between(admin.id, member.id)
    db.session.commit()

    message = ChatService.send_message(admin, group.id, "Hello")
    private_list = ShoppingListService.create_with_items(
        admin, "Mine", is_private=True, items=[{"name": "Socks"}]
    )
    shared_list = ShoppingListService.create_with_items(admin, "Flat", items=[{"name": "Milk"}])
    bought = ShoppingListService.add_item(admin, shared_list.id, "Bread", status=ITEM_BOUGHT)
    db.session.add(ProductSuggestion(name="Socks", created_by_id=admin.id))
    db.session.commit()
    private_list_id = private_list.id

    AccountDeletionService.delete_account(admin)

    assert db.session.get(User, admin_id) is None
    assert member.permission == PERMISSION_ADMIN
    assert db.session.get(ChatMessage, message.id).sender_id is None
    assert db.session.get(ChatMessage, message.id).sender_name == "Deleted user"
    assert db.session.get(Payment, payment.id).paid_by_id is None
    assert [share.user_id for share in PaymentShare.query.all()] == [member.id]
    assert db.session.get(ShoppingList, private_list_id) is None
    assert db.session.get(ShoppingList, shared_list.id).owner_id is None
    assert db.session.get(Item, bought.id).added_by_id is None
    assert db.session.get(Item, bought.id).bought_by_id is None
    assert Item.query.filter_by(name="Socks").count() == 0
    assert ProductSuggestion.query.filter_by(created_by_id=admin_id).count() == 0


def test_last_member_deletion_leaves_group_empty(make_group):
    group, (admin,) = make_group(1)

    AccountDeletionService.delete_account(admin)

    assert group.members == []
