import enum
import logging
from dataclasses import dataclass
from flatshare.extension import db
from flatshare.models import (
    ChatMessage, Item, Payment, PaymentShare, ProductSuggestion, ShoppingList
)
from flatshare.exceptions import ConflictError
from flatshare.service.ledger import LedgerService
from flatshare.service.group_membership import GroupMembershipService

logger = logging.getLogger(__name__)

# absorbs float noise left by equal-split division
BALANCE_TOLERANCE = 0.01

MESSAGE_OK = "Your account can be deleted safely."
MESSAGE_YOU_OWE = (
    "Your account cannot be deleted because you still owe other members money. "
    "Please settle your debts first."
)
MESSAGE_OWED_TO_YOU = (
    "Your account cannot be deleted because other members still owe you {amount:.2f} €. "
    "Please resolve this before deleting your account."
)


class DeletionStatus(enum.Enum):
    OK = "OK"
    # never produced: money owed to the user blocks deletion too
    WARNING = "WARNING"
    BLOCKED = "BLOCKED"


@dataclass
class DeletionCheck:
    status: DeletionStatus
    message: str

    @property
    def blocked(self):
        return self.status == DeletionStatus.BLOCKED

    def to_dict(self):
        return {"status": self.status.value, "message": self.message}


class AccountDeletionService:

    @staticmethod
    def check_deletion_status(user):
        if user.group_id is None:
            return DeletionCheck(DeletionStatus.OK, MESSAGE_OK)

        debts = LedgerService.debts_involving(user.id)

        total_you_owe = sum(d.amount for d in debts if d.from_user_id == user.id)
        if total_you_owe > BALANCE_TOLERANCE:
            return DeletionCheck(DeletionStatus.BLOCKED, MESSAGE_YOU_OWE)

        total_owed_to_you = sum(d.amount for d in debts if d.to_user_id == user.id)
        if total_owed_to_you > BALANCE_TOLERANCE:
            return DeletionCheck(
                DeletionStatus.BLOCKED,
                MESSAGE_OWED_TO_YOU.format(amount=total_owed_to_you)
            )

        return DeletionCheck(DeletionStatus.OK, MESSAGE_OK)

    @staticmethod
    def delete_account(user):
        """
        Remove `user` and detach or delete everything that references them.
        The guard is evaluated again here; a stale OK from an earlier check is not trusted.
        """
        check = AccountDeletionService.check_deletion_status(user)
        if check.blocked:
            logger.warning(f"Deletion of user {user.id} refused: {check.message}")
            raise ConflictError("Account cannot be deleted while debts are outstanding")

        user_id = user.id
        try:
            # 1. admin hand-off
            group = user.group
            if group is not None and user.is_admin:
                GroupMembershipService.promote_successor(group.id, user_id)

            # 2. leave the group
            if group is not None:
                GroupMembershipService.detach(user)

            # 3. anonymize history
            Item.query.filter_by(added_by_id=user_id).update(
                {Item.added_by_id: None}, synchronize_session="fetch")
            Item.query.filter_by(bought_by_id=user_id).update(
                {Item.bought_by_id: None}, synchronize_session="fetch")
            ChatMessage.query.filter_by(sender_id=user_id).update(
                {ChatMessage.sender_id: None}, synchronize_session="fetch")
            Payment.query.filter_by(paid_by_id=user_id).update(
                {Payment.paid_by_id: None}, synchronize_session="fetch")
            ShoppingList.query.filter_by(owner_id=user_id, is_private=False).update(
                {ShoppingList.owner_id: None}, synchronize_session="fetch")

            # 4. remove dependent rows
            for share in PaymentShare.query.filter_by(user_id=user_id).all():
                db.session.delete(share)
            LedgerService.delete_involving(user_id)
            ProductSuggestion.query.filter_by(created_by_id=user_id).delete(
                synchronize_session="fetch")
            for shopping_list in ShoppingList.query.filter_by(owner_id=user_id, is_private=True).all():
                db.session.delete(shopping_list)

            # 5. the user itself
            db.session.delete(user)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"User {user_id} and dependent records deleted")
