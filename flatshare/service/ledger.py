import logging
from datetime import datetime
from sqlalchemy import or_, and_
from flatshare.extension import db
from flatshare.models import Debt
from flatshare.exceptions import ValidationError, NotFoundError

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Append-only store of unsettled debts.
    Debts are never updated: a debt is either present or deleted.
    Methods add to / delete from the session; committing is up to the caller.
    """

    @staticmethod
    def create_debt(debtor, creditor, amount, reason, group_id, payment=None):
        if debtor.id == creditor.id:
            raise ValidationError("A debt needs two different users")
        if amount is None or amount <= 0:
            raise ValidationError("Debt amount must be positive")

        debt = Debt(
            debtor=debtor,
            creditor=creditor,
            amount=amount,
            reason=reason,
            group_id=group_id,
            payment=payment,
            timestamp=datetime.utcnow()
        )
        db.session.add(debt)
        return debt

    @staticmethod
    def get(debt_id):
        debt = db.session.get(Debt, debt_id)
        if not debt:
            raise NotFoundError(f"Debt {debt_id} not found")
        return debt

    @staticmethod
    def delete_by_id(debt_id):
        debt = LedgerService.get(debt_id)
        db.session.delete(debt)
        return debt

    @staticmethod
    def delete_by_payment(payment):
        debts = list(payment.debts)
        for debt in debts:
            db.session.delete(debt)
        return len(debts)

    @staticmethod
    def settle_between(user_a_id, user_b_id):
        """Remove every debt between two users, in both directions."""
        debts = Debt.query.filter(
            or_(
                and_(Debt.from_user_id == user_a_id, Debt.to_user_id == user_b_id),
                and_(Debt.from_user_id == user_b_id, Debt.to_user_id == user_a_id),
            )
        ).all()
        for debt in debts:
            db.session.delete(debt)

        logger.info(f"Settled {len(debts)} debt(s) between users {user_a_id} and {user_b_id}")
        return len(debts)

    @staticmethod
    def delete_involving(user_id):
        debts = LedgerService.debts_involving(user_id)
        for debt in debts:
            db.session.delete(debt)
        return len(debts)

    @staticmethod
    def debts_involving(user_id):
        return (
            Debt.query
            .filter(or_(Debt.from_user_id == user_id, Debt.to_user_id == user_id))
            .order_by(Debt.timestamp.desc(), Debt.id.desc())
            .all()
        )

    @staticmethod
    def debts_in_group(group_id):
        return Debt.query.filter_by(group_id=group_id).all()
