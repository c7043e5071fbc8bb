import logging
from flatshare.extension import db
from flatshare.models import Payment, PaymentShare, User
from flatshare.exceptions import ValidationError, NotFoundError
from flatshare.service.ledger import LedgerService

logger = logging.getLogger(__name__)


class PaymentSplitter:
    """
    Turns one payment into PaymentShares plus the debts each sharer owes the payer.
    The split is a plain equal division; remainders are not redistributed.
    """

    @staticmethod
    def unique_ids(participant_ids):
        seen = []
        for user_id in participant_ids or []:
            if user_id not in seen:
                seen.append(user_id)
        return seen

    @staticmethod
    def create_payment(payer, title, amount, date, participant_ids, image_url=None):
        if payer.group_id is None:
            raise ValidationError("Join a group before recording a payment")
        title = (title or "").strip()
        if not title:
            raise ValidationError("Payment title must not be empty")
        participant_ids = PaymentSplitter.unique_ids(participant_ids)
        if not participant_ids:
            raise ValidationError("Payment must be shared with at least one person.")
        if amount is None or amount <= 0:
            raise ValidationError("Payment amount must be positive")

        amount_per_user = amount / len(participant_ids)
        group_id = payer.group_id

        try:
            payment = Payment(
                title=title,
                amount=amount,
                date=date,
                paid_by=payer,
                group_id=group_id,
                image_url=image_url
            )
            db.session.add(payment)
            db.session.flush()

            for user_id in participant_ids:
                participant = db.session.get(User, user_id)
                if not participant:
                    raise NotFoundError(f"User {user_id} to share the payment with was not found")

                db.session.add(PaymentShare(payment=payment, user=participant))

                if participant.id != payer.id:
                    LedgerService.create_debt(
                        debtor=participant,
                        creditor=payer,
                        amount=amount_per_user,
                        reason=payment.title,
                        group_id=group_id,
                        payment=payment
                    )

            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(
            f"Payment {payment.id} '{title}' of {amount:.2f} by user {payer.id} "
            f"split between {len(participant_ids)} participant(s)"
        )
        return payment

    @staticmethod
    def get(payment_id):
        payment = db.session.get(Payment, payment_id)
        if not payment:
            raise NotFoundError(f"Payment {payment_id} not found")
        return payment

    @staticmethod
    def delete_payment(payment):
        """Remove a payment with its debts and shares in one transaction."""
        payment_id = payment.id
        try:
            removed = LedgerService.delete_by_payment(payment)
            for share in list(payment.shares):
                db.session.delete(share)
            db.session.delete(payment)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Payment {payment_id} deleted together with {removed} debt(s)")

    @staticmethod
    def payments_for_group(group_id):
        return (
            Payment.query
            .filter_by(group_id=group_id)
            .order_by(Payment.date.desc(), Payment.id.desc())
            .all()
        )
