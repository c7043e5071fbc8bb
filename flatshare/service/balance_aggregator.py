from collections import defaultdict
from flatshare.models import User, Payment, PaymentShare
from flatshare.service.ledger import LedgerService
from flatshare.utils.avatars import normalize_avatar_url


class BalanceAggregator:
    """Nets the ledger between one user and every other member of their group."""

    @staticmethod
    def empty_summary():
        return {
            "total_owed_to_you": 0.0,
            "total_you_owe": 0.0,
            "debt_summaries": [],
            "recent_payments": [],
        }

    @staticmethod
    def pair_totals(debts, user_id):
        """Map other-user id -> [what they owe user_id, what user_id owes them]."""
        totals = defaultdict(lambda: [0.0, 0.0])
        for debt in debts:
            if debt.to_user_id == user_id:
                totals[debt.from_user_id][0] += debt.amount
            elif debt.from_user_id == user_id:
                totals[debt.to_user_id][1] += debt.amount
        return totals

    @staticmethod
    def net(owes_you, you_owe):
        difference = owes_you - you_owe
        return max(0.0, difference), max(0.0, -difference)

    @staticmethod
    def debt_summaries(user):
        debts = LedgerService.debts_in_group(user.group_id)
        totals = BalanceAggregator.pair_totals(debts, user.id)

        members = (
            User.query
            .filter(User.group_id == user.group_id, User.id != user.id)
            .order_by(User.id)
            .all()
        )

        summaries = []
        for member in members:
            owes_you, you_owe = totals.get(member.id, (0.0, 0.0))
            final_owes_you, final_you_owe = BalanceAggregator.net(owes_you, you_owe)
            summaries.append({
                "user_id": member.id,
                "username": member.username,
                "avatar_url": normalize_avatar_url(member.avatar_url, member.username),
                "owes_you": final_owes_you,
                "you_owe": final_you_owe,
            })
        return summaries

    @staticmethod
    def recent_payments(group_id):
        """Payments shared with at least one current member of the group, newest first."""
        return (
            Payment.query
            .join(PaymentShare, PaymentShare.payment_id == Payment.id)
            .join(User, User.id == PaymentShare.user_id)
            .filter(User.group_id == group_id)
            .distinct()
            .order_by(Payment.date.desc(), Payment.id.desc())
            .all()
        )

    @staticmethod
    def summary(user):
        if user.group_id is None:
            return BalanceAggregator.empty_summary()

        summaries = BalanceAggregator.debt_summaries(user)
        return {
            "total_owed_to_you": sum((s["owes_you"] for s in summaries), 0.0),
            "total_you_owe": sum((s["you_owe"] for s in summaries), 0.0),
            "debt_summaries": summaries,
            "recent_payments": BalanceAggregator.recent_payments(user.group_id),
        }
