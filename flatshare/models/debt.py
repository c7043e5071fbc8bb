from datetime import datetime
from flatshare.extension import db


class Debt(db.Model):
    """
    One-way, unsettled obligation: `debtor` owes `creditor` `amount`.
    Rows are never updated; settling deletes them.
    """
    __tablename__ = "debts"
    __table_args__ = (
        db.CheckConstraint("from_user_id <> to_user_id", name="ck_debts_distinct_parties"),
    )

    id = db.Column(db.Integer, primary_key=True)
    from_user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    to_user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    reason = db.Column(db.String(255), nullable=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id"), nullable=True)
    payment_id = db.Column(db.Integer, db.ForeignKey("payments.id"), nullable=True)

    # Relationships
    debtor = db.relationship("User", foreign_keys=[from_user_id])
    creditor = db.relationship("User", foreign_keys=[to_user_id])
    payment = db.relationship("Payment", back_populates="debts")
