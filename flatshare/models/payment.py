from datetime import datetime
from flatshare.extension import db


class Payment(db.Model):
    __tablename__ = "payments"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    date = db.Column(db.Date, nullable=False)
    image_url = db.Column(db.String(512), nullable=True)  # receipt
    # nulled when the payer deletes their account
    paid_by_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id"), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    paid_by = db.relationship("User", foreign_keys=[paid_by_id])
    shares = db.relationship("PaymentShare", back_populates="payment", order_by="PaymentShare.id")
    debts = db.relationship("Debt", back_populates="payment")


class PaymentShare(db.Model):
    __tablename__ = "payment_shares"

    id = db.Column(db.Integer, primary_key=True)
    payment_id = db.Column(db.Integer, db.ForeignKey("payments.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)

    # Relationships
    payment = db.relationship("Payment", back_populates="shares")
    user = db.relationship("User")
