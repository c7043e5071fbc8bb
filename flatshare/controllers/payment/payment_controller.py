from flask import g
from flask_restful import Resource, Api
from flatshare.extension import db
from flatshare.models import User
from flatshare.exceptions import ForbiddenError, NotFoundError
from flatshare.schemas.payment_schema import PaymentSchema, PaymentCreateSchema
from flatshare.service.payment_splitter import PaymentSplitter
from flatshare.service.balance_aggregator import BalanceAggregator
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import load_json, no_content
from . import payment_bp

api = Api(payment_bp)

# Schemas
payment_schema = PaymentSchema()
payments_schema = PaymentSchema(many=True)
payment_create_schema = PaymentCreateSchema()


def can_access_payment(user, payment):
    """The payer and members of the group the payment was made in."""
    if payment.paid_by_id is not None and payment.paid_by_id == user.id:
        return True
    return payment.group_id is not None and payment.group_id == user.group_id


def resolve_payer(current_user, paid_by_id):
    if paid_by_id is None or paid_by_id == current_user.id:
        return current_user

    payer = db.session.get(User, paid_by_id)
    if not payer:
        raise NotFoundError(f"Payer with id {paid_by_id} not found")
    if current_user.group_id is None or payer.group_id != current_user.group_id:
        raise ForbiddenError("You can only record payments for members of your group")
    return payer


class PaymentResource(Resource):

    @login_required
    def get(self):
        current_user = g.current_user
        if current_user.group_id is None:
            return [], 200
        payments = PaymentSplitter.payments_for_group(current_user.group_id)
        return payments_schema.dump(payments), 200

    @login_required
    def post(self):
        current_user = g.current_user
        data = load_json(payment_create_schema)

        payer = resolve_payer(current_user, data.get("paid_by_id"))
        payment = PaymentSplitter.create_payment(
            payer=payer,
            title=data["title"],
            amount=data["amount"],
            date=data["date"],
            participant_ids=data["shared_with"],
            image_url=data.get("image_url")
        )
        return payment_schema.dump(payment), 201


class PaymentDetailResource(Resource):

    @login_required
    def get(self, payment_id):
        payment = PaymentSplitter.get(payment_id)
        if not can_access_payment(g.current_user, payment):
            raise NotFoundError(f"Payment {payment_id} not found")
        return payment_schema.dump(payment), 200

    @login_required
    def delete(self, payment_id):
        payment = PaymentSplitter.get(payment_id)
        if not can_access_payment(g.current_user, payment):
            raise ForbiddenError("Access denied")

        PaymentSplitter.delete_payment(payment)
        return no_content()


class PaymentSummaryResource(Resource):

    @login_required
    def get(self):
        summary = BalanceAggregator.summary(g.current_user)
        summary["recent_payments"] = payments_schema.dump(summary["recent_payments"])
        return summary, 200


api.add_resource(PaymentResource, "/payments")
api.add_resource(PaymentSummaryResource, "/payments/summary")
api.add_resource(PaymentDetailResource, "/payments/<int:payment_id>")
