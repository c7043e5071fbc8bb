from flask import g
from flask_restful import Resource, Api, reqparse
from flatshare.extension import db
from flatshare.exceptions import ForbiddenError
from flatshare.schemas.debt_schema import DebtSchema
from flatshare.service.ledger import LedgerService
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import no_content
from . import debt_bp

api = Api(debt_bp)

# Schemas
debts_schema = DebtSchema(many=True)


class DebtResource(Resource):

    @login_required
    def get(self):
        debts = LedgerService.debts_involving(g.current_user.id)
        return debts_schema.dump(debts), 200


class SettleDebtsResource(Resource):

    @login_required
    def delete(self):
        parser = reqparse.RequestParser()
        parser.add_argument("from_user_id", type=int, required=True, location="args")
        parser.add_argument("to_user_id", type=int, required=True, location="args")
        args = parser.parse_args()

        current_user = g.current_user
        if current_user.id not in (args["from_user_id"], args["to_user_id"]):
            raise ForbiddenError("You can only settle debts you are part of")

        LedgerService.settle_between(args["from_user_id"], args["to_user_id"])
        db.session.commit()
        return no_content()


api.add_resource(DebtResource, "/debts")
api.add_resource(SettleDebtsResource, "/debts/settle")
