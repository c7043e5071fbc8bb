from marshmallow import fields
from flatshare.extension import ma
from flatshare.models import Debt
from flatshare.utils.avatars import user_card


class DebtSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Debt
        load_instance = True
        include_fk = True

    timestamp = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")
    debtor = fields.Method("get_debtor", dump_only=True)
    creditor = fields.Method("get_creditor", dump_only=True)

    def get_debtor(self, obj):
        return user_card(obj.debtor)

    def get_creditor(self, obj):
        return user_card(obj.creditor)
