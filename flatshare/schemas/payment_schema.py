from marshmallow import EXCLUDE, fields, pre_load, validate
from flatshare.extension import ma
from flatshare.models import Payment
from flatshare.utils.avatars import user_card


class PaymentSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Payment
        load_instance = True
        include_fk = True
        exclude = ("created_at",)

    date = fields.Date(format="%Y-%m-%d")
    paid_by = fields.Method("get_paid_by", dump_only=True)
    shared_with = fields.Method("get_shared_with", dump_only=True)

    def get_paid_by(self, obj):
        # a deleted payer renders as the placeholder user
        return user_card(obj.paid_by)

    def get_shared_with(self, obj):
        return [user_card(share.user) for share in obj.shares if share.user is not None]


# For creating
class PaymentCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1))
    amount = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    date = fields.Date(required=True, format="%Y-%m-%d")
    paid_by_id = fields.Integer(required=False, allow_none=True)
    image_url = fields.String(required=False, allow_none=True)
    shared_with = fields.List(fields.Integer(), required=True)

    @pre_load
    def strip_title(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("title"), str):
            data = {**data, "title": data["title"].strip()}
        return data
