from marshmallow import fields
from flatshare.extension import ma
from flatshare.models import Group
from flatshare.schemas.user_schema import UserSchema


class GroupSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Group
        load_instance = True
        dump_only = ("id", "join_code", "created_at")

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")
    members = fields.List(
        fields.Nested(UserSchema, only=("id", "username", "avatar_url", "permission")),
        dump_only=True
    )


class GroupCreateSchema(ma.Schema):
    name = fields.String(required=True)


class JoinGroupSchema(ma.Schema):
    join_code = fields.String(required=True)
