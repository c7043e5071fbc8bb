from marshmallow import fields, post_dump
from flatshare.extension import ma
from flatshare.models import User
from flatshare.utils.avatars import normalize_avatar_url
from flatshare.schemas.auth_schema import USERNAME_VALIDATORS


class UserSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = User
        load_instance = True
        include_fk = True  # group_id
        exclude = ("password_hash",)

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")

    @post_dump
    def normalize_avatar(self, data, **kwargs):
        if "avatar_url" in data:
            data["avatar_url"] = normalize_avatar_url(data.get("avatar_url"), data.get("username"))
        return data


# For PATCH /me
class ProfileUpdateSchema(ma.Schema):
    username = fields.String(validate=USERNAME_VALIDATORS)
    avatar_url = fields.String(allow_none=True)
    paypal_email = fields.Email(allow_none=True)
