from flask import g
from flask_restful import Resource, Api
from flatshare.extension import db
from flatshare.schemas.user_schema import UserSchema, ProfileUpdateSchema
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import load_json
from . import auth_bp

api = Api(auth_bp)

user_schema = UserSchema()
profile_update_schema = ProfileUpdateSchema()


class MeResource(Resource):
    @login_required
    def get(self):
        return user_schema.dump(g.current_user), 200

    @login_required
    def patch(self):
        user = g.current_user
        data = load_json(profile_update_schema)

        for field in ["username", "avatar_url", "paypal_email"]:
            if field in data:
                setattr(user, field, data[field])

        db.session.commit()
        return user_schema.dump(user), 200


api.add_resource(MeResource, '/me')
