from flask import g
from flask_restful import Resource, Api
from flatshare.extension import db
from flatshare.models import User
from flatshare.exceptions import NotFoundError
from flatshare.schemas.user_schema import UserSchema
from flatshare.service.account_deletion import AccountDeletionService
from flatshare.utils.decorators import login_required
from flatshare.utils.helper import no_content
from . import user_bp

api = Api(user_bp)

user_schema = UserSchema()


def visible_user(current_user, user_id):
    """Users can see themselves and members of their own group."""
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    if user.id != current_user.id and (
        current_user.group_id is None or user.group_id != current_user.group_id
    ):
        raise NotFoundError("User not found")
    return user


class UserResource(Resource):
    @login_required
    def get(self, user_id):
        return user_schema.dump(visible_user(g.current_user, user_id)), 200


class UserPermissionResource(Resource):
    @login_required
    def get(self, user_id):
        user = visible_user(g.current_user, user_id)
        return {"permission": user.permission}, 200


class MyDeletionStatusResource(Resource):
    @login_required
    def get(self):
        return AccountDeletionService.check_deletion_status(g.current_user).to_dict(), 200


class UserDeletionStatusResource(Resource):
    @login_required
    def get(self, user_id):
        user = visible_user(g.current_user, user_id)
        return AccountDeletionService.check_deletion_status(user).to_dict(), 200


class MyAccountResource(Resource):
    @login_required
    def delete(self):
        AccountDeletionService.delete_account(g.current_user)
        return no_content()


api.add_resource(MyDeletionStatusResource, "/users/me/deletion-status")
api.add_resource(MyAccountResource, "/users/me")
api.add_resource(UserResource, "/users/<int:user_id>")
api.add_resource(UserPermissionResource, "/users/<int:user_id>/permission")
api.add_resource(UserDeletionStatusResource, "/users/<int:user_id>/deletion-status")
