from flask_restful import Resource, Api
from flask_jwt_extended import create_access_token
from flatshare.models import User
from flatshare.exceptions import AuthError
from flatshare.schemas.auth_schema import LoginSchema
from flatshare.schemas.user_schema import UserSchema
from flatshare.utils.helper import load_json
from . import auth_bp

api = Api(auth_bp)

login_schema = LoginSchema()
user_schema = UserSchema()


class Login(Resource):
    def post(self):
        data = load_json(login_schema)

        user = User.query.filter_by(email=data["email"].strip().lower()).first()
        if not user:
            raise AuthError("This email address is not registered.")
        if not user.check_password(data["password"]):
            raise AuthError("The password is incorrect. Please try again.")

        access_token = create_access_token(identity=str(user.id), additional_claims={"email": user.email})

        return {
            "access_token": access_token,
            "user": user_schema.dump(user),
            "has_group": user.group_id is not None
        }, 200


api.add_resource(Login, '/auth/login')
