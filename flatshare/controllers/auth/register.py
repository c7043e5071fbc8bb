from flask_restful import Resource, Api
from flask_jwt_extended import create_access_token
from flatshare.models import User
from flatshare.extension import db
from flatshare.exceptions import ValidationError
from flatshare.schemas.auth_schema import RegisterSchema
from flatshare.schemas.user_schema import UserSchema
from flatshare.utils.avatars import random_avatar_url
from flatshare.utils.helper import load_json
from . import auth_bp

api = Api(auth_bp)

register_schema = RegisterSchema()
user_schema = UserSchema()


class Register(Resource):
    def post(self):
        data = load_json(register_schema)

        email = data["email"].strip().lower()
        if User.query.filter_by(email=email).first():
            raise ValidationError("This email address is already in use.")

        user = User(
            username=data["username"].strip(),
            email=email,
            avatar_url=random_avatar_url()
        )
        user.set_password(data["password"])

        db.session.add(user)
        db.session.commit()

        access_token = create_access_token(identity=str(user.id), additional_claims={"email": user.email})
        return {
            "message": "Registration successful",
            "access_token": access_token,
            "user": user_schema.dump(user)
        }, 201


api.add_resource(Register, '/auth/register')
