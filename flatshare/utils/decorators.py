from functools import wraps
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask import g
from flatshare.extension import db
from flatshare.models import User


def login_required(fn):
    """
    Verify the bearer token and attach the acting user to g.current_user.
    Resources read g.current_user once and hand it to the services explicitly.
    """
    @wraps(fn)
    def decorator(*args, **kwargs):
        verify_jwt_in_request()
        user_id = get_jwt_identity()

        user = db.session.get(User, int(user_id))
        if not user:
            return {"message": "User not found"}, 401
        g.current_user = user

        return fn(*args, **kwargs)
    return decorator
