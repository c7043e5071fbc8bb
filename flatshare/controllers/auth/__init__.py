from flask import Blueprint

auth_bp = Blueprint('auth_bp', __name__)


from .register import *
from .login import *
from .me import *
