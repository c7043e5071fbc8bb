from flask import Blueprint

group_bp = Blueprint('group_bp', __name__)


from .group import *
