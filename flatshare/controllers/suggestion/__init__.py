from flask import Blueprint

suggestion_bp = Blueprint('suggestion_bp', __name__)


from .suggestion import *
