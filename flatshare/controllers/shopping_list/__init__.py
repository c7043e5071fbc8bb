from flask import Blueprint

shopping_list_bp = Blueprint('shopping_list_bp', __name__)


from .shopping_list import *
from .item import *
