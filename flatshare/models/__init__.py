from flatshare.extension import db
from .user import User
from .group import Group
from .payment import Payment, PaymentShare
from .debt import Debt
from .chat_message import ChatMessage
from .shopping_list import ShoppingList, Item
from .product_suggestion import ProductSuggestion
