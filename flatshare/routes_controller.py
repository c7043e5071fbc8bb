from flatshare.controllers.auth import auth_bp
from flatshare.controllers.user import user_bp
from flatshare.controllers.group import group_bp
from flatshare.controllers.payment import payment_bp
from flatshare.controllers.debt import debt_bp
from flatshare.controllers.chat import chat_bp
from flatshare.controllers.shopping_list import shopping_list_bp
from flatshare.controllers.suggestion import suggestion_bp



def register_routes(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(group_bp)
    app.register_blueprint(payment_bp)
    app.register_blueprint(debt_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(shopping_list_bp)
    app.register_blueprint(suggestion_bp)
