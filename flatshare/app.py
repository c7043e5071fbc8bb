import logging
import os
from datetime import timedelta
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import upgrade
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException
from flatshare.extension import db, migrate, jwt, ma
from flatshare.routes_controller import register_routes

load_dotenv()

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "migrations")


def cors_origins():
    origins = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in origins.split(",") if origin.strip()]


def create_app(config=None):
    app = Flask(__name__)
    CORS(app,
         supports_credentials=True,
         origins=cors_origins(),
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
         allow_headers=["Content-Type", "Authorization"],
         expose_headers=["Authorization"],
         max_age=3600
    )

    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///flatshare.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {"pool_pre_ping": True}
    app.config["JWT_SECRET_KEY"] = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(hours=24)
    app.config["JWT_TOKEN_LOCATION"] = ["headers"]
    app.config["JWT_HEADER_NAME"] = "Authorization"
    app.config["JWT_HEADER_TYPE"] = "Bearer"
    # jwt errors raised inside flask-restful resources must reach the jwt handlers
    app.config["PROPAGATE_EXCEPTIONS"] = True
    app.config["ERROR_404_HELP"] = False
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    jwt.init_app(app)
    ma.init_app(app)

    register_routes(app)
    register_error_handlers(app)
    register_jwt_handlers()

    @app.route('/')
    def home():
        return {"message": "Welcome to the flatshare API"}

    if not app.config.get("TESTING"):
        with app.app_context():
            upgrade(directory=MIGRATIONS_DIR)
            from flatshare.seed import seed
            seed()

    return app


def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        data = getattr(e, "data", None) or {"message": e.description}
        return jsonify(data), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.error(f"Unhandled error: {e}", exc_info=True)
        db.session.rollback()
        return jsonify({"message": "Internal server error"}), 500


def register_jwt_handlers():

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"message": "Missing authorization token", "error": reason}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"message": "Invalid token", "error": reason}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401
