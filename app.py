import os
import logging
from datetime import datetime, timezone
from dotenv import load_dotenv
load_dotenv()
from flask import Flask, jsonify, current_app
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from config import config_dict
from models import db
from classes.validators import ValidationError
from utils.helpers import error_response
from routes.authentication import auth_bp
from routes.students import student_bp
from routes.topics import topic_bp
from routes.quizzes import quiz_bp
from routes.tests import test_bp
from routes.admin import admin_bp

migrate = Migrate()


def create_app(config_name=None):
    app = Flask(__name__)

    env = config_name or os.environ.get("FLASK_ENV", "production")
    app.config.from_object(config_dict.get(env, config_dict["production"]))

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(app, resources={r"/api/*": {"origins": app.config["ALLOWED_ORIGINS"]}}, supports_credentials=True)

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(student_bp, url_prefix='/api/students')
    app.register_blueprint(topic_bp, url_prefix='/api/topics')
    app.register_blueprint(quiz_bp, url_prefix='/api/quizzes')
    app.register_blueprint(test_bp, url_prefix='/api/tests')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    register_routes(app)
    register_error_handlers(app)

    app.logger.info("Environment: %s", env)
    return app


def register_routes(app):
    @app.route('/health')
    def health():
        return jsonify({"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()})

    @app.route('/api')
    def api_info():
        return jsonify({
            "name": app.config["API_NAME"],
            "version": app.config["API_VERSION"],
            "status": "running",
        })


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return error_response("VALIDATION_ERROR", error.message, error.details)

    @app.errorhandler(404)
    def handle_not_found(error):
        return error_response("NOT_FOUND", "Route not found")

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({
            "success": False,
            "error": {"code": error.name.upper().replace(" ", "_"), "message": error.description},
        })
        return response, error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception("Unhandled error: %s", error)
        db.session.rollback()
        return error_response("INTERNAL_ERROR", "An unexpected error occurred")


app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config['DEBUG'])
