from flask import Flask
from config import Config

from extensions import init_supabase, init_password_reset_service
from utils.logging_config import configure_logging

from blueprints.admin import admin_bp

from flask_cors import CORS

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config.get('LOG_LEVEL', 'INFO'), app.config.get('LOG_JSON', False))

    CORS(app,
         supports_credentials=True,
         origins="*",
         methods=['POST', 'OPTIONS'],
         allow_headers=['Content-Type', 'Authorization', 'Accept', 'Origin'],
         expose_headers=['Content-Type']
    )

    # Initialize extensions
    init_supabase(app)
    init_password_reset_service(app)

    # Register blueprints
    app.register_blueprint(admin_bp, url_prefix="/admin")

    return app


if __name__ == "__main__":
    create_app().run(port=5001)
