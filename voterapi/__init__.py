from dotenv import load_dotenv
from flask import Flask
from flasgger import Swagger

from .config import Config
from .errors import register_error_handlers
from .extensions import cors
from .middleware.request_id import init_request_id
from .store import VoterStore
from .swagger_config import swagger_template

load_dotenv()

def create_app(config_class=Config, store: VoterStore | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])
    Swagger(app, template=swagger_template(app))

    # Extensions
    cors.init_app(app, origins=app.config["CORS_ORIGINS"])

    # One store per application, created empty
    app.extensions["voter_store"] = store if store is not None else VoterStore()

    # Middleware + errors
    init_request_id(app)
    register_error_handlers(app)

    # Blueprint imports
    from .api.voter.routes import voter_bp
    from .api.system.routes import system_bp

    # Blueprints
    app.register_blueprint(voter_bp, url_prefix="/voter")
    app.register_blueprint(system_bp)

    return app
