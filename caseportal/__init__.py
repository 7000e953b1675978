# FILE: caseportal/__init__.py
from flask import Flask
from config import Config
from flask_login import LoginManager
from flask_socketio import SocketIO

# 1. Extensions are declared here and bound to the app inside create_app
login = LoginManager()
socketio = SocketIO()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Socket handlers must be declared before init_app so every app gets them
    from caseportal import events  # noqa: F401

    # 2. Bind extensions
    login.init_app(app)
    socketio.init_app(app, cors_allowed_origins=app.config['SOCKETIO_CORS_ORIGINS'])

    from caseportal.errors import bp as errors_bp
    app.register_blueprint(errors_bp)

    from caseportal.auth import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix='/auth')

    from caseportal.records import bp as records_bp
    app.register_blueprint(records_bp, url_prefix='/api/records')

    from caseportal.messages import bp as messages_bp
    app.register_blueprint(messages_bp, url_prefix='/api/messages')

    from caseportal.iep import bp as iep_bp
    app.register_blueprint(iep_bp, url_prefix='/api/iep')

    from caseportal.questions import bp as questions_bp
    app.register_blueprint(questions_bp, url_prefix='/api/questions')

    from caseportal.main import bp as main_bp
    app.register_blueprint(main_bp)

    return app
