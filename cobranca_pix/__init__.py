from flask import Flask
from cobranca_pix.routes.auth import auth_bp
from cobranca_pix.routes.pix import pix_bp
from cobranca_pix.error import register_erro_handlers
from cobranca_pix.brute_force import limiter


def create_api(testing=False):
    app = Flask('cobranca_pix')

    if testing:
        app.config['TESTING'] = True
        app.config['RATELIMIT_ENABLED'] = False

    limiter.init_app(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(pix_bp, url_prefix='/pix')

    register_erro_handlers(app)

    return app
