# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - Flask application setup.

Rights forms translate their labels with Flask-Babel, which needs a Flask
application. Host applications call i18n_init() on their own app; the CLI
and the tests use create_app().
"""

from os import path

from flask import Flask

from rightsconfig.config import get_config
from rightsconfig.i18n import i18n_init

from rightsconfig import log

logging = log.getLogger(__name__)


def create_app(config=None):
    """
    Simple wrapper around create_app_ext().
    """
    return create_app_ext(flask_config_file=config)


def create_app_ext(flask_config_file=None, flask_config_dict=None, rights_config_class=None):
    """
    Factory for Flask apps rendering rights forms.

    :param flask_config_file: A Flask config file name (may define a RIGHTSCONFIG_CONFIG class).
                              If not given, a config pointed to by the RIGHTSCONFIGCFG env var
                              will be loaded (if possible).
    :param flask_config_dict: A dict used to update the Flask config (applied after
                              flask_config_file was loaded, if given).
    :param rights_config_class: If given, this class is instantiated as app.cfg;
                                otherwise, RIGHTSCONFIG_CONFIG from the Flask config is used.
                                If that is also not present, DefaultConfig is used.
    """
    logging.debug("running create_app_ext")
    app = Flask("rightsconfig")
    if flask_config_file:
        app.config.from_pyfile(path.abspath(flask_config_file))
    else:
        app.config.from_envvar("RIGHTSCONFIGCFG", silent=True)
    if flask_config_dict:
        app.config.update(flask_config_dict)
    Config = rights_config_class or app.config.get("RIGHTSCONFIG_CONFIG")
    app.cfg = get_config(Config)
    if app.cfg.translation_directories:
        app.config.setdefault("BABEL_TRANSLATION_DIRECTORIES", ";".join(app.cfg.translation_directories))
    i18n_init(app, app.cfg.locale_default)
    return app
