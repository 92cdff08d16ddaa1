# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - i18n (internationalization) and l10n (localization) support

To use this, please use exactly this line (no less, no more)::

    from rightsconfig.i18n import _, L_, N_

    # _ == gettext
    # N_ == ngettext
    # L_ == lazy_gettext

Labels of rights form controls belong to the application the form is for.
They are translated in a separate gettext domain named after the
application id, see app_gettext().
"""


import os

from babel import Locale

from flask import current_app, request
from flask_babel import Babel, Domain, gettext, ngettext, lazy_gettext

from rightsconfig import log

logging = log.getLogger(__name__)


_ = gettext
N_ = ngettext
L_ = lazy_gettext

# (app_id, translation_directories) -> Domain, domains cache their translations per locale
_domains = {}


def i18n_init(app, default_locale="en"):
    """initialize Flask-Babel"""
    app.config.setdefault("BABEL_DEFAULT_LOCALE", default_locale)
    Babel(app, locale_selector=get_locale)


def get_locale():
    """return the best matching locale for the current request"""
    locale = None
    supported_locales = [Locale("en")] + current_app.extensions["babel"].instance.list_translations()
    supported_locales += list_app_translations()
    supported_languages = list(dict.fromkeys(str(locale) for locale in supported_locales))
    logging.debug(f"supported_languages = {supported_languages!r}")
    try:
        locale = request.accept_languages.best_match(supported_languages)
        logging.debug(f"best match locale = {locale!r}")
    except RuntimeError:  # CLI call has no valid request context
        pass
    if not locale:
        locale = current_app.config["BABEL_DEFAULT_LOCALE"]
        logging.debug(f"default locale = {locale!r}")
    return locale


def get_domain(app_id, translation_directories=None):
    """return the translation Domain of application app_id"""
    if isinstance(translation_directories, str):
        translation_directories = (translation_directories,)
    elif translation_directories is not None:
        translation_directories = tuple(translation_directories)
    key = (app_id, translation_directories)
    try:
        return _domains[key]
    except KeyError:
        domain = _domains[key] = Domain(translation_directories=translation_directories, domain=app_id)
        logging.debug(f"created translation domain for {app_id!r}")
        return domain


def app_gettext(app_id, translation_directories=None):
    """return a lazy gettext function translating in the domain of application app_id

    Translation happens when the returned string is rendered, so labels can
    be defined outside of a request.
    """
    return get_domain(app_id, translation_directories).lazy_gettext


def list_app_translations():
    """return the locales the application domains have translations for

    Only domains created with their own translation_directories are searched,
    the others use the BABEL_TRANSLATION_DIRECTORIES of the Flask app.
    """
    result = []
    for app_id, translation_directories in _domains:
        for dirname in translation_directories or ():
            if not os.path.isdir(dirname):
                continue
            for folder in os.listdir(dirname):
                if os.path.isfile(os.path.join(dirname, folder, "LC_MESSAGES", f"{app_id}.mo")):
                    result.append(Locale.parse(folder))
    return result
