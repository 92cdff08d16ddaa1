# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - Configuration defaults class
"""


from babel import Locale, parse_locale

from rightsconfig import error

from rightsconfig import log

logging = log.getLogger(__name__)


class ConfigFunctionality:
    """Configuration base class with config class behaviour."""

    def __init__(self):
        """Init Config instance"""
        if self.config_check_enabled:
            self._config_check()

        try:
            self.language_default = parse_locale(self.locale_default)[0]
            self.content_dir = Locale(self.language_default).text_direction
        except Exception:  # noqa
            raise error.ConfigurationError("Invalid locale_default value (give something like 'en_US').")

        if isinstance(self.translation_directories, str):
            self.translation_directories = [self.translation_directories]

    def _config_check(self):
        """Check the config values, raise ConfigurationError for bad ones"""
        if not self.field_namespace or not isinstance(self.field_namespace, str):
            raise error.ConfigurationError("field_namespace must be a non-empty string, e.g. 'app'.")
        for char in "[]":
            if char in self.field_namespace:
                raise error.ConfigurationError(f"field_namespace must not contain {char!r}.")
        if not self.header_tag or not self.header_tag.isalnum():
            raise error.ConfigurationError("header_tag must be a tag name like 'h2'.")
        if self.checkbox_value in (None, ""):
            raise error.ConfigurationError("checkbox_value must not be empty.")
        logging.debug(f"config check passed for {self.__class__.__name__}")


class DefaultConfig(ConfigFunctionality):
    """Configuration defaults for rights forms.

    To change the defaults, subclass and override class attributes::

        class MyConfig(DefaultConfig):
            header_tag = "h3"

    and pass an instance (or the class) to RightConfig(app_id, cfg=...).
    """

    # run _config_check() at init time
    config_check_enabled = True

    # submitted fields are named <field_namespace>[<access_key>]
    field_namespace = "app"

    # tag wrapping the label of header controls if they give none
    header_tag = "h2"

    # value submitted by checked checkboxes if the control gives none
    checkbox_value = 1

    # directories with compiled application translations, None means to use
    # the BABEL_TRANSLATION_DIRECTORIES setting of the flask app
    translation_directories = None

    locale_default = "en"
