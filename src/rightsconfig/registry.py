# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - registry of application rights configurations.

An application that wants custom access configuration registers a factory
(usually its RightConfig subclass) under its application id. The admin UI
looks up the application id and gets a RightConfig instance or None if the
application has no custom access configuration.
"""


from collections import namedtuple
from importlib import import_module

from rightsconfig.error import ConfigurationError

from rightsconfig import log

logging = log.getLogger(__name__)


class RightConfigRegistry:
    class Entry(namedtuple("Entry", "app_id factory")):
        def __call__(self, *args, **kw):
            return self.factory(self.app_id, *args, **kw)

    def __init__(self):
        self._entries = {}

    def __repr__(self):
        return f"<{self.__class__.__name__}: {list(self._entries.values())!r}>"

    def __contains__(self, app_id):
        return app_id in self._entries

    def app_ids(self):
        """return the ids of all registered applications, sorted"""
        return sorted(self._entries)

    def register(self, app_id, factory):
        """
        Register a factory for an application.

        :param app_id: id of the application
        :param factory: callable taking app_id and cfg, returning a RightConfig
        """
        entry = self.Entry(app_id, factory)
        old_entry = self._entries.get(app_id)
        if old_entry is not None:
            if old_entry.factory is factory:
                return
            raise ConfigurationError(f"Application {app_id!r} already has a rights config: {old_entry.factory!r}")
        self._entries[app_id] = entry
        logging.debug(f"registered rights config {factory!r} for {app_id!r}")

    def unregister(self, app_id):
        """
        Unregister the factory of an application.

        :param app_id: id of the application
        """
        try:
            del self._entries[app_id]
        except KeyError:
            raise ValueError(app_id) from None

    def get(self, app_id, cfg=None):
        """
        Create the RightConfig of an application.

        :returns: RightConfig instance or None if app_id has no rights config
        """
        entry = self._entries.get(app_id)
        if entry is None:
            return None
        return entry(cfg=cfg)


registry = RightConfigRegistry()


def register_right_config(app_id, registry=registry):
    """class decorator registering a RightConfig subclass for app_id"""

    def wrap(cls):
        registry.register(app_id, cls)
        return cls

    return wrap


def load_right_config(config_path):
    """
    Import a RightConfig class given as "package.module:ClassName".

    :raises ConfigurationError: if config_path is malformed or can't be imported
    """
    module_name, sep, class_name = config_path.partition(":")
    if not sep or not module_name or not class_name:
        raise ConfigurationError(
            f"Invalid rights config {config_path!r} (give something like 'myapp.rights:MyRightConfig')."
        )
    try:
        module = import_module(module_name)
    except ImportError:
        raise ConfigurationError(f"Can't import module {module_name!r} of rights config {config_path!r}.")
    try:
        return getattr(module, class_name)
    except AttributeError:
        raise ConfigurationError(f"Module {module_name!r} has no rights config {class_name!r}.") from None
