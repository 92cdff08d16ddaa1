# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - configuration
"""

from rightsconfig.config.default import DefaultConfig  # noqa


def get_config(cfg=None):
    """return a config instance for cfg (None, a config class or a config instance)"""
    if cfg is None:
        return DefaultConfig()
    if isinstance(cfg, type):
        return cfg()
    return cfg
