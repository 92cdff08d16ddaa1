# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - common helpers for rightsconfig.cli tests.
"""

from rightsconfig.rights import RightConfig


class BogusRightConfig(RightConfig):
    """a rights config with a control of unknown type"""

    def init(self):
        self.add_item("send_sms", "Can send SMS")
        self.add_item("x", "X", "bogus")
