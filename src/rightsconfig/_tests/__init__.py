# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    rightsconfig - some common code for testing
"""


from rightsconfig.constants.controls import (
    CONTROL_HEADER,
    CONTROL_LIST,
    CONTROL_SELECT,
    CONTROL_SELECTLIST,
    HINT_ALL_CHECKBOX,
)
from rightsconfig.rights import RightConfig


LEVELS = {0: "None", 1: "Read", 2: "Write"}


class SampleRightConfig(RightConfig):
    """a rights config using every control type"""

    def init(self):
        self.add_item("general", "General", CONTROL_HEADER)
        self.add_item("send_sms", "Can send SMS")
        self.add_item("level", "Access level", CONTROL_SELECT, dict(options=LEVELS))
        self.add_item("blog", "Blogs", CONTROL_LIST, dict(items={1: "News", 2: "Team"}, hint1=HINT_ALL_CHECKBOX))
        self.add_item("type", "Item types", CONTROL_SELECTLIST, dict(items={"page": "Pages"}, options=LEVELS))


def make_right_config(*items, app_id="test", cfg=None):
    """create a RightConfig with the given items, each a tuple of add_item() arguments"""

    class TestRightConfig(RightConfig):
        def init(self):
            for item in items:
                self.add_item(*item)

    return TestRightConfig(app_id, cfg=cfg)


def split_html(html):
    """split a rendered form into the table and the script part"""
    table, sep, scripts = str(html).partition("</table>")
    assert sep
    return table, scripts
