# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - access rights configuration of an application

An interface between an application and the admin UI managing access rights.

To allow custom access configuration for an application, subclass
RightConfig, override init() and use add_item() to add controls to the
form. The default implementation of get_html() builds the form for you.
If you need custom controls, see ControlRenderer.

Normally the system keeps access_key -> value pairs in a centralized storage.
An application may choose to keep all or some of its access keys in its own
storage. get_rights() and set_rights() are hooks called when an admin
manages the application access of a contact or group, they decide whether a
given key -> value pair is stored by the system or by the application.
"""


from collections import namedtuple

from markupsafe import Markup

from rightsconfig.config import get_config
from rightsconfig.constants.controls import (
    CLASS_TABLE,
    CLASS_TABLE_GROUP,
    CONTROL_CHECKBOX,
    CONTROL_LIST,
    CONTROL_SELECT,
    CONTROL_SELECTLIST,
    HINT_ALL_CHECKBOX,
)
from rightsconfig.controls import ControlRenderer, EMPTY
from rightsconfig.error import ConfigurationError, UnknownControlError
from rightsconfig.i18n import _, app_gettext
from rightsconfig.templating import render_scripts

from rightsconfig import log

logging = log.getLogger(__name__)


ControlItem = namedtuple("ControlItem", "name label type params")


class RightConfig(ControlRenderer):
    """
    Access rights configuration of one application.

    Correct subclassing looks like this::

        class BlogRightConfig(RightConfig):
            def init(self):
                self.add_item("add_post", "Can add posts")
                self.add_item("blog", "Blogs", "list", dict(items={1: "News", 2: "Team"}, hint1="all_checkbox"))

        BlogRightConfig("blog").get_html(rights, inherited)
    """

    def __init__(self, app_id, cfg=None):
        """
        :param app_id: id of the application, also the gettext domain of the labels
        :param cfg: config instance or class, default DefaultConfig
        """
        if not app_id:
            raise ConfigurationError("RightConfig needs the id of the application it configures.")
        self.app_id = app_id
        self.cfg = get_config(cfg)
        self.items = []
        self._gettext = app_gettext(app_id, self.cfg.translation_directories)
        self.init()
        logging.debug(f"{self.__class__.__name__} for {app_id!r} has {len(self.items)} items")

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.app_id!r}: {len(self.items)} items>"

    def init(self):
        """
        Override in subclass to add the controls of the form, see add_item().
        """

    def add_item(self, name, label, type=CONTROL_CHECKBOX, params=None):
        """
        Add one control to the form that the default implementation of get_html() returns.

        Type checkbox:
        - cssclass: CSS class for <tr>
        - value: value submitted if checked, default cfg.checkbox_value

        Type select:
        - cssclass: CSS class for <tr>
        - options: dict value -> human readable name, values are ints.
          Effective value is the maximum of own and inherited value.

        Type list - list of checkboxes with label being a header above them:
        - cssclass: CSS class for <tr>
        - items: dict id -> human readable name, checkboxes to show in the list,
          access_key of a checkbox is name.id
        - hint1: text to show above left checkbox column;
          "all_checkbox" shows a checkbox to check everything at once, its
          status is saved with access_key name.all
        - hint2: text to show above right checkbox column, if it is present
        - value: value submitted by checked items

        Type selectlist - list of selects with label being a header above them:
        - cssclass, items, hint1, hint2: see list
        - options: see select, shared by all items

        Type header - a row with the label only:
        - cssclass: CSS class for <tr>
        - tag: tag to wrap the label in, default cfg.header_tag

        :param name: access_key to store
        :param label: human readable name of the control, translated in the domain of the app
        :param type: control type
        :param params: dict of parameters for the control type, see above
        """
        if not isinstance(label, Markup):
            label = self._gettext(label)
        self.items.append(ControlItem(name, label, type, dict(params or {})))

    def get_rights(self, contact_id):
        """
        Return custom access rights managed by the application for a contact id
        (not considering the groups it is in) or a list of group ids.
        Applications using their own rights storage must override this.

        :param contact_id: contact id (positive int) or a list of group ids (positive ints)
        :returns: dict access_key -> value; for group ids the aggregated rights
                  are returned, as if for a member of all the groups.
        """
        return {}

    def set_rights(self, contact_id, right, value=None):
        """
        Update custom rights storage for contact_id, setting access_key right to value.

        :param contact_id: contact id (if positive) or group id (if negative)
        :param right: access_key to set value for
        :param value: value to save
        :returns: False to write key and value to the system storage,
                  True if the application keeps it in its own storage.
        """
        return False

    def clear_rights(self, contact_id):
        """
        Remove all custom access rights of a contact or group.

        :param contact_id: contact id (if positive) or group id (if negative)
        """

    def set_default_rights(self, contact_id):
        """
        Set default access for a new contact.

        :param contact_id: contact id
        :returns: dict access_key -> value to put into the system storage
        """
        return {}

    def get_html(self, rights=None, inherited=None):
        """
        Return HTML to include into a page to customize access to the application.

        :param rights: dict access_key -> value of both system-managed and app-managed rights
        :param inherited: dict access_key -> value of rights inherited from the groups
                          the contact is in. None does not show the group UI at all
                          (e.g. when managing the access of a group).
        :returns: Markup with the form table and its scripts
        """
        rights = rights or {}
        html = [self._table_start_html(inherited)]
        all_checkbox_script = False
        select_script = False
        for item in self.items:
            try:
                html.append(self.get_item_html(item.name, item.label, item.type, item.params, rights, inherited))
            except UnknownControlError as err:
                logging.error(f"rights form of {self.app_id!r}, item {item.name!r}: {err}")
                raise
            if item.type == CONTROL_LIST and item.params.get("hint1") == HINT_ALL_CHECKBOX:
                all_checkbox_script = True
            if inherited is not None and item.type in (CONTROL_SELECT, CONTROL_SELECTLIST):
                select_script = True
        html.append(Markup("</table>"))
        logging.debug(
            f"rendered rights form of {self.app_id!r}: select_script={select_script}, "
            f"all_checkbox_script={all_checkbox_script}"
        )
        html.append(render_scripts(select_script=select_script, all_checkbox_script=all_checkbox_script))
        return EMPTY.join(html)

    def _table_start_html(self, inherited):
        if inherited is None:
            return Markup('<table class="{} {}">').format(CLASS_TABLE, CLASS_TABLE_GROUP)
        return Markup(
            '<table class="{}"><tr><th></th><th width="1%">{}</th><th width="1%">{}</th><th width="1%">{}</th></tr>'
        ).format(CLASS_TABLE, _("Effective rights"), _("Granted personally"), _("Inherited from groups"))
