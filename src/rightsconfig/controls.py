# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - rights form controls

Every control registered with RightConfig.add_item() is rendered to one or
more table rows by ControlRenderer.get_item_html(). In subject-edit mode
(inherited rights given) a row has 4 columns: label, effective rights,
personal rights, rights inherited from groups. In group-edit mode
(inherited is None) it has 2 columns: label, rights.
"""


from markupsafe import Markup, escape

from rightsconfig.constants.controls import (
    ALL_SUFFIX,
    CLASS_CB_ALL,
    CLASS_GROUP_VALUE,
    CLASS_INDICATOR,
    CLASS_NO,
    CLASS_SUBCONTROL_HEADER,
    CLASS_SUBCONTROL_ITEM,
    CLASS_YES,
    CONTROL_CHECKBOX,
    CONTROL_HEADER,
    CONTROL_LIST,
    CONTROL_SELECT,
    CONTROL_SELECTLIST,
    HINT_ALL_CHECKBOX,
)
from rightsconfig.error import UnknownControlError
from rightsconfig.i18n import _

from rightsconfig import log

logging = log.getLogger(__name__)

CHECKED = Markup(' checked="checked"')
SELECTED = Markup(' selected="selected"')
EMPTY = Markup("")


def is_granted(value):
    """Return True if a stored rights value grants the right.

    Absent values (None), False, 0, "" and "0" do not grant it,
    everything else does.
    """
    return bool(value) and value != "0"


def to_int(value):
    """Return a stored rights value as int, 0 for empty or non-numeric values"""
    if not is_granted(value):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        logging.debug(f"non-numeric rights value {value!r} treated as 0")
        return 0


def option_label(options, value):
    """Return the label of the select option with the given int value, "" if there is none"""
    for key, label in options.items():
        if to_int(key) == value:
            return label
    return ""


def checked(value):
    return CHECKED if is_granted(value) else EMPTY


class ControlRenderer:
    """
    Renders the controls of a rights form.

    To support a custom control type, add a method rendering it and map the
    type to the method name in control_renderers of your subclass::

        class MyRightConfig(RightConfig):
            control_renderers = dict(RightConfig.control_renderers, radio="_radio_html")

            def _radio_html(self, name, label, params, rights, inherited):
                ...
    """

    # control type -> name of the rendering method
    control_renderers = {
        CONTROL_CHECKBOX: "_checkbox_html",
        CONTROL_SELECT: "_select_html",
        CONTROL_LIST: "_list_html",
        CONTROL_SELECTLIST: "_selectlist_html",
        CONTROL_HEADER: "_header_html",
    }

    # a DefaultConfig instance, see RightConfig
    cfg = None

    def field_name(self, access_key):
        """name of the form field submitting access_key"""
        return f"{self.cfg.field_namespace}[{access_key}]"

    def get_item_html(self, name, label, type, params, rights, inherited=None):
        """
        Generate HTML for one control that was previously added by add_item().

        :param name: access_key of the control
        :param label: human readable name of the control
        :param type: control type, one of CONTROL_TYPES or a type known to control_renderers
        :param params: dict of parameters for this control type
        :param rights: dict access_key -> value of the subject's own rights
        :param inherited: dict access_key -> value of rights inherited from groups,
                          None to render for a group (no inherited rights UI)
        :returns: Markup with zero or more table rows
        :raises UnknownControlError: if there is no renderer for type
        """
        try:
            renderer = getattr(self, self.control_renderers[type])
        except KeyError:
            raise UnknownControlError(type) from None
        params = dict(params or {})
        params.setdefault("cssclass", "")
        return renderer(name, label, params, rights or {}, inherited)

    def _row_html(self, cells, cssclass=""):
        if cssclass:
            return Markup('<tr class="{}">{}</tr>').format(cssclass, EMPTY.join(cells))
        return Markup("<tr>{}</tr>").format(EMPTY.join(cells))

    def _checkbox_html(self, name, label, params, rights, inherited):
        own = rights.get(name)
        group = inherited.get(name) if inherited else None
        cells = [Markup("<td><div>{}</div></td>").format(label)]
        if inherited is not None:
            state = CLASS_YES if is_granted(own) or is_granted(group) else CLASS_NO
            cells.append(Markup('<td><i class="{} {}"></i></td>').format(CLASS_INDICATOR, state))
        cells.append(
            Markup(
                '<td><input type="hidden" name="{0}" value="0">'
                '<input type="checkbox" name="{0}" value="{1}"{2}></td>'
            ).format(self.field_name(name), params.get("value", self.cfg.checkbox_value), checked(own))
        )
        if inherited is not None:
            cells.append(Markup('<td><input type="checkbox"{} disabled="disabled"></td>').format(checked(group)))
        return self._row_html(cells, params["cssclass"])

    def _select_html(self, name, label, params, rights, inherited):
        options = params.get("options")
        if not options:
            return EMPTY
        own = to_int(rights.get(name))
        group = to_int(inherited.get(name)) if inherited else 0
        options_html = EMPTY.join(
            Markup('<option value="{}"{}>{}</option>').format(value, SELECTED if to_int(value) == own else EMPTY, text)
            for value, text in options.items()
        )
        cells = [Markup("<td><div>{}</div></td>").format(label)]
        if inherited is not None:
            # inherited rights are the ceiling: the effective value is the higher one
            cells.append(Markup("<td><strong>{}</strong></td>").format(option_label(options, max(own, group))))
        cells.append(
            Markup('<td><input type="hidden" name="{0}" value="0"><select name="{0}">{1}</select></td>').format(
                self.field_name(name), options_html
            )
        )
        if inherited is not None:
            cells.append(
                Markup('<td><input type="hidden" class="{}" value="{}"></td>').format(CLASS_GROUP_VALUE, group)
            )
        return self._row_html(cells, params["cssclass"])

    def _subcontrol_header_html(self, label, params, hint1, hint2, inherited):
        cells = [Markup("<td><div>{}</div></td>").format(label)]
        if inherited is not None:
            cells.append(Markup("<td></td>"))
        cells.append(Markup('<td><div class="hint">{}</div></td>').format(hint1))
        if inherited is not None:
            cells.append(Markup('<td><div class="hint">{}</div></td>').format(hint2))
        cssclass = CLASS_SUBCONTROL_HEADER
        if params["cssclass"]:
            cssclass = f"{cssclass} {params['cssclass']}"
        return self._row_html(cells, cssclass)

    def _list_html(self, name, label, params, rights, inherited):
        hint1 = params.get("hint1", "")
        hint2 = params.get("hint2", "")
        group = inherited.get(name) if inherited else None
        if hint1 == HINT_ALL_CHECKBOX:
            all_key = f"{name}.{ALL_SUFFIX}"
            group = inherited.get(all_key) if inherited else None
            hint1 = Markup(
                '<input type="hidden" name="{0}" value="0">'
                '<span class="{1}"><label><input type="checkbox" name="{0}" value="1"{2}>{3}</label></span>'
            ).format(self.field_name(all_key), CLASS_CB_ALL, checked(rights.get(all_key)), _("all"))
            if inherited is not None:
                hint2 = Markup('<span class="{}"><input type="checkbox"{} disabled="disabled">{}</span>').format(
                    CLASS_CB_ALL, checked(group), _("all")
                )
        html = [self._subcontrol_header_html(label, params, hint1, hint2, inherited)]

        items = params.get("items") or {}
        item_params = dict(cssclass=CLASS_SUBCONTROL_ITEM)
        if "value" in params:
            item_params["value"] = params["value"]
        if is_granted(group):
            # granted to all items by a group: show every item as inherited
            inherited = {**inherited, **{f"{name}.{item_id}": 1 for item_id in items}}
        for item_id, item_name in items.items():
            html.append(
                self.get_item_html(
                    f"{name}.{item_id}", escape(item_name), CONTROL_CHECKBOX, item_params, rights, inherited
                )
            )
        return EMPTY.join(html)

    def _selectlist_html(self, name, label, params, rights, inherited):
        options = params.get("options")
        if not options:
            return EMPTY
        hint1, hint2 = params.get("hint1", ""), params.get("hint2", "")
        html = [self._subcontrol_header_html(label, params, hint1, hint2, inherited)]
        item_params = dict(cssclass=CLASS_SUBCONTROL_ITEM, options=options)
        for item_id, item_name in (params.get("items") or {}).items():
            html.append(
                self.get_item_html(
                    f"{name}.{item_id}", escape(item_name), CONTROL_SELECT, item_params, rights, inherited
                )
            )
        return EMPTY.join(html)

    def _header_html(self, name, label, params, rights, inherited):
        tag = params.get("tag") or self.cfg.header_tag
        colspan = 2 if inherited is None else 4
        cell = Markup('<td colspan="{0}"><div><{1}>{2}</{1}></div></td>').format(colspan, tag, label)
        return self._row_html([cell], params["cssclass"])
