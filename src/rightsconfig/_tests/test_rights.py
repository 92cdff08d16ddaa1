# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
    rightsconfig - rightsconfig.rights Tests
"""


import pytest

from markupsafe import Markup

from rightsconfig.config.default import DefaultConfig
from rightsconfig.constants.controls import (
    CONTROL_CHECKBOX,
    CONTROL_HEADER,
    CONTROL_LIST,
    CONTROL_SELECT,
    CONTROL_SELECTLIST,
    HINT_ALL_CHECKBOX,
)
from rightsconfig.error import ConfigurationError, UnknownControlError
from rightsconfig.rights import ControlItem, RightConfig

from rightsconfig._tests import LEVELS, SampleRightConfig, make_right_config, split_html

INHERITED_CHECKED = '<td><input type="checkbox" checked="checked" disabled="disabled"></td>'
INHERITED_UNCHECKED = '<td><input type="checkbox" disabled="disabled"></td>'


class TestRegistry:

    def test_init_adds_items_in_order(self):
        rc = SampleRightConfig("sample")
        assert [item.name for item in rc.items] == ["general", "send_sms", "level", "blog", "type"]
        assert all(isinstance(item, ControlItem) for item in rc.items)

    def test_add_item_defaults(self):
        rc = make_right_config(("send_sms", "Can send SMS"))
        item = rc.items[0]
        assert item.type == CONTROL_CHECKBOX
        assert item.params == {}
        assert str(item.label) == "Can send SMS"

    def test_add_item_keeps_markup_label(self):
        label = Markup("<em>Admin</em>")
        rc = make_right_config(("admin", label))
        assert rc.items[0].label is label

    def test_add_item_copies_params(self):
        params = dict(cssclass="x")
        rc = make_right_config(("a", "A", CONTROL_CHECKBOX, params))
        params["cssclass"] = "y"
        assert rc.items[0].params == dict(cssclass="x")

    def test_no_validation_at_registration(self):
        rc = make_right_config(("x", "X", "bogus"))
        assert rc.items[0].type == "bogus"

    @pytest.mark.parametrize("app_id", ["", None])
    def test_app_id_required(self, app_id):
        with pytest.raises(ConfigurationError):
            RightConfig(app_id)

    def test_app_id_is_explicit(self):
        rc = SampleRightConfig("contacts")
        assert rc.app_id == "contacts"
        assert "contacts" in repr(rc)

    def test_cfg_class_or_instance(self):
        class Config(DefaultConfig):
            header_tag = "h3"

        assert make_right_config(cfg=Config).cfg.header_tag == "h3"
        assert make_right_config(cfg=Config()).cfg.header_tag == "h3"
        assert isinstance(make_right_config().cfg, DefaultConfig)


class TestHooks:

    def test_defaults(self):
        rc = SampleRightConfig("sample")
        assert rc.get_rights(1) == {}
        assert rc.get_rights([1, 2]) == {}
        assert rc.set_rights(1, "send_sms", 1) is False
        assert rc.set_rights(-3, "send_sms") is False
        assert rc.clear_rights(1) is None
        assert rc.set_default_rights(1) == {}

    def test_override(self):
        class CustomRightConfig(RightConfig):
            def __init__(self, app_id):
                self.stored = {}
                super().__init__(app_id)

            def set_rights(self, contact_id, right, value=None):
                if right.startswith("blog."):
                    self.stored[(contact_id, right)] = value
                    return True
                return False

        rc = CustomRightConfig("blog")
        assert rc.set_rights(5, "blog.1", 1) is True
        assert rc.set_rights(5, "send_sms", 1) is False
        assert rc.stored == {(5, "blog.1"): 1}


class TestGetHtml:

    def test_checkbox_group_mode(self):
        rc = make_right_config(("send_sms", "Can send SMS"))
        html = rc.get_html({"send_sms": 1})
        assert isinstance(html, Markup)
        table, scripts = split_html(html)
        assert table.startswith('<table class="zebra c-access-app c-access-app-group">')
        assert '<input type="hidden" name="app[send_sms]" value="0">' in table
        assert '<input type="checkbox" name="app[send_sms]" value="1" checked="checked">' in table
        assert "Effective rights" not in table
        assert "icon10" not in table
        assert 'disabled="disabled"' not in table

    def test_checkbox_subject_mode(self):
        rc = make_right_config(("send_sms", "Can send SMS"))
        table, scripts = split_html(rc.get_html({}, {"send_sms": "1"}))
        assert table.startswith('<table class="zebra c-access-app"><tr><th></th>')
        assert "Effective rights" in table
        assert "Granted personally" in table
        assert "Inherited from groups" in table
        assert '<input type="checkbox" name="app[send_sms]" value="1">' in table
        assert '<i class="icon10 yes"></i>' in table
        assert INHERITED_CHECKED in table

    @pytest.mark.parametrize(
        "value,granted",
        [(1, True), ("1", True), (True, True), (2, True), ("yes", True)]
        + [(0, False), ("0", False), ("", False), (None, False)],
    )
    def test_checkbox_checked(self, value, granted):
        rc = make_right_config(("send_sms", "Can send SMS"))
        table, scripts = split_html(rc.get_html({"send_sms": value}, {}))
        assert ('value="1" checked="checked">' in table) == granted
        assert ('<i class="icon10 yes">' in table) == granted
        assert INHERITED_UNCHECKED in table

    def test_checkbox_params(self):
        rc = make_right_config(("a", "A", CONTROL_CHECKBOX, dict(cssclass="special", value=5)))
        table, scripts = split_html(rc.get_html())
        assert '<tr class="special">' in table
        assert '<input type="checkbox" name="app[a]" value="5">' in table

    def test_select_effective_value(self):
        rc = make_right_config(("level", "Level", CONTROL_SELECT, dict(options=LEVELS)))
        html = rc.get_html({"level": 1}, {"level": 2})
        table, scripts = split_html(html)
        assert "<td><strong>Write</strong></td>" in table
        assert '<option value="1" selected="selected">Read</option>' in table
        assert '<option value="2">Write</option>' in table
        assert '<input type="hidden" name="app[level]" value="0"><select name="app[level]">' in table
        assert '<input type="hidden" class="g-value" value="2">' in table
        assert "input.g-value" in scripts

    @pytest.mark.parametrize(
        "own,group,effective",
        [(None, None, "None"), (2, None, "Write"), ("2", "1", "Write"), (0, "1", "Read"), ("", "", "None")],
    )
    def test_select_max(self, own, group, effective):
        rc = make_right_config(("level", "Level", CONTROL_SELECT, dict(options=LEVELS)))
        rights = {} if own is None else {"level": own}
        inherited = {} if group is None else {"level": group}
        table, scripts = split_html(rc.get_html(rights, inherited))
        assert f"<td><strong>{effective}</strong></td>" in table

    def test_select_group_mode(self):
        rc = make_right_config(("level", "Level", CONTROL_SELECT, dict(options=LEVELS)))
        table, scripts = split_html(rc.get_html({"level": 2}))
        assert '<option value="2" selected="selected">Write</option>' in table
        assert "<strong>" not in table
        assert "g-value" not in table
        assert "input.g-value" not in scripts

    @pytest.mark.parametrize("params", [{}, dict(options={}), dict(options=None)])
    def test_select_without_options(self, params):
        rc = make_right_config(("level", "Level", CONTROL_SELECT, params))
        assert rc.get_item_html("level", "Level", CONTROL_SELECT, params, {"level": 1}, {}) == ""
        table, scripts = split_html(rc.get_html({"level": 1}, {}))
        assert "app[level]" not in table

    def test_list(self):
        rc = make_right_config(
            ("blog", "Blogs", CONTROL_LIST, dict(items={1: "News", 2: "Team"}, hint1="Read", hint2="Inherited"))
        )
        table, scripts = split_html(rc.get_html({"blog.2": 1}, {}))
        assert '<tr class="c-access-subcontrol-header">' in table
        assert '<td><div class="hint">Read</div></td>' in table
        assert '<td><div class="hint">Inherited</div></td>' in table
        assert table.count('<tr class="c-access-subcontrol-item">') == 2
        assert '<input type="checkbox" name="app[blog.1]" value="1">' in table
        assert '<input type="checkbox" name="app[blog.2]" value="1" checked="checked">' in table
        assert "c-access-cb-all input:enabled" not in scripts

    def test_list_escapes_item_names(self):
        rc = make_right_config(("blog", "Blogs", CONTROL_LIST, dict(items={1: "<b>News</b>"})))
        table, scripts = split_html(rc.get_html())
        assert "<td><div>&lt;b&gt;News&lt;/b&gt;</div></td>" in table

    def test_list_all_checkbox(self):
        rc = make_right_config(
            ("blog", "Blogs", CONTROL_LIST, dict(items={1: "News", 2: "Team"}, hint1=HINT_ALL_CHECKBOX))
        )
        table, scripts = split_html(rc.get_html({"blog.all": 1}))
        assert '<input type="hidden" name="app[blog.all]" value="0">' in table
        all_checkbox = '<input type="checkbox" name="app[blog.all]" value="1" checked="checked">'
        assert f'<span class="c-access-cb-all"><label>{all_checkbox}' in table
        assert "c-access-cb-all input:enabled" in scripts

    def test_list_all_checkbox_inherited(self):
        rc = make_right_config(
            ("blog", "Blogs", CONTROL_LIST, dict(items={1: "News", 2: "Team"}, hint1=HINT_ALL_CHECKBOX))
        )
        inherited = {"blog.all": 1, "blog.2": 0}
        table, scripts = split_html(rc.get_html({}, inherited))
        # mirror of the inherited "all" checkbox
        assert '<span class="c-access-cb-all"><input type="checkbox" checked="checked" disabled="disabled">' in table
        # every item shows as inherited, whatever its own inherited value
        assert table.count(INHERITED_CHECKED) == 2
        assert table.count('<i class="icon10 yes"></i>') == 2
        assert inherited == {"blog.all": 1, "blog.2": 0}

    def test_list_all_checkbox_not_inherited(self):
        rc = make_right_config(
            ("blog", "Blogs", CONTROL_LIST, dict(items={1: "News", 2: "Team"}, hint1=HINT_ALL_CHECKBOX))
        )
        table, scripts = split_html(rc.get_html({}, {"blog.1": 1}))
        assert table.count(INHERITED_CHECKED) == 1
        assert table.count(INHERITED_UNCHECKED) == 1

    def test_list_inherited_by_list_key(self):
        rc = make_right_config(("blog", "Blogs", CONTROL_LIST, dict(items={1: "News", 2: "Team"})))
        inherited = {"blog": 1}
        table, scripts = split_html(rc.get_html({}, inherited))
        assert "c-access-cb-all" not in table
        assert table.count(INHERITED_CHECKED) == 2
        assert table.count('<i class="icon10 yes"></i>') == 2
        assert inherited == {"blog": 1}

    def test_list_without_items(self):
        rc = make_right_config(("blog", "Blogs", CONTROL_LIST))
        table, scripts = split_html(rc.get_html({}, {}))
        assert '<tr class="c-access-subcontrol-header">' in table
        assert "c-access-subcontrol-item" not in table

    def test_selectlist(self):
        rc = make_right_config(
            ("type", "Types", CONTROL_SELECTLIST, dict(items={"page": "Pages", "file": "Files"}, options=LEVELS))
        )
        table, scripts = split_html(rc.get_html({"type.page": "1"}, {"type.file": 2}))
        options = '<option value="0">None</option><option value="1" selected="selected">'
        assert f'<select name="app[type.page]">{options}' in table
        assert table.count("<td><strong>") == 2
        assert "<td><strong>Read</strong></td>" in table
        assert "<td><strong>Write</strong></td>" in table
        assert "input.g-value" in scripts

    def test_selectlist_without_options(self):
        rc = make_right_config(("type", "Types", CONTROL_SELECTLIST, dict(items={"page": "Pages"})))
        table, scripts = split_html(rc.get_html({}, {}))
        assert "c-access-subcontrol-header" not in table

    def test_header(self):
        rc = make_right_config(("general", "General", CONTROL_HEADER))
        table, scripts = split_html(rc.get_html())
        assert '<td colspan="2"><div><h2>General</h2></div></td>' in table
        table, scripts = split_html(rc.get_html({}, {}))
        assert '<td colspan="4"><div><h2>General</h2></div></td>' in table

    def test_header_tag(self):
        rc = make_right_config(("general", "General", CONTROL_HEADER, dict(tag="h4")))
        table, scripts = split_html(rc.get_html())
        assert "<h4>General</h4>" in table

    def test_group_mode_never_shows_inherited(self):
        rc = SampleRightConfig("sample")
        table, scripts = split_html(rc.get_html({"send_sms": 1, "level": 2, "blog.all": 1}))
        assert "Effective rights" not in table
        assert "<strong>" not in table
        assert "g-value" not in table
        assert 'disabled="disabled"' not in table
        assert "icon10" not in table
        assert "input.g-value" not in scripts

    def test_render_order(self):
        rc = SampleRightConfig("sample")
        table, scripts = split_html(rc.get_html({}, {}))
        positions = [table.index(f"app[{key}]") for key in ("send_sms", "level", "blog.all", "blog.1", "type.page")]
        assert positions == sorted(positions)
        assert table.index("<h2>General</h2>") < positions[0]

    def test_scripts(self):
        rc = make_right_config(("send_sms", "Can send SMS"))
        html = str(rc.get_html({}, {}))
        assert html.endswith("}).call({});</script>")
        table, scripts = split_html(html)
        assert "updateIndicator" in scripts
        assert "input.g-value" not in scripts
        assert "c-access-cb-all input:enabled" not in scripts

    def test_rendering_is_repeatable(self):
        rc = SampleRightConfig("sample")
        rights, inherited = {"send_sms": 1, "level": 1}, {"blog.all": 1}
        assert rc.get_html(rights, inherited) == rc.get_html(rights, inherited)
        assert len(rc.items) == 5

    def test_field_namespace(self):
        class Config(DefaultConfig):
            field_namespace = "rights"

        rc = make_right_config(("send_sms", "Can send SMS"), cfg=Config)
        table, scripts = split_html(rc.get_html())
        assert 'name="rights[send_sms]"' in table


class TestUnknownControl:

    def test_get_item_html(self):
        rc = make_right_config()
        with pytest.raises(UnknownControlError) as excinfo:
            rc.get_item_html("x", "X", "bogus", {}, {})
        assert excinfo.value.control_type == "bogus"
        assert str(excinfo.value) == "Unknown control: bogus"

    def test_get_html_aborts(self):
        rc = make_right_config(("send_sms", "Can send SMS"), ("x", "X", "bogus"), ("level", "Level"))
        with pytest.raises(ConfigurationError):
            rc.get_html({"send_sms": 1})

    def test_custom_control(self):
        class RadioRightConfig(RightConfig):
            control_renderers = dict(RightConfig.control_renderers, radio="_radio_html")

            def init(self):
                self.add_item("mode", "Mode", "radio")

            def _radio_html(self, name, label, params, rights, inherited):
                return Markup('<tr><td><input type="radio" name="{}"></td></tr>').format(self.field_name(name))

        table, scripts = split_html(RadioRightConfig("radio").get_html())
        assert '<input type="radio" name="app[mode]">' in table
