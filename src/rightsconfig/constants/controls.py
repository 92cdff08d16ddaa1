# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - rights form control related constants
"""

# Control types

CONTROL_CHECKBOX = "checkbox"
CONTROL_SELECT = "select"
CONTROL_LIST = "list"  # list of checkboxes below a header row
CONTROL_SELECTLIST = "selectlist"  # list of selects sharing the same options
CONTROL_HEADER = "header"

CONTROL_TYPES = [CONTROL_CHECKBOX, CONTROL_SELECT, CONTROL_LIST, CONTROL_SELECTLIST, CONTROL_HEADER]

# hint1 value of a list control asking for an "all" checkbox
HINT_ALL_CHECKBOX = "all_checkbox"

# access_key suffix the "all" checkbox of a list is stored with
ALL_SUFFIX = "all"

# CSS Classes, the form scripts depend on them
CLASS_TABLE = "zebra c-access-app"
CLASS_TABLE_GROUP = "c-access-app-group"
CLASS_CB_ALL = "c-access-cb-all"
CLASS_SUBCONTROL_HEADER = "c-access-subcontrol-header"
CLASS_SUBCONTROL_ITEM = "c-access-subcontrol-item"
CLASS_GROUP_VALUE = "g-value"
CLASS_INDICATOR = "icon10"
CLASS_YES = "yes"
CLASS_NO = "no"
