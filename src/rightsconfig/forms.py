# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - handling of submitted rights forms

Helpers for the code receiving a form rendered by RightConfig.get_html().
Nothing here validates values, that is up to the caller.
"""


from rightsconfig.constants.controls import (
    ALL_SUFFIX,
    CONTROL_CHECKBOX,
    CONTROL_HEADER,
    CONTROL_LIST,
    CONTROL_SELECT,
    CONTROL_SELECTLIST,
    HINT_ALL_CHECKBOX,
)
from rightsconfig.controls import is_granted, to_int
from rightsconfig.error import UnknownControlError

from rightsconfig import log

logging = log.getLogger(__name__)


def extract_rights(form, namespace="app"):
    """
    Collect the submitted rights fields of a form.

    Checkboxes are preceded by a hidden field with the same name and value 0,
    so a checked checkbox submits its name twice. The last value wins.

    :param form: werkzeug MultiDict (e.g. request.form) or a plain dict
    :param namespace: field name prefix, fields are named namespace[access_key]
    :returns: dict access_key -> submitted value (str)
    """
    prefix = f"{namespace}["
    rights = {}
    for field in form:
        if not (field.startswith(prefix) and field.endswith("]")):
            continue
        access_key = field[len(prefix) : -1]
        if not access_key:
            continue
        getlist = getattr(form, "getlist", None)
        values = getlist(field) if getlist is not None else [form[field]]
        if values:
            rights[access_key] = values[-1]
    logging.debug(f"extracted {len(rights)} rights from form")
    return rights


def split_rights(right_config, contact_id, values):
    """
    Offer submitted rights to the application storage.

    set_rights() of right_config is called once per access_key, keys the
    application does not keep itself are returned for the system storage.

    :param right_config: RightConfig of the application
    :param contact_id: contact id (if positive) or group id (if negative)
    :param values: dict access_key -> value, e.g. from extract_rights()
    :returns: dict access_key -> value to write to the system storage
    """
    system_rights = {}
    for access_key, value in values.items():
        if not right_config.set_rights(contact_id, access_key, value):
            system_rights[access_key] = value
    logging.debug(
        f"{right_config.app_id!r} kept {len(values) - len(system_rights)} of {len(values)} rights of {contact_id}"
    )
    return system_rights


def effective_rights(right_config, rights, inherited=None):
    """
    Resolve the effective rights of a contact the same way the form shows them.

    - checkbox: granted (1) if granted personally or inherited from a group
    - list: like checkbox for each item; an "all" checkbox (personal or
      inherited) grants every item
    - select, selectlist: the higher one of personal and inherited value

    :param right_config: RightConfig of the application
    :param rights: dict access_key -> value, personal rights
    :param inherited: dict access_key -> value, rights inherited from groups
    :returns: dict access_key -> int
    """
    rights = rights or {}
    inherited = inherited or {}
    result = {}

    def granted(access_key):
        return is_granted(rights.get(access_key)) or is_granted(inherited.get(access_key))

    def higher(access_key):
        return max(to_int(rights.get(access_key)), to_int(inherited.get(access_key)))

    for item in right_config.items:
        if item.type == CONTROL_CHECKBOX:
            result[item.name] = int(granted(item.name))
        elif item.type == CONTROL_LIST:
            if item.params.get("hint1") == HINT_ALL_CHECKBOX:
                all_key = f"{item.name}.{ALL_SUFFIX}"
                all_granted = granted(all_key)
                result[all_key] = int(all_granted)
            else:
                all_granted = is_granted(inherited.get(item.name))
            for item_id in item.params.get("items") or {}:
                access_key = f"{item.name}.{item_id}"
                result[access_key] = int(all_granted or granted(access_key))
        elif item.type == CONTROL_SELECT:
            if item.params.get("options"):
                result[item.name] = higher(item.name)
        elif item.type == CONTROL_SELECTLIST:
            if item.params.get("options"):
                for item_id in item.params.get("items") or {}:
                    access_key = f"{item.name}.{item_id}"
                    result[access_key] = higher(access_key)
        elif item.type == CONTROL_HEADER:
            continue
        elif item.type in right_config.control_renderers:
            logging.debug(f"no effective rights policy for custom control {item.type!r}, skipping {item.name!r}")
        else:
            raise UnknownControlError(item.type)
    return result
