# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - jinja2 templates bundled with the package
"""


from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

SCRIPTS_TEMPLATE = "rights_scripts.html"

env = Environment(
    loader=PackageLoader("rightsconfig", "templates"),
    autoescape=select_autoescape(),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_scripts(select_script=False, all_checkbox_script=False):
    """
    Render the client side behaviour of a rights form table.

    The indicator update is always included, the other parts only if
    the form needs them.

    :param select_script: include recomputing the effective value of selects
    :param all_checkbox_script: include the logic of "all" checkboxes of lists
    """
    template = env.get_template(SCRIPTS_TEMPLATE)
    return Markup(template.render(select_script=select_script, all_checkbox_script=all_checkbox_script))
