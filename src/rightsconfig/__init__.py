# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig - access rights configuration forms for web applications.
"""


import sys
import platform

version = "0.1.0"

project = "rightsconfig"


if sys.hexversion < 0x3090000:
    sys.exit("Error: %s requires Python 3.9+, current version is %s\n" % (project, platform.python_version()))
