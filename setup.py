#!/usr/bin/env python
# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

from setuptools import setup, find_packages


setup_args = dict(
    name="rightsconfig",
    version="0.1.0",
    description="Access rights configuration forms for web applications",
    license="GPL-2.0-or-later",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "rightsconfig": ["templates/*.html", "_tests/*.conf"],
    },
    install_requires=[
        "Babel>=2.10.0",  # internationalization support
        "click",  # command line interface
        "flask>=3.0.0",  # micro framework
        "flask-babel>=3.0.0",  # i18n support
        "jinja2>=3.1.0",  # template engine
        "markupsafe",  # safe html strings
        "werkzeug",  # form data structures
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "rightsconfig = rightsconfig.cli:cli",
        ],
    },
    # stuff for babel:
    message_extractors={
        "src": [
            ("rightsconfig/templates/**.html", "jinja2", None),
            ("rightsconfig/**/_tests/**", "ignore", None),
            ("rightsconfig/**.py", "python", None),
        ],
    },
)


if __name__ == "__main__":
    setup(**setup_args)
