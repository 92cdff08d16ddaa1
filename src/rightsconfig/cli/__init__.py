# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.

"""
rightsconfig CLI - preview rights forms of applications
"""

import json

import click

from flask import current_app as app
from flask.cli import FlaskGroup

from rightsconfig.app import create_app
from rightsconfig.error import ConfigurationError
from rightsconfig.registry import load_right_config

from rightsconfig import log

logging = log.getLogger(__name__)


def Help():
    """rightsconfig initial help"""
    click.echo(
        """\
Quick help / most important commands overview:

  rightsconfig items myapp.rights:MyRightConfig --app-id myapp
      # List the controls of a rights form

  rightsconfig render myapp.rights:MyRightConfig --app-id myapp --rights rights.json
      # Render a rights form to HTML

For more information please run:

  rightsconfig --help

  rightsconfig <subcommand> --help
"""
    )


@click.group(cls=FlaskGroup, create_app=create_app, invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """rightsconfig extensions to the Flask CLI"""
    logging.debug("invoked_subcommand: %s", ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        Help()


@cli.command("help", help="Quick help")
def _Help():
    Help()


def _load(config, app_id):
    try:
        cls = load_right_config(config)
        return cls(app_id, cfg=app.cfg)
    except ConfigurationError as err:
        raise click.ClickException(str(err))


def _read_rights(f, what):
    if f is None:
        return None
    try:
        rights = json.load(f)
    except ValueError as err:
        raise click.BadParameter(f"not valid JSON: {err}", param_hint=what)
    if not isinstance(rights, dict):
        raise click.BadParameter("must be a JSON object mapping access_key to value", param_hint=what)
    return rights


@cli.command("items", help="List the controls of a rights form")
@click.argument("config")
@click.option("--app-id", "-a", required=True, help="Id of the application the rights config is for")
def cli_Items(config, app_id):
    right_config = _load(config, app_id)
    for item in right_config.items:
        click.echo(f"{item.type:<10} {item.name:<24} {item.label}")


@cli.command("render", help="Render the rights form of an application to HTML")
@click.argument("config")
@click.option("--app-id", "-a", required=True, help="Id of the application the rights config is for")
@click.option("--rights", "-r", type=click.File("r"), help="JSON file with the personal rights")
@click.option(
    "--inherited",
    "-i",
    type=click.File("r"),
    help="JSON file with the rights inherited from groups, if not given the form is rendered for a group",
)
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output file, default stdout")
def cli_Render(config, app_id, rights, inherited, output):
    right_config = _load(config, app_id)
    rights = _read_rights(rights, "--rights") or {}
    inherited = _read_rights(inherited, "--inherited")
    try:
        html = right_config.get_html(rights, inherited)
    except ConfigurationError as err:
        raise click.ClickException(str(err))
    output.write(str(html))
    output.write("\n")
