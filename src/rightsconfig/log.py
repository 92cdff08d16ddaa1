# Copyright: 2026 rightsconfig project
# License: GNU GPL v2 (or any later version), see LICENSE.txt for details.
"""
    rightsconfig - init "logging" system

    Logging must be configured before the code in log.getLogger gets
    executed. Thus, logging is configured either by:

    a) an environment variable RIGHTSCONFIGLOGGINGCONF that contains the
       path/filename of a logging configuration file - this method overrides
       all following methods (except if it can't read or use that
       configuration, then it will use c))
    b) by an explicit call to rightsconfig.log.load_config('logging.conf') -
       you need to do this very early or a) or c) will happen before
    c) by using a builtin fallback logging conf

    If logging is not yet configured, log.getLogger will do an implicit
    configuration call - then a) or c) is done.

    Usage (for developers)
    ----------------------
    At the top of your module::

       from rightsconfig import log
       logging = log.getLogger(__name__)

    This will create a logger with 'rightsconfig.your.module' as name.
"""

from io import StringIO
import os
import logging
import logging.config
import logging.handlers  # needed for handlers defined there being configurable in logging.conf file

# This is the "last resort" fallback logging configuration for the case
# that load_config() is either not called at all or with a non-working
# logging configuration.
logging_config = """\
[DEFAULT]
# Default loglevel, to adjust verbosity: DEBUG, INFO, WARNING, ERROR, CRITICAL
loglevel=INFO

[loggers]
keys=root

[handlers]
keys=stderr

[formatters]
keys=default

[logger_root]
level=%(loglevel)s
handlers=stderr

[handler_stderr]
class=StreamHandler
level=NOTSET
formatter=default
args=(sys.stderr, )

[formatter_default]
format=%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s
datefmt=
class=logging.Formatter
"""

configured = False


def load_config(conf_fname=None):
    """load logging config from conffile"""
    global configured
    err_msg = None
    conf_fname = os.environ.get("RIGHTSCONFIGLOGGINGCONF", conf_fname)
    if conf_fname:
        try:
            conf_fname = os.path.abspath(conf_fname)
            # open the file ourselves, fileConfig() silently ignores unreadable files
            with open(conf_fname) as f:
                logging.config.fileConfig(f, disable_existing_loggers=False)
            configured = True
            logger = getLogger(__name__)
            logger.debug(f'using logging configuration read from "{conf_fname}"')
        except Exception as err:
            err_msg = str(err)
    if not configured:
        # load builtin fallback logging config
        with StringIO(logging_config) as f:
            logging.config.fileConfig(f, disable_existing_loggers=False)
        configured = True
        logger = getLogger(__name__)
        if err_msg:
            logger.warning(f'load_config for "{conf_fname}" failed with "{err_msg}".')
        logger.debug("using logging configuration read from built-in fallback in rightsconfig.log module!")
    else:
        # configured before, keep that configuration
        logger = getLogger(__name__)
        if err_msg:
            logger.warning(f'load_config for "{conf_fname}" failed with "{err_msg}".')

    import rightsconfig

    code_path = os.path.dirname(rightsconfig.__file__)
    logger.debug(f"Running {rightsconfig.project} {rightsconfig.version} code from {code_path}")


def getLogger(name):
    """wrapper around logging.getLogger, so we can do some more stuff:

    - patch loglevel constants into logger object, so it can be used
      instead of the logging module
    """
    if not configured:
        load_config()
    logger = logging.getLogger(name)
    for levelnumber, levelname in logging._levelToName.items():
        setattr(logger, levelname, levelnumber)
    return logger
