# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Configuration bits
# :Creato:   sab 17 ott 2026 10:05:37 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
Handle the configuration details.
"""

__docformat__ = 'reStructuredText'

from collections import namedtuple
from configparser import ConfigParser
from io import StringIO

from rtcbridge import BridgeException


class ConfigurationError(BridgeException):
    """Configuration error"""


DEFAULT_SECTION = 'bridge'
"""The section of the configuration file holding the bridge parameters."""

AUTHOR = 'bridge'
"""Default identity used to commit on the target repository."""

LOGGING_SUPER_SECTION = '[[logging]]'
BASIC_LOGGING_CONFIG = """\
[formatters]
keys = console

[formatter_console]
format = %(asctime)s [%(levelname).1s] %(message)s
datefmt = %H:%M:%S

[loggers]
keys = root,shell

[logger_root]
level = INFO
handlers = console

[logger_shell]
level = WARNING
handlers =
qualname = rtcbridge.shell
propagate = 1

[handlers]
keys = console

[handler_console]
class = StreamHandler
formatter = console
args = (sys.stdout,)
level = INFO
"""

# (attribute, option name, mandatory)
OPTIONS = (
    ('directory', 'directory', True),
    ('hg_repository', 'mercurial-repository', True),
    ('rtc_repository', 'rtc-repository', True),
    ('rtc_workspace', 'rtc-workspace', True),
    ('rtc_stream', 'rtc-stream', True),
    ('rtc_user', 'rtc-user', True),
    ('rtc_password', 'rtc-password', True),
    ('author', 'author', False),
    ('scm_command', 'scm-command', False),
    ('hg_command', 'hg-command', False),
)


class BridgeConfig(namedtuple('BridgeConfig', [o[0] for o in OPTIONS])):
    """
    The immutable set of parameters driving a bridge.

    Every mandatory field must be given and not empty, otherwise a
    `ConfigurationError` naming all the missing ones is raised at
    construction time. The `directory` is made absolute.
    """

    __slots__ = ()

    def __new__(klass, directory=None, hg_repository=None,
                rtc_repository=None, rtc_workspace=None, rtc_stream=None,
                rtc_user=None, rtc_password=None, author=None,
                scm_command=None, hg_command=None):
        from os.path import abspath, expanduser

        values = dict(directory=directory, hg_repository=hg_repository,
                      rtc_repository=rtc_repository,
                      rtc_workspace=rtc_workspace, rtc_stream=rtc_stream,
                      rtc_user=rtc_user, rtc_password=rtc_password)
        missing = [optname for attr, optname, mandatory in OPTIONS
                   if mandatory and not values[attr]]
        if missing:
            raise ConfigurationError("Missing mandatory parameters: %s"
                                     % ', '.join(missing))

        values['directory'] = abspath(expanduser(directory))
        values['author'] = author or AUTHOR
        values['scm_command'] = scm_command or 'scm'
        values['hg_command'] = hg_command or 'hg'
        return super(BridgeConfig, klass).__new__(klass, **values)

    def __repr__(self):
        # Keep the password out of tracebacks and logs
        return '%s(%s)' % (self.__class__.__name__, ', '.join(
            '%s=%r' % (f, f == 'rtc_password' and '********' or getattr(self, f))
            for f in self._fields))


class Config(ConfigParser):
    '''
    Syntactic sugar around standard ConfigParser, for easier access to
    the configuration.

    The options of the bridge are read from the ``[bridge]`` section;
    the `overrides`, usually coming from the command line, take
    precedence over whatever the file says.

    This is where the logging system gets initialized, possibly merging a
    logging specific configuration section, introduced by a *supersection*
    ``[[logging]]``.
    '''

    def __init__(self, fp, overrides=None):
        ConfigParser.__init__(self, interpolation=None)
        self.overrides = dict(overrides or {})

        loggingcfg = None
        if fp:
            config = fp.read()

            # Look for a [[logging]] separator, that introduce a
            # standard logging section
            cfgs = config.split(LOGGING_SUPER_SECTION)
            if len(cfgs) == 2:
                bridgecfg, loggingcfg = cfgs
            else:
                bridgecfg = cfgs[0]

            self.read_string(bridgecfg)

        self._setupLogging(loggingcfg or BASIC_LOGGING_CONFIG)

    def _setupLogging(self, config):
        """
        Configure the logging system, forcing the DEBUG level on every
        handler when the ``debug`` option is active.
        """

        import logging
        from logging.config import fileConfig

        fileConfig(StringIO(config), disable_existing_loggers=False)

        if self.get(DEFAULT_SECTION, 'debug', False):
            root = logging.getLogger()
            root.setLevel(logging.DEBUG)
            for h in root.handlers:
                h.setLevel(logging.DEBUG)
            logging.getLogger('rtcbridge.shell').setLevel(logging.DEBUG)

    def get(self, section, option, default=None, raw=False, vars=None,
            fallback=None):
        """
        Get an option value for a given section or the `default` value.

        The `overrides` given to the constructor win over the file
        content. The literal strings ``None``, ``True`` and ``False``
        are converted to the corresponding Python values.
        """

        if default is None:
            default = fallback
        option = self.optionxform(option)
        if option in self.overrides:
            value = self.overrides[option]
        elif self.has_option(section, option):
            value = ConfigParser.get(self, section, option, raw=raw, vars=vars)
        else:
            value = default

        if value == 'None':
            return default
        elif value == 'True':
            return True
        elif value == 'False':
            return False
        else:
            return value

    def bridgeConfig(self, section=DEFAULT_SECTION):
        """
        Build and return the `BridgeConfig` described by `section`.
        """

        return BridgeConfig(**dict((attr, self.get(section, optname))
                                   for attr, optname, mandatory in OPTIONS))
