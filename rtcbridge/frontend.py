# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Frontend capabilities
# :Creato:   sab 17 ott 2026 14:31:47 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
Implement the command line frontend.
"""

__docformat__ = 'reStructuredText'

__version__ = '0.1.0'

from logging import getLogger
from optparse import OptionParser, OptionGroup, Option

from rtcbridge import BridgeException
from rtcbridge.config import Config, ConfigurationError, DEFAULT_SECTION


USAGE = """\
%prog [--init | --run] [parameters]

Give exactly one action. Every parameter is mandatory, either on the
command line or in the [bridge] section of the --configfile."""


class RecogOption(Option):
    """
    Make it possible to recognize an option explicitly given on the
    command line from those simply coming out for their default value.
    """

    def process(self, opt, value, values, parser):
        setattr(values, '__seen_' + self.dest, True)
        return Option.process(self, opt, value, values, parser)


GENERAL_OPTIONS = [
    RecogOption("-c", "--configfile", metavar="CONFNAME",
                help="Read the parameters from the [bridge] section of "
                     "CONFNAME. Options given on the command line win "
                     "over the ones in the file."),
    RecogOption("-D", "--debug", dest="debug",
                action="store_true", default=False,
                help="Print each executed command and its output."),
    RecogOption("-v", "--verbose", dest="verbose",
                action="store_true", default=False,
                help="Be verbose, echoing the log message of each "
                     "synchronized revision."),
    RecogOption("--dry-run", dest="dry_run",
                action="store_true", default=False,
                help="Show the commands, without executing them."),
]

ACTION_OPTIONS = [
    RecogOption("-i", "--init", dest="init", action="store_true",
                default=False,
                help="Initialize the bridge: the directory gets emptied, "
                     "the RTC workspace created and loaded, and the "
                     "Mercurial repository created."),
    RecogOption("-r", "--run", dest="run", action="store_true",
                default=False,
                help="Run the bridge, replaying the pending RTC revisions "
                     "on the Mercurial repository."),
]

PARAMETER_OPTIONS = [
    RecogOption("-d", "--directory", metavar="DIRECTORY",
                help="Working directory, created or emptied on "
                     "initialization: do not delete it between runs."),
    RecogOption("-m", "--mercurial-repository", metavar="REPOSITORY",
                dest="mercurial_repository",
                help="URL of the Mercurial repository."),
    RecogOption("-t", "--rtc-repository", metavar="REPOSITORY",
                dest="rtc_repository",
                help="URI of the RTC SCM repository."),
    RecogOption("-w", "--rtc-workspace", metavar="WORKSPACE",
                dest="rtc_workspace",
                help="Workspace to use in the RTC repository, created "
                     "during initialization."),
    RecogOption("-s", "--rtc-stream", metavar="STREAM",
                dest="rtc_stream",
                help="RTC stream to follow."),
    RecogOption("-u", "--rtc-user", metavar="USER",
                dest="rtc_user",
                help="RTC user name."),
    RecogOption("-p", "--rtc-password", metavar="PASSWORD",
                dest="rtc_password",
                help="RTC password."),
    RecogOption("-a", "--author", metavar="AUTHOR",
                help="Identity used for the Mercurial commits, "
                     "'bridge' by default."),
]


def buildParser():
    """
    Build the command line parser.
    """

    parser = OptionParser(usage=USAGE, version=__version__,
                          option_list=GENERAL_OPTIONS)

    actions = OptionGroup(parser, "Actions", "Give one.")
    actions.add_options(ACTION_OPTIONS)

    parameters = OptionGroup(parser, "Parameters", "All mandatory, but "
                             "--author.")
    parameters.add_options(PARAMETER_OPTIONS)

    parser.add_option_group(actions)
    parser.add_option_group(parameters)
    return parser


def main(argv=None):
    """
    Script entry point.

    Parse the command line options, and execute the requested action.
    Return the exit status: 0 on success, 1 when the bridge failed.
    Bad invocations exit with status 2, after printing the usage.
    """

    from rtcbridge.bridge import Bridge
    from rtcbridge.shwrap import ExternalCommand

    parser = buildParser()
    options, args = parser.parse_args(argv)

    if args:
        parser.error("unexpected arguments: %s" % ' '.join(args))
    if options.init and options.run:
        parser.error("give either --init or --run, not both")
    if not (options.init or options.run):
        parser.error("give one action, either --init or --run")
    action = options.init and 'init' or 'run'

    overrides = {}
    for k, v in vars(options).items():
        if k.startswith('__') or k in ('configfile', 'init', 'run'):
            continue
        if hasattr(options, '__seen_' + k):
            overrides[k.replace('_', '-')] = v

    if options.configfile:
        try:
            with open(options.configfile) as fp:
                config = Config(fp, overrides)
        except EnvironmentError as e:
            parser.error("cannot read %s: %s" % (options.configfile, e))
    else:
        config = Config(None, overrides)

    try:
        bconfig = config.bridgeConfig()
    except ConfigurationError as e:
        parser.error(str(e))

    ExternalCommand.DEBUG = config.get(DEFAULT_SECTION, 'debug', False)
    ExternalCommand.DRY_RUN = config.get(DEFAULT_SECTION, 'dry-run', False)

    log = getLogger('rtcbridge')
    try:
        bridge = Bridge(bconfig, verbose=config.get(DEFAULT_SECTION,
                                                     'verbose', False))
        getattr(bridge, action)()
    except KeyboardInterrupt:
        log.warning("Interrupted by the user")
        return 1
    except BridgeException as e:
        log.critical("Bridge %s failed: %s", action, e)
        return 1
    except EnvironmentError as e:
        log.critical("Bridge %s failed: %s", action, e)
        return 1
    return 0
