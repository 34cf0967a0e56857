# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Configuration details about known repository kinds
# :Creato:   sab 17 ott 2026 10:41:19 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
This module holds a simple abstraction of what a repository is for
the bridge purposes.
"""

__docformat__ = 'reStructuredText'


class Repository(object):
    """
    Collector for the configuration of a single repository.
    """

    METADIR = None
    """
    The name of the "meta" directory used by this kind of repository.
    Subclasses should override this, obviously.
    """

    EXTRA_METADIRS = []
    """
    Other eventual "meta" directories.
    """

    EXECUTABLE = None
    """
    The name of the external command line tool, for some backends.
    """

    def __init__(self, config, which):
        """
        Initialize a new instance of Repository, taking its settings from
        the `config` (a `BridgeConfig`); `which` is either "source"
        or "target".
        """

        from logging import getLogger

        self.config = config
        self.which = which
        self.basedir = config.directory
        self.log = getLogger('rtcbridge.%s.%s' % (self.__class__.__name__,
                                                  which))
        self._load(config)
        self._validateConfiguration()

    def _load(self, config):
        """
        Load the configuration for this repository.

        Subclasses must set at least ``repository``, the URL or URI of
        the remote counterpart.
        """

        self.repository = None

    def _validateConfiguration(self):
        """
        Validate the configuration, making sure the external command
        line tool can be found.
        """

        if self.EXECUTABLE:
            from os import getenv
            from shutil import which
            from rtcbridge.config import ConfigurationError

            found = which(self.EXECUTABLE)
            if found is None:
                self.log.critical("Cannot find external command %r",
                                  self.EXECUTABLE)
                raise ConfigurationError("The command %r used "
                                         "by the %s repository does not "
                                         "exist in %r!" %
                                         (self.EXECUTABLE, self.which,
                                          getenv('PATH')))

    def metadirs(self):
        """
        Return the list of all the "meta" directories of this repository.
        """

        return [md for md in [self.METADIR] + self.EXTRA_METADIRS if md]

    def command(self, *args):
        """
        Return the base external command, a sequence suitable to be used
        to init an ExternalCommand instance.
        """

        if self.EXECUTABLE:
            cmd = [self.EXECUTABLE]
            cmd.extend(args)
            return cmd

    def workingDir(self):
        """
        Return an instance of the specific WorkingDir for this kind of
        repository.

        Subclasses must reimplement this.
        """

        from rtcbridge import BridgeBug

        raise BridgeBug("%s should override this method!" % self.__class__)
