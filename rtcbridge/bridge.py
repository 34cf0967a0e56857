# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Synchronization engine
# :Creato:   sab 17 ott 2026 13:02:15 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
Implement the two activities of a bridge: initialization of a new
bridge directory, and synchronization with the upstream stream.

There is no record of the last synchronized revision: the upstream
``scm compare`` is asked again on every run, and the Mercurial history
is the only trace of what has already been replayed.
"""

__docformat__ = 'reStructuredText'

from logging import getLogger

from rtcbridge import BridgeException


INITIAL_MESSAGE = 'Initial bridge checkin.'
"""Commit message of the first revision of the target repository."""

COMMIT_MESSAGE_FORMAT = '%(revision)s: %(message)s'
"""How each upstream revision is described on the target repository."""


class BridgeNotInitialized(BridgeException):
    "The bridge directory does not exist, initialize it first"


class RevisionSyncFailure(BridgeException):
    "Failure synchronizing a single upstream revision"

    def __init__(self, revision, cause):
        BridgeException.__init__(self, "Revision %s failed: %s"
                                 % (revision.id, cause))
        self.revision = revision
        self.cause = cause


class Bridge(object):
    """
    A Bridge has two main capabilities: it's able to initialize a
    new bridge directory, or bring it in sync with the current
    upstream stream.

    It drives a source working dir (RTC by default) and a target one
    (Mercurial by default), sharing the same directory.
    """

    def __init__(self, config, source=None, target=None, verbose=False):
        """
        Initialize a new bridge on the given `config`, a `BridgeConfig`.

        When `source` or `target` are not given the RTC and Mercurial
        backends are used.
        """

        self.config = config
        self.verbose = verbose
        self.log = getLogger('rtcbridge.bridge')

        if source is None:
            from rtcbridge.repository.rtc import RtcRepository

            source = RtcRepository(config, 'source').workingDir()
        if target is None:
            from rtcbridge.repository.hg import HgRepository

            target = HgRepository(config, 'target').workingDir(
                source.repository.metadirs())
        self.source = source
        self.target = target

    @property
    def directory(self):
        return self.config.directory

    def commitMessage(self, revision):
        """
        Compute the commit message for the given upstream `revision`.
        """

        return COMMIT_MESSAGE_FORMAT % {'revision': revision.id,
                                        'message': revision.message}

    def init(self):
        """
        Initialize the bridge directory.

        Any existing content of the directory is destroyed, then the
        upstream workspace is created and loaded there, a new target
        repository is initialized and the loaded tree is committed
        and pushed as the first revision.
        """

        self.log.info('Initializing bridge in "%s"', self.directory)

        self._resetDirectory()

        try:
            self.source.createAndLoadWorkspace()
        except BridgeException:
            self.log.critical('Cannot create the upstream workspace %r!',
                              self.config.rtc_workspace)
            raise

        try:
            self.target.initializeRepository()
        except BridgeException:
            self.log.critical('Cannot initialize the target repository!')
            raise

        self._pushChange(INITIAL_MESSAGE)

        self.log.info("Initialization completed")

    def run(self):
        """
        Replay every pending upstream revision, oldest first.

        Each revision is accepted in the working copy, then committed
        and pushed on its own. Stop at the first failure, raising a
        `RevisionSyncFailure`. Return the list of synchronized revisions.
        """

        from os.path import isdir

        self.log.info('Synchronizing "%s"', self.directory)

        if not isdir(self.directory):
            raise BridgeNotInitialized('"%s" does not exist, run the '
                                       'initialization first' % self.directory)

        try:
            pendings = self.source.pendingRevisions()
        except KeyboardInterrupt:
            self.log.warning('Leaving "%s" unchanged, stopped by user',
                             self.directory)
            raise
        except BridgeException:
            self.log.critical('Unable to get pending revisions')
            raise

        if not pendings:
            self.log.info("Nothing to synchronize")
            return []

        synced = []
        for revision in pendings:
            self.log.info('Syncing %s', revision.id)
            if self.verbose:
                self.log.info('Log message: %s', revision.message)
            try:
                self.source.advanceTo(revision.id)
                self._pushChange(self.commitMessage(revision))
            except KeyboardInterrupt:
                self.log.warning('Leaving revision %s incomplete, stopped '
                                 'by user', revision.id)
                raise
            except BridgeException as e:
                self.log.critical("Couldn't sync revision %s: %s",
                                  revision.id, e)
                raise RevisionSyncFailure(revision, e) from e
            synced.append(revision)
            self.log.info('Synced %s', revision.id)

        self.log.info('Synchronization completed, now at revision %s',
                      synced[-1].id)
        return synced

    def _resetDirectory(self):
        """
        Remove the bridge directory, if it exists, and create it empty.
        """

        from os import makedirs
        from os.path import exists
        from shutil import rmtree
        from rtcbridge.shwrap import ExternalCommand

        if ExternalCommand.DRY_RUN:
            self.log.info('Not resetting "%s", dry run', self.directory)
            return

        if exists(self.directory):
            self.log.info('Removing existing "%s"', self.directory)
            rmtree(self.directory)
        makedirs(self.directory)

    def _pushChange(self, message):
        """
        Commit everything with the given `message` and push it.
        """

        self.target.commitAll(message, self.config.author)
        self.target.push(self.config.hg_repository)
