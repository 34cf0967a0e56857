# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Syncable targets
# :Creato:   sab 17 ott 2026 11:24:52 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

"""
Syncronizable targets are the simplest abstract wrappers around a
working directory shared with the source version control system.
"""

__docformat__ = 'reStructuredText'

from rtcbridge import BridgeBug
from rtcbridge.shwrap import ExternalCommandFailure
from rtcbridge.workdir import WorkingDir


class TargetInitializationFailure(ExternalCommandFailure):
    "Failure initializing the target VCS"


class CommitFailure(ExternalCommandFailure):
    "Failure committing the changes on the target system"


class PushFailure(ExternalCommandFailure):
    "Failure pushing the commits to the target remote repository"


class TargetWorkingDir(WorkingDir):
    """
    This is an abstract working dir usable as a *shadow* of another
    kind of VC, sharing the same working directory.

    Most interesting entry points are:

    initializeRepository
        to create the target repository in the working directory

    commitAll
        to register whatever changed in the working directory,
        except the metadata of the source system

    push
        to send the local commits to the remote repository

    Subclasses MUST override the _underscoredMethods.
    """

    def __init__(self, repository, ignored_metadirs=()):
        """
        Initialize the working dir; `ignored_metadirs` lists the
        directories, usually belonging to the source system, that
        must never be committed.
        """

        WorkingDir.__init__(self, repository)
        self.ignored_metadirs = list(ignored_metadirs)

    def initializeRepository(self):
        """
        Create a brand new repository in the working directory.
        """

        self.log.info('Initializing new repository in %r',
                      self.repository.basedir)
        self._initializeRepository()

    def _initializeRepository(self):
        raise BridgeBug("%s should override this method!" % self.__class__)

    def commitAll(self, message, author):
        """
        Add and remove whatever changed, then commit everything with
        the given `message` on behalf of `author`.
        """

        self.log.info('Committing %r...', message.split('\n', 1)[0])
        self._addRemoveAll()
        self._commit(message, author)

    def _addRemoveAll(self):
        raise BridgeBug("%s should override this method!" % self.__class__)

    def _commit(self, message, author):
        raise BridgeBug("%s should override this method!" % self.__class__)

    def push(self, remote_url):
        """
        Push every local commit to `remote_url`.
        """

        self.log.info('Pushing to %r', remote_url)
        self._push(remote_url)

    def _push(self, remote_url):
        raise BridgeBug("%s should override this method!" % self.__class__)
