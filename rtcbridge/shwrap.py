# -*- mode: python; coding: utf-8 -*-
# :Progetto: rtcbridge -- Tiny wrapper around external command
# :Creato:   sab 17 ott 2026 09:20:11 CEST
# :Autore:   rtcbridge contributors
# :Licenza:  GNU General Public License
#

__docformat__ = 'reStructuredText'

from subprocess import Popen, PIPE

from rtcbridge import BridgeException


MASK = '********'
"""Replacement shown in logs for secret arguments, such as passwords."""


class ExternalCommandFailure(BridgeException):
    "An external command exited with an unexpected status"


class ExternalCommand(object):
    """Wrap a single command to be executed, without any shell in between."""

    DEBUG = False
    """Print the output of the command, when not PIPEd to the caller."""

    DRY_RUN = False
    """Don't really execute the command."""

    def __init__(self, command=None, cwd=None, ok_status=None, secrets=None):
        """
        Initialize a ExternalCommand instance, specifying the command
        to be executed and eventually the working directory.

        `secrets` is a sequence of argument values that must never
        appear in the logs, nor in the string representation of the
        command.

        The instance will use the logger ``rtcbridge.shell``.
        """

        from logging import getLogger

        self.command = list(command or [])
        """The command to be executed."""

        self.cwd = cwd
        """The working directory, go there before execution."""

        self.exit_status = None
        """Once the command has been executed, this is its exit status."""

        self.ok_status = ok_status is None and (0,) or tuple(ok_status)
        """Used to determine which exit_status should not trigger warnings."""

        self.secrets = [s for s in (secrets or []) if s]
        """Argument values masked in the logs."""

        self._last_command = None
        """Last executed command."""

        self.log = getLogger('rtcbridge.shell')

    def __str__(self):
        """
        Return a string representation of the command prefixed by working dir.
        """

        r = '$' + repr(self)
        if self.cwd:
            r = self.cwd + ' ' + r
        return r

    def __repr__(self):
        """
        Compute a reasonable shell-like representation of the external command.
        """

        result = []
        for arg in self._last_command or self.command:
            if arg in self.secrets:
                arg = MASK
            bs_buf = []

            # Add a space to separate this argument from the others
            result.append(' ')

            needquote = (" " in arg) or ("\t" in arg)
            if needquote:
                result.append('"')

            for c in arg:
                if c == '\\':
                    # Don't know if we need to double yet.
                    bs_buf.append(c)
                elif c == '"':
                    # Double backspaces.
                    result.append('\\' * len(bs_buf) * 2)
                    bs_buf = []
                    result.append('\\"')
                else:
                    # Normal char
                    if bs_buf:
                        result.extend(bs_buf)
                        bs_buf = []
                    result.append(c)

            # Add remaining backspaces, if any.
            if bs_buf:
                result.extend(bs_buf)

            if needquote:
                result.extend(bs_buf)
                result.append('"')

        return ''.join(result)

    def isOk(self):
        """Tell whether the last execution terminated with an acceptable status."""

        return self.exit_status is None or self.exit_status in self.ok_status

    def execute(self, *args, **kwargs):
        """
        Execute the command, appending `args` to its base argument vector.

        Recognized keyword arguments are ``cwd``, ``input``,
        ``stdout`` and ``stderr`` (use ``PIPE`` to capture the streams).

        Return a tuple ``(output, error)`` of file-like objects, either
        of which is ``None`` when the corresponding stream was not
        captured.
        """

        from io import StringIO
        from os import devnull, getcwd
        from os.path import isdir
        from sys import stderr
        from errno import ENOENT

        self.exit_status = None

        self._last_command = list(self.command)
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            self._last_command.extend(args[0])
        else:
            self._last_command.extend(args)

        self.log.info(self)

        if self.DRY_RUN:
            return None, None

        cwd = kwargs.get('cwd') or self.cwd or getcwd()
        if not isdir(cwd):
            raise OSError(ENOENT, "Working directory does not exist", cwd)

        self.log.debug("Executing %r (%r)", self, cwd)

        input = kwargs.get('input')
        output = kwargs.get('stdout')
        error = kwargs.get('stderr')

        # When not in debug, redirect stderr and stdout to /dev/null
        # when the caller didn't ask for them.
        opened = []
        if not self.DEBUG:
            if output is None:
                output = open(devnull, 'w')
                opened.append(output)
            if error is None:
                error = open(devnull, 'w')
                opened.append(error)
        try:
            try:
                process = Popen(self._last_command,
                                stdin=input is not None and PIPE or None,
                                stdout=output,
                                stderr=error,
                                cwd=cwd,
                                universal_newlines=True)
            except OSError as e:
                if e.errno == ENOENT:
                    raise OSError(ENOENT, "%r does not exist!"
                                  % self._last_command[0])
                raise

            out, err = process.communicate(input=input)
        finally:
            for f in opened:
                f.close()

        self.exit_status = process.returncode
        if self.exit_status in self.ok_status:
            self.log.info("[Ok]")
        else:
            self.log.warning("[Status %s]", self.exit_status)

        # For debug purposes, copy the output to our stderr when hidden above
        if self.DEBUG:
            if out and output == PIPE:
                stderr.write('Output stream:\n')
                stderr.write(out)
            if err and error == PIPE:
                stderr.write('Error stream:\n')
                stderr.write(err)

        if out is not None:
            out = StringIO(out)
        if err is not None:
            err = StringIO(err)

        return out, err
