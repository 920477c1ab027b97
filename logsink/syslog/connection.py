# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import threading
import weakref

from logsink.errors import AppenderConnectionError
from logsink.logging import SPEW as log_SPEW

try:
    import syslog as _syslog
except ImportError:  # Windows does not have syslog
    _syslog = None


HAVE_SYSLOG = _syslog is not None


logger = logging.getLogger(__name__)


class _SharedHandle:
    """
    The process wide state behind one backend: which connection last called
    ``openlog`` and how many connections are open.
    """

    def __init__(self):
        self.lock = threading.Lock()
        self.active = None
        self.open_count = 0


_handles = weakref.WeakKeyDictionary()
_handles_lock = threading.Lock()


def _shared_handle(backend):
    with _handles_lock:
        handle = _handles.get(backend)
        if handle is None:
            handle = _handles[backend] = _SharedHandle()
        return handle


class SyslogConnection:
    """
    A single owned handle onto the syslog facility.

    The ``backend`` is anything that quacks like the stdlib ``syslog`` module, that
    is it provides ``openlog``, ``syslog`` and ``closelog``. The operating system's
    syslog handle is process wide, so connections on the same backend coordinate:
    a connection calls ``openlog`` again before emitting if another one opened
    since, every message carries its own facility, and ``closelog`` only happens
    once the last open connection closes.
    """

    def __init__(self, ident, logopt, facility, *, backend=None):
        if backend is None:
            backend = _syslog

        self.ident = ident
        self.logopt = logopt
        self.facility = facility

        self._backend = backend
        self._handle = None if backend is None else _shared_handle(backend)
        self._open = False

    @classmethod
    def open(cls, ident, logopt, facility, *, backend=None):
        conn = cls(ident, logopt, facility, backend=backend)
        conn._openlog()
        return conn

    @property
    def is_open(self):
        return self._open

    def _call_openlog(self):
        # Must be called with self._handle.lock held.
        try:
            self._backend.openlog(self.ident, int(self.logopt), int(self.facility))
        except (OSError, ValueError) as exc:
            raise AppenderConnectionError(
                f"unable to open syslog for {self.ident!r}: {exc}"
            ) from exc
        self._handle.active = self

    def _openlog(self):
        if self._backend is None:
            raise AppenderConnectionError("syslog is not available on this platform")

        with self._handle.lock:
            self._call_openlog()
            self._handle.open_count += 1
            self._open = True

        logger.debug(
            "Opened syslog connection ident=%r logopt=%r facility=%r",
            self.ident,
            self.logopt,
            self.facility,
        )

    def emit(self, priority, message):
        if not self._open:
            raise AppenderConnectionError(
                f"syslog connection for {self.ident!r} is closed"
            )

        logger.log(log_SPEW, "Emitting %r at priority %r", message, priority)

        with self._handle.lock:
            if not self._open:
                raise AppenderConnectionError(
                    f"syslog connection for {self.ident!r} is closed"
                )

            if self._handle.active is not self:
                self._call_openlog()

            # The stdlib passes the message to syslog(3) as the argument to a literal
            # "%s" format, so it's never interpreted as a format string.
            try:
                self._backend.syslog(int(priority) | int(self.facility), message)
            except (OSError, ValueError) as exc:
                raise AppenderConnectionError(
                    f"unable to send message to syslog: {exc}"
                ) from exc

    def close(self):
        if not self._open:
            return

        with self._handle.lock:
            if not self._open:
                return

            self._open = False
            self._handle.open_count -= 1
            if self._handle.active is self:
                self._handle.active = None
            if self._handle.open_count == 0:
                self._backend.closelog()

        logger.debug("Closed syslog connection ident=%r", self.ident)
