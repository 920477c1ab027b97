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

import enum
import functools
import operator

from logsink.errors import ConfigurationError, InvalidPriorityError


@enum.unique
class Priority(enum.IntEnum):
    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


# Facilities are encoded the way openlog(3) expects them, i.e. shifted left by 3.
@enum.unique
class Facility(enum.IntEnum):
    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3


class LogOption(enum.IntFlag):
    PID = 0x01
    CONS = 0x02
    ODELAY = 0x04
    NDELAY = 0x08
    NOWAIT = 0x10
    PERROR = 0x20


PRIORITY_NAMES = {p.name: p for p in Priority}
PRIORITY_NAMES.update(
    {
        "EMERGENCY": Priority.EMERG,
        "PANIC": Priority.EMERG,
        "CRITICAL": Priority.CRIT,
        "ERROR": Priority.ERR,
        "WARN": Priority.WARNING,
        "INFORMATIONAL": Priority.INFO,
    }
)

FACILITY_NAMES = {f.name: f for f in Facility}

LOGOPT_NAMES = {o.name: o for o in LogOption}


def _symbol(name):
    name = name.strip().upper()
    if name.startswith("LOG_"):
        name = name[len("LOG_") :]
    return name


def resolve_priority(value):
    if isinstance(value, bool):
        raise InvalidPriorityError(f"unknown syslog priority {value!r}")

    if isinstance(value, int):
        try:
            return Priority(value)
        except ValueError:
            raise InvalidPriorityError(f"unknown syslog priority {value!r}") from None

    if isinstance(value, str):
        try:
            return PRIORITY_NAMES[_symbol(value)]
        except KeyError:
            raise InvalidPriorityError(f"unknown syslog priority {value!r}") from None

    raise InvalidPriorityError(f"unknown syslog priority {value!r}")


def resolve_facility(value):
    if isinstance(value, bool):
        raise ConfigurationError(f"unknown syslog facility {value!r}")

    if isinstance(value, int):
        # Platform specific facilities (LOG_NTP, LOG_SECURITY, ...) are passed through
        # as long as they leave the priority bits clear.
        if value < 0 or value & 0x07:
            raise ConfigurationError(f"unknown syslog facility {value!r}")
        try:
            return Facility(value)
        except ValueError:
            return value

    if isinstance(value, str):
        # Allow numeric strings, such as what comes from an environment variable.
        if value.strip().isdigit():
            return resolve_facility(int(value))
        try:
            return FACILITY_NAMES[_symbol(value)]
        except KeyError:
            raise ConfigurationError(f"unknown syslog facility {value!r}") from None

    raise ConfigurationError(f"unknown syslog facility {value!r}")


def _logopt_flag(value):
    if isinstance(value, bool):
        raise ConfigurationError(f"unknown syslog option {value!r}")

    if isinstance(value, int):
        if value < 0:
            raise ConfigurationError(f"unknown syslog option {value!r}")
        return LogOption(value)

    if isinstance(value, str):
        if value.strip().isdigit():
            return LogOption(int(value))
        try:
            return LOGOPT_NAMES[_symbol(value)]
        except KeyError:
            raise ConfigurationError(f"unknown syslog option {value!r}") from None

    raise ConfigurationError(f"unknown syslog option {value!r}")


def resolve_logopt(value):
    """
    Turns ``value`` into a ``LogOption``. ``value`` may be an integer bit field, a
    string of option names joined with ``|`` (``"PID|CONS"``, ``"LOG_PID | LOG_CONS"``),
    or an iterable of names and/or integers which are OR'd together.
    """
    if isinstance(value, str):
        parts = [part for part in value.split("|") if part.strip()]
    elif isinstance(value, int):
        parts = [value]
    else:
        try:
            parts = list(value)
        except TypeError:
            raise ConfigurationError(f"unknown syslog option {value!r}") from None

    return functools.reduce(
        operator.or_, (_logopt_flag(part) for part in parts), LogOption(0)
    )
