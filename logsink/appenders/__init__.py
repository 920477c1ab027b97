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

from logsink.errors import ConfigurationError
from logsink.syslog.connection import HAVE_SYSLOG

from .system import SyslogAppender


_factories = {}


def register_factory(kind, factory):
    _factories[kind] = factory
    return factory


def create(kind, name, **opts):
    try:
        factory = _factories[kind]
    except KeyError:
        raise ConfigurationError(f"unknown appender kind {kind!r}") from None

    return factory(name, **opts)


def kinds():
    return sorted(_factories)


def syslog(name=None, **opts):
    """
    Accessor / factory for the syslog appender.
    """
    if not name:
        raise ConfigurationError("the syslog appender needs a name as first argument")
    return create("syslog", name, **opts)


# Only offer the syslog appender where the platform has a syslog facility.
if HAVE_SYSLOG:
    register_factory("syslog", SyslogAppender)


__all__ = ["SyslogAppender", "create", "kinds", "register_factory", "syslog"]
