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

from logsink.appender import Appender, registry
from logsink.errors import (
    AppenderClosedError,
    AppenderConnectionError,
    ConfigurationError,
    InvalidPriorityError,
)
from logsink.event import LogEvent
from logsink.layouts import BasicLayout, Layout
from logsink.levels import Level, level_num


__all__ = [
    "Appender",
    "AppenderClosedError",
    "AppenderConnectionError",
    "BasicLayout",
    "ConfigurationError",
    "InvalidPriorityError",
    "Layout",
    "Level",
    "LogEvent",
    "level_num",
    "registry",
]
