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

import abc

from logsink.levels import level_name


class Layout(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def format(self, event):
        """
        Renders the given ``LogEvent`` as a string. Returning an empty string tells the
        appender that there is nothing to send.
        """

    def footer(self):
        return ""


def format_obj(obj):
    if isinstance(obj, str):
        return obj
    elif isinstance(obj, BaseException):
        return f"<{type(obj).__name__}> {obj}"
    else:
        return repr(obj)


class BasicLayout(Layout):
    """
    Formats an event as ``LEVEL  logger : message``.
    """

    def format(self, event):
        return f"{level_name(event.level):>5}  {event.logger} : {format_obj(event.data)}"
