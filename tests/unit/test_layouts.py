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

import arrow
import pytest

from logsink.errors import ConfigurationError
from logsink.event import LogEvent
from logsink.layouts import BasicLayout, Layout, format_obj
from logsink.levels import Level


class TestLogEvent:
    def test_defaults_time(self):
        before = arrow.utcnow()
        event = LogEvent("app", "info", "hello")
        assert before <= event.time <= arrow.utcnow()

    def test_resolves_level(self):
        assert LogEvent("app", "ERROR", "boom").level is Level.error

    def test_rejects_unknown_level(self):
        with pytest.raises(ConfigurationError):
            LogEvent("app", "loud", "boom")

    def test_is_frozen(self):
        event = LogEvent("app", Level.info, "hello")
        with pytest.raises(AttributeError):
            event.data = "changed"


class TestBasicLayout:
    @pytest.mark.parametrize(
        ("level", "data", "expected"),
        [
            (Level.debug, "hello", "DEBUG  app : hello"),
            (Level.info, "hello", " INFO  app : hello"),
            (Level.fatal, ValueError("bad"), "FATAL  app : <ValueError> bad"),
            (Level.warn, {"a": 1}, " WARN  app : {'a': 1}"),
        ],
    )
    def test_format(self, level, data, expected):
        assert BasicLayout().format(LogEvent("app", level, data)) == expected

    def test_no_footer(self):
        assert BasicLayout().footer() == ""


def test_layout_is_abstract():
    with pytest.raises(TypeError):
        Layout()


@pytest.mark.parametrize(
    ("obj", "expected"),
    [("text", "text"), (KeyError("k"), "<KeyError> 'k'"), (3, "3"), (None, "None")],
)
def test_format_obj(obj, expected):
    assert format_obj(obj) == expected
