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
import logging.config

import click

from logsink import appenders
from logsink.errors import AppenderConnectionError, ConfigurationError
from logsink.event import LogEvent
from logsink.levels import LEVEL_NAMES
from logsink.logging import SPEW  # noqa: F401  registers the SPEW level name
from logsink.syslog import resolve_facility, resolve_logopt, resolve_priority


logger = logging.getLogger(__name__)


def _validate(resolver):
    def callback(ctx, param, value):
        if value is not None:
            try:
                return resolver(value)
            except ConfigurationError as exc:
                raise click.BadParameter(str(exc))

    return callback


def _validate_map(ctx, param, value):
    if not value:
        return None

    mapping = {}
    for item in value:
        level, sep, priority = item.partition("=")
        if not sep or not level or not priority:
            raise click.BadParameter(f"{item!r} is not of the form LEVEL=PRIORITY")
        try:
            mapping[level] = resolve_priority(priority)
        except ConfigurationError as exc:
            raise click.BadParameter(str(exc))
    return mapping


@click.group(
    context_settings={
        "auto_envvar_prefix": "LOGSINK",
        "help_option_names": ["-h", "--help"],
        "max_content_width": 88,
    }
)
@click.option(
    "--log-level",
    type=click.Choice(["spew", "debug", "info", "warning", "error", "critical"]),
    default="warning",
    show_default=True,
    help="The verbosity of the console logger.",
)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False, writable=True, readable=True),
    help="A file to additionally send logging to.",
)
def cli(log_level, log_file):
    """
    Diagnostic tools for logsink appenders.
    """
    handlers = ["console"]
    if log_file:
        handlers.append("file")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "class": "logging.Formatter",
                    "style": "{",
                    "format": "[{asctime}] [{levelname:^10}] {message}",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "level": log_level.upper(),
                    "formatter": "console",
                },
                "file": {
                    "class": "logging.handlers.WatchedFileHandler",
                    "filename": log_file or "/dev/null",
                    "level": log_level.upper(),
                    "formatter": "console",
                },
            },
            "root": {"level": "SPEW", "handlers": handlers},
        }
    )


@cli.command(short_help="Sends a message through a syslog appender.")
@click.option(
    "--ident",
    metavar="IDENT",
    help="The identifier prepended to the message. Defaults to the logger name.",
)
@click.option(
    "--facility",
    default="user",
    show_default=True,
    callback=_validate(resolve_facility),
    help="The syslog facility, by name (daemon, local0, ...) or number.",
)
@click.option(
    "--logopt",
    default="PID|CONS",
    show_default=True,
    callback=_validate(resolve_logopt),
    help="Options used to open the connection, names joined with '|'.",
)
@click.option(
    "--level",
    type=click.Choice([name.lower() for name in LEVEL_NAMES]),
    default="info",
    show_default=True,
    help="The level of the event to send.",
)
@click.option(
    "--map",
    "map_",
    multiple=True,
    metavar="LEVEL=PRIORITY",
    callback=_validate_map,
    help="Override the mapping of a level to a syslog priority, may be repeated.",
)
@click.option(
    "--logger",
    "logger_name",
    default="logsink",
    show_default=True,
    help="The name of the logger the event is attributed to.",
)
@click.argument("message")
def syslog(ident, facility, logopt, level, map_, logger_name, message):
    """
    Sends MESSAGE to the system logger, the same way an application using a syslog
    appender would, and then closes the appender again.
    """
    if not appenders.HAVE_SYSLOG:
        raise click.UsageError("syslog is not available on this platform.")

    for key, value in dict(
        ident=ident, facility=facility, logopt=logopt, level=level, map=map_
    ).items():
        logger.debug("Configuring %s to %r", key, value)

    try:
        appender = appenders.syslog(
            logger_name,
            ident=ident,
            facility=facility,
            logopt=logopt,
            map=map_,
        )
    except ConfigurationError as exc:
        raise click.UsageError(str(exc))
    except AppenderConnectionError:
        logger.exception("Unable to open syslog.")
        raise SystemExit(1)

    try:
        appender.append(LogEvent(logger_name, level, message))
    except (ConfigurationError, AppenderConnectionError):
        logger.exception("Unable to send message.")
        raise SystemExit(1)
    finally:
        appender.close()
