# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Command line tool base class: one parser, a sub-command per @arg method"""
from __future__ import annotations

from .pretty import TableLayout
from lexicon import envdefault, errors, pretty
from argparse import Action, Namespace
from os import PathLike
from typing import Any, Callable, Collection, Mapping, NoReturn, Sequence, TextIO, TypeVar

import argparse
import errno
import functools
import json as jsonlib
import logging
import requests.exceptions
import sys

# Optional shell completions
try:
    import argcomplete  # type: ignore

    ARGCOMPLETE_INSTALLED = True
except ImportError:
    ARGCOMPLETE_INSTALLED = False

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

SKIP_EVALUATION_TYPES = (property, functools.cached_property)
ARG_LIST_PROP = "_arg_list"
LOG_FORMAT = "%(levelname)s\t%(message)s"
EXPECTED_ERRORS = (requests.exceptions.ConnectionError, errors.Error)


class CustomFormatter(argparse.RawDescriptionHelpFormatter):
    """Help formatter to display the default value only for integers and non-empty strings"""

    def _get_help_string(self, action: Action) -> str:
        help_text = action.help or ""
        if "%(default)" not in help_text and action.default is not argparse.SUPPRESS and action.option_strings:
            if (not isinstance(action.default, bool) and isinstance(action.default, int)) or (
                isinstance(action.default, str) and action.default
            ):
                help_text += " (default: %(default)s)"

        return help_text


class UserError(Exception):
    """User error"""


F = TypeVar("F", bound=Callable)


def arg(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Declares an argument of a CLI command.

    Accepts the same arguments as `argparse.ArgumentParser.add_argument`.
    Methods marked with this decorator are exposed as commands named after
    the method, and parsed arguments are available as `self.args`::

        class CLI(CommandLineTool):

            @arg("word", nargs="+")
            def check(self):
                print(self.args.word)
    """

    def wrap(func: F) -> F:
        arg_list = getattr(func, ARG_LIST_PROP, None)
        if arg_list is None:
            arg_list = []
            setattr(func, ARG_LIST_PROP, arg_list)

        if args or kwargs:
            arg_list.insert(0, (args, kwargs))

        return func

    return wrap


class Config(dict):
    """Read-only JSON configuration file; a missing file is an empty config"""

    def __init__(self, file_path: str | PathLike):
        dict.__init__(self)
        self.file_path = file_path
        self.load()

    def load(self) -> None:
        self.clear()
        try:
            with open(self.file_path, encoding="utf-8") as fp:
                data = jsonlib.load(fp)
        except OSError as ex:
            if ex.errno == errno.ENOENT:
                return

            raise UserError(
                "Failed to load configuration file {!r}: {}: {}".format(self.file_path, ex.__class__.__name__, ex)
            ) from ex
        except ValueError as ex:
            raise UserError("Invalid JSON in configuration file {!r}".format(self.file_path)) from ex

        if not isinstance(data, dict):
            raise UserError("Configuration file {!r} must contain a JSON object".format(self.file_path))
        self.update(data)


class CommandLineTool:
    config: Config

    def __init__(self, name: str, parser: argparse.ArgumentParser | None = None):
        self.log = logging.getLogger(name)
        self.parser = parser or argparse.ArgumentParser(prog=name, formatter_class=CustomFormatter)
        self.parser.add_argument(
            "--config",
            help="config file location %(default)r",
            default=envdefault.LEXICON_CONFIG,
        )
        self.parser.add_argument("--version", action="version", version="lexicon {}".format(__version__))
        self.parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
        self.add_args(self.parser)
        self.subparsers = self.parser.add_subparsers(title="commands", dest="command", help="", metavar="")
        self.add_cmds()
        self.args: Namespace = Namespace()

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        pass  # override in sub-class

    def add_cmds(self) -> None:
        """Add every method tagged with @arg as a command"""
        for prop in sorted(dir(self)):
            # Skip @property and @cached_property attributes to delay coercing their evaluation.
            classprop = getattr(self.__class__, prop, None)
            if isinstance(classprop, SKIP_EVALUATION_TYPES):
                continue
            func = getattr(self, prop, None)
            if getattr(func, ARG_LIST_PROP, None) is None:
                continue
            assert func.__doc__, f"Missing docstring for {func.__qualname__}"
            parser = self.subparsers.add_parser(
                prop.replace("_", "-"), help=func.__doc__, description=func.__doc__, formatter_class=CustomFormatter
            )
            parser.set_defaults(func=func)
            for arg_args, arg_kwargs in getattr(func, ARG_LIST_PROP):
                parser.add_argument(*arg_args, **arg_kwargs)

    def print_response(
        self,
        result: Mapping[str, Any] | Collection[Mapping[str, Any]],
        json: bool = True,
        table_layout: TableLayout | None = None,
        header: bool = True,
        file: TextIO | None = None,
    ) -> None:
        """print command result in chosen format"""
        if file is None:
            file = sys.stdout

        if json:
            print(jsonlib.dumps(result, indent=4, sort_keys=True), file=file)
        else:
            rows = [result] if isinstance(result, Mapping) else result
            pretty.print_table(rows, table_layout=table_layout, header=header, file=file)

    def run(self, args: Sequence[str] | None = None) -> int | None:
        args = args or sys.argv[1:]
        if not args:
            args = ["--help"]

        if ARGCOMPLETE_INSTALLED:
            argcomplete.autocomplete(self.parser)
        self.args = self.parser.parse_args(args=args)
        if self.args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        try:
            self.config = Config(self.args.config)
            func = getattr(self.args, "func", None)
            if not func:
                self.parser.print_help()
                return 1
            return func()
        except (UserError,) + EXPECTED_ERRORS as ex:
            # nicer output on "expected" errors
            err = "command failed: {0.__class__.__name__}: {0}".format(ex)
            self.log.error(err)
            return 1
        except OSError as ex:
            if ex.errno != errno.EPIPE:
                raise
            self.log.error("*** output truncated ***")
            return 13  # SIGPIPE value in case anyone cares
        except KeyboardInterrupt:
            self.log.error("*** terminated by keyboard ***")
            return 2  # SIGINT

    def main(self, args: Sequence[str] | None = None) -> NoReturn:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logging.getLogger("requests").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        sys.exit(self.run(args))
