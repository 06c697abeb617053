# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers producing help output with options listed alphabetically."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Final, TypeVar

import typer
from click.core import Command, Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


def _primary_option_name(param: Parameter) -> str:
    """Return the sort key for ``param``.

    Args:
        param: Click parameter whose option names are inspected.

    Returns:
        str: Lower-cased long option name without leading dashes, falling back
        to the first declared name and then the parameter name.
    """

    option_names: Iterable[str] = tuple(getattr(param, "opts", ())) + tuple(
        getattr(param, "secondary_opts", ()),
    )
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


def _write_sorted_params(command: Command, ctx: Context, formatter: HelpFormatter) -> None:
    """Write the argument and option sections of ``command`` with options sorted.

    Arguments keep their declaration order. Options are ordered by
    :func:`_primary_option_name`, ties broken by declaration order.

    Args:
        command: Click command whose parameters are rendered.
        ctx: Click context used to build help records.
        formatter: Formatter receiving the help sections.
    """

    arguments: list[tuple[str, str]] = []
    options: list[tuple[tuple[str, int], tuple[str, str]]] = []

    for index, param in enumerate(command.get_params(ctx)):
        record = param.get_help_record(ctx)
        if record is None:
            continue
        if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
            arguments.append(record)
            continue
        options.append(((_primary_option_name(param), index), record))

    if arguments:
        with formatter.section("Arguments"):
            formatter.write_dl(arguments)
    if options:
        with formatter.section("Options"):
            formatter.write_dl([record for _, record in sorted(options, key=lambda item: item[0])])


class SortedTyperCommand(TyperCommand):
    """Typer command that renders its options in sorted order."""

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Render argument and option help with options sorted alphabetically.

        Args:
            ctx: Click context for the command being rendered.
            formatter: Formatter receiving the help sections.
        """

        _write_sorted_params(self, ctx, formatter)


class SortedTyperGroup(TyperGroup):
    """Typer group listing its own options and its commands alphabetically."""

    command_class = SortedTyperCommand

    def list_commands(self, ctx: Context) -> list[str]:
        """Return registered command names in alphabetical order.

        Args:
            ctx: Click context for the group.

        Returns:
            list[str]: Sorted command names.
        """

        return sorted(super().list_commands(ctx))

    def format_options(self, ctx: Context, formatter: HelpFormatter) -> None:
        """Render the group's sorted options followed by its sorted commands.

        Args:
            ctx: Click context for the group.
            formatter: Formatter receiving the help sections.
        """

        _write_sorted_params(self, ctx, formatter)
        self.format_commands(ctx, formatter)


class SortedTyper(typer.Typer):
    """Typer application that emits sorted command and option listings."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Register a command that uses :class:`SortedTyperCommand` unless ``cls`` is given.

        Args:
            name: Optional command name; Typer derives one from the function otherwise.
            cls: Optional command class overriding :class:`SortedTyperCommand`.
            **kwargs: Remaining keyword arguments forwarded to :meth:`typer.Typer.command`.

        Returns:
            Callable[[CommandCallback], CommandCallback]: Decorator registering the command.
        """

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, cls: type[TyperGroup] | None = None, **kwargs: Any) -> SortedTyper:
    """Build a :class:`SortedTyper` application.

    Pass ``rich_markup_mode=None`` to keep help rendering on the click
    formatter path, which is where the sorted listings are produced.

    Args:
        cls: Optional group class overriding :class:`SortedTyperGroup`.
        **kwargs: Keyword arguments forwarded to :class:`typer.Typer`.

    Returns:
        SortedTyper: Configured Typer application.
    """

    return SortedTyper(cls=cls, **kwargs)


__all__ = ["SortedTyper", "SortedTyperCommand", "SortedTyperGroup", "create_typer"]
