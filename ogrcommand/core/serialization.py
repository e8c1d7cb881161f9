"""Table-driven rendering of option sets into command-line tokens.

A command family declares an ordered tuple of Rule objects. Each rule
pairs a predicate over the option set ("is this option set, and does it
win any conflict") with a pure renderer that turns the option value into
tokens. serialize() walks the whole table on every call, so the table
order is the argument order of the rendered command.

Flag names are emitted as-is; every value goes through shell.quote().

Example:
    >>> from ogrcommand.core import serialization as ser
    >>> from ogrcommand.options.ogr2ogr import ConversionOptions
    >>> rules = (ser.switch("overwrite", "-overwrite"),
    ...          ser.scalar("layer_name", "-nln"))
    >>> ser.serialize(rules, ConversionOptions(layer_name="roads"))
    ['-nln', "'roads'"]
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from ogrcommand.types import coordinates
from ogrcommand.utils import shell

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable

    from ogrcommand.options.base import OptionSet

    Predicate = Callable[[OptionSet], bool]
    Renderer = Callable[[Any], list[str]]

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Rule:
    """One entry of a serialization table.

    Attributes:
        option: Field name of the option the rule renders.
        applies: Predicate deciding whether the option is emitted.
        render: Turns the option value into command-line tokens.
    """

    option: str
    applies: Predicate
    render: Renderer

    def tokens(self, options: OptionSet) -> list[str]:
        if not self.applies(options):
            return []

        return self.render(options.get(self.option))


def serialize(rules: Iterable[Rule], options: OptionSet) -> list[str]:
    """Render an option set through a rule table, in table order."""
    tokens: list[str] = []
    for rule in rules:
        tokens.extend(rule.tokens(options))
    return tokens


def _text(value: Any) -> str:
    if isinstance(value, float):
        return coordinates.format_number(value)

    return str(value)


def _is_set(option: str) -> Predicate:
    return lambda options: options.is_set(option)


def _is_true(option: str) -> Predicate:
    return lambda options: options.get(option) is True


def _both(first: Predicate, second: Predicate | None) -> Predicate:
    if second is None:
        return first

    return lambda options: first(options) and second(options)


def unless_set(*others: str) -> Predicate:
    """Predicate that holds while none of ``others`` is set.

    Used for mutually exclusive options where one side wins.
    """
    checks = [_is_set(other) for other in others]
    return lambda options: not any(check(options) for check in checks)


def switch(option: str, flag: str, *, when: Predicate | None = None) -> Rule:
    """Bare flag emitted when a boolean option is true."""
    return Rule(option, _both(_is_true(option), when), lambda _: [flag])


def scalar(option: str, flag: str, *, when: Predicate | None = None) -> Rule:
    """``flag 'value'`` for text and numeric options."""
    return Rule(
        option,
        _both(_is_set(option), when),
        lambda value: [flag, shell.quote(_text(value))],
    )


def choice(option: str, flag: str) -> Rule:
    """``flag 'member'`` for enumeration options."""
    return Rule(
        option,
        _is_set(option),
        lambda value: [flag, shell.quote(value.value)],
    )


def compound(option: str, flag: str) -> Rule:
    """``flag 'rendered'`` for compound values exposing ``render()``."""
    return Rule(
        option,
        _is_set(option),
        lambda value: [flag, shell.quote(value.render())],
    )


def joined(option: str, flag: str, separator: str = ",") -> Rule:
    """Single ``flag 'a,b,c'`` for a list of enumeration members."""
    return Rule(
        option,
        _is_set(option),
        lambda value: [flag, shell.quote(separator.join(v.value for v in value))],
    )


def mapping(option: str, flag: str) -> Rule:
    """One ``flag 'KEY=VALUE'`` per entry, in insertion order."""

    def render(value: dict[str, str]) -> list[str]:
        tokens: list[str] = []
        for key, item in value.items():
            tokens.extend((flag, shell.quote(f"{key}={item}")))
        return tokens

    return Rule(option, _is_set(option), render)


def sequence(option: str, flag: str) -> Rule:
    """One ``flag 'rendered'`` per compound element, in list order."""

    def render(value: list[Any]) -> list[str]:
        tokens: list[str] = []
        for item in value:
            tokens.extend((flag, shell.quote(item.render())))
        return tokens

    return Rule(option, _is_set(option), render)


def member_of(option: str, flag: str, allowed: Collection[Any]) -> Rule:
    """``flag 'value'`` only when the value belongs to ``allowed``.

    Values outside the domain are dropped from the command and logged.
    """
    is_set = _is_set(option)

    def predicate(options: OptionSet) -> bool:
        if not is_set(options):
            return False
        value = options.get(option)
        if value in allowed:
            return True
        logger.warning(
            "Dropping option %s=%r: not one of %s",
            option,
            value,
            sorted(str(v) for v in allowed),
        )
        return False

    return Rule(option, predicate, lambda value: [flag, shell.quote(_text(value))])


def tri_state(option: str, flag: str) -> Rule:
    """``flag=YES`` / ``flag=NO`` for an optional boolean."""
    return Rule(
        option,
        lambda options: options.get(option) is not None,
        lambda value: [f"{flag}={'YES' if value else 'NO'}"],
    )
