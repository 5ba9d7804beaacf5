import argparse

import pytest
from pydantic import ValidationError

from fast_batch.core.definition import ArgumentSpec, CommandDefinition, OptionSpec
from fast_batch.exceptions import InvalidArgumentException, InvalidDefinitionException


def test_arguments_keep_declaration_order():
    definition = CommandDefinition()
    definition.add_argument("source", required=True)
    definition.add_argument("target", required=True)
    definition.add_argument("tags", is_array=True)

    assert [a.name for a in definition.arguments] == ["source", "target", "tags"]
    assert definition.get_argument("tags").is_array
    assert definition.has_argument("source")
    assert not definition.has_argument("missing")


def test_required_argument_after_optional_is_rejected():
    definition = CommandDefinition([ArgumentSpec(name="limit")])

    with pytest.raises(InvalidDefinitionException):
        definition.add_argument("source", required=True)


def test_nothing_can_follow_an_array_argument():
    definition = CommandDefinition([ArgumentSpec(name="files", is_array=True)])

    with pytest.raises(InvalidDefinitionException):
        definition.add_argument("extra")


def test_duplicate_names_and_shortcuts_are_rejected():
    definition = CommandDefinition(
        arguments=[ArgumentSpec(name="source")],
        options=[OptionSpec(name="force", shortcut="f")],
    )

    with pytest.raises(InvalidDefinitionException):
        definition.add_argument("source")
    with pytest.raises(InvalidDefinitionException):
        definition.add_option("force")
    with pytest.raises(InvalidDefinitionException):
        definition.add_option("fast", shortcut="f")


def test_frozen_definition_cannot_change():
    definition = CommandDefinition().freeze()

    assert definition.is_frozen
    with pytest.raises(InvalidDefinitionException):
        definition.add_argument("source")


def test_required_argument_cannot_have_default():
    with pytest.raises(ValidationError):
        ArgumentSpec(name="source", required=True, default="x")


def test_flag_option_cannot_have_default():
    with pytest.raises(ValidationError):
        OptionSpec(name="force", default="yes")


def test_unknown_argument_lookup_raises():
    with pytest.raises(InvalidArgumentException, match='The "nope" argument does not exist.'):
        CommandDefinition().get_argument("nope")


def test_configure_parser_lets_required_arguments_be_missing():
    definition = CommandDefinition()
    definition.add_argument("source", required=True)
    definition.add_argument("ids", required=True, is_array=True)
    definition.add_option("dry-run")
    definition.add_option("limit", accepts_value=True, default="10")
    definition.add_option("tag", shortcut="t", accepts_value=True, is_array=True)

    parser = argparse.ArgumentParser()
    definition.configure_parser(parser)

    empty = parser.parse_args([])
    assert empty.source is None
    assert empty.ids == []
    assert empty.dry_run is False
    assert empty.limit == "10"
    assert empty.tag is None

    full = parser.parse_args(["users.csv", "1", "2", "--dry-run", "--limit", "5", "-t", "a", "--tag", "b"])
    assert full.source == "users.csv"
    assert full.ids == ["1", "2"]
    assert full.dry_run is True
    assert full.limit == "5"
    assert full.tag == ["a", "b"]
