"""Tests for commands and the invoker."""

from patternkit.behavioral.command import (
    AppendTextCommand,
    Command,
    CommandInvoker,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    TextDocument,
)


class TestCommands:
    """Test execute and undo."""

    def test_light_commands(self):
        light = Light("kitchen")
        on = LightOnCommand(light)

        on.execute()
        assert light.is_on is True

        on.undo()
        assert light.is_on is False

    def test_light_off_undo_restores_previous_state(self):
        light = Light()
        light.turn_on()
        off = LightOffCommand(light)

        off.execute()
        assert light.is_on is False
        off.undo()
        assert light.is_on is True

    def test_append_text(self):
        document = TextDocument("Hello")
        command = AppendTextCommand(document, ", world")

        command.execute()
        assert document.text == "Hello, world"
        command.undo()
        assert document.text == "Hello"

    def test_macro_undo_runs_in_reverse(self):
        document = TextDocument()
        macro = MacroCommand([AppendTextCommand(document, "a"), AppendTextCommand(document, "b")])

        macro.execute()
        assert document.text == "ab"
        macro.undo()
        assert document.text == ""


class TestCommandInvoker:
    """Test history handling."""

    def test_undo_reverts_most_recent(self):
        document = TextDocument()
        invoker = CommandInvoker()
        invoker.run(AppendTextCommand(document, "one "))
        invoker.run(AppendTextCommand(document, "two"))

        assert invoker.undo() is True
        assert document.text == "one "
        assert len(invoker.history) == 1

    def test_undo_with_empty_history(self):
        assert CommandInvoker().undo() is False

    def test_irreversible_commands_not_recorded(self):
        class Ping(Command):
            def __init__(self):
                self.count = 0

            def execute(self):
                self.count += 1

        ping = Ping()
        invoker = CommandInvoker()
        invoker.run(ping)

        assert ping.count == 1
        assert invoker.history == []
