"""Tests unitaires pour les sources de lignes."""

from unittest.mock import MagicMock

from clipgroup.ui.prompts import ConsoleLineSource


class TestConsoleLineSource:
    """Tests pour ConsoleLineSource."""

    def test_returns_reply(self):
        """Retourne la ligne lue sur la console."""
        console = MagicMock()
        console.input.return_value = "Beach"

        reply = ConsoleLineSource(console).ask("Enter group name (empty = done): ")

        assert reply == "Beach"
        console.input.assert_called_once_with("Enter group name (empty = done): ", markup=False)

    def test_end_of_input_is_empty(self):
        """Une fin de flux donne une ligne vide."""
        console = MagicMock()
        console.input.side_effect = EOFError

        assert ConsoleLineSource(console).ask("prompt: ") == ""
