"""Sources de lignes pour la saisie interactive."""

from typing import Optional, Protocol

from loguru import logger
from rich.console import Console


class LineSource(Protocol):
    """
    Fournit une ligne de texte en réponse à une invite.

    Les stratégies de regroupement ne dépendent que de cette interface,
    ce qui permet de les tester avec des réponses scriptées.
    """

    def ask(self, prompt: str) -> str:
        ...


class ConsoleLineSource:
    """
    Lit les réponses de l'utilisateur sur la console Rich.

    Attributs :
        console: Console Rich utilisée pour afficher l'invite et lire la ligne.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialise la source.

        Arguments :
            console: Console Rich à utiliser (nouvelle console par défaut).
        """
        self.console = console or Console()

    def ask(self, prompt: str) -> str:
        """
        Affiche l'invite et retourne la ligne saisie, sans le retour chariot.

        Une fin de flux (Ctrl-D) est traitée comme une ligne vide.

        Arguments :
            prompt: Texte de l'invite, affiché tel quel.

        Retourne :
            La ligne saisie.
        """
        try:
            reply = self.console.input(prompt, markup=False)
        except EOFError:
            logger.debug("Fin de l'entrée standard, réponse vide")
            return ""
        logger.debug(f"{prompt.strip()} -> {reply!r}")
        return reply
