"""Map operation data model."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from clipgroup.exceptions import UnknownOperationKindError


class OperationKind(Enum):
    """What a map operation does with the clips of its range."""

    COPY = "copy"


def available_kinds() -> List[str]:
    """Return the names accepted by parse_kind."""
    return [kind.value for kind in OperationKind]


def parse_kind(name: str) -> OperationKind:
    """
    Resolve a kind name typed by the user.

    Args:
        name: Kind name, e.g. 'copy'.

    Returns:
        Matching OperationKind.

    Raises:
        UnknownOperationKindError: If no kind has this name.
    """
    try:
        return OperationKind(name.strip())
    except ValueError:
        raise UnknownOperationKindError(name, ", ".join(available_kinds())) from None


@dataclass(frozen=True)
class MapOp:
    """
    A named instruction applied to every clip with start <= id < end.

    An empty or inverted range is allowed and simply matches nothing.
    Two operations are equal only if all four fields are.
    """

    kind: OperationKind
    name: str
    start: int
    end: int

    def contains(self, media_id: int) -> bool:
        """Check if a clip ID falls in this operation's range."""
        return self.start <= media_id < self.end

    def __str__(self) -> str:
        return f"{self.name} ({self.start}..{self.end})"
