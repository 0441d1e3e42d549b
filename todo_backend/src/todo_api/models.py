from __future__ import annotations

import re

from .errors import InvalidDescription

CHECK_MARK = "√"
UNCHECKED = " "

_PLACEHOLDER = re.compile(r":(check|id|description)\b")


# PUBLIC_INTERFACE
def validate_description(description: str) -> str:
    """Return description unchanged, or raise InvalidDescription if it is empty."""
    if description == "":
        raise InvalidDescription()
    return description


# PUBLIC_INTERFACE
class Task:
    """
    A single to-do item.

    Fields:
    - id: Positive integer assigned by the repository's sequential counter
    - description: Free text, never empty
    - completed: Completion flag, False on construction

    The entity is mutable: handlers load it from a repository, call
    mark_completed()/update_description() and store it back.
    """

    def __init__(self, id: int, description: str) -> None:
        self._id = id
        self._description = validate_description(description)
        self._completed = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def description(self) -> str:
        return self._description

    @property
    def completed(self) -> bool:
        return self._completed

    def mark_completed(self) -> None:
        self._completed = True

    def update_description(self, new_description: str) -> None:
        """Replace the description; the completion flag is left as is."""
        self._description = validate_description(new_description)

    def represented_as(self, format: str) -> str:
        """
        Render the task through a display format.

        Placeholders:
        - :check -> '√' when completed, a single space otherwise
        - :id -> the task id
        - :description -> the description text

        Substitution happens in one pass, so placeholder-like text inside the
        description is emitted verbatim.
        """
        values = {
            "check": CHECK_MARK if self._completed else UNCHECKED,
            "id": str(self._id),
            "description": self._description,
        }
        return _PLACEHOLDER.sub(lambda m: values[m.group(1)], format)

    def __repr__(self) -> str:
        return f"Task(id={self._id}, description={self._description!r}, completed={self._completed})"
