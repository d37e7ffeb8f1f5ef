"""Message templates with a single ``%status%`` slot."""

from __future__ import annotations

from dataclasses import dataclass

STATUS_SLOT = "%status%"


@dataclass(frozen=True)
class StatusTemplate:
    """A message template split once around its first ``%status%`` slot.

    Only the first occurrence is a slot; any later ``%status%`` text is
    kept literally.

    Example:
        >>> StatusTemplate.parse("got HTTP %status%, expected 200").render(404)
        'got HTTP 404, expected 200'
    """

    head: str
    tail: str | None = None

    @classmethod
    def parse(cls, template: str) -> StatusTemplate:
        head, slot, tail = template.partition(STATUS_SLOT)
        if not slot:
            return cls(head=template)
        return cls(head=head, tail=tail)

    @property
    def has_slot(self) -> bool:
        return self.tail is not None

    @property
    def raw(self) -> str:
        """The template text as configured."""
        if self.tail is None:
            return self.head
        return f"{self.head}{STATUS_SLOT}{self.tail}"

    def render(self, status_code: int) -> str:
        if self.tail is None:
            return self.head
        return f"{self.head}{status_code:d}{self.tail}"
