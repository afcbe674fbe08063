from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Participant:
    first_name: str
    last_name: str
    # Position in the extracted input; keeps namesakes distinct.
    index: int = field(default=0)

    @property
    def family(self) -> str:
        return self.last_name

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict[str, str]:
        return {"first_name": self.first_name, "last_name": self.last_name}


@dataclass(frozen=True)
class Pairing:
    """Giver gives a gift to receiver."""

    giver: Participant
    receiver: Participant

    @property
    def family_key(self) -> tuple[str, str]:
        return (self.giver.family, self.receiver.family)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"giver": self.giver.to_dict(), "receiver": self.receiver.to_dict()}
