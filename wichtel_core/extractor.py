"""Turn free-form participant text into Participant records."""

from __future__ import annotations

import logging
import re

from .models import Participant

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"(?P<first_name>\w+)\s(?P<last_name>\w+)")


def extract(text: str) -> list[Participant]:
    """One participant per line: given name, one whitespace, family name.

    Lines without a match are skipped. Order follows the input.
    """
    participants: list[Participant] = []
    # Only \n and \r\n end a line; other Unicode breaks stay inside it.
    for lineno, line in enumerate((text or "").split("\n"), start=1):
        line = line.removesuffix("\r")
        m = NAME_PATTERN.search(line)
        if not m:
            if line.strip():
                logger.debug("Skipping line %d without a name: %r", lineno, line)
            continue
        participants.append(
            Participant(
                first_name=m.group("first_name"),
                last_name=m.group("last_name"),
                index=len(participants),
            )
        )
    return participants
