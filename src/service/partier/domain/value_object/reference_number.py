"""
Ticket reference number: `TIX` + five decimal digits (10000-99999).

The value printed on the ticket and encoded in its QR code. Generation is
random and does not guarantee uniqueness; the ticket table's unique
constraint does, and issuance regenerates on collision.
"""

import random
import re
from typing import Optional

import attrs


REFERENCE_PREFIX = 'TIX'
REFERENCE_MIN = 10000
REFERENCE_MAX = 99999
REFERENCE_PATTERN = re.compile(r'^TIX(\d{5})$')

_rng = random.SystemRandom()


@attrs.frozen
class ReferenceNumber:
    value: str

    def __attrs_post_init__(self) -> None:
        if not REFERENCE_PATTERN.match(self.value):
            raise ValueError(f'Invalid reference number: {self.value!r}')

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> 'ReferenceNumber':
        digits = (rng or _rng).randint(REFERENCE_MIN, REFERENCE_MAX)
        return cls(f'{REFERENCE_PREFIX}{digits}')

    @classmethod
    def parse(cls, code: Optional[str]) -> Optional['ReferenceNumber']:
        """Parse a scanned payload; None when it is not a ticket code."""
        if not code:
            return None
        candidate = code.strip()
        if not REFERENCE_PATTERN.match(candidate):
            return None
        return cls(candidate)
