"""
String split/join transforms.
"""

from typing import List, Sequence

from pydantic import BaseModel, Field


class SplitResponse(BaseModel):
    """Characters at odd and even 1-indexed positions."""

    odd: List[str] = Field(default_factory=list)
    even: List[str] = Field(default_factory=list)


class JoinResponse(BaseModel):
    """Interleaved string rebuilt from odd/even characters."""

    string: str


def split_string(value: str) -> SplitResponse:
    """Split ``value`` into characters at odd and even positions.

    Positions are 1-indexed, so the first character lands in ``odd``.
    """
    response = SplitResponse()
    for position, letter in enumerate(value, start=1):
        if position % 2 == 0:
            response.even.append(letter)
        else:
            response.odd.append(letter)
    return response


def join_halves(odd: Sequence[str], even: Sequence[str]) -> JoinResponse:
    """Interleave ``odd`` and ``even`` back into a single string.

    Walks up to the longer of the two sequences; a missing entry on either
    side contributes nothing.
    """
    max_length = max(len(odd), len(even))
    letters: List[str] = []
    for index in range(max_length):
        if index < len(odd):
            letters.append(odd[index])
        if index < len(even):
            letters.append(even[index])
    return JoinResponse(string="".join(letters))
