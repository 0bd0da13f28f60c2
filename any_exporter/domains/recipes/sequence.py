"""Compiler for the compact value-sequence notation.

A sequence is a list of tokens separated by single spaces.  Each token is
one of:

    N        the single value N
    A+BxC    A followed by C more values, each the previous one plus B
    A-BxC    same as A+(-B)xC
    AxC      A repeated C+1 times (shorthand for A+0xC)

``A``, ``B`` and ``N`` are decimal literals that may carry a leading minus;
``C`` is a non-negative integer literal.  Anything else is rejected, so
``"1 2-3x4 1x2"`` compiles to ``[1, 2, -1, -4, -7, -10, 1, 1, 1]``.
"""

import re

from any_exporter.domains.recipes.types import SequenceFormatError

_UNSIGNED = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_SIGNED = rf"-?{_UNSIGNED}"

_SINGLE_RE = re.compile(_SIGNED)
_PROGRESSION_RE = re.compile(
    rf"(?P<start>{_SIGNED})"
    rf"(?:\+(?P<up>{_SIGNED})|-(?P<down>{_UNSIGNED}))?"
    r"x(?P<times>[0-9]+)"
)


def compile_token(token: str) -> list[float]:
    """Expand one token into its values.

    Raises:
        SequenceFormatError: The token matches none of the accepted shapes.
    """
    if _SINGLE_RE.fullmatch(token):
        return [float(token)]

    match = _PROGRESSION_RE.fullmatch(token)
    if match is None:
        raise SequenceFormatError(f"invalid sequence token {token!r}", token=token)

    value = float(match.group("start"))
    if match.group("up") is not None:
        step = float(match.group("up"))
    elif match.group("down") is not None:
        step = -float(match.group("down"))
    else:
        step = 0.0
    times = int(match.group("times"))

    values = [value]
    for _ in range(times):
        value += step
        values.append(value)
    return values


def compile_sequence(text: str) -> list[float]:
    """Compile a whole sequence string into an ordered list of values.

    Raises:
        SequenceFormatError: The text is empty or any token is malformed.
    """
    if not text:
        raise SequenceFormatError("empty sequence", token=text)

    values: list[float] = []
    for token in text.split(" "):
        values.extend(compile_token(token))
    return values


def is_non_decreasing(values: list[float]) -> bool:
    """Return True if no value is smaller than the one before it."""
    return all(prev <= cur for prev, cur in zip(values, values[1:]))
