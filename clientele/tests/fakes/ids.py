"""Fake IdSourcePort implementation for testing."""

from collections.abc import Iterable

from clientele.core.ports import IdSourcePort


class SequenceIdSource(IdSourcePort):
    """Id source that replays a fixed sequence of candidates.

    Tracks how many draws were made for test assertions. Raises
    RuntimeError once the sequence is used up, unless repeat is set,
    in which case the sequence starts over.
    """

    def __init__(self, values: Iterable[int], repeat: bool = False):
        """Initialize with the candidates to hand out, in order."""
        self.values = list(values)
        self.repeat = repeat
        self.draw_count = 0

    def draw(self) -> int:
        if not self.values:
            raise RuntimeError("SequenceIdSource has no values")
        if self.draw_count >= len(self.values) and not self.repeat:
            raise RuntimeError("SequenceIdSource exhausted")
        value = self.values[self.draw_count % len(self.values)]
        self.draw_count += 1
        return value
