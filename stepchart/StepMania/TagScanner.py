from typing import Iterator, List, Optional, Tuple

TAG_PREFIX = "#"
TAG_NAME_SEPARATOR = ":"


def scan_lines(text: str) -> Iterator[str]:
    """
    Yields every line of text with surrounding whitespace removed, skipping blank lines.
    """
    for line in text.splitlines():
        line = line.strip()
        if line:
            yield line


class Idle:
    """No tag has been opened yet. Lines seen in this state are ignored."""

    def __repr__(self):
        return "Idle()"


class AccumulatingTag:
    def __init__(self, name: str, first_line: str = ""):
        self.name = name
        self.lines: List[str] = [first_line] if first_line else []

    @property
    def body(self) -> str:
        return "\n".join(self.lines)

    def __repr__(self):
        return f"AccumulatingTag(name={self.name!r}, lines={len(self.lines)})"


class TagAccumulator:
    """
    Groups scanned lines into (tag name, body) pairs.

    A tag body can span several lines and only ends when the next tag header
    or the end of input is reached, so each pair is emitted on the transition
    out of AccumulatingTag: either when feed() sees the next header, or when
    finish() is called.
    """

    def __init__(self):
        self.state = Idle()

    def feed(self, line: str) -> Optional[Tuple[str, str]]:
        """
        :param line: A stripped, non-empty line
        :return: The finished (name, body) pair if this line closed a tag, else None
        """
        if line.startswith(TAG_PREFIX):
            finished = self._flush()
            name, _, first_line = line[len(TAG_PREFIX):].partition(TAG_NAME_SEPARATOR)
            self.state = AccumulatingTag(name=name, first_line=first_line)
            return finished

        if isinstance(self.state, AccumulatingTag):
            self.state.lines.append(line)
        return None

    def finish(self) -> Optional[Tuple[str, str]]:
        return self._flush()

    def _flush(self) -> Optional[Tuple[str, str]]:
        if not isinstance(self.state, AccumulatingTag):
            return None
        finished = (self.state.name, self.state.body)
        self.state = Idle()
        return finished


def iter_tags(text: str) -> Iterator[Tuple[str, str]]:
    accumulator = TagAccumulator()
    for line in scan_lines(text):
        finished = accumulator.feed(line)
        if finished is not None:
            yield finished

    finished = accumulator.finish()
    if finished is not None:
        yield finished
