import os
import sys
import time
from contextlib import suppress
from enum import Enum
from typing import NamedTuple, Optional

from markup import extract_text
from tokenizer import Token, compute_word_frequencies, tokenize

DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"
EMPTY_INDICATOR = "Histogram[ empty ]"


class FileAccessError(Exception):
    """Raised when the input cannot be read or the output cannot be written."""

    def __init__(self, path, message):
        super().__init__(f"{message}: '{path}'")
        self.path = path


class State(Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    RANKED = "ranked"


class RankedEntry(NamedTuple):
    word: Token
    count: int


def pad_left(text: str, width: int) -> str:
    '''Right-justifies text in a field of the given width using spaces.'''
    if len(text) >= width:
        return text
    return " " * (width - len(text)) + text


def render_bar(entry: RankedEntry, width: int) -> str:
    """
    Formats one histogram line as ASCII art, e.g. "cat | == (2)".
    The bar has exactly one "=" per occurrence and is never truncated.

    Args:
        entry (RankedEntry): The word and its count.
        width (int): Column width the word is right-justified to.

    Returns:
        str: The rendered line, without a trailing newline.
    """
    return f"{pad_left(entry.word, width)} | {'=' * entry.count} ({entry.count})"


def render_label(entry: RankedEntry, width: int) -> str:
    '''Short form of a histogram line, e.g. "cat | (2)".'''
    return f"{pad_left(entry.word, width)} | ({entry.count})"


class Histogram:
    """
    Histogram of word frequency in a text file.

    Reads text files into a case-insensitive frequency table, ranks the
    words by descending frequency and writes the ranking as ASCII art.
    """

    def __init__(self, path=None, markup=False):
        self._entries: dict[Token, int] = {}
        self._longest = 0
        self._ranked: Optional[tuple[RankedEntry, ...]] = None
        self._state = State.UNINITIALIZED
        if path is not None:
            self.build(path, markup=markup)

    @property
    def state(self) -> State:
        return self._state

    @property
    def entries(self) -> dict[Token, int]:
        return dict(self._entries)

    @property
    def longest(self) -> int:
        return self._longest

    def __len__(self):
        return len(self._entries)

    def build(self, path, markup=False) -> None:
        """
        Reads the file and adds its words to the frequency table.

        The whole file is read before anything is counted, so a failed read
        leaves the table untouched. Counts accumulate across calls and any
        cached ranking is dropped.

        Args:
            path: Path to a UTF-8 or ASCII text file.
            markup (bool): Strip HTML tags before tokenizing.

        Raises:
            FileAccessError: If the file is missing or unreadable.
        """
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as file:
                text = file.read()
        except OSError as exc:
            raise FileAccessError(path, "Cannot read input file") from exc

        if markup:
            text = extract_text(text)

        counts, longest = compute_word_frequencies(tokenize(text))
        for word, count in counts.items():
            self._entries[word] = self._entries.get(word, 0) + count
        self._longest = max(self._longest, longest)
        self._ranked = None
        self._state = State.LOADED

    def sorted_entries(self) -> tuple[RankedEntry, ...]:
        """
        Returns all the entries sorted by decreasing frequency, alphabetically for ties.
        The ranking is computed once and reused until the table changes.
        """
        if self._ranked is not None:
            return self._ranked
        ranked = sorted(self._entries.items(), key=lambda item: (-item[1], item[0]))
        self._ranked = tuple(RankedEntry(word, count) for word, count in ranked)
        if self._state is State.LOADED:
            self._state = State.RANKED
        return self._ranked

    def render(self, path) -> None:
        """
        Writes the ASCII art histogram to a file, one line per word.
        An existing file is overwritten. Rendering before any build writes an empty file.

        Raises:
            FileAccessError: If the file cannot be created or written.
        """
        lines = [render_bar(entry, self._longest) + "\n" for entry in self.sorted_entries()]
        try:
            file = open(path, "w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise FileAccessError(path, "Cannot write output file") from exc
        try:
            with file:
                file.writelines(lines)
        except OSError as exc:
            # no partial histogram is left behind
            with suppress(OSError):
                os.remove(path)
            raise FileAccessError(path, "Cannot write output file") from exc

    def describe(self) -> str:
        if not self._entries:
            return EMPTY_INDICATOR
        return "\n".join(render_label(entry, self._longest) for entry in self.sorted_entries())

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return f"Histogram(words={len(self._entries)}, state={self._state.value})"


def elapsed_ms(start):
    return int((time.perf_counter() - start) * 1000)


def main(argv=None):
    """
    Reads a text file, ranks its words and writes the histogram,
    printing how long each stage took.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 2:
        print("Usage: python histogram.py [input_file [output_file]]")
        sys.exit(1)

    input_path = args[0] if len(args) > 0 else DEFAULT_INPUT
    output_path = args[1] if len(args) > 1 else DEFAULT_OUTPUT

    try:
        start = time.perf_counter()
        histogram = Histogram(input_path)
        print(f"Reading time in milliseconds: {elapsed_ms(start)}")

        # sorting explicitly so it is timed on its own
        start = time.perf_counter()
        histogram.sorted_entries()
        print(f"Sorting time in milliseconds: {elapsed_ms(start)}")

        start = time.perf_counter()
        histogram.render(output_path)
        print(f"Writing time in milliseconds: {elapsed_ms(start)}")
    except FileAccessError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
