import re
from typing import Iterable, Iterator, Optional

Token = str  # Type alias for clarity

WORD_PATTERN = re.compile(r"[A-Za-z]+")


def tokenize(text: str) -> Iterator[Token]:
    """
    Lazily yields the words found in raw text.
    A word is a maximal run of ASCII letters; digits, punctuation,
    whitespace and non-ASCII characters all act as delimiters.

    Args:
        text (str): The raw text to scan.

    Returns:
        Iterator[Token]: The words in the order they appear, case preserved.
    """
    for match in WORD_PATTERN.finditer(text):
        yield match.group()


def validate(word: Token) -> bool:
    '''Checks if the string is a word that should be counted.'''
    if not word:
        return False
    first = word[0]
    return ("a" <= first <= "z") or ("A" <= first <= "Z")


def compute_word_frequencies(tokens: Iterable[Token],
                             token_dict: Optional[dict[Token, int]] = None) -> tuple[dict[Token, int], int]:
    """
    Adds the tokens to a case-insensitive frequency dictionary.
    The longest lower-cased word is tracked along the way so callers
    can align output columns without another pass over the keys.

    Args:
        tokens (Iterable[Token]): Words to count.
        token_dict (dict[Token, int], optional): Existing table to update in place.

    Returns:
        tuple[dict[Token, int], int]: The frequency table and the longest word length.
    """
    if token_dict is None:
        token_dict = {}
    longest = max(map(len, token_dict), default=0)
    for token in tokens:
        if not validate(token):
            continue
        word = token.lower()
        if len(word) > longest:
            longest = len(word)
        token_dict[word] = token_dict.get(word, 0) + 1
    return token_dict, longest
