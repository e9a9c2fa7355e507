# word.py
# Packed word codec: one letter per 5-bit field, first letter in the lowest field.

from typing import Iterator, List, Optional

BITS_PER_LETTER = 5
LETTER_MASK = (1 << BITS_PER_LETTER) - 1
WORD_BITS = 64
ALPHABET = 26

# Encoding capacity of a 64-bit word
MAX_LETTERS = WORD_BITS // BITS_PER_LETTER

# Letter positions covered by shifts(); also the longest word a search may build
SHIFT_POSITIONS = 6


class WordError(ValueError):
    """Invalid word or length cap handed to the codec."""


class InvariantError(RuntimeError):
    """An operator produced a value that is not a word."""


def _word(value: int) -> int:
    if value == 0:
        raise InvariantError("operator produced an empty word")
    return value


def encode(s: str, max_length: int = MAX_LETTERS) -> int:
    """Pack ``s`` into an integer. Raises ``WordError`` for anything that is not
    1..max_length lowercase ASCII letters."""
    if not 1 <= max_length <= MAX_LETTERS:
        raise WordError(f"max length must be between 1 and {MAX_LETTERS}, got {max_length}")
    if not s:
        raise WordError("word must not be empty")
    if len(s) > max_length:
        raise WordError(f"'{s}' is longer than {max_length} letters")
    w = 0
    for idx, ch in enumerate(s):
        if not "a" <= ch <= "z":
            raise WordError(f"'{s}' contains {ch!r}; only a-z are allowed")
        w |= (ord(ch) - ord("a") + 1) << (idx * BITS_PER_LETTER)
    return w


def decode(word: int) -> str:
    letters = []
    while word:
        letters.append(chr((word & LETTER_MASK) + ord("a") - 1))
        word >>= BITS_PER_LETTER
    return "".join(letters)


def length(word: int) -> int:
    return (word.bit_length() + BITS_PER_LETTER - 1) // BITS_PER_LETTER


def is_valid(word: int) -> bool:
    """True if ``word`` is a non-zero packing of contiguous letters within capacity."""
    if word <= 0 or word.bit_length() > MAX_LETTERS * BITS_PER_LETTER:
        return False
    while word:
        if not 1 <= word & LETTER_MASK <= ALPHABET:
            return False
        word >>= BITS_PER_LETTER
    return True


def dupl_first(word: int, max_length: int) -> Optional[int]:
    """Insert a copy of the first letter right after it. None once the cap is hit."""
    if length(word) >= max_length:
        return None
    return _word((word << BITS_PER_LETTER) | (word & LETTER_MASK))


def pop(word: int) -> Optional[int]:
    rest = word >> BITS_PER_LETTER
    if rest == 0:
        return None
    return rest


def rotate(word: int) -> List[Optional[int]]:
    """Return ``[first letter moved to the end, last letter moved to the front]``.

    Periodic words such as ``"aa"`` or ``"abab"`` get the same value twice.
    """
    n = length(word)
    if n == 1:
        return [None, None]
    last = (n - 1) * BITS_PER_LETTER
    first_ch = word & LETTER_MASK
    last_ch = word >> last
    full = (1 << (n * BITS_PER_LETTER)) - 1
    to_end = (word >> BITS_PER_LETTER) | (first_ch << last)
    to_front = ((word << BITS_PER_LETTER) & full) | last_ch
    return [_word(to_end), _word(to_front)]


def shifts(word: int) -> List[Optional[int]]:
    """Per-letter alphabet shifts.

    Slot ``i`` holds the word with letter ``i`` moved one up (``z`` wraps to
    ``a``), slot ``i + SHIFT_POSITIONS`` the same letter moved one down (``a``
    wraps to ``z``). Slots past the end of the word stay None.
    """
    ret: List[Optional[int]] = [None] * (2 * SHIFT_POSITIONS)
    for i in range(SHIFT_POSITIONS):
        shift = i * BITS_PER_LETTER
        mask = LETTER_MASK << shift
        c = (word & mask) >> shift
        if c == 0:
            break
        rest = word & ~mask
        up = c % ALPHABET + 1
        down = (c - 2) % ALPHABET + 1
        ret[i] = _word(rest | (up << shift))
        ret[i + SHIFT_POSITIONS] = _word(rest | (down << shift))
    return ret


def neighbours(word: int, max_length: int) -> Iterator[int]:
    """Yield every word one edit away, in search expansion order."""
    grown = dupl_first(word, max_length)
    if grown is not None:
        yield grown
    shorter = pop(word)
    if shorter is not None:
        yield shorter
    for w in shifts(word):
        if w is not None:
            yield w
    for w in rotate(word):
        if w is not None:
            yield w
