"""Word table constants: letter frequency statistics and default tile style."""

# English letter frequencies (percent of letters in a large English corpus)
# Source: https://www3.nd.edu/~busiforc/handouts/cryptography/letterfrequencies.html
ENGLISH_LETTER_FREQUENCY: dict[str, float] = {
    "a": 8.4966, "b": 2.0720, "c": 4.5388, "d": 3.3844, "e": 11.1607,
    "f": 1.8121, "g": 2.4705, "h": 3.0034, "i": 7.5448, "j": 0.1965,
    "k": 1.1016, "l": 5.4893, "m": 3.0129, "n": 6.6544, "o": 7.1635,
    "p": 3.1671, "q": 0.1962, "r": 7.5809, "s": 5.7351, "t": 6.9509,
    "u": 3.6308, "v": 1.0074, "w": 1.2899, "x": 0.2902, "y": 1.7779,
    "z": 0.2722,
}

ENGLISH_VOWELS = frozenset("aeiou")

PERSIAN_LETTERS = "آابپتثجچحخدذرزژسشصضطظعغفقکگلمنوهی"
PERSIAN_VOWELS = frozenset("اآویه")

# No frequency table is available for Persian; every letter weighs the same
UNIFORM_FREQUENCY = 1.0

DEFAULT_ALPHABET = "en-US"
DEFAULT_COLUMNS = 4
DEFAULT_ROWS = 4
# The chance that a letter of higher frequency will appear
DEFAULT_FREQUENT_WORD_LIKELIHOOD = 0.3

DEFAULT_BACKGROUND_COLOR = "#feffd4"
DEFAULT_BORDER_COLOR = "black"
DEFAULT_BORDER_WIDTH = 3
DEFAULT_FONT_FAMILY = "sans-serif"
DEFAULT_FONT_SIZE = 32
DEFAULT_FOREGROUND_COLOR = "black"

DEFAULT_SURFACE_SIZE: tuple[int, int] = (300, 300)
