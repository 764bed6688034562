"""Letters, octaves and accidentals - the parts a note name is spelled from.

Each is a closed enumeration with an explicit order:

- :class:`Letter` - C D E F G A B, cyclic (``Letter.B.next()`` is C)
- :class:`Octave` - ``FIRST`` (0) to ``TENTH`` (9), shown as subscript digits ₀-₉
- :class:`Accidental` - none, flat (♭) or sharp (♯)

Example:
	```python
	from tempered.notation import Letter, Octave, Accidental

	Letter.from_char("g")        # Letter.G
	Octave.from_number(4)        # Octave.FIFTH, displayed "₄"
	str(Accidental.SHARP)        # "♯"
	```
"""

import enum
import functools
import typing

import tempered.errors


# Natural (white key) semitone offset of each letter above C.
NATURAL_SEMITONES: typing.Dict[str, int] = {
	"C": 0,
	"D": 2,
	"E": 4,
	"F": 5,
	"G": 7,
	"A": 9,
	"B": 11,
}

SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"


@functools.total_ordering
class Letter (enum.Enum):

	"""
	Musical note letter, ordered C < D < E < F < G < A < B.
	"""

	C = "C"
	D = "D"
	E = "E"
	F = "F"
	G = "G"
	A = "A"
	B = "B"


	@classmethod
	def from_char (cls, value: str) -> "Letter":

		"""Read a single letter, case-insensitive.

		Parameters:
			value: One character, ``a``-``g`` or ``A``-``G``.

		Raises:
			IncorrectLetter: For anything else, including empty or longer strings.

		Example:
			```python
			Letter.from_char("g")  # → Letter.G
			Letter.from_char("H")  # raises IncorrectLetter
			```
		"""

		if not isinstance(value, str) or len(value) != 1 or value.upper() not in NATURAL_SEMITONES:
			raise tempered.errors.IncorrectLetter(f"Incorrect letter: {value!r}. Expected one of A-G.")

		return cls(value.upper())


	def position (self) -> int:

		"""
		Return the position of this letter within C..B (0-6).
		"""

		return _LETTERS.index(self)


	def next (self) -> "Letter":

		"""
		Return the following letter, wrapping B around to C.
		"""

		return _LETTERS[(self.position() + 1) % len(_LETTERS)]


	def previous (self) -> "Letter":

		"""
		Return the preceding letter, wrapping C around to B.
		"""

		return _LETTERS[(self.position() - 1) % len(_LETTERS)]


	def semitone (self) -> int:

		"""
		Return the natural semitone offset of this letter above C (C=0 ... B=11).
		"""

		return NATURAL_SEMITONES[self.value]


	def __lt__ (self, other: object) -> bool:

		if not isinstance(other, Letter):
			return NotImplemented

		return self.position() < other.position()


	def __str__ (self) -> str:

		return self.value


_LETTERS: typing.Tuple[Letter, ...] = tuple(Letter)


@functools.total_ordering
class Octave (enum.Enum):

	"""
	The ten supported octaves. ``FIRST`` is octave 0, ``TENTH`` is octave 9.
	"""

	FIRST = 0
	SECOND = 1
	THIRD = 2
	FOURTH = 3
	FIFTH = 4
	SIXTH = 5
	SEVENTH = 6
	EIGHTH = 7
	NINTH = 8
	TENTH = 9


	@classmethod
	def from_number (cls, value: int) -> "Octave":

		"""Return the octave for a number in 0-9.

		Raises:
			OctaveNotInRange: If ``value`` is not an integer in 0-9.
		"""

		if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
			raise tempered.errors.OctaveNotInRange(f"Octave {value!r} is not in range 0-9")

		return cls(value)


	def __int__ (self) -> int:

		return self.value


	def __index__ (self) -> int:

		return self.value


	def __lt__ (self, other: object) -> bool:

		if not isinstance(other, Octave):
			return NotImplemented

		return self.value < other.value


	def __str__ (self) -> str:

		return SUBSCRIPT_DIGITS[self.value]


class Accidental (enum.Enum):

	"""
	Note accidental: none, flat (♭) or sharp (♯).
	"""

	NONE = ""
	FLAT = "♭"
	SHARP = "♯"


	@classmethod
	def from_symbol (cls, value: str) -> "Accidental":

		"""Read an accidental symbol.

		Accepts ``""`` (none), ``"b"`` or ``"♭"`` (flat) and ``"#"`` or ``"♯"`` (sharp).

		Raises:
			IncorrectAccidental: For any other symbol.
		"""

		if value not in _ACCIDENTAL_SYMBOLS:
			raise tempered.errors.IncorrectAccidental(f"Unknown accidental: {value!r}. Expected '', '#', '♯', 'b' or '♭'.")

		return _ACCIDENTAL_SYMBOLS[value]


	def semitones (self) -> int:

		"""
		Return how far this accidental moves a letter: -1, 0 or +1.
		"""

		return _ACCIDENTAL_SEMITONES[self]


	def __str__ (self) -> str:

		return self.value


_ACCIDENTAL_SYMBOLS: typing.Dict[str, Accidental] = {
	"": Accidental.NONE,
	"b": Accidental.FLAT,
	"♭": Accidental.FLAT,
	"#": Accidental.SHARP,
	"♯": Accidental.SHARP,
}

_ACCIDENTAL_SEMITONES: typing.Dict[Accidental, int] = {
	Accidental.NONE: 0,
	Accidental.FLAT: -1,
	Accidental.SHARP: 1,
}
