"""Notes: letter, accidental and octave, and their mapping to pitches.

A :class:`Note` is a spelling such as C♯₄ or D♭₄. Only accidentals with a
black key behind them are allowed: C and F cannot be flat, E and B cannot be
sharp. Every note resolves to exactly one :class:`~tempered.pitch.Pitch`, and
every pitch has one canonical spelling that prefers sharps::

	number:  0  1   2  3   4  5  6   7  8   9  10  11
	note:    C  C♯  D  D♯  E  F  F♯  G  G♯  A  A♯  B

Notes order by the pitch they resolve to, so C♯₄ and D♭₄ sort together even
though they are different spellings and compare unequal. Notes in the
``TENTH`` octave have no pitch, so ordering them raises ``PitchNotInRange``.

Example:
	```python
	from tempered.notation import Letter, Octave, Accidental

	c_sharp = Note(Letter.C, Octave.FIFTH, Accidental.SHARP)
	str(c_sharp)                  # "C♯₄"
	c_sharp.pitch().frequency()   # 277.18
	str(c_sharp.enharmonic())     # "D♭₄"
	Note.parse("Eb3")             # Note(E, FOURTH, FLAT)
	```
"""

import dataclasses
import typing

import tempered.constants.frequencies
import tempered.errors
import tempered.notation
import tempered.pitch

Accidental = tempered.notation.Accidental
Letter = tempered.notation.Letter
Octave = tempered.notation.Octave


# Canonical spelling of each chromatic number, sharps preferred.
CANONICAL_SPELLINGS: typing.Tuple[typing.Tuple[Letter, Accidental], ...] = (
	(Letter.C, Accidental.NONE),
	(Letter.C, Accidental.SHARP),
	(Letter.D, Accidental.NONE),
	(Letter.D, Accidental.SHARP),
	(Letter.E, Accidental.NONE),
	(Letter.F, Accidental.NONE),
	(Letter.F, Accidental.SHARP),
	(Letter.G, Accidental.NONE),
	(Letter.G, Accidental.SHARP),
	(Letter.A, Accidental.NONE),
	(Letter.A, Accidental.SHARP),
	(Letter.B, Accidental.NONE),
)

# Letters with no black key below (flat) or above (sharp) them.
NO_FLAT: typing.FrozenSet[Letter] = frozenset({Letter.C, Letter.F})
NO_SHARP: typing.FrozenSet[Letter] = frozenset({Letter.E, Letter.B})

_SUBSCRIPT_TO_DIGIT = str.maketrans(tempered.notation.SUBSCRIPT_DIGITS, "0123456789")


@dataclasses.dataclass(frozen=True)
class Note:

	"""A spelled note: letter, octave and accidental.

	Equality compares the spelling; ``<``, ``<=``, ``>`` and ``>=`` compare
	the resolved pitches. Ordering therefore needs both notes inside the
	frequency table: comparing or sorting any ``TENTH`` octave note raises
	``PitchNotInRange``.
	"""

	letter: Letter
	octave: Octave
	accidental: Accidental = Accidental.NONE


	def __post_init__ (self) -> None:

		if not isinstance(self.letter, Letter):
			raise tempered.errors.IncorrectLetter(f"Incorrect letter: {self.letter!r}")

		if not isinstance(self.octave, Octave):
			raise tempered.errors.OctaveNotInRange(f"Octave {self.octave!r} is not an Octave")

		if not isinstance(self.accidental, Accidental):
			raise tempered.errors.IncorrectAccidental(f"Unknown accidental: {self.accidental!r}")

		if self.accidental is Accidental.FLAT and self.letter in NO_FLAT:
			raise tempered.errors.IncorrectAccidental(f"{self.letter} cannot be flat")

		if self.accidental is Accidental.SHARP and self.letter in NO_SHARP:
			raise tempered.errors.IncorrectAccidental(f"{self.letter} cannot be sharp")


	@classmethod
	def from_pitch (cls, pitch: tempered.pitch.Pitch) -> "Note":

		"""Return the canonical (sharp-preferring) spelling of a pitch.

		Example:
			```python
			Note.from_pitch(Pitch(49))  # C♯₄
			Note.from_pitch(Pitch(57))  # A₄
			```
		"""

		letter, accidental = CANONICAL_SPELLINGS[pitch.number()]

		return cls(letter, pitch.octave(), accidental)


	@classmethod
	def parse (cls, text: str) -> "Note":

		"""Read a note name such as ``"C#4"``, ``"Db3"``, ``"a4"`` or ``"F♯₄"``.

		The name is a letter, an optional accidental (``#``, ``♯``, ``b``, ``♭``)
		and an octave number 0-9, written as a plain or subscript digit.

		Raises:
			IncorrectLetter: If the first character is not A-G.
			IncorrectAccidental: If the accidental is unknown or not allowed on the letter.
			OctaveNotInRange: If the octave number is above 9.
			IncorrectNoteName: If the text is otherwise not a note name.
		"""

		if not isinstance(text, str) or not text.strip():
			raise tempered.errors.IncorrectNoteName(f"Not a note name: {text!r}")

		name = text.strip()
		letter = Letter.from_char(name[0])

		octave_text = name[1:].translate(_SUBSCRIPT_TO_DIGIT)
		accidental_text = ""

		while octave_text and not octave_text[0].isdigit():
			accidental_text += octave_text[0]
			octave_text = octave_text[1:]

		if not octave_text or not octave_text.isascii() or not octave_text.isdigit():
			raise tempered.errors.IncorrectNoteName(f"Not a note name: {text!r}. Expected e.g. 'C4', 'F#3', 'Bb2'.")

		accidental = Accidental.from_symbol(accidental_text)
		octave = Octave.from_number(int(octave_text))

		return cls(letter, octave, accidental)


	def enharmonic (self) -> "Note":

		"""Return the other spelling of the same pitch.

		A flat becomes the sharp of the letter below and a sharp becomes the
		flat of the letter above; the octave is kept. A note without an
		accidental is returned unchanged.

		The octave never needs to change: C♭ and B♯ are not allowed, so no
		spelling crosses the B/C boundary.

		Example:
			```python
			Note(Letter.C, Octave.FIFTH, Accidental.SHARP).enharmonic()  # D♭₄
			Note(Letter.B, Octave.FIFTH, Accidental.FLAT).enharmonic()   # A♯₄
			```
		"""

		if self.accidental is Accidental.FLAT:
			return Note(self.letter.previous(), self.octave, Accidental.SHARP)

		if self.accidental is Accidental.SHARP:
			return Note(self.letter.next(), self.octave, Accidental.FLAT)

		return self


	def pitch (self) -> tempered.pitch.Pitch:

		"""Return the pitch this note resolves to.

		Raises:
			PitchNotInRange: If the note lies beyond the frequency table. The
				table stops at B₈, so every note in the ``TENTH`` octave is out
				of range.
		"""

		index = (
			int(self.octave) * tempered.constants.frequencies.SEMITONES_PER_OCTAVE
			+ self.letter.semitone()
			+ self.accidental.semitones()
		)

		pitches = tempered.pitch.all_pitches()

		if not 0 <= index < len(pitches):
			raise tempered.errors.PitchNotInRange(f"{self} is outside the frequency table (C₀-B₈)")

		return pitches[index]


	def frequency (self) -> float:

		"""
		Return the frequency of this note in Hz.
		"""

		return self.pitch().frequency()


	def __lt__ (self, other: object) -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.pitch() < other.pitch()


	def __le__ (self, other: object) -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.pitch() <= other.pitch()


	def __gt__ (self, other: object) -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.pitch() > other.pitch()


	def __ge__ (self, other: object) -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.pitch() >= other.pitch()


	def __str__ (self) -> str:

		return str(self.letter) + str(self.accidental) + str(self.octave)
