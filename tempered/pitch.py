"""Absolute pitches of the equal-tempered scale.

A :class:`Pitch` is a validated index into
:data:`~tempered.constants.frequencies.FREQUENCIES`: index 0 is C₀, index 57
is A₄ (440 Hz), index 107 is B₈. Pitches sort by index, which is also
ascending frequency.

:func:`all_pitches` returns the shared, read-only table of every pitch. It is
built the first time it is asked for and never changes afterwards.
"""

import dataclasses
import logging
import threading
import typing

import tempered.constants.frequencies
import tempered.errors
import tempered.interval
import tempered.notation


logger = logging.getLogger(__name__)

# Offset between a table index and a MIDI note number (C₄ = 60, so C₀ = 12).
MIDI_NOTE_OFFSET = 12


@dataclasses.dataclass(frozen=True, order=True)
class Pitch:

	"""
	One of the 108 pitches in the frequency table.
	"""

	index: int


	def __post_init__ (self) -> None:

		if isinstance(self.index, bool) or not isinstance(self.index, int):
			raise tempered.errors.PitchNotInRange(f"Pitch index must be an integer, got {self.index!r}")

		if not 0 <= self.index < len(tempered.constants.frequencies.FREQUENCIES):
			raise tempered.errors.PitchNotInRange(
				f"Pitch index {self.index} is not in range 0-{len(tempered.constants.frequencies.FREQUENCIES) - 1}"
			)


	@classmethod
	def from_midi_note (cls, midi_note: int) -> "Pitch":

		"""Return the pitch for a MIDI note number (C₄ = 60).

		Only MIDI notes 12 (C₀) to 119 (B₈) are in the table.

		Raises:
			PitchNotInRange: For MIDI notes outside the table.
		"""

		return cls(midi_note - MIDI_NOTE_OFFSET)


	@classmethod
	def nearest (cls, frequency: float) -> "Pitch":

		"""Return the table pitch closest to an arbitrary frequency.

		Closeness is measured in cents, not Hz, so the choice is the same in
		every octave. Frequencies below C₀ or above B₈ snap to those ends.

		Parameters:
			frequency: Frequency in Hz.

		Raises:
			InvalidInterval: If the frequency is zero, negative or not finite.

		Example:
			```python
			Pitch.nearest(441.0).index   # 57 - A₄
			Pitch.nearest(270.0).index   # 49 - C♯₄ (about 45 cents away; C₄ is about 55)
			```
		"""

		best = min(
			all_pitches(),
			key=lambda pitch: tempered.interval.Interval.between(frequency, pitch.frequency()).cents.abs()
		)

		logger.debug(f"{frequency} Hz snapped to {best.frequency()} Hz (index {best.index})")

		return best


	def frequency (self) -> float:

		"""
		Return the frequency of this pitch in Hz.
		"""

		return tempered.constants.frequencies.FREQUENCIES[self.index]


	def number (self) -> int:

		"""Return the chromatic number of this pitch within its octave.

		| Number | Note  |
		|--------|-------|
		| 0      | C     |
		| 1      | C♯/D♭ |
		| 2      | D     |
		| 3      | D♯/E♭ |
		| 4      | E     |
		| 5      | F     |
		| 6      | F♯/G♭ |
		| 7      | G     |
		| 8      | G♯/A♭ |
		| 9      | A     |
		| 10     | A♯/B♭ |
		| 11     | B     |
		"""

		return self.index % tempered.constants.frequencies.SEMITONES_PER_OCTAVE


	def octave (self) -> tempered.notation.Octave:

		"""
		Return the octave this pitch belongs to.
		"""

		return tempered.notation.Octave.from_number(self.index // tempered.constants.frequencies.SEMITONES_PER_OCTAVE)


	def midi_note (self) -> int:

		"""
		Return the MIDI note number of this pitch (C₄ = 60).
		"""

		return self.index + MIDI_NOTE_OFFSET


	def transpose (self, semitones: int) -> "Pitch":

		"""Return the pitch a number of semitones away.

		Raises:
			PitchNotInRange: If the result falls outside the table.
		"""

		return Pitch(self.index + semitones)


	def __str__ (self) -> str:

		return tempered.interval.format_decimal(self.frequency())


_pitches: typing.Optional[typing.Tuple[Pitch, ...]] = None
_pitches_lock = threading.Lock()


def all_pitches () -> typing.Tuple[Pitch, ...]:

	"""Return every pitch in the table, lowest first.

	The tuple is built once, on first use, and shared by every caller. The
	lock only matters for that first call; later calls read the cached tuple.

	Example:
		```python
		pitches = all_pitches()
		len(pitches)               # 108
		pitches[57].frequency()    # 440.0
		```
	"""

	global _pitches

	if _pitches is None:

		with _pitches_lock:

			if _pitches is None:
				_pitches = tuple(Pitch(index) for index in range(len(tempered.constants.frequencies.FREQUENCIES)))
				logger.debug(f"Built pitch table with {len(_pitches)} pitches")

	return _pitches
