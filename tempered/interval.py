"""Intervals between frequencies, measured in cents.

A cent is 1/100 of an equal-tempered semitone, so an octave is 1200 cents.
The interval from ``frequency_0`` to ``frequency_1`` is::

	1200 * ln(frequency_1 / frequency_0) / ln(2)

positive when the second frequency is higher, negative when it is lower.

Example:
	```python
	Interval.between(440.0, 880.0).cents   # Cents(1200.0) - one octave up
	Interval.between(880.0, 440.0).cents   # Cents(-1200.0)
	```
"""

import dataclasses
import math
import typing

import tempered.errors


def format_decimal (value: float) -> str:

	"""Render a float as its shortest decimal, without a trailing ".0".

	Example:
		```python
		format_decimal(440.0)    # "440"
		format_decimal(277.18)   # "277.18"
		```
	"""

	text = repr(float(value))

	return text[:-2] if text.endswith(".0") else text


class HasFrequency (typing.Protocol):

	"""Anything with a ``frequency()`` in Hz, such as a pitch or a note."""

	def frequency (self) -> float: ...


@dataclasses.dataclass(frozen=True, order=True)
class Cents:

	"""
	A finite interval size in cents. NaN and infinities are rejected.
	"""

	value: float


	def __post_init__ (self) -> None:

		if not isinstance(self.value, (int, float)) or isinstance(self.value, bool):
			raise tempered.errors.InvalidInterval(f"Cents must be a number, got {self.value!r}")

		try:
			value = float(self.value)
		except OverflowError as e:
			raise tempered.errors.InvalidInterval("Cents value is too large to represent") from e

		if not math.isfinite(value):
			raise tempered.errors.InvalidInterval(f"Cents must be finite, got {self.value!r}")

		object.__setattr__(self, "value", value)


	def abs (self) -> "Cents":

		"""
		Return the non-negative size of this interval.
		"""

		return Cents(abs(self.value))


	def semitones (self) -> float:

		"""
		Return the size in equal-tempered semitones (100 cents each).
		"""

		return self.value / 100.0


	def __abs__ (self) -> "Cents":

		return self.abs()


	def __neg__ (self) -> "Cents":

		return Cents(-self.value)


	def __float__ (self) -> float:

		return self.value


	def __str__ (self) -> str:

		return format_decimal(self.value)


@dataclasses.dataclass(frozen=True, order=True)
class Interval:

	"""
	Signed logarithmic distance between two frequencies.
	"""

	cents: Cents


	@classmethod
	def between (cls, frequency_0: float, frequency_1: float) -> "Interval":

		"""Create the interval from one frequency to another.

		The logarithms are subtracted rather than dividing first, so
		``between(f, f)`` is exactly zero and swapping the arguments negates the
		result exactly.

		Parameters:
			frequency_0: Starting frequency in Hz.
			frequency_1: Target frequency in Hz.

		Returns:
			An interval that is positive when ``frequency_1`` is the higher one.

		Raises:
			InvalidInterval: If either frequency is zero, negative, NaN or infinite.

		Example:
			```python
			Interval.between(440.0, 880.0).cents.value  # 1200.0
			Interval.between(440.0, 466.16).cents        # ~100 cents, one semitone
			```
		"""

		for frequency in (frequency_0, frequency_1):

			if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
				raise tempered.errors.InvalidInterval(f"Frequency must be a number, got {frequency!r}")

			if (isinstance(frequency, float) and not math.isfinite(frequency)) or frequency <= 0:
				raise tempered.errors.InvalidInterval(f"Frequency must be positive and finite, got {frequency!r}")

		cents = 1200.0 * (math.log(frequency_1) - math.log(frequency_0)) / math.log(2.0)

		return cls(Cents(cents))


	@classmethod
	def between_pitches (cls, pitch_0: HasFrequency, pitch_1: HasFrequency) -> "Interval":

		"""
		Create the interval between two pitches or notes, by their frequencies.
		"""

		return cls.between(pitch_0.frequency(), pitch_1.frequency())
