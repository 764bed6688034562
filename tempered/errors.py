"""Errors raised while building pitches, notes and intervals.

Every error is a ``ValueError`` subclass, so callers that only care that the
input was rejected can keep catching ``ValueError``. None of them is worth
retrying: the caller has to change the input.
"""


class TemperedError (ValueError):

	"""Base class for every error raised by tempered."""


class IncorrectLetter (TemperedError):

	"""A note letter outside A-G (either case)."""


class IncorrectAccidental (TemperedError):

	"""An accidental that cannot be applied to a letter (C♭, F♭, E♯, B♯) or an unknown symbol."""


class OctaveNotInRange (TemperedError):

	"""An octave number outside the ten supported octaves (0-9)."""


class PitchNotInRange (TemperedError):

	"""A pitch index that falls outside the frequency table."""


class InvalidInterval (TemperedError):

	"""A zero, negative or non-finite frequency, or a non-finite cents value."""


class IncorrectNoteName (TemperedError):

	"""Text that cannot be read as a note name such as ``"C#4"``."""
