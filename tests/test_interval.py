import math

import pytest

import tempered.errors
import tempered.interval
import tempered.note
import tempered.pitch

Cents = tempered.interval.Cents
Interval = tempered.interval.Interval


def test_octave_is_1200_cents () -> None:

	"""Doubling the frequency is one octave up."""

	assert Interval.between(440.0, 880.0).cents.value == pytest.approx(1200.0)
	assert Interval.between(880.0, 440.0).cents.value == pytest.approx(-1200.0)


def test_semitone_is_about_100_cents () -> None:

	"""Neighbouring table pitches are one semitone apart (within rounding)."""

	pitches = tempered.pitch.all_pitches()

	for lower, higher in zip(pitches, pitches[1:]):
		assert Interval.between_pitches(lower, higher).cents.value == pytest.approx(100.0, abs=2.0)


def test_unison_is_exactly_zero () -> None:

	"""The interval from a frequency to itself is zero."""

	for frequency in [16.35, 440.0, 7902.13, 1e-3, 1e6]:
		assert Interval.between(frequency, frequency).cents.value == 0.0


def test_symmetry () -> None:

	"""Swapping the frequencies negates the interval."""

	pairs = [(440.0, 466.16), (16.35, 7902.13), (261.63, 392.0), (1.0, 3.0)]

	for f0, f1 in pairs:
		assert Interval.between(f0, f1).cents == -Interval.between(f1, f0).cents


def test_sign_follows_direction () -> None:

	"""Up is positive, down is negative."""

	assert Interval.between(440.0, 466.16).cents > Cents(0.0)
	assert Interval.between(466.16, 440.0).cents < Cents(0.0)


def test_between_notes () -> None:

	"""Notes can be measured directly through their frequencies."""

	a4 = tempered.note.Note.parse("A4")
	a5 = tempered.note.Note.parse("A5")

	assert Interval.between_pitches(a4, a5).cents.value == pytest.approx(1200.0)


def test_invalid_frequencies () -> None:

	"""Zero, negative, NaN and infinite frequencies are rejected, not propagated."""

	bad = [0.0, -1.0, float("nan"), float("inf"), float("-inf")]

	for frequency in bad:
		with pytest.raises(tempered.errors.InvalidInterval):
			Interval.between(frequency, 440.0)

		with pytest.raises(tempered.errors.InvalidInterval):
			Interval.between(440.0, frequency)

	with pytest.raises(tempered.errors.InvalidInterval, match="must be a number"):
		Interval.between("440", 880.0)


def test_extreme_ratio_stays_finite () -> None:

	"""Very large or small ratios do not overflow to infinity."""

	cents = Interval.between(1e-300, 1e300).cents.value

	assert math.isfinite(cents)
	assert cents > 0


def test_cents_rejects_non_finite () -> None:

	"""Cents never holds NaN or an infinity."""

	for value in [float("nan"), float("inf"), float("-inf")]:
		with pytest.raises(tempered.errors.InvalidInterval):
			Cents(value)


def test_cents_abs () -> None:

	"""abs() gives the non-negative size."""

	assert Cents(-350.5).abs() == Cents(350.5)
	assert abs(Cents(-350.5)) == Cents(350.5)
	assert Cents(12.0).abs() == Cents(12.0)
	assert Interval.between(880.0, 440.0).cents.abs().value == pytest.approx(1200.0)


def test_cents_ordering () -> None:

	"""Cents sort as plain numbers."""

	values = [Cents(100.0), Cents(-1200.0), Cents(0.0), Cents(7.5)]

	assert sorted(values) == [Cents(-1200.0), Cents(0.0), Cents(7.5), Cents(100.0)]
	assert Interval(Cents(1.0)) < Interval(Cents(2.0))


def test_cents_display_and_conversion () -> None:

	"""Cents display as their decimal value."""

	assert str(Cents(1200.0)) == "1200"
	assert str(Cents(-3.25)) == "-3.25"
	assert float(Cents(700)) == 700.0
	assert Cents(700).semitones() == 7.0


def test_large_integer_frequencies () -> None:

	"""Integers too big for a float are still valid positive frequencies."""

	cents = Interval.between(10 ** 400, 1.0).cents.value

	assert math.isfinite(cents)
	assert cents < 0
	assert Interval.between(10 ** 400, 10 ** 400).cents.value == 0.0

	with pytest.raises(tempered.errors.InvalidInterval):
		Interval.between(-(10 ** 400), 1.0)


def test_cents_rejects_oversized_integer () -> None:

	"""An integer beyond float range is not a finite cents value."""

	with pytest.raises(tempered.errors.InvalidInterval, match="too large"):
		Cents(10 ** 400)


def test_format_decimal () -> None:

	"""Whole numbers drop the trailing .0; fractions keep their digits."""

	assert tempered.interval.format_decimal(440.0) == "440"
	assert tempered.interval.format_decimal(277.18) == "277.18"
	assert tempered.interval.format_decimal(-1200.0) == "-1200"
	assert tempered.interval.format_decimal(0.5) == "0.5"
