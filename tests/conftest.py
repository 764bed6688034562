import typing

import pytest

import tempered.errors
import tempered.note
import tempered.notation


def _every_legal_note () -> typing.List[tempered.note.Note]:

	"""Build every note that passes construction, in all ten octaves."""

	notes: typing.List[tempered.note.Note] = []

	for octave in tempered.notation.Octave:
		for letter in tempered.notation.Letter:
			for accidental in tempered.notation.Accidental:
				try:
					notes.append(tempered.note.Note(letter, octave, accidental))
				except tempered.errors.IncorrectAccidental:
					continue

	return notes


@pytest.fixture
def legal_notes () -> typing.List[tempered.note.Note]:

	"""Every legal spelling in every octave, including the TENTH octave."""

	return _every_legal_note()


@pytest.fixture
def table_notes () -> typing.List[tempered.note.Note]:

	"""Every legal spelling whose pitch lies inside the frequency table."""

	return [note for note in _every_legal_note() if note.octave is not tempered.notation.Octave.TENTH]
