import argparse
import logging
import os
import typing

import yaml

import tempered.errors
import tempered.interval
import tempered.notation
import tempered.note


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DEFAULT_CONFIG: typing.Dict[str, typing.Any] = {
	"reference": "A4",
	"spelling": "sharp",
	"notes": ["C4", "C#4", "D4", "Eb4", "E4", "F4", "F#4", "G4", "Ab4", "A4", "Bb4", "B4"],
}

SPELLINGS = ("sharp", "flat")


def load_config (config_path: str = 'tempered.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def respell (note: tempered.note.Note, spelling: str) -> tempered.note.Note:

	"""
	Return the note spelled with sharps or with flats.
	"""

	if spelling not in SPELLINGS:
		raise ValueError(f"Unknown spelling '{spelling}'. Available: {list(SPELLINGS)}")

	wanted = tempered.notation.Accidental.SHARP if spelling == "sharp" else tempered.notation.Accidental.FLAT

	if note.accidental is tempered.notation.Accidental.NONE or note.accidental is wanted:
		return note

	return note.enharmonic()


def describe_note (note: tempered.note.Note, reference: tempered.note.Note) -> str:

	"""
	Return one table row: spelling, frequency and cents from the reference.
	"""

	cents = tempered.interval.Interval.between_pitches(reference, note).cents.value

	return f"{str(note):<4} {note.frequency():>9.2f} Hz {cents:>+9.2f} cents"


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Print frequency and distance from the reference for each configured note.
	"""

	parser = argparse.ArgumentParser(prog="tempered", description="Describe notes of the equal-tempered scale.")
	parser.add_argument("--config", default="tempered.yaml", help="YAML config file (default: tempered.yaml)")
	args = parser.parse_args(argv)

	config = {**DEFAULT_CONFIG, **load_config(args.config)}
	spelling = config.get("spelling", "sharp")

	if spelling not in SPELLINGS:
		logger.error(f"Unknown spelling '{spelling}'. Available: {list(SPELLINGS)}")
		return 1

	try:
		reference = tempered.note.Note.parse(str(config.get("reference")))
		reference.pitch()
	except tempered.errors.TemperedError as e:
		logger.error(f"Invalid reference note: {e}")
		return 1

	status = 0

	for name in config.get("notes") or []:

		try:
			note = respell(tempered.note.Note.parse(str(name)), spelling)
			print(describe_note(note, reference))

		except tempered.errors.TemperedError as e:
			logger.error(f"Skipping {name!r}: {e}")
			status = 1

	return status


if __name__ == "__main__":
	raise SystemExit(main())
