"""Constants for tempered.

This package contains:

- ``tempered.constants.frequencies`` - The equal-tempered reference frequency table,
  C₀ (16.35 Hz) through B₈ (7902.13 Hz), A₄ = 440 Hz

The table size and reference constants are re-exported here so
``tempered.constants.SEMITONES_PER_OCTAVE`` works without the submodule path.
"""

import tempered.constants.frequencies as frequencies


FREQUENCIES = frequencies.FREQUENCIES
REFERENCE_FREQUENCY = frequencies.REFERENCE_FREQUENCY
REFERENCE_INDEX = frequencies.REFERENCE_INDEX
SEMITONES_PER_OCTAVE = frequencies.SEMITONES_PER_OCTAVE
