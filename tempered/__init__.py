"""
tempered - pitches, notes and intervals of the equal-tempered scale (A₄ = 440 Hz).

Three views of the same musical pitch, with lossless conversion between the
first two:

- **Pitch.** One of 108 chromatic pitches, C₀ (16.35 Hz) to B₈ (7902.13 Hz),
  indexed into a fixed frequency table. Exposes frequency, chromatic number
  (0-11) and octave.
- **Note.** A spelling - letter, accidental and octave - such as ``C♯₄`` or
  ``D♭₄``. Illegal spellings (C♭, F♭, E♯, B♯) are rejected on construction.
  Notes convert to pitches and back; pitches always come back with the
  sharp-preferring spelling. ``enharmonic()`` swaps between the two spellings
  of a black key.
- **Interval.** The signed distance between two frequencies in cents
  (100 cents = 1 semitone, 1200 = 1 octave).

Minimal example:

    ```python
    import tempered

    a4 = tempered.Pitch(57)
    a4.frequency()                               # 440.0

    note = tempered.Note.parse("C#4")
    str(note)                                    # "C♯₄"
    str(note.enharmonic())                       # "D♭₄"
    note.pitch() == note.enharmonic().pitch()    # True

    tempered.Interval.between(440.0, 880.0).cents.value   # 1200.0
    ```

Every error is a ``ValueError`` subclass from ``tempered.errors``.

Package-level exports: ``Pitch``, ``Note``, ``Interval``, ``Cents``, ``Letter``,
``Octave``, ``Accidental``, ``all_pitches``, ``FREQUENCIES`` and the error classes.
"""

import tempered.constants.frequencies
import tempered.errors
import tempered.interval
import tempered.notation
import tempered.note
import tempered.pitch


FREQUENCIES = tempered.constants.frequencies.FREQUENCIES

Letter = tempered.notation.Letter
Octave = tempered.notation.Octave
Accidental = tempered.notation.Accidental

Pitch = tempered.pitch.Pitch
all_pitches = tempered.pitch.all_pitches
Note = tempered.note.Note
Interval = tempered.interval.Interval
Cents = tempered.interval.Cents

TemperedError = tempered.errors.TemperedError
IncorrectLetter = tempered.errors.IncorrectLetter
IncorrectAccidental = tempered.errors.IncorrectAccidental
OctaveNotInRange = tempered.errors.OctaveNotInRange
PitchNotInRange = tempered.errors.PitchNotInRange
InvalidInterval = tempered.errors.InvalidInterval
IncorrectNoteName = tempered.errors.IncorrectNoteName
