"""
Closed option sets for composition settings and user profiles.

Each set is a Django TextChoices so the stored value, the display label and
the option list offered to clients all come from one declaration.
"""

from django.db import models


class Instrument(models.TextChoices):
    PIANO = "Piano"
    VIOLIN = "Violin"
    GUITAR = "Guitar"
    CELLO = "Cello"
    FLUTE = "Flute"
    CLARINET = "Clarinet"
    TRUMPET = "Trumpet"
    SAXOPHONE = "Saxophone"
    DRUMS = "Drums"
    HARP = "Harp"
    SYNTHESIZER = "Synthesizer"


class Complexity(models.TextChoices):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    VIRTUOSO = "Virtuoso"


class KeySignature(models.TextChoices):
    C_MAJOR = "C Major"
    G_MAJOR = "G Major"
    D_MAJOR = "D Major"
    A_MAJOR = "A Major"
    F_MAJOR = "F Major"
    B_FLAT_MAJOR = "Bb Major"
    E_FLAT_MAJOR = "Eb Major"
    A_MINOR = "A Minor"
    E_MINOR = "E Minor"
    D_MINOR = "D Minor"
    C_MINOR = "C Minor"
    CHROMATIC = "Chromatic"


class TimeSignature(models.TextChoices):
    FOUR_FOUR = "4/4"
    THREE_FOUR = "3/4"
    SIX_EIGHT = "6/8"
    FIVE_FOUR = "5/4"
    TWO_FOUR = "2/4"
    TWELVE_EIGHT = "12/8"


class Mood(models.TextChoices):
    HAPPY = "Happy"
    SAD = "Sad"
    EPIC = "Epic"
    RELAXING = "Relaxing"
    DARK = "Dark"
    ROMANTIC = "Romantic"
    TENSE = "Tense"
    ETHEREAL = "Ethereal"
    JAZZ = "Jazz"


class SubscriptionTier(models.TextChoices):
    FREE = "free"
    PRO = "pro"


class Polyphony(models.TextChoices):
    """How many simultaneous notes an instrument is written with."""

    POLYPHONIC = "polyphonic"
    MONOPHONIC = "monophonic"
    PERCUSSIVE = "percussive"


POLYPHONY = {
    Instrument.PIANO: Polyphony.POLYPHONIC,
    Instrument.GUITAR: Polyphony.POLYPHONIC,
    Instrument.HARP: Polyphony.POLYPHONIC,
    Instrument.SYNTHESIZER: Polyphony.POLYPHONIC,
    Instrument.DRUMS: Polyphony.PERCUSSIVE,
}


def polyphony_of(instrument: Instrument) -> Polyphony:
    """Return the polyphony class of an instrument (monophonic by default)."""
    return POLYPHONY.get(Instrument(instrument), Polyphony.MONOPHONIC)


def option_lists() -> dict[str, list[str]]:
    """Option lists offered to clients, derived from the choice classes."""
    return {
        "instruments": Instrument.values,
        "complexities": Complexity.values,
        "keys": KeySignature.values,
        "time_signatures": TimeSignature.values,
        "moods": Mood.values,
    }
