"""Starting points offered before a piece is generated."""

from .choices import Complexity, Instrument, KeySignature, Mood, TimeSignature
from .types import CompositionSettings

DEFAULT_TEMPO = 100

# Shown by the renderer until the first generation comes back.
PLACEHOLDER_NOTATION = """X:1
T:Waiting for Inspiration
C:ArioMuse AI
M:4/4
L:1/4
Q:1/4=100
K:C
z4 | z4 | z4 | z4 |]
"""

PRESETS: dict[str, CompositionSettings] = {
    "Cinematic Strings": CompositionSettings(
        instrument=Instrument.VIOLIN,
        key=KeySignature.D_MINOR,
        time_signature=TimeSignature.SIX_EIGHT,
        tempo=140,
        complexity=Complexity.ADVANCED,
        mood=Mood.EPIC,
        prompt="A hans zimmer style building tension with rapid arpeggios.",
    ),
    "Sunday Morning Jazz": CompositionSettings(
        instrument=Instrument.PIANO,
        key=KeySignature.E_FLAT_MAJOR,
        time_signature=TimeSignature.FOUR_FOUR,
        tempo=90,
        complexity=Complexity.INTERMEDIATE,
        mood=Mood.JAZZ,
        prompt="Smooth jazz chords with a walking bassline feel.",
    ),
    "Ethereal Harp": CompositionSettings(
        instrument=Instrument.HARP,
        key=KeySignature.F_MAJOR,
        time_signature=TimeSignature.THREE_FOUR,
        tempo=70,
        complexity=Complexity.INTERMEDIATE,
        mood=Mood.ETHEREAL,
        prompt="Dreamy glissandos and gentle melody for meditation.",
    ),
}

# Upper bounds (exclusive) in BPM; anything faster is Prestissimo.
TEMPO_MARKINGS = [
    (60, "Largo"),
    (66, "Larghetto"),
    (76, "Adagio"),
    (108, "Andante"),
    (120, "Moderato"),
    (168, "Allegro"),
    (200, "Presto"),
]


def tempo_marking(bpm: int) -> str:
    """Italian tempo marking for a BPM value."""
    for upper, marking in TEMPO_MARKINGS:
        if bpm < upper:
            return marking
    return "Prestissimo"


def default_settings_for(user=None) -> CompositionSettings:
    """
    Settings for a new piece, seeded from the user's onboarding answers.

    Falls back to Piano / Intermediate when the user has not chosen.
    """
    instrument = getattr(user, "primary_instrument", None) or Instrument.PIANO
    complexity = getattr(user, "experience_level", None) or Complexity.INTERMEDIATE
    return CompositionSettings(
        prompt="",
        instrument=instrument,
        complexity=complexity,
        key=KeySignature.C_MAJOR,
        time_signature=TimeSignature.FOUR_FOUR,
        tempo=DEFAULT_TEMPO,
        mood=Mood.HAPPY,
    )
