"""
Prompt compilation for the composition model.

The system prompt carries the ABC formatting rules and the JSON output
contract; the user prompt lists the requested settings. Both are rebuilt from
CompositionSettings on every request.
"""

from src.compositions.choices import Polyphony, polyphony_of
from src.compositions.types import CompositionSettings

RESPONSE_FIELDS = ("abc", "commentary", "title")

VOICING_RULES = {
    Polyphony.POLYPHONIC: (
        "This is a polyphonic instrument: write chords in square brackets "
        "(e.g. [CEG]) alongside the melody."
    ),
    Polyphony.MONOPHONIC: (
        "This is a monophonic instrument: write single notes only, no chords."
    ),
    Polyphony.PERCUSSIVE: (
        "This is a percussion instrument: write rhythmic patterns on a "
        "percussion staff, single strokes or stacked hits only."
    ),
}

IDEA_PROMPT = (
    "Give me a creative, sophisticated, short (1 sentence) music composition "
    "prompt describing a mood, instrument, and specific musical technique. "
    "Example: 'A baroque fugue in G minor featuring rapid harpsichord ornamentation.'"
)

# Canned ideas returned when the model cannot supply one.
NO_CREDENTIAL_IDEA = "A mysterious melody in the fog..."
EMPTY_REPLY_IDEA = "A happy tune on a sunny day."
FALLBACK_IDEA = "A fast violin run in a minor key."


def build_system_prompt(settings: CompositionSettings) -> str:
    """Formatting rules and output contract for one request."""
    voicing = VOICING_RULES[polyphony_of(settings.instrument)]
    return f"""You are ArioMuse, an expert composer and music theorist specializing in procedural music generation.

Your goal is to compose a musically coherent, pleasing piece based on constraints.

RULES FOR ABC NOTATION:
1. Use standard ABC notation headers: X:1, T:Title, C:ArioMuse, M:Meter, L:Unit Length, Q:Tempo, K:Key.
2. Ensure bar lines (|) are placed correctly according to the time signature ({settings.time_signature.value}).
3. Use appropriate note ranges for the requested instrument ({settings.instrument.value}).
4. Add dynamics (!pp!, !mp!, !mf!, !f!) and articulation (.staccato, tenuto) where appropriate for musicality.
5. {voicing}
6. Ensure the piece lasts at least 8-16 bars.
7. Use repeat signs (|: :|) if the structure calls for it (AABB form etc).

OUTPUT FORMAT:
JSON object with "abc" (string), "commentary" (string), "title" (string)."""


def build_user_prompt(settings: CompositionSettings) -> str:
    """The requested settings and the reasoning steps to follow."""
    return f"""COMPOSE REQUEST:
- Instrument: {settings.instrument.value}
- Key: {settings.key.value}
- Time Signature: {settings.time_signature.value}
- Tempo: {settings.tempo} BPM
- Complexity: {settings.complexity.value}
- Mood: {settings.mood.value}
- Context/Prompt: "{settings.prompt}"

Step-by-step reasoning:
1. Determine chord progression based on Key and Mood.
2. Construct melody based on Complexity.
3. Generate valid ABC string."""


def build_messages(settings: CompositionSettings) -> list[dict]:
    """Messages in OpenAI format (the LiteLLM standard)."""
    return [
        {
            "role": "user",
            "content": build_system_prompt(settings) + "\n\n" + build_user_prompt(settings),
        }
    ]
