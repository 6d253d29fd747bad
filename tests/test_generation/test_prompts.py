# tests/test_generation/test_prompts.py
from src.generation.prompts import (
    RESPONSE_FIELDS,
    build_messages,
    build_system_prompt,
    build_user_prompt,
)
from tests.test_compositions.factories import make_settings


def test_user_prompt_lists_every_setting():
    prompt = build_user_prompt(make_settings(
        instrument="Cello",
        key="D Minor",
        time_signature="3/4",
        tempo=72,
        complexity="Advanced",
        mood="Romantic",
        prompt="A slow serenade",
    ))

    assert "Instrument: Cello" in prompt
    assert "Key: D Minor" in prompt
    assert "Time Signature: 3/4" in prompt
    assert "Tempo: 72 BPM" in prompt
    assert "Complexity: Advanced" in prompt
    assert "Mood: Romantic" in prompt
    assert '"A slow serenade"' in prompt


def test_system_prompt_has_formatting_rules_and_contract():
    prompt = build_system_prompt(make_settings(time_signature="6/8"))

    assert "X:1, T:Title, C:ArioMuse" in prompt
    assert "time signature (6/8)" in prompt
    assert "8-16 bars" in prompt
    assert "repeat signs" in prompt
    for field in RESPONSE_FIELDS:
        assert f'"{field}"' in prompt


def test_polyphonic_instruments_get_chords():
    prompt = build_system_prompt(make_settings(instrument="Piano"))
    assert "[CEG]" in prompt


def test_monophonic_instruments_get_single_notes():
    prompt = build_system_prompt(make_settings(instrument="Flute"))
    assert "single notes only" in prompt
    assert "[CEG]" not in prompt


def test_messages_are_a_single_user_turn():
    messages = build_messages(make_settings())
    assert len(messages) == 1
    assert messages[0]["role"] == "user"
    assert "RULES FOR ABC NOTATION" in messages[0]["content"]
    assert "COMPOSE REQUEST" in messages[0]["content"]
