"""
Shared pytest fixtures for realtimesession tests.
"""

import copy

import pytest

SESSION_RESPONSE = {
    "id": "sess_1",
    "object": "realtime.session",
    "model": "gpt-4o-realtime",
    "modalities": ["audio", "text"],
    "instructions": "",
    "voice": "alloy",
    "input_audio_format": "pcm16",
    "output_audio_format": "pcm16",
    "tool_choice": "auto",
    "temperature": 0.8,
    "max_response_output_tokens": "inf",
    "tools": [],
    "client_secret": {"value": "sk_abc", "expires_at": 1700000000000},
}


@pytest.fixture
def session_response():
    """A fresh copy of a minimal successful sessions response."""
    return copy.deepcopy(SESSION_RESPONSE)
