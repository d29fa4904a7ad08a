from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)
from pydantic_core import PydanticCustomError

UNBOUNDED_WIRE_VALUE = "inf"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ValueModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Finite(ValueModel):
    value: StrictInt

    def __init__(self, value: int, **data):
        super().__init__(value=value, **data)


class Unbounded(ValueModel):
    pass


# Max output token limit: a finite count or "inf" on the wire.
IntOrUnbounded = Union[Finite, Unbounded]

UNBOUNDED = Unbounded()


def int_or_unbounded_from_wire(value):
    """Integers are finite limits. Any string at all means unbounded."""
    if isinstance(value, (Finite, Unbounded)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Finite(value)
    if isinstance(value, str):
        return UNBOUNDED
    raise PydanticCustomError("int_or_string_type", "Input should be an integer or a string")


def int_or_unbounded_to_wire(value):
    if isinstance(value, Finite):
        return value.value
    if isinstance(value, Unbounded):
        return UNBOUNDED_WIRE_VALUE
    raise TypeError(f"Expected Finite or Unbounded, got {type(value).__name__}")


def millis_to_datetime(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


def datetime_to_millis(instant: datetime) -> int:
    return (instant - EPOCH) // timedelta(milliseconds=1)


class InputAudioTranscription(ValueModel):
    model: StrictStr


class TurnDetection(ValueModel):
    type: StrictStr
    threshold: Optional[StrictFloat] = None
    prefix_padding_ms: Optional[StrictInt] = None
    silence_duration_ms: Optional[StrictInt] = None
    create_response: Optional[StrictBool] = None


class ToolDescriptor(ValueModel):
    type: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    # Arbitrary JSON, passed through untouched.
    parameters: Any = None

    @classmethod
    def function(cls, name: str, description: Optional[str] = None, parameters: Any = None):
        """Describe a callable function tool."""
        return cls(type="function", name=name, description=description, parameters=parameters)


class SessionConfig(ValueModel):
    """Settings sent when creating a realtime session. Only model is required."""

    model: StrictStr
    modalities: Optional[List[StrictStr]] = None
    instructions: Optional[StrictStr] = None
    voice: Optional[StrictStr] = None
    input_audio_format: Optional[StrictStr] = None
    output_audio_format: Optional[StrictStr] = None
    input_audio_transcription: Optional[InputAudioTranscription] = None
    turn_detection: Optional[TurnDetection] = None
    tools: Optional[List[ToolDescriptor]] = None
    tool_choice: Optional[StrictStr] = None
    temperature: Optional[StrictFloat] = None
    max_response_output_tokens: Optional[IntOrUnbounded] = None

    @field_validator("max_response_output_tokens", mode="before")
    @classmethod
    def validate_max_tokens(cls, v):
        return None if v is None else int_or_unbounded_from_wire(v)

    @field_serializer("max_response_output_tokens")
    def serialize_max_tokens(self, v):
        return None if v is None else int_or_unbounded_to_wire(v)


class ClientSecret(ValueModel):
    value: StrictStr = Field(repr=False)
    expires_at: datetime

    @field_validator("expires_at", mode="before")
    @classmethod
    def validate_expires_at(cls, v):
        """The wire carries Unix milliseconds."""
        if isinstance(v, datetime):
            return v
        if isinstance(v, bool) or not isinstance(v, int):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        try:
            return millis_to_datetime(v)
        except OverflowError:
            raise PydanticCustomError(
                "unix_millis_range", "Input should be Unix milliseconds within the datetime range"
            ) from None

    @field_serializer("expires_at")
    def serialize_expires_at(self, v):
        return datetime_to_millis(v)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the secret is past its expiration instant."""
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at


class SessionResult(ValueModel):
    """Session as created by the server, with its client secret."""

    id: StrictStr
    object: StrictStr
    model: StrictStr
    modalities: List[StrictStr]
    instructions: StrictStr
    voice: StrictStr
    input_audio_format: StrictStr
    output_audio_format: StrictStr
    input_audio_transcription: Optional[InputAudioTranscription] = None
    turn_detection: Optional[TurnDetection] = None
    tools: List[ToolDescriptor]
    tool_choice: StrictStr
    temperature: StrictFloat
    max_response_output_tokens: IntOrUnbounded
    client_secret: ClientSecret

    @field_validator("max_response_output_tokens", mode="before")
    @classmethod
    def validate_max_tokens(cls, v):
        return int_or_unbounded_from_wire(v)

    @field_serializer("max_response_output_tokens")
    def serialize_max_tokens(self, v):
        return int_or_unbounded_to_wire(v)
