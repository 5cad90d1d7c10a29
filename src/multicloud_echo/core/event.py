"""
Event data model.

The Event is the request payload shared by both deployment targets:
a message and a numeric code. `code == 0` requests a failure, any other
value (negative included) requests an echo.

Wire format (JSON):
    {"message": "hi!", "code": 123}

Missing fields take their zero value ("" and 0). A missing code is
therefore indistinguishable from an explicit failure request.
"""

import json
import re
from dataclasses import dataclass, asdict
from typing import Any

from .exceptions import EventDecodeError

_FIELD_NAMES = ("message", "code")
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


@dataclass(frozen=True)
class Event:
    """
    One invocation payload.

    Attributes:
        message: Text payload, no length constraint
        code: Failure discriminant (0 = fail, anything else = echo)
    """

    message: str = ""
    code: int = 0

    @property
    def is_failure_request(self) -> bool:
        return self.code == 0

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_payload(cls, payload: Any) -> "Event":
        """
        Build an Event from an already-decoded JSON value.

        Keys match field names case-insensitively ("Message" sets message);
        when several keys map to the same field the last one wins. Lone
        UTF-16 surrogates in the message become U+FFFD.

        Args:
            payload: Decoded JSON (dict, or None for a JSON null)

        Returns:
            The decoded Event. Unknown keys are ignored.

        Raises:
            EventDecodeError: If the value is not an object or a field
                has the wrong type
        """
        if payload is None:
            return cls()

        if not isinstance(payload, dict):
            raise EventDecodeError(
                f"Event must be a JSON object, got {type(payload).__name__}"
            )

        fields = {}
        for key, value in payload.items():
            name = key.lower()
            # null leaves the field as it was
            if name in _FIELD_NAMES and value is not None:
                fields[name] = value

        message = fields.get("message")
        if message is None:
            message = ""
        elif not isinstance(message, str):
            raise EventDecodeError(
                f"Field 'message' must be a string, got {type(message).__name__}"
            )
        else:
            message = _LONE_SURROGATE.sub("\ufffd", message)

        code = fields.get("code")
        if code is None:
            code = 0
        # bool is an int subclass; JSON true/false is not a number
        elif isinstance(code, bool) or not isinstance(code, int):
            raise EventDecodeError(
                f"Field 'code' must be an integer, got {type(code).__name__}"
            )

        return cls(message=message, code=code)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Event":
        """
        Decode an Event from its JSON wire format.

        Raises:
            EventDecodeError: If the data is not valid JSON or not a valid Event
        """
        try:
            payload = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise EventDecodeError(f"Invalid JSON: {e}") from e
        except RecursionError as e:
            raise EventDecodeError("Invalid JSON: nesting too deep") from e
        return cls.from_payload(payload)
