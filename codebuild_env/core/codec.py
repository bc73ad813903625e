"""Wire codec for value objects.

Request bodies are built from ``request_body()``, which is where enum tags
are checked against their known values. Responses are parsed through the
normal construction path and accept any tag the service returns.
"""

import json
import logging
from typing import Any, Dict, Union

from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)


def dump_request(value_object) -> Dict[str, Any]:
    """Build the request body for a value object."""
    body = value_object.request_body()
    logger.debug(f"Built request body for {type(value_object).__name__} with keys: {sorted(body)}")
    return body


def to_json(value_object, indent: int = 2) -> str:
    """Serialize a value object's request body as JSON."""
    return json.dumps(dump_request(value_object), indent=indent)


def _load_payload(payload: Union[str, bytes, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidArgument(f"Response is not valid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise InvalidArgument(f"Expected a JSON object, got {type(payload).__name__}.")
    return payload


def parse_response(payload: Union[str, bytes, Dict[str, Any]], model):
    """Build a value object of type ``model`` from a response payload.

    Args:
        payload: Decoded JSON object, or JSON text
        model: Value object class to build

    Returns:
        A validated instance of ``model``
    """
    data = _load_payload(payload)
    logger.debug(f"Parsing {model.__name__} from response")
    return model.create(data)


def parse_environment(payload: Union[str, bytes, Dict[str, Any]]):
    """Build a ProjectEnvironment from a response payload.

    Accepts either the environment object itself or a wrapper holding it under
    an ``environment`` key, as project descriptions do.
    """
    from ..models.environment import ProjectEnvironment

    data = _load_payload(payload)
    if "environment" in data and isinstance(data["environment"], dict):
        data = data["environment"]
    return parse_response(data, ProjectEnvironment)
