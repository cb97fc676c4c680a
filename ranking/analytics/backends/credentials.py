"""Loader for the service account credential stored in the process environment."""

import logging
from typing import Any

import orjson
from orjson import JSONDecodeError

from ranking.exceptions import CredentialParseError

logger = logging.getLogger(__name__)


def load_credential(raw_credential: str | None) -> dict[str, Any]:
    """Decode a service account credential that was serialized to a JSON string twice.

    Raw newlines are turned back into `\\n` escapes before the first parse, since
    tools such as dotenv expand them when the value is loaded.

    Raises:
        CredentialParseError: if the value is missing or either parse fails.
    """
    if raw_credential is None:
        logger.error("Invalid credential: the service account credential is not configured")
        raise CredentialParseError("The service account credential is not configured")

    try:
        encoded_credential = orjson.loads(raw_credential.replace("\n", "\\n"))
        credential = orjson.loads(encoded_credential)
    except (JSONDecodeError, TypeError) as ex:
        logger.error(f"Invalid credential: {ex}")
        raise CredentialParseError(f"Failed to decode the service account credential: {ex}") from ex

    if not isinstance(credential, dict):
        logger.error(f"Invalid credential: expected a JSON object, got {type(credential).__name__}")
        raise CredentialParseError("The service account credential is not a JSON object")

    return credential
