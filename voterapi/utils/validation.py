from flask import request
from marshmallow import ValidationError

from ..exceptions import InvalidIdentifier, MalformedBody


def load_or_abort(schema):
    """Parse the JSON request body into a record, or abort with 400."""
    payload = request.get_json(silent=True)
    if payload is None:
        raise MalformedBody({"_body": ["Body must be valid JSON"]})
    try:
        return schema.load(payload)
    except ValidationError as err:
        raise MalformedBody(err.messages)


def parse_identifier(name: str, raw: str) -> int:
    # str.isdigit() also accepts non-ASCII digits
    if not raw or not raw.isascii() or not raw.isdigit():
        raise InvalidIdentifier(name, raw)
    return int(raw)
