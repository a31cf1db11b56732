from flask import Blueprint, current_app, jsonify
from flasgger import swag_from

from ...errors import error_response
from ...exceptions import VoterAlreadyExists, VoterNotFound, VoterStoreError, VoteEntryNotFound
from ...schemas.voter import VoteRecordSchema, VoterSchema
from ...store import VoterStore
from ...utils.validation import load_or_abort, parse_identifier

voter_bp = Blueprint("voter", __name__)

voter_schema = VoterSchema()
voter_many_schema = VoterSchema(many=True)
vote_schema = VoteRecordSchema()
vote_many_schema = VoteRecordSchema(many=True)

_ID_PARAM = {"in": "path", "name": "voter_id", "type": "integer", "required": True}
_POLL_PARAM = {"in": "path", "name": "poll_id", "type": "integer", "required": True}


def _store() -> VoterStore:
    return current_app.extensions["voter_store"]


def _text(body: str):
    return current_app.response_class(body, status=200, mimetype="text/plain")


@voter_bp.get("")
@swag_from({
    "tags": ["Voters"],
    "summary": "List all voters",
    "responses": {200: {"description": "OK", "schema": {"type": "array", "items": {"$ref": "#/definitions/Voter"}}}},
})
def list_all_voters():
    try:
        voters = _store().get_all()
    except VoterStoreError:
        current_app.logger.exception("Error getting all voters")
        return error_response(404, "Error getting all voters")

    return jsonify(voter_many_schema.dump(voters))


@voter_bp.get("/<voter_id>")
@swag_from({
    "tags": ["Voters"],
    "summary": "Get a voter",
    "parameters": [_ID_PARAM],
    "responses": {200: {"description": "OK", "schema": {"$ref": "#/definitions/Voter"}}, 400: {}, 404: {}},
})
def get_voter(voter_id):
    voter_id = parse_identifier("voter_id", voter_id)

    try:
        voter = _store().get(voter_id)
    except VoterNotFound as e:
        current_app.logger.info("Voter not found: %s", e)
        return error_response(404, "Voter not found")

    return voter_schema.dump(voter), 200


@voter_bp.get("/<voter_id>/polls")
@swag_from({
    "tags": ["Poll history"],
    "summary": "Get the poll history of a voter",
    "parameters": [_ID_PARAM],
    "responses": {200: {"description": "OK", "schema": {"type": "array", "items": {"$ref": "#/definitions/VoteRecord"}}}, 400: {}, 404: {}},
})
def get_poll_history(voter_id):
    voter_id = parse_identifier("voter_id", voter_id)

    try:
        history = _store().get_history(voter_id)
    except VoterNotFound as e:
        current_app.logger.info("Voter not found: %s", e)
        return error_response(404, "Voter not found")

    return jsonify(vote_many_schema.dump(history))


@voter_bp.get("/<voter_id>/polls/<poll_id>")
@swag_from({
    "tags": ["Poll history"],
    "summary": "Get a single poll from a voter's history",
    "description": "When the history holds the poll more than once, the earliest entry is returned.",
    "parameters": [_ID_PARAM, _POLL_PARAM],
    "responses": {200: {"description": "OK", "schema": {"$ref": "#/definitions/VoteRecord"}}, 400: {}, 404: {}},
})
def get_single_poll(voter_id, poll_id):
    voter_id = parse_identifier("voter_id", voter_id)
    poll_id = parse_identifier("poll_id", poll_id)

    try:
        vote = _store().get_history_entry(voter_id, poll_id)
    except VoterNotFound as e:
        current_app.logger.info("Voter not found: %s", e)
        return error_response(404, "Voter not found")
    except VoteEntryNotFound as e:
        current_app.logger.info("Poll not found: %s", e)
        return error_response(404, "Poll not found for this voter")

    return vote_schema.dump(vote), 200


@voter_bp.post("/<voter_id>")
@swag_from({
    "tags": ["Poll history"],
    "summary": "Append a poll to a voter's history",
    "parameters": [_ID_PARAM, {"in": "body", "name": "body", "required": True, "schema": {"$ref": "#/definitions/VoteRecord"}}],
    "responses": {200: {"description": "Voter id", "schema": {"type": "integer"}}, 400: {}, 404: {}},
})
def add_poll_to_voter(voter_id):
    voter_id = parse_identifier("voter_id", voter_id)
    vote = load_or_abort(vote_schema)

    try:
        _store().add_history_entry(voter_id, vote)
    except VoterNotFound as e:
        current_app.logger.info("Failed to add poll to voter: %s", e)
        return error_response(404, "Failed to add poll to voter")

    return jsonify(voter_id)


@voter_bp.post("")
@swag_from({
    "tags": ["Voters"],
    "summary": "Add a voter",
    "parameters": [{"in": "body", "name": "body", "required": True, "schema": {"$ref": "#/definitions/Voter"}}],
    "responses": {200: {"description": "Echo of the stored voter"}, 400: {}, 500: {"description": "Voter already exists"}},
})
def add_voter():
    voter = load_or_abort(voter_schema)

    try:
        _store().add(voter)
    except VoterAlreadyExists as e:
        current_app.logger.warning("Error adding voter: %s", e)
        return error_response(500, "Failed to add voter")

    return voter_schema.dump(voter), 200


@voter_bp.put("")
@swag_from({
    "tags": ["Voters"],
    "summary": "Replace a voter (history included)",
    "parameters": [{"in": "body", "name": "body", "required": True, "schema": {"$ref": "#/definitions/Voter"}}],
    "responses": {200: {"description": "Echo of the stored voter"}, 400: {}, 500: {"description": "Voter does not exist"}},
})
def update_voter():
    voter = load_or_abort(voter_schema)

    try:
        _store().update(voter)
    except VoterNotFound as e:
        current_app.logger.warning("Error updating voter: %s", e)
        return error_response(500, "Failed to update voter")

    return voter_schema.dump(voter), 200


@voter_bp.delete("/<voter_id>")
@swag_from({
    "tags": ["Voters"],
    "summary": "Delete a voter",
    "description": "Deleting an unknown voter also succeeds.",
    "parameters": [_ID_PARAM],
    "responses": {200: {"description": "Delete OK"}, 400: {}, 500: {}},
})
def delete_voter(voter_id):
    voter_id = parse_identifier("voter_id", voter_id)

    try:
        _store().delete(voter_id)
    except VoterStoreError:
        current_app.logger.exception("Error deleting voter %s", voter_id)
        return error_response(500, "Failed to delete voter")

    return _text("Delete OK")


@voter_bp.delete("")
@swag_from({
    "tags": ["Voters"],
    "summary": "Delete all voters",
    "responses": {200: {"description": "Delete All OK"}, 500: {}},
})
def delete_all_voters():
    try:
        _store().delete_all()
    except VoterStoreError:
        current_app.logger.exception("Error deleting all voters")
        return error_response(500, "Failed to delete all voters")

    return _text("Delete All OK")
