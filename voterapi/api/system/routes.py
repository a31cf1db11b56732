from flask import Blueprint
from flasgger import swag_from

system_bp = Blueprint("system", __name__)


@system_bp.get("/health")
@swag_from({"tags": ["System"], "summary": "Health check", "responses": {200: {"description": "OK"}}})
def health():
    # Static payload
    return {
        "status": "ok",
        "version": "1.0.0",
        "uptime": 100,
        "users_processed": 1000,
        "errors_encountered": 10,
    }, 200


@system_bp.get("/crash")
@swag_from({"tags": ["System"], "summary": "Simulate an unexpected crash", "responses": {500: {"description": "Recovered crash", "schema": {"$ref": "#/definitions/ErrorResponse"}}}})
def crash():
    raise RuntimeError("Simulating an unexpected crash")


@system_bp.get("/crash2")
@swag_from({"tags": ["System"], "summary": "Simulate a division by zero", "responses": {500: {"description": "Recovered crash", "schema": {"$ref": "#/definitions/ErrorResponse"}}}})
def crash_divide():
    i = 0
    j = 1 / i
    return {"val_j": str(j)}, 200
