def swagger_template(app=None):
    title = "Voter API"
    version = "1.0.0"

    if app:
        title = app.config.get("SWAGGER_TITLE", title)
        version = app.config.get("SWAGGER_VERSION", version)

    return {
        "swagger": "2.0",
        "info": {
            "title": title,
            "version": version,
            "description": "Voter records and their poll history, held in memory.",
        },
        "definitions": {
            "VoteRecord": {
                "type": "object",
                "properties": {
                    "PollId": {"type": "integer", "minimum": 0, "example": 1},
                    "VoteId": {"type": "integer", "minimum": 0, "example": 1},
                    "VoteDate": {"type": "string", "format": "date-time", "example": "2024-11-05T14:30:00Z"},
                }
            },
            "Voter": {
                "type": "object",
                "properties": {
                    "VoterId": {"type": "integer", "minimum": 0, "example": 1},
                    "Name": {"type": "string", "example": "Ada Lovelace"},
                    "Email": {"type": "string", "example": "ada@example.com"},
                    "VoteHistory": {"type": "array", "items": {"$ref": "#/definitions/VoteRecord"}},
                }
            },
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "success": {"type": "boolean", "example": False},
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string", "example": "NOT_FOUND"},
                            "message": {"type": "string", "example": "Voter not found"},
                            "details": {"type": "object"}
                        }
                    },
                    "request_id": {"type": "string"}
                }
            }
        }
    }
