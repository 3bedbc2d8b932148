from flask import request


def json_object() -> dict:
    """Request body as a dict; anything but a JSON object reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
