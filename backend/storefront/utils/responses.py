from flask import jsonify


def success_response(data=None, status_code=200, message=None, **extra):
    """``{"status": "success", "data": ..., ["message"], ...extra}``"""
    body = {"status": "success"}
    if message:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = data
    return jsonify(body), status_code
