from __future__ import annotations

import io

from flask import Response, send_file

from ..config import SETTINGS


def send_png(data: bytes, cache_control: str | None = None) -> Response:
    response = send_file(io.BytesIO(data), mimetype="image/png")
    response.headers["Cache-Control"] = cache_control or SETTINGS.cache_control
    return response
