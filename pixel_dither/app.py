from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, Response, jsonify, request

from .config import APP_VERSION, SETTINGS, configure_logging
from .errors import InvalidInputError, PipelineError
from .infrastructure.network import FETCHER, ImageFetcher
from .infrastructure.responses import send_png
from .processing.pipeline import PipelineParams, render_png
from .validation import parse_dither_request

INVALID_URL_ERROR = "Missing or invalid url query parameter"
DITHER_FAILED_ERROR = "Failed to dither image"
STATUS_MESSAGE = "Pixel dither service is running. Use /dither?url=..."

log = logging.getLogger(__name__)


def create_app(
    fetcher: ImageFetcher | None = None,
    params: PipelineParams | None = None,
) -> Flask:
    configure_logging()
    app = Flask(__name__)
    source = fetcher or FETCHER
    pipeline_params = params or PipelineParams.from_settings(SETTINGS)

    @app.before_request
    def log_request():
        log.info("%s %s", request.method, request.full_path.rstrip("?"))

    @app.after_request
    def allow_any_origin(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.route("/dither")
    def dither():
        try:
            dither_request = parse_dither_request(request.args)
        except InvalidInputError as exc:
            log.info("Rejected /dither request: %s", exc)
            return jsonify(error=INVALID_URL_ERROR), 400

        try:
            src = source.fetch_image(dither_request.url)
            data = render_png(src, pipeline_params)
        except PipelineError as exc:
            log.error("Error in /dither for %s: %s", dither_request.url, exc)
            return jsonify(error=DITHER_FAILED_ERROR), 500
        except Exception:
            log.exception("Unexpected error in /dither for %s", dither_request.url)
            return jsonify(error=DITHER_FAILED_ERROR), 500

        return send_png(data)

    @app.route("/health")
    def health():
        return jsonify(ok=True, version=APP_VERSION, pipeline=asdict(pipeline_params))

    @app.route("/")
    def index():
        return Response(STATUS_MESSAGE, mimetype="text/plain")

    return app


# Module-level application for WSGI servers (``pixel_dither.app:app``).
app = create_app()
application = app
