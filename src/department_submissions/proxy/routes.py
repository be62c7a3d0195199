"""
Submission proxy blueprint.

Endpoints:
    POST /api/submissions/project   forward a project to the content API
    POST /api/submissions/research  forward a research record
    POST /api/submissions/journal   forward a journal article
    GET  /api/health                readiness probe
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from department_submissions.clients import UpstreamClient

logger = logging.getLogger(__name__)

submissions_bp = Blueprint("submissions_bp", __name__, url_prefix="/api")

UPSTREAM_PATHS = {
    "project": "/api/v1/public/project-mod/projects/submit/",
    "research": "/api/v1/public/research-mod/research/submit/",
    "journal": "/api/v1/public/journal-mod/articles/submit/",
}

FAILURE_MESSAGES = {
    "project": "Unable to submit project",
    "research": "Unable to submit research",
    "journal": "Unable to submit journal article",
}


@submissions_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"}), 200


@submissions_bp.route("/submissions/<entity_type>", methods=["POST"])
async def submit(entity_type):
    """Relay the body to the upstream and echo back its status and JSON."""
    if entity_type not in UPSTREAM_PATHS:
        return jsonify({"error": "Unknown submission type"}), 404

    try:
        payload = request.get_json(force=True)
        async with UpstreamClient(current_app.config["UPSTREAM"]) as client:
            status, data = await client.forward(UPSTREAM_PATHS[entity_type], payload)
    except Exception:
        logger.exception(f"{entity_type} submission failed")
        response = jsonify({"error": FAILURE_MESSAGES[entity_type]})
        response.status_code = 500
    else:
        logger.info(f"{entity_type} submission relayed with status {status}")
        response = jsonify(data)
        response.status_code = status

    response.headers["Cache-Control"] = "no-store"
    return response
