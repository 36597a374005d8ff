#!/usr/bin/env python3
"""SiteSmith - HTTP API for the website generation pipeline."""

import logging
import os

from flask import Flask, jsonify, request

from config.defaults import DEFAULTS
from core.errors import GenerationError
from core.orchestrator import build_orchestrator
from core.state import STYLES, GenerationRequest

app = Flask(__name__)
orchestrator = build_orchestrator()


def _check_string_list(data, key, details):
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        details.append({"path": [key], "message": f"{key} must be a list of strings"})
        return None
    return value


def parse_generation_request(data):
    """Validate a request body. Returns (GenerationRequest or None, details)."""
    details = []
    if not isinstance(data, dict):
        return None, [{"path": [], "message": "Expected a JSON object"}]

    prompt = data.get("prompt")
    min_len = DEFAULTS["min_prompt_length"]
    if not isinstance(prompt, str):
        details.append({"path": ["prompt"], "message": "Prompt is required"})
    elif len(prompt.strip()) < min_len:
        details.append({"path": ["prompt"], "message": f"Prompt must be at least {min_len} characters"})

    template = data.get("template")
    if template is not None and not isinstance(template, str):
        details.append({"path": ["template"], "message": "template must be a string"})

    style = data.get("style")
    if style is not None and style not in STYLES:
        details.append({"path": ["style"], "message": f"style must be one of: {', '.join(STYLES)}"})

    pages = _check_string_list(data, "pages", details)
    features = _check_string_list(data, "features", details)

    if details:
        return None, details
    return GenerationRequest(
        prompt=prompt,
        template=template,
        style=style,
        pages=pages,
        features=features,
    ), []


def _require_fields(data, *keys):
    if not isinstance(data, dict):
        return list(keys)
    return [k for k in keys if not isinstance(data.get(k), str) or not data[k].strip()]


@app.route("/api/health")
def api_health():
    return jsonify({"status": "ok"})


@app.route("/api/ai/generate", methods=["POST"])
def api_generate():
    """Run the generation pipeline for one prompt."""
    data = request.get_json(silent=True)
    gen_request, details = parse_generation_request(data)
    if gen_request is None:
        return jsonify({"error": "Invalid request data", "details": details}), 400

    result = orchestrator.generate_website(gen_request)
    if not result.success:
        return jsonify({"error": result.error or "Generation failed"}), 500
    return jsonify(result.to_dict())


@app.route("/api/ai/component", methods=["POST"])
def api_component():
    data = request.get_json(silent=True)
    missing = _require_fields(data, "name", "description")
    if missing:
        return jsonify({"error": f"Missing {', '.join(missing)}"}), 400

    style = data.get("style")
    if style is not None and style not in STYLES:
        return jsonify({"error": f"style must be one of: {', '.join(STYLES)}"}), 400

    try:
        code = orchestrator.generate_component(data["name"], data["description"], style)
    except GenerationError as e:
        app.logger.error("[api] component generation failed: %s", e)
        return jsonify({"error": str(e)}), 500
    return jsonify({"code": code})


@app.route("/api/ai/refine", methods=["POST"])
def api_refine():
    data = request.get_json(silent=True)
    missing = _require_fields(data, "code", "feedback")
    if missing:
        return jsonify({"error": f"Missing {', '.join(missing)}"}), 400

    try:
        code = orchestrator.refine_code(data["code"], data["feedback"])
    except GenerationError as e:
        app.logger.error("[api] refine failed: %s", e)
        return jsonify({"error": str(e)}), 500
    return jsonify({"code": code})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    port = int(os.environ.get("PORT", 5001))
    print(f"SiteSmith running at http://localhost:{port}")
    app.run(debug=False, port=port)
