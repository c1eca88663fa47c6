"""Flask API exposing the call-flow analysis."""

from flask import Flask, jsonify, request

from callflow_analyzer.config import Config
from callflow_analyzer.pipeline import CallFlowAnalyzer


def create_app(config: Config | None = None,
               analyzer: CallFlowAnalyzer | None = None) -> Flask:
    """Flask application factory."""
    app = Flask(__name__)

    if config is None:
        config = Config()
    if analyzer is None:
        analyzer = CallFlowAnalyzer(config.log_file)

    app.config["CALLFLOW"] = config
    app.config["ANALYZER"] = analyzer

    @app.route("/api/analyze", methods=["POST"])
    def analyze():
        data = request.get_json(silent=True) or {}
        phone_number = data.get("phoneNumber") if isinstance(data, dict) else None
        if isinstance(phone_number, int) and not isinstance(phone_number, bool):
            phone_number = str(phone_number)
        if not phone_number or not isinstance(phone_number, str):
            return jsonify({"error": "Phone number is required"}), 400

        result = app.config["ANALYZER"].analyze(phone_number)
        if not result.found:
            return jsonify({"error": "No call flow found for this number"}), 404

        return jsonify(result.to_dict())

    @app.route("/health")
    def health():
        current = app.config["ANALYZER"]
        return jsonify({
            "status": "ok",
            "log_file": current.log_file,
            "log_available": current.log_available(),
        })

    return app
