import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from robot_canvas.brain.plan_validator import PlanFailure, PlanValidator
from robot_canvas.config import Settings
from robot_canvas.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Canvas snapshots arrive as base64 in the JSON body
MAX_BODY_BYTES = 10 * 1024 * 1024


def create_app(settings, validator=None):
    """
    Builds the Flask app around one PlanValidator.
    `settings` is constructed once by the caller; nothing here reads the
    environment.
    """
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_BODY_BYTES
    CORS(app)

    validator = validator or PlanValidator(settings)

    @app.errorhandler(RequestEntityTooLarge)
    def body_too_large(e):
        return jsonify({
            "error": f"Request body exceeds {MAX_BODY_BYTES // (1024 * 1024)} MB",
            "details": f"{type(e).__name__}: {e.description}"
        }), 413

    @app.route('/api/health', methods=['GET'])
    def health():
        return jsonify({
            "backend": "connected",
            "model": settings.robotics_model,
            "api_key_configured": bool(settings.gemini_api_key),
            "canvas": {
                "width": settings.canvas_width,
                "height": settings.canvas_height
            }
        })

    @app.route('/api/generate-trajectory', methods=['POST'])
    def generate_trajectory():
        """
        Main endpoint: takes {image, prompt}, returns the validated trajectory
        or an {error, details} envelope.
        """
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}

            result = validator.validate(data.get('image'), data.get('prompt'))

            if isinstance(result, PlanFailure):
                error = result.error
                return jsonify({
                    "error": error.message,
                    "details": error.details
                }), error.status_code

            return jsonify({
                "success": True,
                "trajectory": result.plan.to_dicts()
            })

        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Unexpected error while generating trajectory")
            return jsonify({
                "error": str(e) or "Failed to generate trajectory",
                "details": repr(e)
            }), 500

    return app


def main():
    settings = Settings.from_env()
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; trajectory requests will fail")

    app = create_app(settings)
    logger.info("Serving on port %d with model %s", settings.port, settings.robotics_model)
    app.run(host='0.0.0.0', port=settings.port, debug=False, use_reloader=False)


if __name__ == '__main__':
    main()
