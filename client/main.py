from flask import Flask, request, jsonify
import os
import sys

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Obtener el directorio raíz del proyecto
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from core.config import SERVER_HOST, SERVER_PORT, STRICT_VALIDATION
from core.shamir_core import reconstruct, validate_record, validation_status
from client.share_loader import InputFormatError, parse_share_record

app = Flask(__name__)

frontend_origin = os.getenv("FRONTEND_ORIGIN", "http://127.0.0.1:5000")
CORS(
    app,
    resources={"/api/*": {"origins": frontend_origin}},
    supports_credentials=False,
    expose_headers=["Content-Type"],
    allow_headers=["Content-Type"],
)

limiter_enabled = os.getenv("LIMITER_ENABLED", "true").lower() in {"1", "true", "yes"}
limiter_rate = os.getenv("LIMITER_DEFAULT_RATE", "60 per minute")
if limiter_enabled:
    limiter = Limiter(
        get_remote_address,
        app=app,
        default_limits=[limiter_rate],
        storage_uri="memory://",
    )
else:
    limiter = Limiter(get_remote_address, app=app, enabled=False)


@app.errorhandler(429)
def handle_rate_limit(exc):
    return jsonify({"error": "Límite de solicitudes excedido. Intenta nuevamente más tarde."}), 429


@app.errorhandler(ValueError)
def handle_invalid_input(exc):
    # InputFormatError y todos los errores del núcleo heredan de ValueError
    app.logger.info("Solicitud rechazada (%s): %s", type(exc).__name__, exc)
    return jsonify({"error": str(exc), "kind": type(exc).__name__}), 400


def read_payload():
    payload = request.get_json(silent=True)
    if payload is None:
        raise InputFormatError("El cuerpo de la petición debe ser JSON.")
    return payload


@app.route("/api/health", methods=["GET"])
@limiter.exempt
def health():
    return jsonify({"status": "ok", "strict_validation": STRICT_VALIDATION})


@app.route("/api/reconstruct", methods=["POST"])
def reconstruct_endpoint():
    record = parse_share_record(read_payload(), require_expected=False)

    secret = reconstruct(
        record.shares,
        record.prime,
        threshold=record.threshold,
        strict=STRICT_VALIDATION,
    )
    app.logger.info("Secreto reconstruido a partir de %d shares", len(record.shares))

    return jsonify({"secret": secret, "share_count": len(record.shares)})


@app.route("/api/validate", methods=["POST"])
def validate_record_endpoint():
    record = parse_share_record(read_payload())

    recovered, is_valid = validate_record(record, strict=STRICT_VALIDATION)
    status = validation_status(is_valid)
    app.logger.info("Validación de %d shares: %s", len(record.shares), status)

    return jsonify({
        "recovered_secret": recovered,
        "expected_secret": record.expected_secret,
        "valid": is_valid,
        "status": status,
    })


if __name__ == "__main__":
    mode = "estricta" if STRICT_VALIDATION else "permisiva"
    print(f"Servidor en http://{SERVER_HOST}:{SERVER_PORT} (validación {mode})")
    app.run(host=SERVER_HOST, port=SERVER_PORT)
