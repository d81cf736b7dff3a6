import argparse
import os
import sys

import requests

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.shamir_core import validate_record, validation_status
from client.config import DEFAULT_SHARE_FILE, REQUEST_TIMEOUT, SERVER_URL
from client.share_loader import load_share_record

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser():
    parser = argparse.ArgumentParser(
        description="Reconstruye el secreto de un fichero de shares y lo compara con el esperado."
    )
    parser.add_argument("path", nargs="?", default=str(DEFAULT_SHARE_FILE),
                        help="fichero JSON con expectedSecret, prime y shares")
    parser.add_argument("--remote", action="store_true",
                        help="validar contra el servidor en lugar de localmente")
    parser.add_argument("--url", default=SERVER_URL, help="endpoint /api/validate del servidor")
    parser.add_argument("--lenient", action="store_true",
                        help="no comprobar primalidad ni rangos (sólo en modo local)")
    return parser


def validate_remote(path, url):
    """Envía el registro al servidor y devuelve (recuperado, válido)."""
    record = load_share_record(path)
    payload = {
        "expectedSecret": record.expected_secret,
        "prime": record.prime,
        "shares": [{"x": share.x, "y": share.y} for share in record.shares],
    }
    if record.threshold is not None:
        payload["threshold"] = record.threshold

    response = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    if response.status_code != 200:
        try:
            message = response.json().get("error", response.text)
        except ValueError:
            message = response.text
        raise RuntimeError(f"El servidor respondió {response.status_code}: {message}")

    reply = response.json()
    return reply["recovered_secret"], reply["valid"]


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if args.remote:
            recovered, is_valid = validate_remote(args.path, args.url)
        else:
            record = load_share_record(args.path)
            recovered, is_valid = validate_record(record, strict=False if args.lenient else None)
    except (ValueError, RuntimeError, requests.RequestException) as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR

    print(f"Loaded from: {args.path}")
    print(f"Recovered Secret: {recovered}")
    print(f"Status: {validation_status(is_valid)}")
    return EXIT_VALID if is_valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
