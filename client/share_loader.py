"""
Lectura de registros de shares desde JSON.

El formato esperado es el del fichero de ejemplo ``shamir.json``::

    {
        "expectedSecret": 1234,
        "prime": 2087,
        "shares": [{"x": 1, "y": 1494}, {"x": 2, "y": 1942}, {"x": 3, "y": 491}]
    }

``threshold`` es opcional. Los valores numéricos pueden venir como enteros
JSON o como texto decimal. El núcleo sólo recibe enteros ya parseados.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Union

from core.shamir_core import Share, ShareRecord


class InputFormatError(ValueError):
    """El documento de entrada no tiene el formato esperado."""


def parse_int(value: Any, field: str) -> int:
    """Convierte un entero JSON o un texto decimal en int."""
    if isinstance(value, bool):
        raise InputFormatError(f"El campo '{field}' debe ser numérico.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InputFormatError(f"El campo '{field}' debe ser un entero, recibido {value!r}.")


def parse_shares(items: Any) -> List[Share]:
    if not isinstance(items, list):
        raise InputFormatError("'shares' debe ser una lista.")

    shares: List[Share] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise InputFormatError(f"El share {index + 1} debe ser un objeto con 'x' e 'y'.")
        missing = [key for key in ("x", "y") if key not in item]
        if missing:
            raise InputFormatError(f"Al share {index + 1} le falta: {', '.join(missing)}.")
        shares.append(
            Share(
                parse_int(item["x"], f"shares[{index}].x"),
                parse_int(item["y"], f"shares[{index}].y"),
            )
        )
    return shares


def parse_share_record(payload: Any, require_expected: bool = True) -> ShareRecord:
    """
    Extrae un ShareRecord de un diccionario ya decodificado.
    Con ``require_expected=False`` el secreto esperado es opcional (queda en None).
    """
    if not isinstance(payload, Mapping):
        raise InputFormatError("El documento debe ser un objeto JSON.")

    required = ["prime", "shares"]
    if require_expected:
        required.insert(0, "expectedSecret")
    missing = [key for key in required if key not in payload]
    if missing:
        raise InputFormatError(f"Faltan campos requeridos: {', '.join(missing)}.")

    expected = payload.get("expectedSecret")
    threshold = payload.get("threshold")
    return ShareRecord(
        expected_secret=(
            parse_int(expected, "expectedSecret")
            if expected is not None or require_expected
            else None
        ),
        prime=parse_int(payload["prime"], "prime"),
        shares=parse_shares(payload["shares"]),
        threshold=parse_int(threshold, "threshold") if threshold is not None else None,
    )


def load_share_record(path: Union[str, Path]) -> ShareRecord:
    """Lee y parsea un fichero JSON con un registro de shares."""
    file_path = Path(path).expanduser()
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputFormatError(f"No se pudo leer {file_path}: {exc}") from exc

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise InputFormatError(f"JSON inválido en {file_path}: {exc}") from exc

    return parse_share_record(payload)
