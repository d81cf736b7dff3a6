# Reconstrucción de secretos Shamir por interpolación de Lagrange

# ---------------------------
# IMPORTS
# ---------------------------
from math import gcd
from typing import Iterable, List, NamedTuple, Optional, Tuple

# isPrime de pycryptodome: test probabilístico (Miller-Rabin + Lucas)
from Crypto.Util.number import isPrime

from core import config
from core.errors import (
    DuplicateXError,
    InsufficientSharesError,
    InvalidThresholdError,
    InvalidModulusError,
    ShareFormatError,
    ShareRangeError,
)
from core.field_arithmetic import mod_inverse, mod_sub

STATUS_VALID = "Valid"
STATUS_INVALID = "Invalid"


# ---------------------------
# TIPOS: Share y ShareRecord
# ---------------------------
class Share(NamedTuple):
    """Punto (x, y) del polinomio. Inmutable; se comporta como una tupla."""

    x: int
    y: int


class ShareRecord(NamedTuple):
    """Datos ya parseados que recibe el validador desde el exterior."""

    expected_secret: int
    prime: int
    shares: List[Share]
    threshold: Optional[int] = None


def _is_int(value) -> bool:
    # bool es subclase de int, pero True/False no son coordenadas válidas
    return isinstance(value, int) and not isinstance(value, bool)


def _as_share(item) -> Share:
    """Convierte un par (x, y) cualquiera en Share, o lanza ShareFormatError."""
    if isinstance(item, Share):
        candidate = item
    else:
        try:
            x, y = item
        except (TypeError, ValueError):
            raise ShareFormatError(f"Share inválido, se esperaba un par (x, y): {item!r}")
        candidate = Share(x, y)
    if not (_is_int(candidate.x) and _is_int(candidate.y)):
        raise ShareFormatError(f"Las coordenadas del share deben ser enteras: {item!r}")
    return candidate


# ---------------------------
# FUNCIÓN validate_shares: comprobaciones previas a la aritmética
# ---------------------------
def validate_shares(
    shares: Iterable,
    prime: int,
    threshold: Optional[int] = None,
    strict: Optional[bool] = None,
) -> List[Share]:
    """
    Valida el conjunto de shares antes de interpolar y lo devuelve como lista de Share.
    - shares: iterable de pares (x, y)
    - prime: módulo del campo
    - threshold: umbral declarado (opcional); si se da, hacen falta al menos t shares
    - strict: si es None se usa config.STRICT_VALIDATION
      (en modo permisivo se exige además que cada diferencia xi - xj sea
      invertible módulo prime; si no, InvalidModulusError antes de interpolar)
    Lanza una subclase de ShamirError en cuanto encuentra un problema.
    """
    if strict is None:
        strict = config.STRICT_VALIDATION

    points = [_as_share(item) for item in shares]

    # un conjunto vacío daría una suma vacía (0): se rechaza explícitamente
    if not points:
        raise InsufficientSharesError("Se necesita al menos un share para reconstruir el secreto.")
    if threshold is not None:
        if not _is_int(threshold) or threshold < 1:
            raise InvalidThresholdError(f"Umbral inválido: {threshold!r}")
        if len(points) < threshold:
            raise InsufficientSharesError(
                f"No hay suficientes shares. Se necesitan {threshold}, hay {len(points)}."
            )

    if not _is_int(prime) or prime <= 1:
        raise InvalidModulusError(f"El módulo debe ser un entero mayor que 1 (recibido {prime!r}).")

    # escaneo de duplicados ANTES de cualquier operación: x ≡ x' (mod p) anula el denominador
    seen = set()
    for share in points:
        key = share.x % prime
        if key in seen:
            raise DuplicateXError(share.x)
        seen.add(key)

    if strict:
        if not isPrime(prime):
            raise InvalidModulusError(f"El módulo {prime} no es primo.")
        for share in points:
            if not 1 <= share.x < prime:
                raise ShareRangeError(f"x={share.x} fuera de [1, {prime - 1}].")
            if not 0 <= share.y < prime:
                raise ShareRangeError(f"y={share.y} fuera de [0, {prime - 1}].")
    else:
        # con un módulo compuesto una diferencia xi - xj puede no ser invertible
        for i, first in enumerate(points):
            for second in points[i + 1:]:
                if gcd(first.x - second.x, prime) != 1:
                    raise InvalidModulusError(
                        f"x={first.x} y x={second.x} no tienen diferencia invertible módulo {prime}."
                    )

    return points


# ---------------------------
# FUNCIÓN lagrange_interpolation: evaluar el polinomio en un punto
# ---------------------------
def lagrange_interpolation(shares: List[Share], prime: int, at: int = config.SECRET_X) -> int:
    """
    Interpolación de Lagrange en el campo finito módulo 'prime'.
    - shares: pares (x, y) o Share ya validados (x distintos módulo prime)
    - prime: primo del campo
    - at: punto donde evaluar (0 para recuperar a0 = secreto)
    Devuelve: valor entero interpolado en 'at', en [0, prime)
    """
    total = 0
    k = len(shares)
    for i in range(k):
        xi, yi = shares[i]
        num = 1
        den = 1
        for j in range(k):
            if i == j:
                continue
            xj, _ = shares[j]
            # toda resta se renormaliza a [0, prime)
            num = (num * mod_sub(at, xj, prime)) % prime
            den = (den * mod_sub(xi, xj, prime)) % prime
        term = yi * num % prime * mod_inverse(den, prime) % prime
        total = (total + term) % prime
    return (total + prime) % prime


# ---------------------------
# FUNCIÓN reconstruct: wrapper para recuperar el secreto
# ---------------------------
def reconstruct(
    shares: Iterable,
    prime: int,
    threshold: Optional[int] = None,
    strict: Optional[bool] = None,
) -> int:
    """
    Valida los shares y recupera el secreto (valor del polinomio en x=0).
    Se usan todos los shares recibidos, no sólo los t primeros.
    """
    points = validate_shares(shares, prime, threshold=threshold, strict=strict)
    return lagrange_interpolation(points, prime, at=config.SECRET_X)


# ---------------------------
# VERIFICACIÓN: comparación con el secreto esperado
# ---------------------------
def verify_secret(recovered: int, expected: int) -> bool:
    """True si el secreto recuperado coincide con el esperado."""
    return recovered == expected


def validation_status(is_valid: bool) -> str:
    return STATUS_VALID if is_valid else STATUS_INVALID


def validate_record(record: ShareRecord, strict: Optional[bool] = None) -> Tuple[int, bool]:
    """Reconstruye el secreto de un ShareRecord y lo compara con el esperado."""
    recovered = reconstruct(record.shares, record.prime, threshold=record.threshold, strict=strict)
    return recovered, verify_secret(recovered, record.expected_secret)
