# Aritmética modular sobre el campo primo

# ---------------------------
# IMPORTS
# ---------------------------
from core.errors import FieldDomainError


# ---------------------------
# FUNCIÓN power: exponenciación modular
# ---------------------------
def power(base: int, exponent: int, modulus: int) -> int:
    """
    Calcula base^exponent mod modulus con el método binario (square-and-multiply).
    - base: entero cualquiera (los negativos se normalizan a [0, modulus))
    - exponent: entero >= 0
    - modulus: entero > 1
    Devuelve: entero en [0, modulus)
    """
    if modulus <= 1:
        raise FieldDomainError(f"El módulo debe ser mayor que 1 (recibido {modulus}).")
    if exponent < 0:
        raise FieldDomainError("El exponente no puede ser negativo.")

    # los int de Python son de precisión arbitraria: (modulus-1)^2 nunca desborda
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        # si el bit menos significativo es 1, multiplicamos el acumulado
        if exponent & 1:
            result = (result * base) % modulus
        # elevamos al cuadrado para el siguiente bit
        base = (base * base) % modulus
        exponent >>= 1
    return result


# ---------------------------
# FUNCIÓN mod_inverse: inversa modular (Fermat)
# ---------------------------
def mod_inverse(a: int, modulus: int) -> int:
    """
    Devuelve a^-1 mod modulus usando el pequeño teorema de Fermat: a^(p-2).
    Sólo es correcta si 'modulus' es primo; aquí no se comprueba.
    Lanza FieldDomainError si a ≡ 0 (mod modulus): el 0 no tiene inversa.
    """
    if modulus <= 1:
        raise FieldDomainError(f"El módulo debe ser mayor que 1 (recibido {modulus}).")
    if a % modulus == 0:
        raise FieldDomainError(f"No existe inversa modular para {a} mod {modulus}.")
    return power(a, modulus - 2, modulus)


# ---------------------------
# FUNCIÓN mod_sub: resta normalizada
# ---------------------------
def mod_sub(a: int, b: int, modulus: int) -> int:
    """(a - b) mod modulus, siempre en [0, modulus)."""
    return ((a - b) % modulus + modulus) % modulus
