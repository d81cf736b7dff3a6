"""
Errores de la reconstrucción Shamir.

Todos heredan de ValueError: quien ya capture ValueError (como hacía el
código anterior) sigue funcionando, y quien necesite distinguir el motivo
puede capturar la subclase concreta.
"""


class ShamirError(ValueError):
    """Base de los errores del núcleo de reconstrucción."""


class FieldDomainError(ShamirError):
    """Operación fuera del dominio del campo finito (p. ej. inversa de 0)."""


class InsufficientSharesError(ShamirError):
    """No hay shares suficientes para reconstruir."""


class DuplicateXError(ShamirError):
    """Dos shares comparten la misma coordenada x."""

    def __init__(self, x):
        super().__init__(f"Valor x duplicado: {x}")
        self.x = x


class InvalidModulusError(ShamirError):
    """El módulo no es un primo válido para el campo."""


class ShareRangeError(ShamirError):
    """Coordenadas de un share fuera del rango permitido por el primo."""


class ShareFormatError(ShamirError):
    """Un share no es un par de enteros (x, y)."""


class InvalidThresholdError(ShamirError):
    """El umbral declarado no es un entero positivo."""
