"""
Configuración centralizada del núcleo de reconstrucción
"""
import os

# Configuración del servidor de validación
SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = int(os.getenv("SERVER_PORT", "5000"))

# Política de validación Shamir
# - True: se comprueba que el primo lo sea y que x, y estén dentro del campo
# - False: sólo se detectan duplicados y conjuntos vacíos (comportamiento original)
STRICT_VALIDATION = os.getenv("SSS_STRICT_VALIDATION", "true").lower() in {"1", "true", "yes"}

# Punto de evaluación del secreto (término independiente del polinomio)
SECRET_X = 0
