# Configuración del cliente
import os
from pathlib import Path

SERVER_URL = os.getenv("SSS_SERVER_URL", "http://127.0.0.1:5000/api/validate")
REQUEST_TIMEOUT = float(os.getenv("SSS_REQUEST_TIMEOUT", "10"))

# Fichero de shares por defecto (mismo nombre que el del validador original)
DEFAULT_SHARE_FILE = Path(os.getenv("SSS_SHARE_FILE", "shamir.json"))
