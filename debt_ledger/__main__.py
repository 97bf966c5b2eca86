"""
Arranca la API con uvicorn::

    python -m debt_ledger

El puerto sale de la variable ``PORT`` (5000 por defecto).
"""
import uvicorn

from debt_ledger.core.config import LOG_LEVEL, PORT


def main() -> None:
    uvicorn.run("debt_ledger.main:app", host="0.0.0.0", port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
