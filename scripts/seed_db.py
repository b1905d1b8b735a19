from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.lealtad_registry.lealtad_registry.main import create_app
from src.lealtad_registry.lealtad_registry.store.bootstrap import seed_demo_data


def main() -> None:
    app = create_app()
    container = app.extensions["registry_container"]

    if container.backend != "local":
        raise SystemExit("RECORDS_API_URL está configurado: la carga de demostración solo aplica al almacén local.")

    if seed_demo_data(container.local_store):
        print("OK: Datos de demostración cargados en el almacén local")
    else:
        print("SKIP: El almacén local ya contiene notificaciones")


if __name__ == "__main__":
    main()
