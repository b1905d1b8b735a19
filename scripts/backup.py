"""Backup of every record list.

Note: Reads through the configured backend (remote spreadsheet or local JSON
store) and writes a single timestamped JSON snapshot under ``backups/``.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.lealtad_registry.lealtad_registry.main import create_app
from src.lealtad_registry.lealtad_registry.core.exceptions import StoreError
from src.lealtad_registry.lealtad_registry.infractions import mapping as infraction_mapping
from src.lealtad_registry.lealtad_registry.inspections import mapping as inspection_mapping
from src.lealtad_registry.lealtad_registry.notifications import mapping as notification_mapping


def main() -> None:
    app = create_app()
    container = app.extensions["registry_container"]

    try:
        snapshot = {
            "backend": container.backend,
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "notifications": [notification_mapping.to_row(n) for n in container.notification_service.list_all()],
            "infractions": [infraction_mapping.to_row(i) for i in container.infraction_service.list_all()],
            "inspections": [inspection_mapping.to_row(i) for i in container.inspection_service.list_all()],
            "companies": list(container.company_service.list_names()),
            "custom_laws": container.law_service.list_custom(),
        }
    except StoreError as e:
        raise SystemExit(f"No se pudo leer los registros: {e}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"lealtad_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
