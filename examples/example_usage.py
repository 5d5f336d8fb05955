"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the scheduling and streak rules live in services.
"""

import importlib
import sys

from config import get_settings_module

from src.checkin_system.checkin_system.container import build_container


def main(worker_id: str) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    overview = container.shift_service.get_shift_overview(worker_id)
    print(overview.to_dict())
    print(container.streak_service.get_streak(worker_id).to_dict())


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "worker-1")
