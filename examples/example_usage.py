"""Example: use the session-info service directly (without Flask).

Controllers stay thin; the classification logic lives in services.
"""

import sys

from config import load_settings

from src.session_insights.session_insights.container import build_container
from src.session_insights.session_insights.sessions.model import Selection


def main():
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG)

    args = sys.argv[1:]
    grade = args[0] if len(args) > 0 else "2nd"
    center = args[1] if len(args) > 1 else "Nasr City Center"
    week = args[2] if len(args) > 2 else "1"
    selection = Selection.of(grade=grade, center=center, week=week)

    stats = container.session_info_service.stats(selection)
    print(stats.as_dict())
    for ring in stats.ring():
        print(f"{ring.label}: {ring.stats} ({ring.progress}%)")


if __name__ == "__main__":
    main()
