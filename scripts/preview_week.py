"""What does the rule look like this week?

Prints the liturgical season and the practices due on each of the next
seven days, using the default catalog and no user overrides.  Handy for
checking season boundaries and weekly scheduling without a database.

Usage:
    python scripts/preview_week.py [YYYY-MM-DD]
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.db.seed import DEFAULT_PRACTICES
from app.rule.clock import LocalDay, parse_local_date
from app.rule.liturgical import ComputedSeasonResolver
from app.rule.ordering import sort_practices
from app.rule.overrides import resolve_overrides
from app.rule.scheduling import due_today, upcoming_weekly
from app.rule.verses import DEFAULT_VERSES, select_verse
from app.schemas.practice import LANE_LABEL, SEASON_LABEL, Practice, WEEKDAY_NAMES
from app.services.today_service import practice_season_for

CATALOG = [Practice(id=idx, **p.model_dump()) for idx, p in enumerate(DEFAULT_PRACTICES, start=1)]


def preview(start: datetime.date, days: int = 7) -> None:
    resolver = ComputedSeasonResolver()
    for offset in range(days):
        day = LocalDay.from_date(start + datetime.timedelta(days=offset))
        liturgical = resolver.resolve(day.date_local)
        season = practice_season_for(liturgical.season)
        effective = resolve_overrides([p for p in CATALOG if p.season == season], [])
        verse, _ = select_verse(day.date_local, DEFAULT_VERSES)

        header = f"{day.iso} {WEEKDAY_NAMES[day.weekday]:<9}  {SEASON_LABEL[liturgical.season]}"
        if liturgical.celebration_name:
            header += f"  ({liturgical.celebration_name})"
        print(header)
        print(f"  verse: {verse.reference}")
        for p in sort_practices(due_today(effective, day.weekday)):
            print(f"  [{LANE_LABEL[p.lane]:<9}] {p.effective_title}")
        for u in upcoming_weekly(effective, day.weekday):
            print(f"  coming up: {u.practice.effective_title} - {u.when}")
        print()


if __name__ == "__main__":
    start = parse_local_date(sys.argv[1]) if len(sys.argv) > 1 else datetime.date.today()
    print("=" * 60)
    print(f"Rule of Life - week from {start.isoformat()}")
    print("=" * 60)
    print()
    preview(start)
