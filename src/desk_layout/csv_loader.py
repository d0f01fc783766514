"""CSV loading utilities."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Dict, Iterable, List, Optional

import pandas as pd

from .models import Person, Team, parse_dog_status, parse_optional_text

PEOPLE_COLUMNS = ["id", "name", "dog_status"]
TEAM_COLUMNS = ["id", "name"]
LAYOUT_COLUMNS = ["desk", "id", "name", "dog_status", "team_id", "team_name"]


def _read(path: Path | str | IO[Any], required: List[str], label: str) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str)
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"{label} is missing columns: {', '.join(missing)}")
    return df


def load_people(path: Path | str | IO[Any]) -> List[Person]:
    """Load people from ``people.csv``.

    ``team_id`` and ``team_name`` are optional; a blank ``team_id`` means the
    person has no team.
    """
    df = _read(path, PEOPLE_COLUMNS, "people.csv")
    people: List[Person] = []
    seen = set()
    for idx, row in df.iterrows():
        person_id = parse_optional_text(row["id"])
        if person_id is None:
            raise ValueError(f"people.csv row {idx + 2}: missing id")
        if person_id in seen:
            raise ValueError(f"people.csv row {idx + 2}: duplicate id {person_id}")
        seen.add(person_id)
        try:
            status = parse_dog_status(row["dog_status"])
        except ValueError as e:
            raise ValueError(f"people.csv row {idx + 2}: {e}") from None
        team_id = parse_optional_text(row.get("team_id"))
        team = None
        if team_id is not None:
            team = Team(id=team_id, name=parse_optional_text(row.get("team_name")) or "")
        people.append(
            Person(
                id=person_id,
                name=parse_optional_text(row["name"]) or "",
                dog_status=status,
                team=team,
            )
        )
    return people


def load_teams(path: Path | str | IO[Any]) -> List[Team]:
    """Load team definitions."""
    df = _read(path, TEAM_COLUMNS, "teams.csv")
    teams: List[Team] = []
    for _, row in df.iterrows():
        teams.append(Team(id=str(row["id"]).strip(), name=parse_optional_text(row["name"]) or ""))
    return teams


def resolve_teams(people: Iterable[Person], teams: Iterable[Team]) -> List[Person]:
    """Attach full team records to people, validating every team reference."""
    by_id: Dict[str, Team] = {t.id: t for t in teams}
    resolved: List[Person] = []
    for p in people:
        team_id = p.team_id
        if team_id is None:
            resolved.append(p)
            continue
        if team_id not in by_id:
            raise ValueError(f"Unknown team referenced by {p.id}: {team_id}")
        resolved.append(Person(id=p.id, name=p.name, dog_status=p.dog_status, team=by_id[team_id]))
    return resolved


def load_all(people_path: Path | str | IO[Any], teams_path: Optional[Path | str | IO[Any]] = None) -> List[Person]:
    """Convenience wrapper returning people with teams resolved when given."""
    people = load_people(people_path)
    if teams_path is None:
        return people
    return resolve_teams(people, load_teams(teams_path))


def layout_to_frame(layout: Iterable[Person]) -> pd.DataFrame:
    """One row per desk, numbered from 1."""
    rows = []
    for desk, p in enumerate(layout, start=1):
        rows.append({
            "desk": desk,
            "id": p.id,
            "name": p.name,
            "dog_status": p.dog_status.value,
            "team_id": p.team_id or "",
            "team_name": p.team.name if p.team else "",
        })
    return pd.DataFrame(rows, columns=LAYOUT_COLUMNS)
