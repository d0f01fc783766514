import io
import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from desk_layout import csv_loader
from desk_layout.models import DogStatus, Person, Team

DATA_DIR = pathlib.Path(__file__).parent / "data"


def test_load_people():
    people = csv_loader.load_people(DATA_DIR / "people.csv")
    assert len(people) == 11
    ava = people[0]
    assert ava.id == "1"
    assert ava.name == "Ava"
    assert ava.dog_status is DogStatus.AVOID
    assert ava.team is None
    assert people[2].team_id == "t1"
    assert people[8].dog_status is DogStatus.HAVE
    assert people[10].dog_status is DogStatus.AVOID


def test_load_people_without_team_columns():
    people = csv_loader.load_people(io.StringIO("id,name,dog_status\n1,Ann,LIKE\n"))
    assert people == [Person(id="1", name="Ann", dog_status=DogStatus.LIKE)]


def test_load_people_missing_columns():
    with pytest.raises(ValueError, match="dog_status"):
        csv_loader.load_people(io.StringIO("id,name\n1,Ann\n"))


def test_load_people_unknown_status_names_row():
    csv_text = "id,name,dog_status\n1,Ann,LIKE\n2,Bob,CAT\n"
    with pytest.raises(ValueError, match="row 3"):
        csv_loader.load_people(io.StringIO(csv_text))


def test_load_people_duplicate_id():
    csv_text = "id,name,dog_status\n1,Ann,LIKE\n1,Bob,HAVE\n"
    with pytest.raises(ValueError, match="duplicate id 1"):
        csv_loader.load_people(io.StringIO(csv_text))


def test_load_all_resolves_team_names():
    people = csv_loader.load_all(DATA_DIR / "people.csv", DATA_DIR / "teams.csv")
    by_id = {p.id: p for p in people}
    assert by_id["3"].team == Team(id="t1", name="Platform")
    assert by_id["10"].team.name == "Finance"
    assert by_id["1"].team is None


def test_load_all_unknown_team():
    people_csv = io.StringIO("id,name,dog_status,team_id\n1,Ann,LIKE,t9\n")
    teams_csv = io.StringIO("id,name\nt1,Platform\n")
    with pytest.raises(ValueError, match="Unknown team referenced by 1: t9"):
        csv_loader.load_all(people_csv, teams_csv)


def test_layout_to_frame():
    team = Team(id="t1", name="Platform")
    layout = [
        Person(id="a", name="Ann", dog_status=DogStatus.AVOID),
        Person(id="b", name="Bob", dog_status=DogStatus.HAVE, team=team),
    ]
    df = csv_loader.layout_to_frame(layout)
    assert list(df.columns) == csv_loader.LAYOUT_COLUMNS
    assert df["desk"].tolist() == [1, 2]
    assert df["dog_status"].tolist() == ["AVOID", "HAVE"]
    assert df["team_name"].tolist() == ["", "Platform"]


def test_layout_to_frame_empty():
    df = csv_loader.layout_to_frame([])
    assert list(df.columns) == csv_loader.LAYOUT_COLUMNS
    assert df.empty
