"""Dog aware desk layout package."""
from .models import DogStatus, Person, Team, parse_dog_status
from .csv_loader import (
    load_people,
    load_teams,
    load_all,
    layout_to_frame,
)
from .solver import (
    order_team,
    calculate_desk_layout,
    compute_layout_stats,
    grade_layout,
)

__all__ = [
    "DogStatus",
    "Person",
    "Team",
    "parse_dog_status",
    "load_people",
    "load_teams",
    "load_all",
    "layout_to_frame",
    "order_team",
    "calculate_desk_layout",
    "compute_layout_stats",
    "grade_layout",
]
