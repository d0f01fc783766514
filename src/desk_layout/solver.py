"""
Dog aware desk layout.

Desks are arranged in a single line of adjacent desks and:
    teams sit together, so team boundaries matter.
    people who avoid dogs sit as far from dog owners as possible.
    dog owners sit as far apart from each other as possible.
    people who like dogs fill the gaps between dog owners.
The layout is built greedily by ordering each team, then interleaving and
reversing whole teams. A layout can be graded A to F based on how many adjacent
desk pairs are conflicts.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import DogStatus, Person

logger = logging.getLogger(__name__)


# ----------------------------- team ordering -----------------------------
def split_by_dog_status(members: Iterable[Person]) -> Tuple[List[Person], List[Person], List[Person]]:
    """Return ``(likes, has, avoids)`` keeping the original member order."""
    likes: List[Person] = []
    has: List[Person] = []
    avoids: List[Person] = []
    for person in members:
        if person.dog_status is DogStatus.LIKE:
            likes.append(person)
        elif person.dog_status is DogStatus.HAVE:
            has.append(person)
        elif person.dog_status is DogStatus.AVOID:
            avoids.append(person)
        else:
            raise ValueError(f"Unknown dog status for {person.id}: {person.dog_status!r}")
    return likes, has, avoids


def order_team(likes: Sequence[Person], has: Sequence[Person], avoids: Sequence[Person]) -> List[Person]:
    """Order one team so dog owners are spread out with likers between them.

    Avoiders go first. Each dog owner is preceded by an even share of the
    likers; the leftover likers are taken from the back of ``likes`` one per
    dog owner, starting with the first.
    """
    if not has:
        return [*avoids, *likes]

    per_owner = len(likes) // len(has)
    extra = len(likes) % len(has)
    # likes[back:] has already been handed out as extras
    back = len(likes)

    ordered: List[Person] = list(avoids)
    for index, owner in enumerate(has):
        front = index * per_owner
        ordered.extend(likes[front:front + per_owner])
        if extra > 0:
            back -= 1
            assert back >= len(has) * per_owner, "extra like overlaps an even share"
            ordered.append(likes[back])
        extra -= 1
        ordered.append(owner)
    return ordered


# ----------------------------- layout -----------------------------
def calculate_desk_layout(people: Iterable[Person]) -> List[Person]:
    """Return every person once, in desk order from one end of the line."""
    furthest_from_dogs: List[Person] = []
    like_individuals: List[Person] = []
    have_individuals: List[Person] = []

    # Group people into their teams, first seen team first
    teams: Dict[str, List[Person]] = {}
    for person in people:
        team_id = person.team_id
        if team_id is None:
            likes, has, avoids = split_by_dog_status([person])
            furthest_from_dogs.extend(avoids)
            like_individuals.extend(likes)
            have_individuals.extend(has)
        else:
            teams.setdefault(team_id, []).append(person)

    # Teams ending in a like go next to teams starting with a dog
    more_likes_teams: List[List[Person]] = []
    less_likes_teams: List[List[Person]] = []
    for members in teams.values():
        likes, has, avoids = split_by_dog_status(members)
        if len(avoids) == len(members):
            furthest_from_dogs.extend(members)
        elif not has:
            furthest_from_dogs.extend([*avoids, *likes])
        else:
            sorted_team = order_team(likes, has, avoids)
            if len(likes) > len(has):
                more_likes_teams.append(sorted_team)
            else:
                less_likes_teams.append(sorted_team)

    logger.debug(
        "Partitioned %d teams: %d more likes, %d less likes, %d avoid first; "
        "individuals: %d like, %d have",
        len(teams), len(more_likes_teams), len(less_likes_teams), len(furthest_from_dogs),
        len(like_individuals), len(have_individuals),
    )

    matched = more_likes_teams[:len(less_likes_teams)]
    sorted_individuals = order_team(like_individuals, have_individuals, [])

    interleaved: List[Person] = []
    for index, more_likes_team in enumerate(matched):
        interleaved.extend(more_likes_team)
        if index == 0:
            interleaved.extend(sorted_individuals)
        # Reversed so the avoiders of this team sit at its far end
        interleaved.extend(reversed(less_likes_teams[index]))
    if not matched:
        interleaved.extend(sorted_individuals)

    remaining = more_likes_teams[len(less_likes_teams):] + less_likes_teams[len(more_likes_teams):]
    remainder: List[Person] = []
    for index, team in enumerate(remaining):
        # Alternate orientation, continuing from the interleaved block
        if index % 2 != len(matched) % 2:
            remainder.extend(reversed(team))
        else:
            remainder.extend(team)

    return [*furthest_from_dogs, *interleaved, *remainder]


# ----------------------------- report -----------------------------
def compute_layout_stats(layout: Sequence[Person]) -> Dict[str, int | float]:
    """Compute adjacency counts and distances for a desk order."""
    avoid_have = have_have = like_have = 0
    for a, b in zip(layout, layout[1:]):
        pair = {a.dog_status, b.dog_status}
        if pair == {DogStatus.AVOID, DogStatus.HAVE}:
            avoid_have += 1
        elif pair == {DogStatus.HAVE}:
            have_have += 1
        elif pair == {DogStatus.LIKE, DogStatus.HAVE}:
            like_have += 1

    have_desks = [i for i, p in enumerate(layout) if p.dog_status is DogStatus.HAVE]
    avoid_desks = [i for i, p in enumerate(layout) if p.dog_status is DogStatus.AVOID]

    min_have_gap = min((b - a for a, b in zip(have_desks, have_desks[1:])), default=0)
    if have_desks and avoid_desks:
        distances = [min(abs(a - h) for h in have_desks) for a in avoid_desks]
        mean_avoid_distance = sum(distances) / len(distances)
    else:
        mean_avoid_distance = 0.0

    return {
        "desk_count": len(layout),
        "have_count": len(have_desks),
        "avoid_count": len(avoid_desks),
        "avoid_have_adjacent": avoid_have,
        "have_have_adjacent": have_have,
        "like_have_adjacent": like_have,
        "min_have_gap": min_have_gap,
        "mean_avoid_distance": mean_avoid_distance,
        "split_teams": _count_split_teams(layout),
    }


def _count_split_teams(layout: Sequence[Person]) -> int:
    seen: Dict[str, int] = {}
    split = set()
    previous: Optional[str] = None
    for person in layout:
        team_id = person.team_id
        if team_id is not None and team_id != previous:
            if team_id in seen:
                split.add(team_id)
            seen[team_id] = seen.get(team_id, 0) + 1
        previous = team_id
    return len(split)


def grade_layout(stats: Dict[str, int | float]) -> Dict[str, int | float | str]:
    """Assign A to F based on the share of adjacent desk pairs in conflict."""
    pairs = max(1, int(stats["desk_count"]) - 1)
    conflicts = stats["avoid_have_adjacent"] + stats["have_have_adjacent"]
    share = conflicts / pairs
    if stats["split_teams"]:
        g = "F"
    elif share == 0:
        g = "A"
    elif share <= 0.1:
        g = "B"
    elif share <= 0.25:
        g = "C"
    elif share <= 0.4:
        g = "D"
    else:
        g = "F"
    out = dict(stats)
    out["conflict_pairs"] = conflicts
    out["grade"] = g
    return out
