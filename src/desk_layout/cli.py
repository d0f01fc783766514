"""Command line interface for desk layout."""
from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path
from typing import Sequence

from .csv_loader import LAYOUT_COLUMNS, layout_to_frame, load_all
from .solver import calculate_desk_layout, compute_layout_stats, grade_layout

REPORT_COLUMNS = [
    "grade", "desk_count", "have_count", "avoid_count", "conflict_pairs",
    "avoid_have_adjacent", "have_have_adjacent", "like_have_adjacent",
    "min_have_gap", "mean_avoid_distance", "split_teams",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dog aware desk layout")
    parser.add_argument("--people", required=True, help="Path to people.csv")
    parser.add_argument("--teams", help="Optional path to teams.csv used to resolve team names.")
    parser.add_argument("--out-layout", type=Path,
                        help="Write layout CSV: desk,id,name,dog_status,team_id,team_name.")
    parser.add_argument("--out-report", type=Path,
                        help="Write layout report CSV with adjacency counts and grade.")
    parser.add_argument("--out-map", type=Path,
                        help="Write an interactive HTML desk map.")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point used by ``python -m desk_layout.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        people = load_all(args.people, args.teams)
    except ValueError as e:
        parser.error(str(e))

    layout = calculate_desk_layout(people)
    frame = layout_to_frame(layout)

    # Print simple layout
    for row in frame.itertuples(index=False):
        team = row.team_name or row.team_id
        print(f"{row.desk},{row.id},{row.name},{row.dog_status},{team}")

    if args.out_layout:
        args.out_layout.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(args.out_layout, index=False, columns=LAYOUT_COLUMNS)

    report = grade_layout(compute_layout_stats(layout))
    print(f"[REPORT] grade={report['grade']} desks={report['desk_count']} "
          f"conflicts={report['conflict_pairs']} min_have_gap={report['min_have_gap']} "
          f"mean_avoid_distance={report['mean_avoid_distance']:.2f} split_teams={report['split_teams']}")

    if args.out_report:
        args.out_report.parent.mkdir(parents=True, exist_ok=True)
        with args.out_report.open("w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=REPORT_COLUMNS)
            w.writeheader()
            row = {k: report[k] for k in REPORT_COLUMNS}
            row["mean_avoid_distance"] = f"{report['mean_avoid_distance']:.4f}"
            w.writerow(row)

    if args.out_map:
        from .desk_map import generate_desk_map

        args.out_map.parent.mkdir(parents=True, exist_ok=True)
        args.out_map.write_text(generate_desk_map(layout), encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
