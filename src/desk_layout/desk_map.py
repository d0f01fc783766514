from typing import Dict, List, Sequence

import networkx as nx
from pyvis.network import Network

from .models import DogStatus, Person

# ---------------------------
# Public API
# ---------------------------

def generate_desk_map(
    layout: Sequence[Person],
    desks_per_row: int = 12,
    spacing: int = 90,
) -> str:
    """
    Build an interactive desk line visualization.

    Parameters:
      layout: people in desk order.
      desks_per_row: wrap the line onto a new row after this many desks.
      spacing: distance in pixels between neighbouring desks.

    Returns:
      HTML string with embedded network.
    """
    G = build_desk_graph(layout, desks_per_row=desks_per_row, spacing=spacing)

    net = Network(height="500px", width="100%", bgcolor="#111111", font_color="#EEEEEE")
    net.toggle_physics(False)  # positions are fixed
    net.from_nx(G)

    html = net.generate_html()
    return html.replace("</body>", _legend_html() + "</body>", 1)


def build_desk_graph(layout: Sequence[Person], desks_per_row: int = 12, spacing: int = 90) -> nx.Graph:
    """One node per desk, one edge per pair of neighbouring desks."""
    G = nx.Graph()
    positions = _desk_positions(len(layout), max(1, desks_per_row), spacing)

    for desk, person in enumerate(layout):
        x, y = positions[desk]
        team = person.team.name or person.team.id if person.team else ""
        G.add_node(
            person.id,
            label=person.name or person.id,
            title=_node_tooltip(person, desk + 1, team),
            color=_STATUS_COLOR[person.dog_status],
            desk=desk + 1,
            x=x,
            y=y,
            physics=False,
            shape="box",
        )

    for a, b in zip(layout, layout[1:]):
        kind = _edge_kind(a, b)
        same_team = a.team_id is not None and a.team_id == b.team_id
        G.add_edge(
            a.id,
            b.id,
            color=_EDGE_COLOR[kind],
            width=3 if kind == "conflict" else 1,
            label=kind,
            dashes=not same_team,
        )
    return G

# ---------------------------
# Internals
# ---------------------------

_STATUS_COLOR = {
    DogStatus.AVOID: "#AEC6CF",
    DogStatus.LIKE: "#FDFD96",
    DogStatus.HAVE: "#FFB347",
}

_EDGE_COLOR = {
    "conflict": "#FF6B6B",  # avoid or dog next to a dog: red
    "buffer": "#3CB371",    # like next to a dog: green
    "neutral": "#A9A9A9",
}


def _edge_kind(a: Person, b: Person) -> str:
    pair = {a.dog_status, b.dog_status}
    if pair == {DogStatus.HAVE} or pair == {DogStatus.AVOID, DogStatus.HAVE}:
        return "conflict"
    if pair == {DogStatus.LIKE, DogStatus.HAVE}:
        return "buffer"
    return "neutral"


def _desk_positions(n: int, desks_per_row: int, spacing: int) -> Dict[int, tuple]:
    """
    Snake the line across rows so neighbours stay next to each other.
    """
    positions: Dict[int, tuple] = {}
    for desk in range(n):
        row, col = divmod(desk, desks_per_row)
        if row % 2:
            col = desks_per_row - 1 - col
        positions[desk] = (col * spacing, row * spacing * 2)
    return positions


def _node_tooltip(person: Person, desk: int, team: str) -> str:
    return (
        f"<b>{person.name or person.id}</b><br>"
        f"Desk: {desk}<br>"
        f"Dogs: {person.dog_status.value.lower()}<br>"
        f"Team: {team or 'none'}"
    )


def _legend_html() -> str:
    css = """
    <style>
    .legend-box{
      position:absolute;right:12px;bottom:12px;
      background:#222;color:#eee;border:1px solid #444;border-radius:8px;
      padding:8px 12px;font-family:system-ui, -apple-system, Segoe UI, Roboto, Arial;font-size:12px;
      z-index:10;
    }
    .legend-swatch{display:inline-block;width:12px;height:12px;margin-right:6px;vertical-align:middle;border:1px solid #444;}
    </style>
    """
    rows: List[str] = [
        f'<div><span class="legend-swatch" style="background:{color}"></span>{status.value.lower()} dogs</div>'
        for status, color in _STATUS_COLOR.items()
    ]
    return f"""
    {css}
    <div class="legend-box">
      {''.join(rows)}
      <div style="margin-top:6px;"><span class="legend-swatch" style="background:#FF6B6B"></span>conflict</div>
      <div><span class="legend-swatch" style="background:#3CB371"></span>like next to dog</div>
      <div>dashed edge: team boundary</div>
    </div>
    """
