from __future__ import annotations

import colorsys
from typing import Dict, Optional

from plotly.colors import hex_to_rgb

TYPE_COLORS: Dict[str, str] = {
    "Normal": "#A8A77A", "Fire": "#EE8130", "Water": "#6390F0", "Electric": "#F7D02C",
    "Grass": "#7AC74C", "Ice": "#96D9D6", "Fighting": "#C22E28", "Poison": "#A33EA1",
    "Ground": "#E2BF65", "Flying": "#A98FF3", "Psychic": "#F95587", "Bug": "#A6B91A",
    "Rock": "#B6A136", "Ghost": "#735797", "Dragon": "#6F35FC", "Dark": "#705746",
    "Steel": "#B7B7CE", "Fairy": "#D685AD", "None": "#D3D3D3",
}

UNKNOWN_COLOR = "#999999"


def color_for(type_name: Optional[str], default: str = UNKNOWN_COLOR) -> str:
    if type_name is None:
        return TYPE_COLORS["None"]
    return TYPE_COLORS.get(type_name, default)


def shift_hue(hex_color: str, degrees: float) -> str:
    """
    Rotate the hue of a hex colour, keeping lightness and saturation.
    Returns an 'rgb(r, g, b)' string Plotly understands.
    """
    r, g, b = (c / 255.0 for c in hex_to_rgb(hex_color))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    h = (h + degrees / 360.0) % 1.0
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return f"rgb({round(r * 255)}, {round(g * 255)}, {round(b * 255)})"
