"""Theme colors and color utilities for the UI."""


class Palette:
    """Dark arcade palette."""

    BG_TOP = "#1b1f3b"
    BG_BOTTOM = "#0d0f1f"

    PRIMARY = "#ffb300"
    PRIMARY_DARK = "#c68400"
    ACCENT = "#4dd0e1"

    BUTTON_BG = "#2c3160"
    BUTTON_BG_DISABLED = "#23264a"
    OVERLAY_BG = "rgba(8, 10, 24, 0.78)"

    TEXT_PRIMARY = "#f5f5f5"
    TEXT_MUTED = "#8c91b5"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b. Bad input returns a unchanged."""
    a = a.strip()
    b = b.strip()
    if not (len(a) == 7 and len(b) == 7 and a[0] == "#" and b[0] == "#"):
        return a
    try:
        start = [int(a[i:i + 2], 16) for i in (1, 3, 5)]
        end = [int(b[i:i + 2], 16) for i in (1, 3, 5)]
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    mixed = [int(s + (e - s) * t) for s, e in zip(start, end)]
    return "#" + "".join(f"{c:02X}" for c in mixed)
