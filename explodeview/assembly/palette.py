"""Architectural colours of the window unit and its wall."""

WALL_SIDING = "#606060"
WALL_SIDING_ALT = "#555555"
WALL_STRIP = "#202020"
WALL_OPENING = "#101010"
STEEL_STRUCT = "#71717a"
INSULATION = "#fde047"
TIMBER_FRAME = "#9a3412"
EXTERIOR_CLADDING = "#18181b"
GLASS = "#a5f3fc"
