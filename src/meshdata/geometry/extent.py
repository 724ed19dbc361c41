from dataclasses import dataclass


@dataclass
class BBox:
    """Planar extent of a mesh, stored as reported by the driver."""

    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0
