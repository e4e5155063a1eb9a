"""Engine configuration: geometry constants shared by the pattern generators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Anchor point, safe region and per-pattern shape constants."""

    # Every pattern is anchored on the canvas center
    center_x: float = 0.5
    center_y: float = 0.5

    # Inset box used by bounds-filtering generators: [min, max] on both axes
    inset_min: float = 0.05
    inset_max: float = 0.95

    # Constellation (general)
    star_radius: float = 0.25
    star_variance_step: float = 0.002

    # Heart (love). 0.15 is the legacy scale; see DESIGN.md.
    heart_scale: float = 0.15
    heart_samples_per_symbol: int = 4

    # Layered spiral (prosperity)
    spiral_layers: int = 3
    spiral_base_radius: float = 0.08
    spiral_layer_step: float = 0.08
    spiral_turns: float = 2.5
    spiral_growth: float = 1.5
    spiral_samples_per_symbol: int = 8

    # Ward (protection)
    ward_min_sides: int = 6
    ward_outer_radius: float = 0.3
    ward_inner_radius: float = 0.18

    # Tree (wisdom)
    trunk_length: float = 0.25
    branch_length: float = 0.12
    branch_wobble: float = 0.05
    sub_branch_angle: float = 0.3
    sub_branch_length: float = 0.06

    # Downstream unit-square handling: "allow", "clamp" or "reject"
    unit_square_policy: str = "allow"

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def inset_box(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax) of the safe region."""
        return (self.inset_min, self.inset_min, self.inset_max, self.inset_max)
