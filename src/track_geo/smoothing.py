"""Heuristic speed smoothing for a stream of GPS fixes.

Blends the previous smoothed speed with the newest measurement. The weight given
to the new reading drops during sharp turns (so a turn is not read as braking) and
drops further when the fix is imprecise. Near-standstill readings snap to zero so
the display does not keep showing a residual speed after the subject stops.

Thresholds are unit-agnostic literals; callers must feed speeds in the unit the
0.5 standstill cutoff was tuned for (km/h in the original client).
"""

from __future__ import annotations

# Thresholds
STANDSTILL_SPEED = 0.5
TURN_THRESHOLD_DEG = 30
POOR_ACCURACY_M = 50

# Weight given to the current reading
STEADY_WEIGHT = 0.5
TURN_WEIGHT = 0.2
POOR_ACCURACY_WEIGHT = 0.1


def smoothing_weight(direction_change: float, accuracy: float) -> float:
    """Weight (0 → 1) applied to the new speed reading.

    Poor accuracy overrides the direction-based weight entirely.
    """
    direction_weight = TURN_WEIGHT if direction_change > TURN_THRESHOLD_DEG else STEADY_WEIGHT
    return POOR_ACCURACY_WEIGHT if accuracy > POOR_ACCURACY_M else direction_weight


def dynamic_smoothing(
    last_speed: float,
    current_speed: float,
    direction_change: float,
    accuracy: float,
) -> float:
    """Smoothed speed from the previous estimate and a new measurement.

    Args:
        last_speed: Previous smoothed speed (the caller keeps this between fixes).
        current_speed: Speed derived from the latest fix.
        direction_change: Heading change since the last fix, in degrees.
        accuracy: Reported location accuracy radius, in meters.

    Returns:
        0.0 when current_speed is below STANDSTILL_SPEED, otherwise a convex
        combination of last_speed and current_speed.
    """
    if current_speed < STANDSTILL_SPEED:
        return 0.0

    weight = smoothing_weight(direction_change, accuracy)
    return last_speed * (1 - weight) + current_speed * weight
