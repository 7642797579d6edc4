"""Distribution statistics over activity efficiency scores."""

from __future__ import annotations

from leverage_engine.efficiency import calculate_efficiency, classify_efficiency, round_half_up
from leverage_engine.schema import Activity


def _empty_distribution() -> dict[str, int]:
    return {"excellent": 0, "good": 0, "moderate": 0, "low": 0}


def compute_stats(activities: list[Activity]) -> dict:
    """Compute average, median, extremes and tier distribution of efficiencies.

    ``total`` counts every input activity, including ones that scored zero; the
    remaining figures only consider non-zero scores.
    """

    total = len(activities) if activities else 0
    efficiencies = sorted(
        efficiency for efficiency in (calculate_efficiency(a) for a in activities or []) if efficiency > 0
    )

    if not efficiencies:
        return {
            "total": total,
            "average": 0.0,
            "median": 0.0,
            "highest": 0.0,
            "lowest": 0.0,
            "high_efficiency_count": 0,
            "low_efficiency_count": 0,
            "distribution": _empty_distribution(),
        }

    distribution = _empty_distribution()
    for efficiency in efficiencies:
        distribution[classify_efficiency(efficiency).level] += 1

    return {
        "total": total,
        "average": round_half_up(sum(efficiencies) / len(efficiencies), 2),
        # Upper-middle element for even counts.
        "median": round_half_up(efficiencies[len(efficiencies) // 2], 2),
        "highest": round_half_up(efficiencies[-1], 2),
        "lowest": round_half_up(efficiencies[0], 2),
        "high_efficiency_count": sum(1 for efficiency in efficiencies if efficiency >= 10),
        "low_efficiency_count": sum(1 for efficiency in efficiencies if efficiency < 5),
        "distribution": distribution,
    }
