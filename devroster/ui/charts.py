"""Radar chart configuration for a developer's skills (rendered by chart.js)."""
from typing import Any, Dict

from devroster.domain.entities import SKILL_NAMES, Skills

RADAR_COLOR = "rgba(75,192,192,1)"
RADAR_FILL = "rgba(75,192,192,0.4)"

RADAR_OPTIONS: Dict[str, Any] = {
    "scales": {
        "r": {
            "type": "radialLinear",
            "angleLines": {"display": False},
            "min": 50,
            "max": 99,
            "ticks": {"display": False, "stepSize": 3},
        }
    }
}


def radar_chart_data(skills: Skills) -> Dict[str, Any]:
    """Labels and the single 'Skills' dataset, in SKILL_NAMES order."""
    ratings = skills.to_dict()
    return {
        "labels": list(SKILL_NAMES),
        "datasets": [
            {
                "label": "Skills",
                "data": [ratings[name] for name in SKILL_NAMES],
                "backgroundColor": RADAR_FILL,
                "borderColor": RADAR_COLOR,
                "pointBackgroundColor": RADAR_COLOR,
                "pointBorderColor": "#fff",
                "pointHoverBackgroundColor": "#fff",
                "pointHoverBorderColor": RADAR_COLOR,
            }
        ],
    }
