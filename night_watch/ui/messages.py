"""Log-line wording for game signals. No pygame here, so it is testable headless."""
from __future__ import annotations

from night_watch.signals import Signal

_UPGRADE_NAMES = {"attack": "Attack UP", "defense": "Defense UP", "heal": "Heal"}


def describe(signal: Signal) -> str | None:
    """One log line for *signal*, or None when the log should skip it."""
    data = signal.data
    if signal.name == "upgrade":
        name = _UPGRADE_NAMES.get(data["kind"], data["kind"])
        return f"{name} for {data['cost']} (points left {data['points']})"
    if signal.name == "undo":
        return f"Undid today's purchases (points {data['points']})"
    if signal.name == "phase":
        return f"{data['old'].capitalize()} -> {data['new'].capitalize()}"
    if signal.name == "night_report":
        return (
            f"Night {signal.day}: {data['damage']} damage, "
            f"-{data['health_lost']} HP, +{data['earned_points']} points"
        )
    if signal.name == "event":
        return data["message"] or None
    if signal.name == "game_over":
        return f"The base fell on day {signal.day}"
    if signal.name == "session" and data["new"] == "play":
        return "A new watch begins"
    return None
