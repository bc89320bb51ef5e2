"""Static club profile served at the root of the API.

This is reference data that never changes at runtime, so it lives in code
rather than in the database.
"""

CLUB_PROFILE = {
    "club_name": "Liverpool FC",
    "established": 1892,
    "stadium": "Anfield",
    "capacity": 54074,
    "manager": {
        "name": "Jürgen Klopp",
        "nationality": "German",
        "tenure_start": "October 2015",
        "achievements": [
            "Premier League Champion (2019-20)",
            "UEFA Champions League Winner (2018-19)",
            "FIFA Club World Cup Winner (2019)",
            "UEFA Super Cup Winner (2019)",
        ],
    },
    "statistics": {
        "total_goals": 900,
        "total_matches": 520,
        "win_percentage": 67,
        "average_goals_per_match": 1.73,
        "clean_sheets": 160,
    },
}

SUMMARY_FIELDS = ("club_name", "established", "stadium", "capacity", "manager")


def club_summary() -> dict:
    """The headline facts about the club (name, founding year, ground, manager)."""
    return {field: CLUB_PROFILE[field] for field in SUMMARY_FIELDS}
