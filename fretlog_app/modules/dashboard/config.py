# modules/dashboard/config.py


class DashboardDefaultConfig:
    """Defaults for the dashboard focus cards."""

    MAX_SUGGESTIONS = 3
    STALE_AFTER_DAYS = 7  # Repertoire untouched this long is "rusty"
