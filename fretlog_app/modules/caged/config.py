# modules/caged/config.py


class CagedDefaultConfig:
    """
    Default configuration for the CAGED drill module.
    CAGED_TARGET_TIME_SECONDS in the app config overrides TARGET_TIME_SECONDS.
    """

    # --- Vocabulary ---
    SHAPES = ('C', 'A', 'G', 'E', 'D')

    # --- Scoring ---
    TARGET_TIME_SECONDS = 20  # Baseline time to play all five shapes
    WEIGHT_SHAPES = 0.4
    WEIGHT_ACCURACY = 0.4
    WEIGHT_SPEED = 0.2

    # --- Self-rated accuracy scale ---
    ACCURACY_MIN = 1
    ACCURACY_MAX = 5

    # --- Severity bands (inclusive lower bounds) ---
    BAND_HIGH = 80
    BAND_MEDIUM = 60
    BAND_LOW = 40
