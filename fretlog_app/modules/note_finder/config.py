# modules/note_finder/config.py


class NoteFinderDefaultConfig:
    """
    Default configuration for the note finder quiz and its recommendations.
    """

    # --- Fretboard ---
    # High E to low E, standard tablature order
    TUNING = ('E', 'B', 'G', 'D', 'A', 'E')
    FRET_COUNT = 15

    # --- Difficulty score ---
    SLOW_RESPONSE_MS = 3000
    SLOW_RESPONSE_SPAN_MS = 5000
    SLOW_RESPONSE_CAP = 0.3
    MIN_ATTEMPTS_FOR_CONFIDENCE = 5
    MIN_ATTEMPTS_FOR_EXPOSURE = 3
    NEVER_PRACTICED_DAYS = 30
    STALENESS_DAYS = 7
    NEEDS_PRACTICE_THRESHOLD = 0.4

    WEIGHT_ACCURACY = 0.4
    WEIGHT_SPEED = 0.3
    WEIGHT_EXPOSURE = 0.2
    WEIGHT_STALENESS = 0.1

    # --- Recommendations ---
    MAX_PRIORITY_NOTES = 6
    MAX_MAINTENANCE_NOTES = 3
    MAINTENANCE_ACCURACY = 0.7

    # (min attempts, min accuracy) to leave each level
    BEGINNER_EXIT = (50, 0.6)
    INTERMEDIATE_EXIT = (200, 0.8)
    FRETS_BY_LEVEL = {'beginner': 5, 'intermediate': 12, 'advanced': 15}

    QUIZ_LENGTH = 12
    QUIZ_PRIORITY_SHARE = 0.7
    QUIZ_MAINTENANCE_SHARE = 0.2
