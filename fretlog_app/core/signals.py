"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker namespaces so modules can react to each other's activity
without importing one another.

Usage:
    # Publisher (sender)
    from fretlog_app.core.signals import drill_scored
    drill_scored.send(None, score=87, attempt=attempt)

    # Subscriber (receiver) - in module's events.py
    @drill_scored.connect
    def on_drill_scored(sender, **kwargs):
        ...
"""
from blinker import Namespace

practice_signals = Namespace()

# Signal: Fired when a CAGED drill attempt has been scored
# Payload: attempt (DrillAttempt), score (DrillScore)
drill_scored = practice_signals.signal('drill_scored')

# Signal: Fired when a progression timeline is built for a focus
# Payload: focus (str), total_sessions (int), total_minutes (int)
progression_viewed = practice_signals.signal('progression_viewed')
