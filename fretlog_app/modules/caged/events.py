# modules/caged/events.py
from fretlog_app.core.logging_config import get_logger
from fretlog_app.core.signals import drill_scored

logger = get_logger('fretlog.caged')


def init_events(app):
    """
    Connect the module's listeners.
    blinker keeps one connection per receiver, so repeated app creation is safe.
    """
    drill_scored.connect(handle_drill_scored)


def handle_drill_scored(sender, **extra):
    attempt = extra.get('attempt')
    score = extra.get('score')
    if attempt is None or score is None:
        return
    logger.debug(
        "Drill scored: shapes=%s accuracy=%s time=%ss -> %s",
        ','.join(attempt.shapes) or '-',
        attempt.accuracy,
        attempt.time_seconds,
        score.value,
    )
