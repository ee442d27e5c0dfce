"""
Tests for the dashboard "today's focus" suggestions.
"""

from datetime import date

from fretlog_app.models import (
    DrillSessionRecord,
    Goal,
    GoalStatus,
    PracticeSessionRecord,
    RepertoireItem,
)
from fretlog_app.modules.dashboard.logics.focus import (
    goal_suggestion,
    recent_technique_suggestion,
    stale_repertoire_suggestion,
    suggest_focus,
)

TODAY = date(2024, 6, 15)


class TestGoalSuggestion:

    def test_first_active_goal(self):
        goals = [
            Goal(title='Learn sweep picking', status=GoalStatus.COMPLETED, progress=100),
            Goal(title='Memorize the fretboard', progress=40),
            Goal(title='Play Blackbird', progress=10),
        ]
        suggestion = goal_suggestion(goals)
        assert suggestion.type == 'goal'
        assert suggestion.title == 'Memorize the fretboard'
        assert suggestion.description.startswith("You're at 40% on this goal.")

    def test_no_active_goal(self):
        assert goal_suggestion([Goal(title='Done', status=GoalStatus.COMPLETED)]) is None


class TestStaleRepertoire:

    def test_oldest_stale_song(self):
        repertoire = [
            RepertoireItem(title='Wonderwall', artist='Oasis', last_practiced=date(2024, 6, 1)),
            RepertoireItem(title='Blackbird', artist='The Beatles', last_practiced=date(2024, 5, 1)),
            RepertoireItem(title='Fresh', last_practiced=date(2024, 6, 14)),
        ]
        suggestion = stale_repertoire_suggestion(repertoire, TODAY)
        assert suggestion.title == 'Blackbird by The Beatles'
        assert suggestion.topic == 'Blackbird'

    def test_never_practiced_comes_first(self):
        repertoire = [
            RepertoireItem(title='Blackbird', last_practiced=date(2024, 5, 1)),
            RepertoireItem(title='Romanza'),
        ]
        suggestion = stale_repertoire_suggestion(repertoire, TODAY)
        assert suggestion.title == 'Romanza'

    def test_exactly_a_week_is_not_stale(self):
        repertoire = [RepertoireItem(title='Blackbird', last_practiced=date(2024, 6, 8))]
        assert stale_repertoire_suggestion(repertoire, TODAY) is None


class TestRecentTechnique:

    def test_latest_session_first_technique(self):
        records = [
            PracticeSessionRecord(date=date(2024, 6, 10), duration_minutes=30, techniques=('Legato',)),
            PracticeSessionRecord(date=date(2024, 6, 12), duration_minutes=20,
                                  techniques=('Vibrato', 'Bends')),
            DrillSessionRecord(date=date(2024, 6, 14), shapes=('C',), score=70),
        ]
        suggestion = recent_technique_suggestion(records)
        assert suggestion.title == 'Technique: Vibrato'
        assert suggestion.topic == 'Vibrato'

    def test_latest_session_without_techniques(self):
        records = [
            PracticeSessionRecord(date=date(2024, 6, 10), duration_minutes=30, techniques=('Legato',)),
            PracticeSessionRecord(date=date(2024, 6, 12), duration_minutes=20, songs=('Blackbird',)),
        ]
        assert recent_technique_suggestion(records) is None

    def test_no_sessions(self):
        assert recent_technique_suggestion([]) is None


class TestSuggestFocus:

    def test_order_and_limit(self):
        goals = [Goal(title='Memorize the fretboard', progress=40)]
        repertoire = [RepertoireItem(title='Blackbird')]
        records = [PracticeSessionRecord(date=date(2024, 6, 12), duration_minutes=20,
                                         techniques=('Vibrato',))]

        suggestions = suggest_focus(goals, repertoire, records, TODAY)
        assert [s.type for s in suggestions] == ['goal', 'repertoire', 'technique']

        assert len(suggest_focus(goals, repertoire, records, TODAY, limit=2)) == 2

    def test_nothing_to_suggest(self):
        assert suggest_focus([], [], [], TODAY) == []
