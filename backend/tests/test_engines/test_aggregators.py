"""Tests for the session/action aggregators."""

from datetime import datetime, timezone

from auditqa.engines.aggregators import (
    ALL_TIME_DAYS,
    UNASSIGNED,
    UNKNOWN,
    compliance_status,
    compute_closed_loop_stats,
    compute_heatmap,
    compute_staff_performance,
    compute_trend_series,
    filter_actions_by_range,
    filter_sessions_by_range,
    find_recurring_issues,
    format_delta,
    summarize_education,
    summarize_sessions,
)
from auditqa.models.audit import ActionItem

TODAY = "2024-03-15"


class TestTrendSeries:
    def test_groups_by_audit_date(self, make_session):
        sessions = [
            make_session([True], audit_date="2024-01-01", session_id="s1"),
            make_session([False], audit_date="2024-01-01", session_id="s2"),
            make_session([True], audit_date="2024-01-02", session_id="s3"),
        ]
        series = compute_trend_series(sessions)
        assert [(p.date, p.samples, p.compliance) for p in series] == [
            ("2024-01-01", 2, 50),
            ("2024-01-02", 1, 100),
        ]

    def test_ascending_and_counts_criticals(self, make_session):
        sessions = [
            make_session([False], audit_date="2024-02-10", session_id="late", criticals={0: ["a", "b"]}),
            make_session([True], audit_date="2024-02-01", session_id="early"),
        ]
        series = compute_trend_series(sessions)
        assert [p.date for p in series] == ["2024-02-01", "2024-02-10"]
        assert series[1].critical == 2

    def test_incomplete_sessions_excluded(self, make_session):
        sessions = [
            make_session([True], status="in_progress"),
            make_session([True], status="draft"),
        ]
        assert compute_trend_series(sessions) == []

    def test_falls_back_to_created_date(self, make_session):
        session = make_session([True], audit_date="2024-01-05")
        session = session.model_copy(update={"header": session.header.model_copy(update={"audit_date": ""})})
        assert compute_trend_series([session])[0].date == "2024-01-05"


class TestSummarizeSessions:
    def test_sample_count_conserved(self, make_session):
        sessions = [
            make_session([True, False, True], session_id="s1"),
            make_session([True], session_id="s2"),
            make_session([False, False], session_id="s3", status="in_progress"),
        ]
        summary = summarize_sessions(sessions)
        assert summary.sessions == 2
        assert summary.samples == 4
        assert summary.passing == 3
        assert summary.compliance == 75

    def test_empty_input(self):
        summary = summarize_sessions([])
        assert summary.samples == 0
        assert summary.compliance == 0
        assert summary.critical_rate == 0
        assert summary.by_tool == []

    def test_by_tool_and_unit_worst_first(self, make_session):
        sessions = [
            make_session([True, True], title="Hand Hygiene", unit="Unit A", session_id="s1"),
            make_session([False, True], title="Med Pass", unit="Unit B", session_id="s2", criticals={0: ["md_order"]}),
        ]
        summary = summarize_sessions(sessions)
        assert [t.title for t in summary.by_tool] == ["Med Pass", "Hand Hygiene"]
        assert summary.by_tool[0].criticals == 1
        assert [u.unit for u in summary.by_unit] == ["Unit B", "Unit A"]
        assert summary.by_unit[0].model_dump(by_alias=True)["pass"] == 1
        assert summary.critical_fails == 1
        assert summary.critical_rate == 25

    def test_missing_unit_and_title_bucketed(self, make_session):
        summary = summarize_sessions([make_session([True], title="", unit="")])
        assert summary.by_tool[0].title == UNKNOWN
        assert summary.by_unit[0].unit == UNKNOWN

    def test_crit_and_action_items_most_frequent_first(self, make_session, make_result):
        session = make_session([False, False, False], criticals={0: ["a"], 1: ["b"], 2: ["b"]})
        samples = []
        for sample in session.samples:
            key = sample.result.critical_fails[0]
            result = make_result(False, [key], [ActionItem(key=key, label=f"Label {key}", reason="Critical fail")])
            samples.append(sample.model_copy(update={"result": result}))
        summary = summarize_sessions([session.model_copy(update={"samples": samples})])
        assert [(c.key, c.count) for c in summary.crit_items] == [("b", 2), ("a", 1)]
        assert summary.action_items[0].issue == "Label b"
        assert summary.action_items[0].template == "Hand Hygiene"
        assert summary.action_items[0].count == 2


class TestClosedLoopStats:
    def test_overdue_only_when_not_complete(self, make_action):
        open_action = make_action(dueDate="2024-03-14", status="open")
        done_action = make_action(id="qa_2", dueDate="2024-03-14", status="complete")
        assert compute_closed_loop_stats([open_action], today=TODAY).overdue_count == 1
        assert compute_closed_loop_stats([done_action], today=TODAY).overdue_count == 0

    def test_due_today_is_not_overdue(self, make_action):
        assert compute_closed_loop_stats([make_action(dueDate=TODAY)], today=TODAY).overdue_count == 0

    def test_status_counts_and_closure_rate(self, make_action):
        actions = [
            make_action(id="a", status="open"),
            make_action(id="b", status="in_progress"),
            make_action(id="c", status="complete", completedAt="2024-03-16T00:00:00Z"),
            make_action(id="d", status="complete", completedAt="2024-03-16T00:00:00Z"),
        ]
        stats = compute_closed_loop_stats(actions, today=TODAY)
        assert (stats.total, stats.open, stats.prog, stats.done) == (4, 1, 1, 2)
        assert stats.closure_rate == 50

    def test_time_to_close_buckets(self, make_action):
        actions = [
            make_action(id="a", status="complete", createdAt="2024-03-01T08:00:00Z", completedAt="2024-03-05T17:00:00Z"),
            make_action(id="b", status="complete", createdAt="2024-03-01T08:00:00Z", completedAt="2024-03-20T09:00:00Z"),
            make_action(id="c", status="complete", createdAt="2024-03-01T08:00:00Z", completedAt=""),
        ]
        stats = compute_closed_loop_stats(actions, today=TODAY)
        assert (stats.closed7, stats.closed14, stats.closed30) == (1, 1, 2)
        assert stats.avg_close_days == 11.5

    def test_by_owner_and_unit(self, make_action):
        actions = [
            make_action(id="a", owner="  Jane ", unit="Unit A", dueDate="2024-03-01"),
            make_action(id="b", owner="", unit="", status="in_progress"),
        ]
        stats = compute_closed_loop_stats(actions, today=TODAY)
        assert stats.by_owner["Jane"].open == 1
        assert stats.by_owner["Jane"].overdue == 1
        assert stats.by_owner[UNASSIGNED].in_progress == 1
        assert stats.by_unit[UNKNOWN].in_progress == 1
        dumped = stats.model_dump(by_alias=True)
        assert dumped["byOwner"][UNASSIGNED]["in_progress"] == 1

    def test_empty(self):
        stats = compute_closed_loop_stats([], today=TODAY)
        assert stats.total == 0
        assert stats.closure_rate == 0
        assert stats.avg_close_days == 0


class TestRecurringIssues:
    def test_only_groups_of_three_or_more(self, make_action):
        actions = [make_action(id=f"x{i}", issue="X", unit="A") for i in range(3)]
        actions += [make_action(id=f"y{i}", issue="Y", unit="B") for i in range(2)]
        recurring = find_recurring_issues(actions, today=TODAY)
        assert [a.id for a in recurring] == ["x0", "x1", "x2"]

    def test_same_issue_different_unit_not_grouped(self, make_action):
        actions = [
            make_action(id="1", issue="X", unit="A"),
            make_action(id="2", issue="X", unit="A"),
            make_action(id="3", issue="X", unit="B"),
        ]
        assert find_recurring_issues(actions, today=TODAY) == []

    def test_window_excludes_older_actions(self, make_action):
        actions = [
            make_action(id="1", issue="X", unit="A", auditDate="2024-01-01"),
            make_action(id="2", issue="X", unit="A"),
            make_action(id="3", issue="X", unit="A"),
        ]
        assert find_recurring_issues(actions, window_days=30, today=TODAY) == []
        assert len(find_recurring_issues(actions, window_days=90, today=TODAY)) == 3

    def test_deleted_and_blank_issues_skipped(self, make_action):
        actions = [
            make_action(id="1", issue="X", unit="A"),
            make_action(id="2", issue="X", unit="A"),
            make_action(id="3", issue="X", unit="A", deletedAt="2024-03-14T00:00:00Z"),
            make_action(id="4", issue="", unit="A"),
            make_action(id="5", issue="", unit="A"),
            make_action(id="6", issue="", unit="A"),
        ]
        assert find_recurring_issues(actions, today=TODAY) == []


class TestHeatmap:
    def test_grid(self, make_session):
        sessions = [
            make_session([True, False], title="Hand Hygiene", unit="Unit B", session_id="s1"),
            make_session([True], title="Hand Hygiene", unit="Unit A", session_id="s2"),
            make_session([False], title="Med Pass", unit="Unit A", session_id="s3", criticals={0: ["md_order"]}),
            make_session([False], title="Med Pass", unit="Unit C", session_id="s4", status="in_progress"),
        ]
        heatmap = compute_heatmap(sessions)
        assert heatmap.tools == ["Hand Hygiene", "Med Pass"]
        assert heatmap.units == ["Unit A", "Unit B"]
        cell = heatmap.data["Hand Hygiene"]["Unit B"]
        assert (cell.total, cell.passing, cell.rate) == (2, 1, 50)
        assert heatmap.data["Med Pass"]["Unit A"].critical == 1
        assert "Unit B" not in heatmap.data["Med Pass"]


class TestStaffPerformance:
    def test_rollup(self, make_session, make_action, make_education):
        sessions = [
            make_session(
                [True, False, True],
                staff=["Alice", "Alice", " Bob "],
                criticals={1: ["performed_hygiene"]},
            ),
        ]
        actions = [
            make_action(id="a1", staffAudited="Alice", issue="Gloves", auditDate="2024-03-10"),
            make_action(id="a2", staffAudited="Alice", issue="Hand hygiene", auditDate="2024-03-12", status="complete"),
            make_action(id="a3", staffAudited="Alice", issue="Gloves", auditDate="2024-03-14"),
            make_action(id="a4", staffAudited="Alice", issue="Old", auditDate="2023-01-01"),
        ]
        education = [make_education(attendees=["Alice", "Carol"])]
        rows = compute_staff_performance(sessions, actions, education, ("2024-03-01", "2024-03-31"))

        by_name = {row.staff_name: row for row in rows}
        alice = by_name["Alice"]
        assert (alice.audits, alice.passing, alice.critical_fails) == (2, 1, 1)
        assert alice.pass_rate == 50
        assert alice.trend_direction == "declining"
        assert (alice.open_actions, alice.completed_actions) == (2, 1)
        assert alice.education_sessions == 1
        assert alice.recent_issues == ["Gloves", "Hand hygiene"]

        bob = by_name["Bob"]
        assert bob.pass_rate == 100
        assert bob.trend_direction == "improving"

        carol = by_name["Carol"]
        assert carol.audits == 0
        assert carol.trend_direction == "stable"
        assert [row.staff_name for row in rows][0] == "Alice"

    def test_out_of_range_sessions_ignored(self, make_session):
        sessions = [make_session([True], staff=["Alice"], audit_date="2024-02-01")]
        assert compute_staff_performance(sessions, [], [], ("2024-03-01", "2024-03-31")) == []


class TestEducationSummary:
    def test_filters_and_categorizes(self, make_education):
        sessions = [
            make_education(id="1", topic="Hand hygiene refresher", unit="Unit A"),
            make_education(id="2", topic="Hand hygiene refresher", unit="Unit A", category="Custom"),
            make_education(id="3", topic="Fall prevention", unit="Unit B"),
            make_education(id="4", topic="Planned only", status="planned"),
            make_education(id="5", topic="Too old", completedDate="2023-12-01"),
        ]
        summary = summarize_education(sessions, from_ymd="2024-03-01", to_ymd="2024-03-31")
        assert summary.count == 3
        assert summary.by_category["Custom"] == 1
        assert summary.top_topics[0].topic == "Hand hygiene refresher"
        assert summary.top_topics[0].count == 2

        unit_a = summarize_education(sessions, from_ymd="2024-03-01", to_ymd="2024-03-31", unit="Unit A")
        assert unit_a.count == 2


class TestRangeFilters:
    NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)

    def test_sessions_within_days(self, make_session):
        recent = make_session([True], audit_date="2024-03-10", session_id="recent")
        old = make_session([True], audit_date="2024-03-01", session_id="old")
        selected = filter_sessions_by_range([recent, old], 7, now=self.NOW)
        assert [s.id for s in selected] == ["recent"]

    def test_all_time(self, make_session):
        sessions = [make_session([True], audit_date="2019-01-01")]
        assert filter_sessions_by_range(sessions, ALL_TIME_DAYS, now=self.NOW) == sessions

    def test_actions_without_created_at_dropped(self, make_action):
        actions = [make_action(id="a"), make_action(id="b", createdAt="")]
        assert [a.id for a in filter_actions_by_range(actions, 30, now=self.NOW)] == ["a"]


class TestDisplayHelpers:
    def test_compliance_status(self):
        assert compliance_status(95) == "success"
        assert compliance_status(90) == "success"
        assert compliance_status(75) == "warning"
        assert compliance_status(69) == "error"

    def test_format_delta(self):
        assert format_delta(92, 85).text == "+7%"
        assert format_delta(92, 85).direction == "up"
        assert format_delta(80, 85).text == "-5%"
        assert format_delta(80, 85).direction == "down"
        assert format_delta(85, 85).direction == "neutral"
