from datetime import date

from rotina.core import config
from rotina.services.agenda_service import (
    DayStats,
    agenda_for_date,
    day_stats,
    filter_by_period,
    filter_by_person,
    group_by_category,
)


def test_filter_by_period(make_task):
    morning = make_task(periods=("MA",))
    evening = make_task(periods=("TA", "NO"))
    assert filter_by_period([morning, evening], "NO") == [evening]
    assert filter_by_period([morning, evening], "MA") == [morning]


def test_filter_by_person_includes_shared_tasks(make_task):
    rubens = make_task(primary_person="rubens")
    diene = make_task(primary_person="diene")
    shared = make_task(primary_person="juntos")
    tasks = [rubens, diene, shared]

    assert filter_by_person(tasks, "diene") == [diene, shared]
    assert filter_by_person(tasks, None) == tasks


def test_shared_person_is_configurable(make_task, monkeypatch):
    monkeypatch.setattr(config, "SHARED_PERSON", "together")
    shared = make_task(primary_person="together")
    other = make_task(primary_person="juntos")
    assert filter_by_person([shared, other], "diene") == [shared]


def test_group_by_category_keeps_first_seen_order(make_task):
    a = make_task(category="cozinha")
    b = make_task(category="casa")
    c = make_task(category="cozinha")
    groups = group_by_category([a, b, c])
    assert [category for category, _ in groups] == ["cozinha", "casa"]
    assert groups[0][1] == [a, c]


def test_day_stats_counts_essential_tasks(make_task):
    done = make_task(id=1)
    pending = make_task(id=2)
    optional = make_task(id=3, optional=True)
    elsewhere = make_task(id=4, primary_person="diene")

    stats = day_stats([done, pending, optional, elsewhere], "rubens", lambda task_id: task_id in {1, 3})
    assert stats == DayStats(total=2, done=1, all=3)


def test_agenda_for_date(make_task):
    monday_morning = make_task({"type": "weekly", "daysOfWeek": [1]}, periods=("MA",))
    monday_night = make_task({"type": "weekly", "daysOfWeek": [1]}, periods=("NO",), primary_person="diene")
    tuesday = make_task({"type": "weekly", "daysOfWeek": [2]})
    tasks = [monday_morning, monday_night, tuesday]

    assert agenda_for_date(date(2025, 2, 10), tasks) == [monday_morning, monday_night]
    assert agenda_for_date(date(2025, 2, 10), tasks, person="rubens") == [monday_morning]
    assert agenda_for_date(date(2025, 2, 10), tasks, period="NO") == [monday_night]
