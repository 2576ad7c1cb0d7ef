"""Тесты расписания"""
from datetime import datetime, timezone

import pytest

from services.coordinator import CycleCoordinator
from services.scheduler import _weekday_names, build_cron_trigger, create_scheduler
from conftest import FakeMessenger

# 17 октября 2026 - суббота
SATURDAY_NOON = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def test_weekday_names_use_crontab_numbering():
    """Тест: 0 и 7 - воскресенье, 1 - понедельник"""
    assert _weekday_names("1-5") == "mon,tue,wed,thu,fri"
    assert _weekday_names("0,6") == "sun,sat"
    assert _weekday_names("7") == "sun"
    assert _weekday_names("*") == "*"
    assert _weekday_names("mon-fri") == "mon-fri"


def test_weekday_ranges_starting_on_sunday():
    """Тест: диапазоны с воскресенья и шаги в нумерации crontab"""
    assert _weekday_names("0-4") == "sun,mon,tue,wed,thu"
    assert _weekday_names("0-6") == "sun,mon,tue,wed,thu,fri,sat"
    assert _weekday_names("0-7") == "sun,mon,tue,wed,thu,fri,sat"
    assert _weekday_names("*/2") == "sun,tue,thu,sat"
    assert _weekday_names("1-5/2") == "mon,wed,fri"
    assert _weekday_names("1/3") == "mon,thu"


def test_sunday_to_thursday_schedule():
    """Тест: рабочая неделя с воскресенья до четверга"""
    trigger = build_cron_trigger("0 9 * * 0-4", "UTC")

    # суббота -> воскресенье
    assert trigger.get_next_fire_time(None, SATURDAY_NOON) == datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)
    # пятница -> воскресенье
    friday = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)
    assert trigger.get_next_fire_time(None, friday) == datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)

    build_cron_trigger("0 9 * * 0-6", "UTC")
    build_cron_trigger("0 0 9 * * 0-5", "UTC")


def test_weekday_out_of_range():
    with pytest.raises(ValueError):
        _weekday_names("8")
    with pytest.raises(ValueError):
        _weekday_names("5-1")
    with pytest.raises(ValueError):
        _weekday_names("*/0")


def test_six_field_expression_skips_weekend():
    """Тест: шесть полей - секунды первыми; в выходные не срабатывает"""
    trigger = build_cron_trigger("0 15 10 * * 1-5", "UTC")

    next_fire = trigger.get_next_fire_time(None, SATURDAY_NOON)

    assert next_fire == datetime(2026, 10, 19, 10, 15, tzinfo=timezone.utc)


def test_five_field_expression():
    """Тест: пять полей - обычный crontab"""
    trigger = build_cron_trigger("30 9 * * 1", "UTC")

    next_fire = trigger.get_next_fire_time(None, SATURDAY_NOON)

    assert next_fire == datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


def test_invalid_expression():
    with pytest.raises(ValueError):
        build_cron_trigger("15 10 *", "UTC")


def test_scheduler_has_single_standup_job(questions):
    """Тест: одна задача, без параллельных запусков"""
    coordinator = CycleCoordinator(FakeMessenger(), questions, participants=[101])

    scheduler = create_scheduler(coordinator, "0 15 10 * * 1-5", "UTC")

    job = scheduler.get_job("standup")
    assert job is not None
    assert job.max_instances == 1
    assert job.coalesce is True
    assert job.func == coordinator.start_cycle
