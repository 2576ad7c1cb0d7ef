"""Расписание стендапа (APScheduler)"""
import logging
import re

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from services.coordinator import CycleCoordinator

logger = logging.getLogger(__name__)

# В crontab 0 и 7 - воскресенье, а APScheduler считает 0 понедельником
CRON_WEEKDAYS = ["sun", "mon", "tue", "wed", "thu", "fri", "sat", "sun"]


def _weekday_names(field: str) -> str:
    """
    Поле дня недели из crontab в список имён для APScheduler.

    '1-5' -> 'mon,tue,wed,thu,fri', '0-4' -> 'sun,mon,tue,wed,thu',
    '*/2' -> 'sun,tue,thu,sat'. Имена ('mon-fri') и '*' не трогаем.
    """
    names = []
    for item in field.split(","):
        base, _, step = item.partition("/")
        if base == "*" and not step:
            names.append("*")
            continue

        if base == "*":
            start, end = 0, 6
        elif re.fullmatch(r"\d+", base):
            start = int(base)
            end = 6 if step else start
        elif re.fullmatch(r"\d+-\d+", base):
            start, end = (int(x) for x in base.split("-"))
        else:
            names.append(item)
            continue

        if end > 7 or start > end:
            raise ValueError(f"Неверный день недели в расписании: '{item}'")
        if step and (not step.isdigit() or int(step) == 0):
            raise ValueError(f"Неверный шаг дня недели в расписании: '{item}'")

        for day in range(start, end + 1, int(step) if step else 1):
            names.append(CRON_WEEKDAYS[day])

    # 0 и 7 дают воскресенье дважды
    return ",".join(dict.fromkeys(names))


def build_cron_trigger(expression: str, timezone: str = "UTC") -> CronTrigger:
    """
    Cron-выражение из 5 полей (минуты первыми) или 6 полей (секунды первыми)
    """
    fields = expression.split()
    if len(fields) == 5:
        second = "0"
        minute, hour, day, month, day_of_week = fields
    elif len(fields) == 6:
        second, minute, hour, day, month, day_of_week = fields
    else:
        raise ValueError(f"Cron-выражение должно содержать 5 или 6 полей: '{expression}'")

    return CronTrigger(
        second=second,
        minute=minute,
        hour=hour,
        day=day,
        month=month,
        day_of_week=_weekday_names(day_of_week),
        timezone=timezone,
    )


def create_scheduler(coordinator: CycleCoordinator, expression: str, timezone: str = "UTC") -> AsyncIOScheduler:
    """Планировщик с одной задачей: запуск стендапа по расписанию"""
    scheduler = AsyncIOScheduler(timezone=timezone)
    scheduler.add_job(
        coordinator.start_cycle,
        trigger=build_cron_trigger(expression, timezone),
        id="standup",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    logger.info(f"Стендап запланирован: '{expression}' ({timezone})")
    return scheduler
