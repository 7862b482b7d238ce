# src/study_planner/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.state import AppState
from ..errors import InvalidDateKeyError
from ..planner.date_range import days_until, display_grid_days, month_days, shift_month
from ..planner.models import Subject, Topic, date_key, parse_date_key
from ..planner.stats import DEFAULT_LOCALE, monthly_stats, subject_stats

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /subject, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."
        return handler(state, parts[1:])

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

# Indexed by day of week with Sunday = 0.
QUOTES = (
    "Başarı, her gün tekrarlanan küçük çabaların toplamıdır.",
    "Gelecek, bugünden hazırlananlara aittir.",
    "Zorluklar, başarının değerini artıran süslerdir.",
    "Ertelemek, zaman hırsızıdır. Şimdi başla!",
    "Hedefine odaklan, engelleri basamak yap.",
    "Bugün yapacağın fedakarlık, yarınki özgürlüğündür.",
    "Pes etmediğin sürece mağlup sayılmazsın.",
)


def _today() -> date:
    return date.today()


def daily_quote(day: date) -> str:
    """Motivational quote of the day; the same weekday always gets the same quote."""
    return QUOTES[(day.weekday() + 1) % 7]


def _locale(state: AppState) -> str:
    return str(getattr(state.settings, "stats_locale", DEFAULT_LOCALE))


# ---- formatting ----


def _format_topic(pos: int, topic: Topic) -> str:
    mark = "x" if topic.completed else " "
    return f"     {pos}. [{mark}] {topic.text}"


def _format_subject(pos: int, subject: Subject) -> list[str]:
    lines = [f"  {pos}. {subject.name} ({subject.completed_count}/{len(subject.topics)})"]
    lines.extend(_format_topic(i, t) for i, t in enumerate(subject.topics, start=1))
    return lines


def _format_day(day: date, subjects: tuple[Subject, ...]) -> str:
    lines = [f"{date_key(day)} ({day.strftime('%a')}):"]
    if not subjects:
        lines.append("  (nothing planned)")
    for i, subject in enumerate(subjects, start=1):
        lines.extend(_format_subject(i, subject))
    return "\n".join(lines)


# ---- positional lookups (1-based, on the selected day) ----


def _pick_subject(state: AppState, raw: str) -> Subject | None:
    subjects = state.store.subjects_for(state.selected_key)
    if not raw.isdecimal() or not 1 <= int(raw) <= len(subjects):
        return None
    return subjects[int(raw) - 1]


def _pick_topic(subject: Subject, raw: str) -> Topic | None:
    if not raw.isdecimal() or not 1 <= int(raw) <= len(subject.topics):
        return None
    return subject.topics[int(raw) - 1]


def _pick(state: AppState, args: list[str]) -> tuple[Subject, Topic] | str:
    if len(args) < 2:
        return "Need a subject number and a topic number."
    subject = _pick_subject(state, args[0])
    if subject is None:
        return f"No subject #{args[0]} on {state.selected_key}."
    topic = _pick_topic(subject, args[1])
    if topic is None:
        return f"No topic #{args[1]} in {subject.name}."
    return subject, topic


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_month(state: AppState, args: list[str]) -> str:
    """
    /month           -> show current month
    /month next|prev -> navigate
    /month YYYY-MM   -> jump
    """
    if args:
        arg = args[0].lower()
        if arg in ("next", "n", "+"):
            state.current_month = shift_month(state.current_month, 1)
        elif arg in ("prev", "p", "-"):
            state.current_month = shift_month(state.current_month, -1)
        else:
            try:
                state.current_month = parse_date_key(f"{arg}-01")
            except InvalidDateKeyError:
                return "Usage: /month [next|prev|YYYY-MM]"

    stats = monthly_stats(state.store.snapshot, state.current_month)
    return (
        f"Month {state.current_month:%Y-%m}: "
        f"{stats.completed}/{stats.total} topics done ({stats.percent}%)"
    )


def cmd_day(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() == "today":
        day = _today()
    else:
        try:
            day = parse_date_key(args[0])
        except InvalidDateKeyError:
            return "Usage: /day YYYY-MM-DD | /day today"
    state.selected_date = day
    state.current_month = day.replace(day=1)
    return _format_day(day, state.store.subjects_for(state.selected_key))


def cmd_show(state: AppState, args: list[str]) -> str:
    return _format_day(state.selected_date, state.store.subjects_for(state.selected_key))


def cmd_list(state: AppState, args: list[str]) -> str:
    blocks = []
    for day in month_days(state.current_month):
        subjects = state.store.subjects_for(date_key(day))
        if subjects:
            blocks.append(_format_day(day, subjects))
    if not blocks:
        return f"Nothing planned in {state.current_month:%Y-%m}."
    return "\n".join(blocks)


def cmd_subject(state: AppState, args: list[str]) -> str:
    name = " ".join(args)
    sid = state.store.add_subject(state.selected_key, name)
    if sid is None:
        return "Usage: /subject <name>"
    logger.debug("Subject added id=%s date=%s", sid, state.selected_key)
    return cmd_show(state, [])


def cmd_topic(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /topic <subject#> <text>"
    subject = _pick_subject(state, args[0])
    if subject is None:
        return f"No subject #{args[0]} on {state.selected_key}."
    tid = state.store.add_topic(state.selected_key, subject.id, " ".join(args[1:]))
    if tid is None:
        return "Usage: /topic <subject#> <text>"
    return cmd_show(state, [])


def cmd_toggle(state: AppState, args: list[str]) -> str:
    picked = _pick(state, args)
    if isinstance(picked, str):
        return picked
    subject, topic = picked
    state.store.toggle_topic(state.selected_key, subject.id, topic.id)
    return cmd_show(state, [])


def cmd_edit(state: AppState, args: list[str]) -> str:
    picked = _pick(state, args)
    if isinstance(picked, str):
        return picked
    subject, topic = picked
    if not state.store.update_topic(state.selected_key, subject.id, topic.id, " ".join(args[2:])):
        return "Usage: /edit <subject#> <topic#> <new text>"
    return cmd_show(state, [])


def cmd_rmsubject(state: AppState, args: list[str]) -> str:
    subject = _pick_subject(state, args[0]) if args else None
    if subject is None:
        return "Usage: /rmsubject <subject#>"
    state.store.delete_subject(state.selected_key, subject.id)
    return cmd_show(state, [])


def cmd_rmtopic(state: AppState, args: list[str]) -> str:
    picked = _pick(state, args)
    if isinstance(picked, str):
        return picked
    subject, topic = picked
    state.store.delete_topic(state.selected_key, subject.id, topic.id)
    return cmd_show(state, [])


def cmd_grid(state: AppState, args: list[str]) -> str:
    """Week-padded month grid; each cell is day number + done/total, '*' marks the selected day."""
    week_start = int(getattr(state.settings, "week_start", 0))
    snapshot = state.store.snapshot
    lines = [f"{state.current_month:%B %Y}"]
    row: list[str] = []
    for day in display_grid_days(state.current_month, week_start=week_start):
        subjects = snapshot.get(date_key(day), ())
        total = sum(len(s.topics) for s in subjects)
        cell = f"{day.day:>2}" if day.month == state.current_month.month else " ."
        if total:
            cell += f" {sum(s.completed_count for s in subjects)}/{total}"
        if day == state.selected_date:
            cell += "*"
        row.append(f"{cell:<9}")
        if len(row) == 7:
            lines.append("".join(row).rstrip())
            row = []
    return "\n".join(lines)


def cmd_stats(state: AppState, args: list[str]) -> str:
    snapshot = state.store.snapshot
    monthly = monthly_stats(snapshot, state.current_month)
    lines = [
        f"Monthly progress {state.current_month:%Y-%m}: "
        f"{monthly.completed}/{monthly.total} ({monthly.percent}%)"
    ]
    for row in subject_stats(snapshot, state.current_month, locale=_locale(state)):
        lines.append(f"  {row.name}: {row.completed}/{row.total} ({row.percent}%)")
    return "\n".join(lines)


def cmd_countdown(state: AppState, args: list[str]) -> str:
    exam = getattr(state.settings, "exam_date", None)
    if exam is None:
        return "No exam date configured."
    left = days_until(exam, _today())
    if left < 0:
        return f"Exam date {exam.isoformat()} has passed."
    return f"{left} days left until the exam ({exam.isoformat()})."


def cmd_quote(state: AppState, args: list[str]) -> str:
    return daily_quote(_today())


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("month", cmd_month, help_text="Show/navigate month: /month [next|prev|YYYY-MM].")
registry.register("day", cmd_day, help_text="Select a day: /day YYYY-MM-DD | /day today.")
registry.register("show", cmd_show, help_text="Show the selected day.")
registry.register("list", cmd_list, help_text="List every planned day of the month.", aliases=["ls"])
registry.register("grid", cmd_grid, help_text="Calendar grid of the month with done/total per day.")
registry.register("subject", cmd_subject, help_text="Add a subject to the selected day: /subject <name>.")
registry.register("topic", cmd_topic, help_text="Add a topic: /topic <subject#> <text>.")
registry.register("toggle", cmd_toggle, help_text="Toggle a topic: /toggle <subject#> <topic#>.", aliases=["t"])
registry.register("edit", cmd_edit, help_text="Rename a topic: /edit <subject#> <topic#> <text>.")
registry.register("rmsubject", cmd_rmsubject, help_text="Delete a subject: /rmsubject <subject#>.")
registry.register("rmtopic", cmd_rmtopic, help_text="Delete a topic: /rmtopic <subject#> <topic#>.")
registry.register("stats", cmd_stats, help_text="Monthly and per-subject progress.")
registry.register("countdown", cmd_countdown, help_text="Days left until the exam date.")
registry.register("quote", cmd_quote, help_text="Motivational quote of the day.")
