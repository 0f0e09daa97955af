"""
Default practice catalog.

Seeded by :func:`app.db.init_db.seed_practices`, idempotent on ``key``.
Holy Week has no entries of its own: the today view serves the Lent
catalog during Holy Week.
"""

from app.schemas.practice import Lane, PracticeCreate, Recurrence, Season

D, W = Recurrence.DAILY, Recurrence.WEEKLY
SUN, MON, TUE, WED, THU, FRI, SAT = range(7)


def _p(key, season, lane, title, description, recurrence=D, weekday=None, order=0) -> PracticeCreate:
    return PracticeCreate(key=key, season=season, lane=lane, title=title, description=description,
                          recurrence=recurrence, scheduled_weekday=weekday, sort_order=order)


DEFAULT_PRACTICES: list[PracticeCreate] = [
    # Advent
    _p("advent_morning_offering", Season.ADVENT, Lane.PRAYER, "Morning offering",
       "Offer the day before any screen.", order=1),
    _p("advent_wreath_prayer", Season.ADVENT, Lane.PRAYER, "Advent wreath prayer",
       "Light the candles and pray the week's collect.", order=2),
    _p("advent_no_snacking", Season.ADVENT, Lane.ASCETIC, "No snacking between meals", "", order=1),
    _p("advent_confession", Season.ADVENT, Lane.ASCETIC, "Confession", "Go to confession this week.",
       W, SAT, order=2),
    _p("advent_giving", Season.ADVENT, Lane.CHARITY, "Hidden gift", "Do one unseen kindness.", order=1),
    _p("advent_silence", Season.ADVENT, Lane.ATTENTION, "Ten minutes of silence", "", order=1),

    # Christmas
    _p("christmas_te_deum", Season.CHRISTMAS, Lane.PRAYER, "Te Deum", "Pray the Te Deum in thanksgiving.",
       order=1),
    _p("christmas_feast", Season.CHRISTMAS, Lane.ASCETIC, "Feast well", "Share a festive meal.", W, SUN,
       order=1),
    _p("christmas_visit", Season.CHRISTMAS, Lane.CHARITY, "Visit someone alone", "", W, SAT, order=1),
    _p("christmas_creche", Season.CHRISTMAS, Lane.ATTENTION, "Sit by the crèche", "", order=1),

    # Lent
    _p("lent_morning_prayer", Season.LENT, Lane.PRAYER, "Morning prayer", "Pray Lauds or the morning offering.",
       order=1),
    _p("lent_stations", Season.LENT, Lane.PRAYER, "Stations of the Cross", "", W, FRI, order=2),
    _p("lent_friday_fast", Season.LENT, Lane.ASCETIC, "Fast", "One full meal, two small ones.", W, FRI,
       order=1),
    _p("lent_no_sweets", Season.LENT, Lane.ASCETIC, "No sweets", "", order=2),
    _p("lent_almsgiving", Season.LENT, Lane.CHARITY, "Almsgiving", "Set aside what the fast saved.", W, SUN,
       order=1),
    _p("lent_phone_away", Season.LENT, Lane.ATTENTION, "Phone away after 9pm", "", order=1),

    # Easter
    _p("easter_regina_caeli", Season.EASTER, Lane.PRAYER, "Regina Caeli", "Pray at noon.", order=1),
    _p("easter_fixed_wake_time", Season.EASTER, Lane.ASCETIC, "Fixed wake time",
       "Rise at the same time every day.", order=1),
    _p("easter_hospitality", Season.EASTER, Lane.CHARITY, "Hospitality", "Invite someone to a meal.", W, SUN,
       order=1),
    _p("easter_walk", Season.EASTER, Lane.ATTENTION, "Walk outside", "Notice one sign of new life.", order=1),

    # Ordinary Time
    _p("ot_examen", Season.ORDINARY_TIME, Lane.PRAYER, "Evening examen", "", order=1),
    _p("ot_scripture", Season.ORDINARY_TIME, Lane.PRAYER, "Scripture reading", "Read the day's Gospel.", order=2),
    _p("ot_friday_abstinence", Season.ORDINARY_TIME, Lane.ASCETIC, "Friday abstinence", "No meat on Friday.",
       W, FRI, order=1),
    _p("ot_works_of_mercy", Season.ORDINARY_TIME, Lane.CHARITY, "Work of mercy", "", W, WED, order=1),
    _p("ot_sabbath", Season.ORDINARY_TIME, Lane.ATTENTION, "Sabbath rest", "No work email on Sunday.", W, SUN,
       order=1),
]
