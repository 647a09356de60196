# hoshizora/utils.py

import pytz
from babel.dates import get_month_names

# Thai dates count years in the Buddhist era
BUDDHIST_ERA_OFFSET = 543


def format_thai_date(value, timezone='Asia/Bangkok', locale='th'):
    """
    Format a datetime the way a ``th-TH`` long date reads, e.g. ``15 มกราคม 2567``.
    Naive datetimes are treated as UTC. Returns '' for None.
    """
    if value is None:
        return ''
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    local = value.astimezone(pytz.timezone(timezone))
    month = get_month_names('wide', locale=locale)[local.month]
    return f'{local.day} {month} {local.year + BUDDHIST_ERA_OFFSET}'
