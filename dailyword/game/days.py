"""
Day selection: map a point in time to an index into the target list.

The index is whole days elapsed since a fixed epoch, on the local (naive)
clock. It is computed once per session; a clock change mid-session does not
move the word.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional, Union

from dailyword.datasets.catalog import WordCatalog

logger = logging.getLogger(__name__)

DEFAULT_EPOCH = dt.datetime(2022, 1, 1)

When = Union[dt.datetime, dt.date]


def _as_datetime(when: When) -> dt.datetime:
    # date is a superclass of datetime; check the subclass first
    if isinstance(when, dt.datetime):
        return when.replace(tzinfo=None)
    return dt.datetime.combine(when, dt.time())


def day_index(now: When, epoch: When = DEFAULT_EPOCH) -> int:
    """floor((now - epoch) / 1 day); negative before the epoch."""
    delta = _as_datetime(now) - _as_datetime(epoch)
    return delta // dt.timedelta(days=1)


class DaySelector:
    def __init__(self, catalog: WordCatalog, epoch: When = DEFAULT_EPOCH):
        self.catalog = catalog
        self.epoch = _as_datetime(epoch)

    def day_index(self, now: Optional[When] = None) -> int:
        return day_index(dt.datetime.now() if now is None else now, self.epoch)

    def target_word_for(self, now: Optional[When] = None) -> str:
        """Today's word (or `now`'s). Raises IndexOutOfRange past the list."""
        idx = self.day_index(now)
        logger.debug("day index %d (epoch %s)", idx, self.epoch.date())
        return self.catalog.target_for_index(idx)
