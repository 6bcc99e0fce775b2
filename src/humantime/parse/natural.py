# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, Protocol

import dateparser
import pendulum

from humantime.time import python_to_pendulum

logger = logging.getLogger(__name__)

MAX_NATURAL_INPUT_LENGTH = 256


class DateResolver(Protocol):
    def resolve(
        self,
        text: str,
        reference: pendulum.DateTime,
    ) -> Optional[pendulum.DateTime]: ...


class DateparserResolver:
    """
    Resolves free-form date text with the dateparser library.

    Naive results are wall-clock times in the reference's timezone; text that
    names its own timezone is converted into the reference's timezone.
    """

    def __init__(
        self,
        languages: Optional[list[str]] = None,
        date_order: Optional[str] = None,
    ) -> None:
        self.languages = list(languages) if languages else ["en"]
        self.date_order = date_order

    def resolve(
        self,
        text: str,
        reference: pendulum.DateTime,
    ) -> Optional[pendulum.DateTime]:
        if len(text) > MAX_NATURAL_INPUT_LENGTH:
            logger.debug("refusing to resolve %d characters", len(text))
            return None

        # The reference is handed over as naive wall-clock time and dateparser
        # is told it is UTC so it applies no offset of its own. Text naming a
        # timezone comes back aware and is converted below.
        settings: dict[str, Any] = {
            "RELATIVE_BASE": reference.naive(),
            "TIMEZONE": "UTC",
            "PREFER_DATES_FROM": "current_period",
        }
        if self.date_order is not None:
            settings["DATE_ORDER"] = self.date_order

        try:
            result = dateparser.parse(
                text, languages=self.languages, settings=settings
            )
        except (ValueError, OverflowError, TypeError, KeyError) as e:
            logger.debug("dateparser failed on %r: %s", text, e)
            return None

        if result is None:
            logger.debug("dateparser found no date in %r", text)
            return None

        resolved = python_to_pendulum(result, reference.timezone)
        logger.debug("resolved %r to %s", text, resolved.isoformat())
        return resolved


DEFAULT_RESOLVER: DateResolver = DateparserResolver()
