"""
Scrub free-text PII out of the sanitizer's own log messages.

When sanitization fails, the warning carries the error detail, and error
details sometimes quote the data that was being processed. This filter runs
each rendered message through scrubadub (emails, phone numbers, URLs,
credentials, ...) before any handler sees it.
"""

import logging

import scrubadub

logger = logging.getLogger(__name__)


class ScrubbingFilter(logging.Filter):
    """
    logging.Filter that replaces PII in a record's message.

    Example:
        logging.getLogger("sanitizer").addFilter(ScrubbingFilter())
        # "Error masking data for contact: bad value john@example.com"
        # is emitted as
        # "Error masking data for contact: bad value {{EMAIL}}"
    """

    def __init__(self, name: str = ""):
        super().__init__(name)
        self._scrubber = scrubadub.Scrubber()

    def scrub(self, text: str) -> str:
        if not text:
            return text
        try:
            return self._scrubber.clean(text)
        except Exception as e:
            logger.debug(f"Scrubadub error (message kept as is): {type(e).__name__}")
            return text

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = self.scrub(record.getMessage())
        record.args = None
        return True


def install_log_scrubbing(logger_name: str = "sanitizer.engine") -> ScrubbingFilter:
    """
    Attach a ScrubbingFilter to logger_name once and return it.

    Logger filters only see records logged on that exact logger, not ones
    propagated from children, hence the engine logger as the default.
    """
    target = logging.getLogger(logger_name)
    for existing in target.filters:
        if isinstance(existing, ScrubbingFilter):
            return existing
    scrub_filter = ScrubbingFilter()
    target.addFilter(scrub_filter)
    return scrub_filter
