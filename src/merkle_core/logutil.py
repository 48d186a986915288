import logging
import re
from typing import Iterable, Optional, Union


_HEX_DIGEST = re.compile(r"\b([0-9a-fA-F]{12})[0-9a-fA-F]{52}\b")


class DigestShorteningFilter(logging.Filter):
    """Abbreviate full 64-char hex digests in log records to a 12-char prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = str(record.getMessage())
        except (TypeError, ValueError):
            # leave malformed records for the handler to report
            return True
        record.msg = _HEX_DIGEST.sub(r"\1…", msg)
        record.args = ()
        return True


def setup_logging(
    level: Optional[Union[int, str]] = None,
    loggers: Iterable[str] = ("merkle_core.merkle",),
) -> None:
    # logger filters do not see records propagated from children, so name the
    # module loggers that actually emit
    if level is None:
        from .settings import settings

        level = settings.log_level
    logging.basicConfig(level=level)
    f = DigestShorteningFilter()
    for name in loggers:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        lg.addFilter(f)
