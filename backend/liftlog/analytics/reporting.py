from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal

log = logging.getLogger("liftlog.analytics")

NoticeKind = Literal["error", "info", "success"]


@dataclass(frozen=True, slots=True)
class Notice:
    kind: NoticeKind
    message: str


Reporter = Callable[[Notice], None]


def log_notice(notice: Notice) -> None:
    """Default reporter: notices end up in the application log."""
    level = logging.ERROR if notice.kind == "error" else logging.INFO
    log.log(level, "notice kind=%s message=%s", notice.kind, notice.message)
