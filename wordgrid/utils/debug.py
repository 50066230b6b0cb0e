import logging
import os

# -----------------------------
# Debug helpers (enable with --debug or env WORDGRID_DEBUG=1)
# -----------------------------
DEBUG_ENABLED = str(os.getenv("WORDGRID_DEBUG", "")).strip().lower() in {"1", "true", "yes", "on"}

log = logging.getLogger("wordgrid")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(debug: bool = False) -> None:
    global DEBUG_ENABLED
    DEBUG_ENABLED = DEBUG_ENABLED or debug
    logging.basicConfig(
        level=logging.DEBUG if DEBUG_ENABLED else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def debug_event(title: str, message: str, details: str = "", *, level: str = "info") -> None:
    """Log a titled event; multi-line details are logged only with debugging enabled."""
    log.log(_LEVELS.get(level, logging.INFO), "%s | %s", title, message)
    if details and DEBUG_ENABLED:
        for ln in details.splitlines():
            log.debug("    %s", ln)
