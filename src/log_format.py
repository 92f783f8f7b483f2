import logging

RESET = "\033[0m"
DIM = "\033[2m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"

# Message prefixes emitted by the recognizer and session, first match wins.
HIGHLIGHTS: tuple[tuple[str, str], ...] = (
    ("State:", BOLD + CYAN),
    ("Recognized:", CYAN),
    ("Canceled:", BOLD + YELLOW),
    ("Session started", BOLD + GREEN),
    ("Session start failed", BOLD + RED),
)

LEVEL_STYLES = {
    logging.DEBUG: ("DBG", DIM),
    logging.INFO: ("INF", GREEN),
    logging.WARNING: ("WRN", YELLOW),
    logging.ERROR: ("ERR", RED),
    logging.CRITICAL: ("CRT", BOLD + RED),
}


def _paint(text: str, style: str) -> str:
    return f"{style}{text}{RESET}" if style else text


class ColoredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        tag, level_style = LEVEL_STYLES.get(record.levelno, (record.levelname[:3], ""))
        msg = record.getMessage()
        style = next((s for prefix, s in HIGHLIGHTS if msg.startswith(prefix)), "")
        if not style and record.levelno == logging.DEBUG:
            style = DIM

        line = " ".join(
            (
                _paint(self.formatTime(record, self.datefmt), DIM),
                _paint(tag, level_style),
                _paint(f"{record.name:<28}", DIM),
                _paint(msg, style),
            )
        )
        if record.exc_info:
            trace = self.formatException(record.exc_info)
            line += "\n" + "\n".join(_paint(f"    | {row}", DIM) for row in trace.splitlines())
        return line
