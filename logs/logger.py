import logging
import os, sys

from logging.handlers import RotatingFileHandler

log_dir = "logs"
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'

RESET = "\033[0m"
STYLES = {
    'bold': "\033[1m",
    'dim': "\033[2m",
    'magenta': "\033[35m",
    'cyan': "\033[36m",
    'white': "\033[37m",
    'bg_blue': "\033[44m",
    'red': "\033[91m",
    'green': "\033[92m",
    'yellow': "\033[93m",
    'blue': "\033[94m",
}

# Console color per record level, highest matching threshold wins
LEVEL_COLORS = (
    (logging.ERROR, STYLES['red']),
    (logging.WARNING, STYLES['yellow']),
    (logging.INFO, STYLES['blue']),
)

_logger_initialized = False

class LevelColorFormatter(logging.Formatter):
    """Colors console records by level when stdout is a terminal."""
    def format(self, record):
        message = super().format(record)
        if not sys.stdout.isatty():
            return message
        for level, color in LEVEL_COLORS:
            if record.levelno >= level:
                return f"{color}{message}{RESET}"
        return message

def get_logger(name: str) -> logging.Logger:
    """Named logger; the first call attaches file and console handlers to the root."""
    global _logger_initialized
    if not _logger_initialized:
        _logger_initialized = True
        os.makedirs(log_dir, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, 'perceptron.log'),
            maxBytes=1000000,
            backupCount=5,
            delay=True  # Defer file opening until first log
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(LevelColorFormatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)

    return logging.getLogger(name)

USE_ANSI = sys.stdout.isatty()
class PrettyPrinter:
    """Console helpers for demo scripts and module smoke runs."""
    @classmethod
    def _style(cls, text, *styles):
        if not USE_ANSI:
            return text
        return "".join(STYLES[s] for s in styles) + f"{text}{RESET}"

    @classmethod
    def status(cls, label, message, status="info"):
        icons = {
            'info': ('blue', 'ℹ'),
            'success': ('green', '✔'),
            'warning': ('yellow', '⚠'),
            'error': ('red', '✖'),
        }
        color, icon = icons.get(status, ('white', '○'))
        print(f"{cls._style(icon, color)} {cls._style(f'[{label}]', 'bold', color)} {message}")

    @classmethod
    def section_header(cls, text):
        rule = "═" * 32
        print("\n" + cls._style(f"╒{rule}", 'bold', 'magenta'))
        print(cls._style(f" {text.upper()}", 'bold', 'magenta'))
        print(cls._style(f"╘{rule}", 'bold', 'magenta'))

    @classmethod
    def table(cls, headers, rows, title=None):
        widths = [max(len(str(cell)) for cell in column) for column in zip(headers, *rows)]
        inner = sum(widths) + 3 * (len(widths) - 1)

        def line(cells, *styles):
            padded = [cls._style(str(c).ljust(w), *styles) for c, w in zip(cells, widths)]
            return cls._style("│ ", 'blue') + cls._style(" │ ", 'blue').join(padded) + cls._style(" │", 'blue')

        if title:
            print(cls._style(f"╒{'═' * (inner + 2)}╕", 'bold', 'blue'))
            print(cls._style(f"│ {title.center(inner)} │", 'bold', 'blue'))
        print(line(headers, 'bold', 'white', 'bg_blue'))
        print(cls._style(f"├{'┼'.join('─' * (w + 2) for w in widths)}┤", 'blue'))
        for row in rows:
            print(line(row, 'cyan'))
        print(cls._style(f"╘{'╧'.join('═' * (w + 2) for w in widths)}╛", 'bold', 'blue'))

    @classmethod
    def progress_bar(cls, current, total, label="Progress", width=50):
        fraction = current / total if total else 1.0
        filled = int(width * fraction)
        bar = cls._style("█" * filled, 'green') + cls._style("░" * (width - filled), 'dim')
        print(f"{label}: [{bar}] {cls._style(f'{fraction:.0%}', 'bold', 'yellow')} ({current}/{total})")
