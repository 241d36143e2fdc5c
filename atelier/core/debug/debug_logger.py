"""
debug_logger.py
---------------
Console logger for the room orchestration.

Every component logs through the static DebugLogger under a category
("activity", "camera", "placement", ...). Categories and the verbosity
threshold are switched in LoggerConfig or at startup via configure().

Line format:
    [12:00:01] [ActivityController][STATE] Phase idle -> awaiting_arrival
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Which categories are audible, and how loud."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE
    STREAM = None       # None -> sys.stdout at write time

    CATEGORIES = {
        # Runtime
        "system": True,
        "scene": True,
        "loading": False,
        "input": False,
        "loop": False,

        # Room orchestration
        "game_state": True,
        "activity": True,
        "camera": True,
        "placement": True,
        "item": True,

        "event_manager": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

# tag -> (color, severity)
TAG_STYLES = {
    "INIT": (Colors.WHITE, "INFO"),
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}

STATUS_COLORS = {"OK": Colors.GREEN, "LOADING": Colors.CYAN, "FAIL": Colors.RED}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; never instantiated."""

    LINE_LENGTH = 59
    ENTRY_COLUMN = 30

    @staticmethod
    def configure(level: str = None, categories: dict = None,
                  enabled: bool = None, stream=None):
        """
        Adjust logging at startup.

        Args:
            level: One of LEVEL_VALUES; unknown names are ignored
            categories: {category: bool} overrides merged into the defaults
            enabled: Master switch
            stream: File-like target (defaults to stdout)
        """
        if level is not None and level.upper() in LEVEL_VALUES:
            LoggerConfig.LOG_LEVEL = level.upper()
        if categories:
            LoggerConfig.CATEGORIES.update(categories)
        if enabled is not None:
            LoggerConfig.ENABLE_LOGGING = enabled
        if stream is not None:
            LoggerConfig.STREAM = stream

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _write(text: str):
        print(text, file=LoggerConfig.STREAM or sys.stdout)

    @staticmethod
    def _caller_name(depth: int = 3) -> str:
        """Class of the calling method, or the CamelCased module name."""
        try:
            frame = sys._getframe(depth)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars and isinstance(local_vars["cls"], type):
            return local_vars["cls"].__name__

        module = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1][:-3]
        return "".join(part.capitalize() for part in module.split("_"))

    @staticmethod
    def is_enabled(category: str, severity: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        # Errors surface even from muted categories
        if severity != "ERROR" and not LoggerConfig.CATEGORIES.get(category, False):
            return False
        threshold = LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, LEVEL_VALUES["INFO"])
        return LEVEL_VALUES[severity] <= threshold

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        color, severity = TAG_STYLES[tag]
        if not DebugLogger.is_enabled(category, severity):
            return
        stamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._caller_name()
        DebugLogger._write(f"{color}[{stamp}] [{source}][{tag}] {msg}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Startup line. An empty message prints a spacer."""
        if not msg.strip():
            if LoggerConfig.ENABLE_LOGGING:
                DebugLogger._write("")
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """Accepted transition."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        """Something happened in the room (placement, activation, arrival)."""
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "system"):
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        """Rejected request or protocol violation."""
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        """Configuration or construction failure."""
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        DebugLogger._write(f"\n{Colors.WHITE}{rule}\n{heading}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Dotted status line: '> Module ........ [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        label = f"> {module}"
        badge = f"[{status}]"
        pad = max(DebugLogger.ENTRY_COLUMN - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(label) - pad - 1 - len(badge), 1)
        color = STATUS_COLORS.get(status.upper(), Colors.WHITE)
        DebugLogger._write(
            f"{Colors.WHITE}{label}{' ' * pad}{'.' * dots} {color}{badge}{Colors.RESET}"
        )

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not LoggerConfig.ENABLE_LOGGING:
            return
        DebugLogger._write(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")
