import datetime
import sys
import traceback
import os
from colorama import Fore, Style, init

# Initialize Colorama
init(autoreset=True)

LOG_DIR = os.path.join(os.path.expanduser("~"), ".gemsearch", "logs")
os.makedirs(LOG_DIR, exist_ok=True)

class Logger:
    def __init__(self, verbose=False):
        self.verbose = verbose
        self.log_file = os.path.join(
            LOG_DIR,
            f"gemsearch_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )

    def _get_timestamp(self):
        return datetime.datetime.now().strftime("%H:%M:%S")

    def _log(self, level, message, color, stream=None, prefix="", echo=True):
        # streams are looked up per call so redirected stdout/stderr are honoured
        if stream is None:
            stream = sys.stdout
        timestamp = self._get_timestamp()
        if echo:
            print(f"{color}{prefix}{message}{Style.RESET_ALL}", file=stream)

        with open(self.log_file, "a") as f:
            f.write(f"[{timestamp}] [{level}] {message}\n")

    def info(self, message):
        self._log("INFO", message, Fore.CYAN)

    def warning(self, message):
        self._log("WARNING", message, Fore.YELLOW, stream=sys.stderr,
                  prefix=f"{Style.BRIGHT}⚠ {Style.RESET_ALL}{Fore.YELLOW}")

    def error(self, message):
        self._log("ERROR", message, Fore.RED, stream=sys.stderr)

    def debug(self, message):
        self._log("DEBUG", message, Fore.WHITE + Style.DIM, echo=self.verbose)

    # -------- Exception logging --------
    def exception(self, exc_type, exc_value, exc_traceback):
        self.error(f"An unhandled exception occurred: {exc_value}")
        formatted_lines = traceback.format_exception(exc_type, exc_value, exc_traceback)
        for line in formatted_lines:
            for sub_line in line.splitlines():
                if sub_line.strip():
                    self._log("TRACEBACK", f">> {sub_line}", Fore.RED, stream=sys.stderr, echo=self.verbose)


# ---------------- Helper ----------------
logger = Logger()
