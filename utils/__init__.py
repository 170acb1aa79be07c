"""
write-bench Utilities
Console output helpers shared by the benchmark engine and the CLI.

Jobs run on worker threads, so every helper writes its whole line while
holding a module lock.
"""

import sys
import threading

# ANSI color codes
COLORS = {
    "BLUE": "\033[94m",
    "CYAN": "\033[96m",
    "GREEN": "\033[92m",
    "YELLOW": "\033[93m",
    "RED": "\033[91m",
    "BOLD": "\033[1m",
    "ENDC": "\033[0m",
}

_output_lock = threading.Lock()


def color_text(text, color_name):
    """Apply color to text if output is a terminal"""
    if sys.stdout.isatty() and color_name in COLORS:
        return f"{COLORS[color_name]}{text}{COLORS['ENDC']}"
    return text


def _emit(line=""):
    with _output_lock:
        print(line, flush=True)


def print_header(title):
    """Print a formatted header with separators"""
    separator = "#" * 60
    with _output_lock:
        print()
        print(color_text(separator, "BLUE"))
        print(color_text(f"# {title.center(56)} #", "BOLD"))
        print(color_text(separator, "BLUE"))
        print(flush=True)


def print_section(title):
    """Print a section separator"""
    separator = "=" * 60
    with _output_lock:
        print()
        print(color_text(separator, "GREEN"))
        print(color_text(f" {title} ", "BOLD"))
        print(color_text(separator, "GREEN"))
        print(flush=True)


def print_warning(message):
    """Print a warning message"""
    _emit(color_text(f"! WARNING: {message}", "YELLOW"))


def print_error(message):
    """Print an error message"""
    _emit(color_text(f"! ERROR: {message}", "RED"))


def print_info(message):
    """Print an informational message"""
    _emit(color_text(f"* {message}", "CYAN"))


def print_success(message):
    """Print a success message"""
    _emit(color_text(f"✓ {message}", "GREEN"))


def print_bullet(message):
    """Print a bullet point"""
    _emit(color_text(f"• {message}", "ENDC"))
