"""Clicker — headless entry point.

Usage: python main.py SCRIPT_FILE
"""
import sys
from datetime import datetime
from pathlib import Path

from PySide6.QtCore import QCoreApplication, QTimer

from clicker.core.injector import InjectorUnavailable
from clicker.core.player import ScriptPlayer
from clicker.core.settings_manager import SettingsManager

BASE_DIR = Path(__file__).parent


def print_log(level: str, message: str) -> None:
    """Print a timestamped, level-tagged log entry."""
    ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    print(f"[{ts}] [{level.upper():7}] {message}", flush=True)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) < 2:
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        return 2

    try:
        text = Path(argv[1]).read_text(encoding="utf-8")
    except OSError as exc:
        print_log("ERROR", f"Cannot read {argv[1]!r}: {exc}")
        return 1
    if not text.strip():
        print_log("WARNING", "Script is empty")
        return 0

    app = QCoreApplication(argv)
    app.setApplicationName("Clicker")
    app.setApplicationVersion("0.1.0")

    settings = SettingsManager(BASE_DIR / "settings.ini")
    try:
        player = ScriptPlayer(settings)
    except InjectorUnavailable as exc:
        print_log("ERROR", str(exc))
        return 1

    player.log_message.connect(print_log)
    player.status_changed.connect(lambda status: app.quit() if status == "stopped" else None)
    QTimer.singleShot(0, lambda: player.play(text))

    code = app.exec()
    player.shutdown()
    return code


if __name__ == "__main__":
    sys.exit(main())
