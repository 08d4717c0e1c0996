"""Demo application entry point."""
import argparse
import logging
import os
import sys

# Ensure the project root is on path when running directly
_pkg_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _pkg_dir not in sys.path:
    sys.path.insert(0, os.path.dirname(_pkg_dir))

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from switcher.services.strategies import strategy_for
from switcher.shared.logging_ import setup_logger
from switcher.shared.models import SlideDirection, StrategyKind, SwitcherConfig
from switcher.ui.switch_widget import AutoSwitchWidget

DEMO_COLORS = ["#e76f51", "#2a9d8f", "#264653", "#e9c46a"]


class DemoWindow(QWidget):
    """A headline ticker built from a few colored labels."""

    def __init__(self, config: SwitcherConfig, kind: StrategyKind):
        super().__init__()
        self.setWindowTitle(f"AutoSwitcher - {kind.value}")
        self.resize(480, 120)

        self.status = QLabel("")
        self.switcher = AutoSwitchWidget(self, config=config)
        views = []
        for i, color in enumerate(DEMO_COLORS):
            label = QLabel(f"Item {i + 1}")
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setStyleSheet(f"background: {color}; color: white; font-size: 24px;")
            views.append(label)
        self.switcher.set_views(views)
        self.switcher.set_strategy(strategy_for(config, kind))

        self.switcher.switched.connect(lambda i: self.status.setText(f"Showing item {i + 1}"))
        self.switcher.finished.connect(lambda: self.status.setText("Finished"))

        layout = QVBoxLayout(self)
        layout.addWidget(self.switcher, 1)
        layout.addWidget(self.status)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="AutoSwitcher demo")
    parser.add_argument("--strategy", choices=[k.value for k in StrategyKind], default="default")
    parser.add_argument("--interval", type=int, default=2000, help="pause between switches (ms)")
    parser.add_argument("--duration", type=int, default=500, help="animation length (ms)")
    parser.add_argument("--max-switches", type=int, default=None)
    parser.add_argument("--direction", choices=[d.value for d in SlideDirection], default="up")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main():
    """Run the demo."""
    args = parse_args()
    setup_logger(level=logging.DEBUG if args.debug else logging.INFO)

    config = SwitcherConfig(
        interval_ms=args.interval,
        duration_ms=args.duration,
        max_switches=args.max_switches,
        direction=SlideDirection(args.direction),
        auto_start=True,
    )

    app = QApplication(sys.argv[:1])
    app.setApplicationName("AutoSwitcher")

    window = DemoWindow(config, StrategyKind(args.strategy))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
