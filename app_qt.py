# app_qt.py
"""
Main Application Entry Point - Paint Brush
Khởi động bảng vẽ Paint Brush (PySide6)
"""

import sys
import logging
from pathlib import Path
from datetime import datetime

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont


# ========== LOGGING SETUP ==========
def setup_logging(log_dir="logs", level=logging.INFO):
    """Cấu hình logging cho ứng dụng"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"paint_brush_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


# ========== APPLICATION SETUP ==========
def setup_application(argv=None):
    """Cấu hình QApplication"""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv if argv is None else argv)

    # Application metadata
    app.setApplicationName("PaintBrush")
    app.setApplicationDisplayName("Paint Brush")
    app.setOrganizationName("PaintBrush")

    app.setStyle("Fusion")

    default_font = QFont("Segoe UI", 10)
    default_font.setStyleHint(QFont.SansSerif)
    app.setFont(default_font)

    return app


# ========== MAIN ==========
def main():
    logger = setup_logging()
    logger.info("Khởi động Paint Brush")

    app = setup_application()

    from paint_qt.board.window import PaintBrushWindow
    window = PaintBrushWindow()
    window.show()

    code = app.exec()
    logger.info(f"Thoát ứng dụng (code={code})")
    return code


if __name__ == "__main__":
    sys.exit(main())
