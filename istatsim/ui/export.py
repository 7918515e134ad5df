"""
Export of the readout panel to PNG or PDF.

The panel is rasterized at a fixed scale (2x by default) and either saved
directly or placed on a single PDF page sized to the image. Failures are
logged and reported as None; nothing is raised to the UI.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QMarginsF, QPoint, QRectF, QSize, QSizeF, Qt, QTimer
from PySide6.QtGui import QImage, QPageSize, QPainter, QPdfWriter

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("png", "pdf")


def render_widget(widget, scale: float = 2.0) -> Optional[QImage]:
    """Paint a widget into an image at `scale` times its on-screen size."""
    if widget is None or widget.isHidden():
        return None
    size = widget.size()
    if size.isEmpty():
        return None

    image = QImage(
        QSize(round(size.width() * scale), round(size.height() * scale)),
        QImage.Format_ARGB32,
    )
    image.setDevicePixelRatio(scale)
    image.fill(Qt.white)

    painter = QPainter(image)
    try:
        widget.render(painter, QPoint())
    finally:
        painter.end()
    return image


def save_png(image: QImage, path) -> bool:
    return image.save(str(path), "PNG")


def save_pdf(image: QImage, path) -> bool:
    """Write a one-page PDF whose page matches the image dimensions."""
    writer = QPdfWriter(str(path))
    writer.setPageSize(QPageSize(
        QSizeF(image.width(), image.height()),
        QPageSize.Unit.Point,
        "",
        QPageSize.SizeMatchPolicy.ExactMatch,
    ))
    writer.setPageMargins(QMarginsF(0, 0, 0, 0))

    painter = QPainter()
    if not painter.begin(writer):
        return False
    painter.drawImage(QRectF(0, 0, writer.width(), writer.height()), image)
    painter.end()
    return True


def export_panel(widget, filename: str, fmt: str, export_dir=".",
                 scale: float = 2.0) -> Optional[Path]:
    """
    Capture `widget` and write it to export_dir/filename.

    Returns the written path, or None if there was nothing to capture or
    the file could not be written.
    """
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")

    image = render_widget(widget, scale)
    if image is None:
        logger.info("Nothing to export, readout panel not rendered")
        return None

    try:
        os.makedirs(export_dir, exist_ok=True)
    except OSError as e:
        logger.warning("Cannot create export directory %s: %s", export_dir, e)
        return None
    path = Path(export_dir) / filename
    ok = save_png(image, path) if fmt == "png" else save_pdf(image, path)
    if not ok:
        logger.warning("Failed to write %s", path)
        return None
    logger.info("Exported %s (%dx%d)", path, image.width(), image.height())
    return path


def schedule_export(widget, filename: str, fmt: str, config,
                    on_done: Optional[Callable] = None):
    """Export after config.capture_delay_ms so pending repaints land first."""
    def run():
        path = export_panel(widget, filename, fmt, config.export_dir, config.export_scale)
        if on_done is not None:
            on_done(path)

    QTimer.singleShot(config.capture_delay_ms, run)
