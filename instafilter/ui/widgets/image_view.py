"""
Image view showing the processed result.
"""

from typing import Optional

import numpy as np
from PySide6.QtWidgets import QLabel, QSizePolicy
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtCore import Qt


def array_to_qimage(pixels: np.ndarray) -> QImage:
    """Copy an 8-bit (height, width, 3|4) array into a QImage."""
    height, width, nchannels = pixels.shape
    fmt = QImage.Format.Format_RGBA8888 if nchannels == 4 else QImage.Format.Format_RGB888
    data = np.ascontiguousarray(pixels[..., :4] if nchannels >= 4 else pixels[..., :3])
    image = QImage(data.data, width, height, data.strides[0], fmt)
    # QImage does not own the numpy buffer
    return image.copy()


class ImageView(QLabel):
    """Scales the current image to fit, keeping aspect ratio."""

    PLACEHOLDER = "Нет изображения\nНажмите «Открыть…», чтобы выбрать фото"

    def __init__(self):
        super().__init__()
        self._pixmap: Optional[QPixmap] = None
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self.setMinimumSize(320, 240)
        self.setText(self.PLACEHOLDER)

    def set_pixels(self, pixels: np.ndarray) -> None:
        self._pixmap = QPixmap.fromImage(array_to_qimage(pixels))
        self._update_scaled()

    def has_image(self) -> bool:
        return self._pixmap is not None

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_scaled()

    def _update_scaled(self) -> None:
        if self._pixmap is None:
            return
        self.setPixmap(
            self._pixmap.scaled(
                self.size(),
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
