from __future__ import annotations
import os

from PySide6.QtGui import QImage


def ensure_png_suffix(path: str) -> str:
    # nội dung luôn là PNG nên đuôi khác .png cũng bị nối thêm .png
    return path if os.path.splitext(path)[1].lower() == ".png" else path + ".png"


def write_png(image: QImage, path: str) -> str:
    """Ghi QImage ra file PNG. Lỗi ghi -> OSError. Trả về đường dẫn đã ghi."""
    path = ensure_png_suffix(path)
    folder = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(folder):
        raise FileNotFoundError(f"Thư mục không tồn tại: {folder}")
    if image.isNull():
        raise OSError("Ảnh rỗng, không có gì để lưu")
    if not image.save(path, "PNG"):
        raise OSError(f"Không ghi được file: {path}")
    return path
