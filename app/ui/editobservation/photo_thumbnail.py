"""照片缩略图：用 Pillow 读取并缩放照片，再转换为 QPixmap 供照片字段显示"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps
from PyQt6 import QtGui

from engine.utils.logging.logger import log_warn


def load_thumbnail(path: str, size: int) -> Optional[QtGui.QPixmap]:
    """读取照片并按长边不超过 size 等比缩放；文件不存在或无法解码时返回 None。

    会按 EXIF 方向信息先旋正，手机拍摄的竖图不会横着显示。
    """
    if not path or not Path(path).is_file():
        return None

    try:
        with Image.open(path) as source:
            image = ImageOps.exif_transpose(source)
            image.thumbnail((size, size))
            rgba = image.convert("RGBA")
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        # 损坏或非图片文件：字段按“暂无照片”显示
        log_warn("[PhotoThumbnail] 无法读取照片 {}：{}", path, exc)
        return None

    data = rgba.tobytes("raw", "RGBA")
    qimage = QtGui.QImage(
        data,
        rgba.width,
        rgba.height,
        rgba.width * 4,
        QtGui.QImage.Format.Format_RGBA8888,
    )
    # QImage 不持有 data 的所有权，需深拷贝后再脱离 bytes 的生命周期
    return QtGui.QPixmap.fromImage(qimage.copy())
