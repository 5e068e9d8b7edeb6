"""Size tokens for the global UI theme."""


class Sizes:
    """统一的尺寸与字号定义。"""

    # 圆角
    RADIUS_SMALL = 4
    RADIUS_MEDIUM = 8
    RADIUS_LARGE = 12

    # 间距
    SPACING_SMALL = 8
    SPACING_MEDIUM = 12
    SPACING_LARGE = 16

    # 内边距
    PADDING_SMALL = 8
    PADDING_MEDIUM = 12
    PADDING_LARGE = 16

    # 字号
    FONT_SMALL = 11
    FONT_NORMAL = 13
    FONT_LARGE = 15
    FONT_TITLE = 17

    # 控件高度
    INPUT_HEIGHT = 32
    BUTTON_HEIGHT = 32
    TOOLBAR_HEIGHT = 48

    # 底部弹出面板
    BOTTOM_SHEET_HEIGHT = 160
