"""Color tokens for the global UI theme.

野外采集场景以浅色界面为主，主色取偏绿的青色，便于户外强光下辨识。
"""


class Colors:
    """主题配色（浅色）。"""

    # 主题色
    PRIMARY = "#0F766E"         # 主色：青绿 700
    PRIMARY_DARK = "#115E59"    # 深主色：青绿 800
    PRIMARY_LIGHT = "#99F6E4"   # 浅主色：青绿 200

    # 背景
    BG_MAIN = "#F4F7F6"         # 应用主背景：带轻微绿调的灰白
    BG_CARD = "#FFFFFF"
    BG_CARD_HOVER = "#F0FDFA"
    BG_SELECTED = "#CCFBF1"
    BG_INPUT = "#FFFFFF"
    BG_DISABLED = "#E5E7EB"
    BG_HEADER = "#FAFAFA"

    # 文字
    TEXT_PRIMARY = "#111827"
    TEXT_SECONDARY = "#6B7280"
    TEXT_DISABLED = "#9CA3AF"
    TEXT_HINT = "#9CA3AF"
    TEXT_ON_PRIMARY = "#FFFFFF"

    # 边框
    BORDER_LIGHT = "#E5E7EB"
    BORDER_NORMAL = "#D1D5DB"
    BORDER_FOCUS = "#0F766E"

    # 状态色
    SUCCESS = "#16A34A"
    WARNING = "#F97316"
    ERROR = "#DC2626"
    INFO = "#0EA5E9"
