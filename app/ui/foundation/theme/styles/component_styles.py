"""Atomic QSS snippets for reusable widgets."""

from app.ui.foundation.theme.tokens import Colors, Sizes


def button_style() -> str:
    return f"""
        QPushButton {{
            background-color: {Colors.PRIMARY};
            color: {Colors.TEXT_ON_PRIMARY};
            border: none;
            border-radius: {Sizes.RADIUS_SMALL}px;
            padding: {Sizes.PADDING_SMALL}px {Sizes.PADDING_MEDIUM}px;
            font-size: {Sizes.FONT_NORMAL}px;
            min-height: {Sizes.BUTTON_HEIGHT}px;
        }}
        QPushButton:hover {{
            background-color: {Colors.PRIMARY_DARK};
        }}
        QPushButton:disabled {{
            background-color: {Colors.BG_DISABLED};
            color: {Colors.TEXT_DISABLED};
        }}
    """


def flat_button_style() -> str:
    return f"""
        QPushButton {{
            background: transparent;
            color: {Colors.PRIMARY};
            border: 1px solid {Colors.BORDER_NORMAL};
            border-radius: {Sizes.RADIUS_SMALL}px;
            padding: {Sizes.PADDING_SMALL}px {Sizes.PADDING_MEDIUM}px;
            font-size: {Sizes.FONT_NORMAL}px;
            min-height: {Sizes.BUTTON_HEIGHT}px;
        }}
        QPushButton:hover {{
            background-color: {Colors.BG_CARD_HOVER};
            border-color: {Colors.PRIMARY};
        }}
    """


def input_style() -> str:
    return f"""
        QLineEdit, QTextEdit, QPlainTextEdit {{
            background-color: {Colors.BG_INPUT};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER_LIGHT};
            border-radius: {Sizes.RADIUS_SMALL}px;
            padding: {Sizes.PADDING_SMALL}px;
            font-size: {Sizes.FONT_NORMAL}px;
            min-height: {Sizes.INPUT_HEIGHT - 2 * Sizes.PADDING_SMALL}px;
        }}
        QLineEdit:focus, QTextEdit:focus, QPlainTextEdit:focus {{
            border: 1px solid {Colors.BORDER_FOCUS};
        }}
    """


def tree_style() -> str:
    return f"""
        QTreeWidget {{
            background-color: {Colors.BG_CARD};
            color: {Colors.TEXT_PRIMARY};
            border: none;
            border-radius: {Sizes.RADIUS_MEDIUM}px;
            padding: {Sizes.PADDING_SMALL}px;
            font-size: {Sizes.FONT_NORMAL}px;
        }}
        QTreeWidget::item {{
            padding: {Sizes.PADDING_SMALL}px;
        }}
        QTreeWidget::item:selected {{
            background-color: {Colors.BG_SELECTED};
            color: {Colors.TEXT_PRIMARY};
        }}
    """


def field_card_style() -> str:
    return f"""
        QFrame#fieldCard {{
            background-color: {Colors.BG_CARD};
            border: 1px solid {Colors.BORDER_LIGHT};
            border-radius: {Sizes.RADIUS_MEDIUM}px;
        }}
        QLabel#fieldLabel {{
            color: {Colors.TEXT_SECONDARY};
            font-size: {Sizes.FONT_SMALL}px;
        }}
    """


def toolbar_style() -> str:
    return f"""
        QToolBar {{
            background-color: {Colors.BG_HEADER};
            border-bottom: 1px solid {Colors.BORDER_LIGHT};
            min-height: {Sizes.TOOLBAR_HEIGHT}px;
            spacing: {Sizes.SPACING_SMALL}px;
        }}
        QLabel#toolbarTitle {{
            color: {Colors.TEXT_PRIMARY};
            font-size: {Sizes.FONT_TITLE}px;
            font-weight: 600;
        }}
        QLabel#toolbarSubtitle {{
            color: {Colors.TEXT_SECONDARY};
            font-size: {Sizes.FONT_SMALL}px;
        }}
    """


def bottom_sheet_style() -> str:
    return f"""
        QDialog {{
            background-color: {Colors.BG_CARD};
            border-top: 1px solid {Colors.BORDER_NORMAL};
            border-top-left-radius: {Sizes.RADIUS_LARGE}px;
            border-top-right-radius: {Sizes.RADIUS_LARGE}px;
        }}
    """


def toast_content_style() -> str:
    return f"""
        QFrame#toastContent {{
            background-color: {Colors.TEXT_PRIMARY};
            border: none;
            border-radius: {Sizes.RADIUS_MEDIUM}px;
        }}
    """


def hint_text_style() -> str:
    return f"color: {Colors.TEXT_HINT}; font-size: {Sizes.FONT_SMALL}px;"


def dialog_form_style() -> str:
    return f"""
        QDialog {{
            background-color: {Colors.BG_CARD};
        }}
        {button_style()}
        {input_style()}
    """


def global_style() -> str:
    return f"""
        QMainWindow, QStackedWidget {{
            background-color: {Colors.BG_MAIN};
        }}
        QLabel, QCheckBox, QRadioButton {{
            color: {Colors.TEXT_PRIMARY};
            font-size: {Sizes.FONT_NORMAL}px;
        }}
        QScrollArea {{
            border: none;
            background: transparent;
        }}
        {toolbar_style()}
    """
