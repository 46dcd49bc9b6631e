"""Sizes, colours and the style sheet shared by every CurrencyTracker widget.

:class:`Size` and :class:`Color` members are callables: ``Size.Margin(0.5)`` returns
half a margin in pixels and ``Color.Text()`` returns the text colour of the
current theme.
"""
import enum
import logging
import os
import re

from PySide6 import QtWidgets, QtGui, QtCore

DISABLE_STYLESHEET_ENV = 'CURRENCYTRACKER_DISABLE_STYLESHEET'

#: Matches ``<Name>`` and ``<Name@1.5>`` style sheet tokens
TOKEN_RE = re.compile(r'<(?P<name>\w+)(?:@(?P<multiplier>\d+(?:\.\d+)?))?>')


class Theme(enum.StrEnum):
    Light = 'light'
    Dark = 'dark'


class Size(enum.Enum):
    """Base pixel sizes."""
    SmallText = 11.0
    MediumText = 12.0
    LargeText = 16.0
    Indicator = 4.0
    Separator = 1.0
    Margin = 18.0
    RowHeight = 34.0
    DefaultWidth = 640.0
    DefaultHeight = 480.0

    def __call__(self, multiplier=1.0):
        """Return the size times ``multiplier``, rounded to whole pixels."""
        return round(self.value * float(multiplier))


class Color(enum.Enum):
    """Theme-aware colours. Each value maps a :class:`Theme` to an RGB(A) tuple."""
    Transparent = {Theme.Light: (0, 0, 0, 0), Theme.Dark: (0, 0, 0, 0)}
    VeryDarkBackground = {Theme.Light: (245, 245, 245), Theme.Dark: (30, 30, 30)}
    DarkBackground = {Theme.Light: (220, 220, 220), Theme.Dark: (45, 45, 45)}
    Background = {Theme.Light: (190, 190, 190), Theme.Dark: (65, 65, 65)}
    LightBackground = {Theme.Light: (170, 170, 170), Theme.Dark: (85, 85, 85)}
    DisabledText = {Theme.Light: (120, 120, 120), Theme.Dark: (135, 135, 135)}
    SecondaryText = {Theme.Light: (70, 70, 70), Theme.Dark: (185, 185, 185)}
    Text = {Theme.Light: (30, 30, 30), Theme.Dark: (225, 225, 225)}
    SelectedText = {Theme.Light: (0, 0, 0), Theme.Dark: (255, 255, 255)}
    Blue = {Theme.Light: (0, 50, 100), Theme.Dark: (88, 138, 180)}
    Red = {Theme.Light: (179, 94, 94), Theme.Dark: (229, 114, 114)}
    Green = {Theme.Light: (60, 180, 125), Theme.Dark: (90, 200, 155)}
    Yellow = {Theme.Light: (233, 146, 1), Theme.Dark: (253, 166, 1)}

    def __call__(self) -> QtGui.QColor:
        return QtGui.QColor(*self.value[current_theme()])

    def qss(self) -> str:
        """The colour as a style sheet ``rgba()`` value."""
        return rgba(self())


def current_theme() -> Theme:
    """The configured theme. Unknown values fall back to dark."""
    from ..settings import lib
    try:
        return Theme(lib.settings['theme'])
    except ValueError:
        return Theme.Dark


def rgba(color: QtGui.QColor) -> str:
    r, g, b, a = color.getRgb()
    return f'rgba({r},{g},{b},{a})'


def category_color(category: str) -> QtGui.QColor:
    """Return the configured colour of a category, or the text colour when unset or invalid."""
    from ..settings import lib
    color = QtGui.QColor(lib.settings.category_color(category) or '')
    if not color.isValid():
        return Color.Text()
    return color


def init_stylesheet() -> str:
    """Read ``config/stylesheet.qss`` and expand its tokens.

    ``<Text>`` becomes the colour :attr:`Color.Text` and ``<Margin@0.5>`` becomes
    ``Size.Margin(0.5)``.

    Raises:
        FileNotFoundError: If the style sheet template is missing.
        KeyError: If a token names no colour or size.
        RuntimeError: If a malformed token is left over after expansion.
    """
    from ..settings import lib
    path = lib.settings.stylesheet_path
    if not os.path.isfile(path):
        raise FileNotFoundError(f'Style sheet file not found: {path}')

    with open(path, 'r', encoding='utf-8') as f:
        template = f.read()

    def expand(match):
        name, multiplier = match.group('name'), match.group('multiplier')
        if multiplier is not None:
            if name not in Size.__members__:
                raise KeyError(f'Unknown size token: {match.group(0)}')
            return str(Size[name](multiplier))
        if name not in Color.__members__:
            raise KeyError(f'Unknown colour token: {match.group(0)}')
        return Color[name].qss()

    qss = TOKEN_RE.sub(expand, template)
    if re.search(r'<[^<>\s]+>', qss):
        raise RuntimeError('The style sheet has unexpanded tokens')
    return qss


def apply_theme() -> None:
    """Expand and set the application style sheet.

    Setting ``CURRENCYTRACKER_DISABLE_STYLESHEET`` to ``1`` skips styling.
    """
    app = QtWidgets.QApplication.instance()
    if not app:
        raise RuntimeError('apply_theme() must be called after a QApplication is initiated.')

    if os.environ.get(DISABLE_STYLESHEET_ENV, '').lower() in ('1', 'true', 'yes'):
        logging.warning('Style sheet disabled by environment variable.')
        return

    app.setStyleSheet(init_stylesheet())


class RoundedRowDelegate(QtWidgets.QStyledItemDelegate):
    """Paints the selected row as a single pill spanning all of its cells."""

    def paint(self, painter: QtGui.QPainter, option: QtWidgets.QStyleOptionViewItem,
              index: QtCore.QModelIndex) -> None:
        if option.state & QtWidgets.QStyle.State_Selected:
            radius = Size.Indicator(1.5)
            rect = QtCore.QRectF(option.rect)
            column, last = index.column(), index.model().columnCount() - 1

            painter.save()
            painter.setPen(QtCore.Qt.NoPen)
            painter.setBrush(Color.Background())
            painter.setRenderHint(QtGui.QPainter.Antialiasing, True)

            # round only the outer ends of the row
            left = 0 if column == 0 else -radius
            right = 0 if column == last else radius
            painter.setClipRect(rect)
            painter.drawRoundedRect(rect.adjusted(left, 0, right, 0), radius, radius)
            painter.restore()

        super().paint(painter, option, index)
