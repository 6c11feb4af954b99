# canvas.py

from PyQt5.QtWidgets import QWidget, QMenu
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QPen, QColor, QPainter, QFont, QBrush
from typing import Optional

from config import CanvasConfig
from editor import GraphEditor
from utils_geom import to_pixels, radius_px


class GraphCanvas(QWidget):
    def __init__(self, parent=None, config: Optional[CanvasConfig] = None):
        super().__init__(parent)
        self.config = config or CanvasConfig()
        self.editor = GraphEditor(radius=self.config.vertex_radius)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setMinimumSize(200, 200)

        self.outlinePen = QPen(QColor(self.config.outline))
        self.fillBrush = QBrush(QColor(self.config.vertex_fill))
        self.markedBrush = QBrush(QColor(self.config.marked_fill))
        self.labelPen = QPen(QColor(self.config.label_color))
        self.labelFont = QFont(self.config.font_family, self.config.font_size)

    @property
    def graph(self):
        return self.editor.graph

    def _showStatus(self):
        if not self.editor.status:
            return
        try:
            self.parent().statusBar().showMessage(self.editor.status, 4000)
        except AttributeError:
            pass
        self.editor.status = ""

    def _refresh(self, changed: bool):
        if changed:
            self.update()
        self._showStatus()

    # --------------------------
    # Commands (menu / shortcuts): s, c, b, d
    # --------------------------
    def command(self, key: str):
        changed = self.editor.keyPressed(key)
        self._refresh(changed)

    # --------------------------
    # Painting (edges first so lines don't cover the circles)
    # --------------------------
    def paintEvent(self, event):
        w, h = self.width(), self.height()
        if w <= 0 or h <= 0:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(self.config.background))
        try:
            self._drawEdges(painter, w, h)
            self._drawVertices(painter, w, h)
            self._drawHelpLine(painter, w, h)
        finally:
            painter.end()

    def _drawEdges(self, painter, w, h):
        painter.setPen(self.outlinePen)
        for a, b in self.graph.getEdges():
            p1 = QPointF(*to_pixels(*self.graph.getVertex(a).getPosition(), w, h))
            p2 = QPointF(*to_pixels(*self.graph.getVertex(b).getPosition(), w, h))
            painter.drawLine(p1, p2)

    def _drawVertices(self, painter, w, h):
        r = radius_px(self.config.vertex_radius, w, h)
        dia = 2 * r
        painter.setFont(self.labelFont)
        for ref in self.graph.getVertices():
            v = self.graph.getVertex(ref)
            cx, cy = to_pixels(v.x, v.y, w, h)
            rect = QRectF(cx - r, cy - r, dia, dia)
            painter.setPen(self.outlinePen)
            painter.setBrush(self.markedBrush if ref == self.editor.markedVertex else self.fillBrush)
            painter.drawEllipse(rect)
            text = v.displayText()
            if text:
                painter.setPen(self.labelPen)
                painter.drawText(QPointF(cx + r, cy - r / 2), text)

    def _drawHelpLine(self, painter, w, h):
        marked = self.editor.markedVertex
        if marked is None or not self.graph.contains(marked):
            return
        start = QPointF(*to_pixels(*self.graph.getVertex(marked).getPosition(), w, h))
        painter.setPen(self.outlinePen)
        painter.drawLine(start, QPointF(*self.editor.pointer))

    # --------------------------
    # Events
    # --------------------------
    def mouseDoubleClickEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._refresh(self.editor.doubleClick(event.x(), event.y(), self.width(), self.height()))
        else:
            super().mouseDoubleClickEvent(event)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._refresh(self.editor.press(event.x(), event.y(), self.width(), self.height()))
        elif event.button() == Qt.RightButton:
            self._refresh(self.editor.rightPress(event.x(), event.y(), self.width(), self.height()))
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        self._refresh(self.editor.move(event.x(), event.y(), self.width(), self.height()))

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._refresh(self.editor.release())
        super().mouseReleaseEvent(event)

    def contextMenuEvent(self, event):
        # Right-click is an editing gesture; menu only via keyboard context key
        if event.reason() != event.Keyboard:
            return
        menu = QMenu(self)
        menu.addAction("Sample Graph (S)", lambda: self.command("s"))
        menu.addAction("Clear (C)", lambda: self.command("c"))
        menu.addSeparator()
        menu.addAction("BFS from Mark (B)", lambda: self.command("b"))
        menu.addAction("DFS from Mark (D)", lambda: self.command("d"))
        menu.exec_(event.globalPos())
