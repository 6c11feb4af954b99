# mainwindow.py
from PyQt5.QtWidgets import (
    QMainWindow, QStatusBar, QAction, QMessageBox, QShortcut
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence
from typing import Optional

from canvas import GraphCanvas
from config import CanvasConfig

HELP_TEXT = (
    "Double-click empty space: add vertex.  "
    "Double-click two vertices: add edge.  "
    "Right-click: remove vertex / drop mark.  "
    "S sample, C clear, B / D traverse from marked vertex."
)


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[CanvasConfig] = None):
        super().__init__()
        self.setWindowTitle("Graph Drawer")
        self.config = config or CanvasConfig()

        self.canvas = GraphCanvas(self, self.config)
        self.setCentralWidget(self.canvas)

        self.setStatusBar(QStatusBar(self))
        self.statusBar().showMessage(HELP_TEXT)

        self.createActions()
        self.createMenuBar()
        self.createShortcuts()

    def createActions(self):
        self.sampleAction = QAction("&Sample Graph", self, triggered=lambda: self.canvas.command("s"))
        self.clearAction = QAction("&Clear", self, triggered=lambda: self.canvas.command("c"))
        self.quitAction = QAction("&Quit", self, triggered=self.close)

        self.bfsAction = QAction("&Breadth-First Search", self, triggered=lambda: self.canvas.command("b"))
        self.dfsAction = QAction("&Depth-First Search", self, triggered=lambda: self.canvas.command("d"))
        self.graphInfoAction = QAction("&Graph Info", self, triggered=self.showGraphInfo)

        self.aboutAction = QAction("&About", self, triggered=self.showAbout)

    def createMenuBar(self):
        menuBar = self.menuBar()

        fileMenu = menuBar.addMenu("&File")
        fileMenu.addAction(self.sampleAction)
        fileMenu.addAction(self.clearAction)
        fileMenu.addSeparator()
        fileMenu.addAction(self.quitAction)

        traverseMenu = menuBar.addMenu("&Traverse")
        traverseMenu.addAction(self.bfsAction)
        traverseMenu.addAction(self.dfsAction)
        traverseMenu.addSeparator()
        traverseMenu.addAction(self.graphInfoAction)

        aboutMenu = menuBar.addMenu("&About")
        aboutMenu.addAction(self.aboutAction)

    def createShortcuts(self):
        QShortcut(QKeySequence("S"), self, self.sampleAction.trigger)
        QShortcut(QKeySequence("C"), self, self.clearAction.trigger)
        QShortcut(QKeySequence("B"), self, self.bfsAction.trigger)
        QShortcut(QKeySequence("D"), self, self.dfsAction.trigger)
        QShortcut(QKeySequence("I"), self, self.graphInfoAction.trigger)
        QShortcut(QKeySequence("Ctrl+Q"), self, self.quitAction.trigger)
        QShortcut(QKeySequence("F1"), self, self.aboutAction.trigger)

    def showGraphInfo(self):
        stats = self.canvas.graph.get_stats()
        self.statusBar().showMessage(
            f"Vertices: {stats['vertices']}, Edges: {stats['edges']}, Labelled: {stats['labelled']}",
            6000
        )

    def showAbout(self):
        text = f"""
        <div style='min-width:380px'>
        <h3 style='margin:0 0 6px 0'>Graph Drawer</h3>
        <div style='margin-top:4px; line-height:1.55; color:#333'>
            Draw an undirected graph and number its vertices in breadth-first or depth-first order.<br>
            {HELP_TEXT}
        </div>
        </div>
        """
        dlg = QMessageBox(self)
        dlg.setWindowTitle("About")
        dlg.setTextFormat(Qt.RichText)
        dlg.setText(text)
        dlg.setStandardButtons(QMessageBox.Ok)
        dlg.exec_()
