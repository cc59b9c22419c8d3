"""
Main Application Window
=======================
3D view of the scene on the right, inspector on the left.
"""
from PySide6.QtWidgets import QMainWindow, QSplitter
from PySide6.QtCore import Qt

from pointfield.app.application import Application
from pointfield.view.widgets.inspector import InspectorPanel
from pointfield.view.widgets.plot_3d import PyVistaWidget

VISIBLE_APP_NAME = "Point Field"


class MainWindow(QMainWindow):
    def __init__(self, app: Application) -> None:
        super().__init__()
        self.app = app

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 800)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        self.inspector = InspectorPanel(app)
        splitter.addWidget(self.inspector)

        self.visualizer = PyVistaWidget(app)
        splitter.addWidget(self.visualizer)

        splitter.setSizes([300, 900])

        self.visualizer.update_scene()
