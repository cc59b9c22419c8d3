"""
3D Visualization Widget (PyVista Wrapper)
"""
from __future__ import annotations

from typing import Optional
import logging

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor

from pointfield.app.application import Application
from pointfield.view.renderer import InstancedRenderer

logger = logging.getLogger(__name__)


class PyVistaWidget(QWidget):
    def __init__(self, app: Application, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.app = app

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()
        self._renderer = InstancedRenderer(self.plotter, app.meshes)

    def update_scene(self) -> None:
        self._renderer.draw(self.app.scene)
        self.plotter.reset_camera()
        self.plotter.render()

    def _init_plotter(self) -> None:
        self.plotter.set_background("white")
        self.plotter.add_axes()
        self.plotter.view_isometric()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
