"""
Inspector Panel
Read-only tree of the inspectable components in the scene.
"""
from __future__ import annotations

from typing import Any

from PySide6.QtWidgets import QWidget, QVBoxLayout, QTreeWidget, QTreeWidgetItem, QLabel
from PySide6.QtCore import Qt

from pointfield.app.application import Application
from pointfield.app.inspect import inspectable_components

# Long sequences are summarized instead of listed
MAX_LISTED_ITEMS = 64


class InspectorPanel(QWidget):
    def __init__(self, app: Application, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.app = app

        layout = QVBoxLayout(self)

        title = QLabel("Inspector")
        title.setStyleSheet("font-weight: bold;")
        layout.addWidget(title)

        self.tree = QTreeWidget()
        self.tree.setColumnCount(2)
        self.tree.setHeaderLabels(["Field", "Value"])
        layout.addWidget(self.tree)

        self.refresh()

    def refresh(self) -> None:
        self.tree.clear()
        for entity_id, type_name, view in inspectable_components(self.app):
            root = QTreeWidgetItem([f"{type_name} (entity {entity_id})", ""])
            root.setFlags(root.flags() & ~Qt.ItemIsEditable)
            for name, value in view.items():
                self._add_field(root, name, value)
            self.tree.addTopLevelItem(root)
            root.setExpanded(True)
        self.tree.resizeColumnToContents(0)

    def _add_field(self, parent: QTreeWidgetItem, name: str, value: Any) -> None:
        if isinstance(value, list):
            item = QTreeWidgetItem([name, f"[{len(value)} items]"])
            for i, v in enumerate(value[:MAX_LISTED_ITEMS]):
                item.addChild(QTreeWidgetItem([str(i), str(v)]))
            if len(value) > MAX_LISTED_ITEMS:
                item.addChild(QTreeWidgetItem(["...", f"{len(value) - MAX_LISTED_ITEMS} more"]))
        else:
            item = QTreeWidgetItem([name, str(value)])
        parent.addChild(item)
