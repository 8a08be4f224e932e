"""
Filter browser widget for choosing the active filter.

Displays the catalog organized by category in a tree view. Filters inside
a category keep the catalog's alphabetical order.
"""

from typing import Optional
from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QTreeWidget,
    QTreeWidgetItem,
    QLabel,
)
from PySide6.QtCore import Qt, Signal

from ...core import FilterDescriptor
from ...processing import FilterCatalog


class FilterBrowser(QWidget):
    """Browser for catalog filters."""

    # Signal: identifier of the filter the user picked
    filter_selected = Signal(str)

    def __init__(self, catalog: FilterCatalog):
        super().__init__()
        self.catalog = catalog
        self.current_filter_id: Optional[str] = None
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the filter browser UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        layout.addWidget(QLabel("Выберите фильтр"))

        self.tree = QTreeWidget()
        self.tree.setHeaderHidden(True)
        self.tree.itemClicked.connect(self._on_item_clicked)
        self._populate_tree()
        layout.addWidget(self.tree, 1)

    def _populate_tree(self) -> None:
        """Populate tree with filters organized by category."""
        self.tree.clear()
        for category, descriptors in self.catalog.by_category().items():
            category_item = QTreeWidgetItem(self.tree)
            category_item.setText(0, category.title)
            # None marks a category row
            category_item.setData(0, Qt.ItemDataRole.UserRole, None)

            for descriptor in descriptors:
                filter_item = QTreeWidgetItem(category_item)
                filter_item.setText(0, descriptor.display_name)
                filter_item.setData(0, Qt.ItemDataRole.UserRole, descriptor.identifier)
                filter_item.setToolTip(0, self._build_filter_tooltip(descriptor))

        self.tree.expandAll()

    def filter_count(self) -> int:
        """Number of selectable filter rows."""
        count = 0
        for i in range(self.tree.topLevelItemCount()):
            count += self.tree.topLevelItem(i).childCount()
        return count

    def _on_item_clicked(self, item: QTreeWidgetItem, column: int) -> None:
        """Handle tree item selection."""
        filter_id = item.data(0, Qt.ItemDataRole.UserRole)
        if filter_id is None:
            return
        self.current_filter_id = filter_id
        self.filter_selected.emit(filter_id)

    def select_filter(self, identifier: str) -> bool:
        """Select a filter row programmatically. Returns True if found."""
        for i in range(self.tree.topLevelItemCount()):
            category_item = self.tree.topLevelItem(i)
            for j in range(category_item.childCount()):
                item = category_item.child(j)
                if item.data(0, Qt.ItemDataRole.UserRole) == identifier:
                    self.tree.setCurrentItem(item)
                    self._on_item_clicked(item, 0)
                    return True
        return False

    def _build_filter_tooltip(self, descriptor: FilterDescriptor) -> str:
        """Build tooltip text for a filter."""
        tooltip = f"<b>{descriptor.display_name}</b><br>{descriptor.identifier}"
        for spec in descriptor.parameters:
            tooltip += f"<br>• {spec.title}: {spec.lower:g} – {spec.upper:g}"
        return tooltip
