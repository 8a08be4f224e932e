"""
Filter state management.

Central in-memory store for:
- The filter catalog (built once, injected)
- The active filter session
- The loaded input image and the last rendered result

Every user event (image loaded, filter selected, slider moved) ends in a
re-render through the ProcessingApplier. FilterState is its own render
target: published images are kept as ``processed_image`` and forwarded
to listeners.
"""

import logging
from typing import Any, Callable, List, Optional

from ..core import FilterDescriptor
from ..processing import FilterCatalog, FilterSession, ProcessingApplier
from .settings import Settings

logger = logging.getLogger(__name__)

RenderListener = Callable[[Any], None]


class FilterState:
    """Central state management for the application."""

    def __init__(
        self,
        catalog: FilterCatalog,
        settings: Optional[Settings] = None,
        apply_defaults_on_select: Optional[bool] = None,
    ):
        self.catalog = catalog
        self.session = FilterSession()
        self.applier = ProcessingApplier()
        self.input_image: Optional[Any] = None
        self.processed_image: Optional[Any] = None
        self._listeners: List[RenderListener] = []

        if apply_defaults_on_select is None:
            apply_defaults_on_select = settings.get_apply_defaults_on_select() if settings else True
        self.apply_defaults_on_select = apply_defaults_on_select

    # ========== Render Target ==========

    def publish(self, image: Any) -> None:
        """Receive a rendered image and notify listeners."""
        self.processed_image = image
        for listener in list(self._listeners):
            listener(image)

    def add_listener(self, listener: RenderListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RenderListener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    # ========== Events ==========

    def load_image(self, image: Any) -> Optional[Any]:
        """Use a new input image and re-render the current filter."""
        self.input_image = image
        handle = self._current_handle()
        if handle is None:
            return None
        handle.set_input_image(image)
        return self.applier.apply(self.session, handle, self)

    def select_filter(self, identifier: str) -> bool:
        """Switch filters, reset parameters to defaults and re-render. Returns success."""
        descriptor = self.catalog.get(identifier)
        handle = self.catalog.handle(identifier)
        if descriptor is None or handle is None:
            logger.warning(f"Filter not in catalog: {identifier}")
            return False

        self.session.select_filter(descriptor)
        logger.info(f"Filter selected: {identifier} ({descriptor.display_name})")

        # A selected filter always starts from a fresh engine state
        handle.reset()
        if self.input_image is not None:
            handle.set_input_image(self.input_image)
        self.applier.apply(self.session, handle, self, push_values=self.apply_defaults_on_select)
        return True

    def set_parameter(self, key: str, value: float) -> bool:
        """Store a slider value and re-render. Returns success."""
        if not self.session.set_parameter(key, value):
            return False
        handle = self._current_handle()
        if handle is not None:
            self.applier.apply(self.session, handle, self)
        return True

    # ========== Queries ==========

    @property
    def current_descriptor(self) -> Optional[FilterDescriptor]:
        return self.session.descriptor

    def has_image(self) -> bool:
        return self.input_image is not None

    def _current_handle(self):
        if self.session.filter_id is None:
            return None
        return self.catalog.handle(self.session.filter_id)
