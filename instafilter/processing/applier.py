"""
Processing applier - pushes session values into a live filter and renders.

The center input is a 2D point on the engine side but a single slider in
the session: one scalar drives both coordinates.
"""

import logging
from typing import Any, Optional

from ..core import Point2D
from .engine import FilterHandle, RenderTarget, INPUT_CENTER_KEY
from .session import FilterSession

logger = logging.getLogger(__name__)


class ProcessingApplier:
    """Applies a FilterSession to the engine and publishes the result."""

    def push_values(self, session: FilterSession, handle: FilterHandle) -> int:
        """Set every supported session value on the handle. Returns count pushed."""
        supported = handle.supported_input_keys()
        pushed = 0
        for key, value in session.values().items():
            if key not in supported:
                continue
            if key == INPUT_CENTER_KEY:
                handle.set_input(key, Point2D(value, value))
            else:
                handle.set_input(key, value)
            pushed += 1
        return pushed

    def apply(
        self,
        session: FilterSession,
        handle: FilterHandle,
        render_target: RenderTarget,
        push_values: bool = True,
    ) -> Optional[Any]:
        """
        Render the session through a filter handle.

        Args:
            session: Current filter session
            handle: Live filter instance for the session's filter
            render_target: Receives the rendered image
            push_values: Set session values on the handle before rendering

        Returns:
            The published image, or None when the engine produced nothing
        """
        if push_values:
            self.push_values(session, handle)

        output = handle.render_output()
        if output is None:
            logger.debug(f"No output from {session.filter_id}; keeping previous image")
            return None

        render_target.publish(output)
        return output
