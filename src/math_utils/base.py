"""Base classes shared by Math Utils components."""

import logging


class BaseComponent:
    """Base class that attaches a module-scoped logger to each component."""

    def __init__(self) -> None:
        """Initialise the component logger."""
        cls = type(self)
        self.logger = logging.getLogger(f"{cls.__module__}.{cls.__qualname__}")
