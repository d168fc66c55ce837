"""Abstract base for Math Utils interfaces."""

from abc import ABC, abstractmethod

from math_utils.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Common contract for every interface."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Start the interface."""
