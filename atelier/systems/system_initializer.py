"""
system_initializer.py
---------------------
Abstract base class for system initialization.
Separates room setup logic from scene construction.
"""

from abc import ABC, abstractmethod


class SystemInitializer(ABC):
    """
    Base class for building a room's orchestration systems.

    Subclasses define which components to create and how to wire them together.
    """

    def __init__(self, events):
        """
        Args:
            events: EventManager shared by every component built
        """
        self.events = events

    @abstractmethod
    def initialize(self):
        """
        Build every component for this configuration.

        Returns:
            GameContext holding the constructed, not yet wired, components

        Implementation should:
        1. Create component instances
        2. Validate configuration (raise ConfigurationError on gaps)
        3. Return them bundled in a GameContext
        """
        pass
