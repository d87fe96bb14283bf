"""Domain layer for Scroll Selector - pure selection logic, no UI or I/O."""
