"""Multi-criteria decision making: rescale named variables and select the best alternative."""

__version__ = "0.0.3"

__all__ = ["problem", "scaling", "variables", "vector"]