"""Mini README: Core package initialiser for the vendingsim simulator.

The package is split into ``inventory`` (selections, items and the seed
loader), ``machine`` (the deposit/vend state) and ``interface`` (the FastAPI
control panel). Only the logging helper is re-exported here so importing the
package stays free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
