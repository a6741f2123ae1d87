"""Client for a BME680 sensor TCP server, with socket I/O helpers."""

__version__ = "0.1.0"
__all__ = ["client", "netio"]