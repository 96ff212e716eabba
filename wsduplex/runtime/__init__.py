"""Runtime package.

Keep this module dependency-light: importing `wsduplex.runtime.*` in unit
tests should not bind sockets or configure global logging.
"""

__all__: list[str] = []
