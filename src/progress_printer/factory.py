"""Shared defaults for building progress printers."""
import os
from typing import Any, Callable, Optional, TextIO, TypeVar

from progress_printer.printer import ProgressPrinter

T = TypeVar('T')

SILENT_ENV_VAR = 'PROGRESS_PRINTER_SILENT'
TRUTHY = ('1', 'true', 'yes')


class PrinterFactory:
    """Builds printers that share a default sink and silence setting.

    Turning silence on affects every printer created afterwards, which
    keeps test runs quiet without touching call sites.
    """

    def __init__(self, silent: bool = False, out: Optional[TextIO] = None):
        self.silent = silent
        self.out = out

    @classmethod
    def from_env(cls, environ=None) -> 'PrinterFactory':
        """Create a factory that is silent when PROGRESS_PRINTER_SILENT is set."""
        if environ is None:
            environ = os.environ
        value = environ.get(SILENT_ENV_VAR, '')
        return cls(silent=value.strip().lower() in TRUTHY)

    def silence(self, silent: bool = True) -> None:
        self.silent = silent

    def create(self, **kwargs: Any) -> ProgressPrinter:
        """Create a printer, filling in this factory's out and silent defaults."""
        kwargs.setdefault('out', self.out)
        kwargs.setdefault('silent', self.silent)
        return ProgressPrinter(**kwargs)

    def wrap(self, func: Callable[[ProgressPrinter], T], **kwargs: Any) -> T:
        """Create a printer and run func between its start() and finish()."""
        return self.create(**kwargs).wrap(func)


# Default factory used by call sites that don't build their own
printers = PrinterFactory.from_env()
