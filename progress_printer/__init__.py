from .progress import Printer, printer

__all__ = ["Printer", "printer"]
