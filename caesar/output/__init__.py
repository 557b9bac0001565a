"""
Caesar Output Module
=====================

Console display and report generation for CaesarLab results.
"""

from caesar.output.console import CaesarConsoleOutput
from caesar.output.report import CaesarReportGenerator

__all__ = [
    "CaesarConsoleOutput",
    "CaesarReportGenerator",
]
