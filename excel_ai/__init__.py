"""
Sinhala Excel AI
Natural-language (Sinhala/English) requests to styled Excel workbooks
"""

__version__ = "1.0.0"
