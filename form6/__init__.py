"""
Form6 Filing Explorer
=====================

Extraction of pipeline financial and operational data from FERC Form 6
XBRL filings.

Source code organization:
- business/    - Valuation calculator (cost, income and market approaches)
- core/        - Exceptions and shared type aliases
- extraction/  - Tag taxonomy, financial summary and detail report
- parsers/     - XBRL instance parsing and current-context resolution
- storage/     - Filing enumeration and company-name search
- utils/       - Shared utilities (config, logging)
- service.py   - Facade used by the web layer
- cli.py       - Command line interface
"""

__version__ = "0.1.0"
