"""
FieldKit: consistency checks for component field structure documents.

A field structure document lists configurable inputs (text, textarea, select,
colorpicker, switch, file, html) with multi-language labels, opaque validation
rule strings, and a default_data map holding a default for every field.

Main Features:
- Typed field definitions loaded from JSON
- Aggregated validation: every problem is reported in one pass
- Configurable label language policy
- Rich CLI output or JSON reports

CLI Usage:
    $ fieldkit validate fields.json
    $ fieldkit show fields.json --language en
    $ python -m fieldkit validate fields.json
"""

from .FieldKit import app
from .schema import FieldStructureDocument, ValidationPolicy, ValidationResult, load_document, validate

__version__ = "0.1.0"

__all__ = [
    "FieldStructureDocument",
    "ValidationPolicy",
    "ValidationResult",
    "app",
    "load_document",
    "validate",
]
