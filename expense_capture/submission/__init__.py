"""
Remote form submission mapping.
"""

from .form_payload import DEFAULT_FORM_URL, FormFieldMap, build_form_payload, load_form_map

__all__ = ["DEFAULT_FORM_URL", "FormFieldMap", "build_form_payload", "load_form_map"]
