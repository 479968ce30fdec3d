"""API controllers package."""

from .app_controller import AppController
from .terms_controller import TermsController

__all__ = [
    "AppController",
    "TermsController",
]
