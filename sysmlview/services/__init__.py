"""
Services for sysmlview.

High-level services:
- ViewMaterializer: Pure model + viewpoint -> view projection
- ModelIndex: Definition, owned-part and owned-state derivation
- ViewService: Async fetch-and-materialize facade over a model source
"""

from sysmlview.services.derivation import ModelIndex
from sysmlview.services.materializer import ViewMaterializer, materialize
from sysmlview.services.view_service import ViewService

__all__ = [
    "ViewMaterializer",
    "materialize",
    "ModelIndex",
    "ViewService",
]
