"""Generate markdown documentation for the functions and modules of a Rhai engine."""

from .engine import JsonMetadataExporter, MetadataExporter
from .errors import AutodocsError, MetadataError, PreProcessingError
from .models import ModuleDocumentation
from .options import Options, options
from .ordering import FunctionOrder
from .typenames import EngineTypeNames

__all__ = [
    "AutodocsError",
    "EngineTypeNames",
    "FunctionOrder",
    "JsonMetadataExporter",
    "MetadataError",
    "MetadataExporter",
    "ModuleDocumentation",
    "Options",
    "PreProcessingError",
    "options",
]
