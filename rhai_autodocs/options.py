"""Options used to configure documentation generation."""

from __future__ import annotations

import logging

from .engine import MetadataExporter
from .errors import AutodocsError, MetadataError
from .generators import generate_module_documentation
from .models import ModuleDocumentation, ModuleMetadata
from .ordering import FunctionOrder
from .typenames import DEFAULT_TYPE_NAMES, EngineTypeNames

log = logging.getLogger(__name__)

ROOT_NAMESPACE = "global"


class Options:
    """Documentation settings, configured fluently:

        docs = (
            options()
            .include_standard_packages(False)
            .order_with(FunctionOrder.BY_INDEX)
            .generate(engine)
        )
    """

    def __init__(self):
        self.order = FunctionOrder.ALPHABETICAL
        self.standard_packages = False
        self.engine_type_names = DEFAULT_TYPE_NAMES

    def include_standard_packages(self, include_standard_packages: bool) -> Options:
        """Include the standard package functions and modules in the documentation."""
        self.standard_packages = include_standard_packages
        return self

    def order_with(self, order: FunctionOrder) -> Options:
        """Order functions in a specific way, see FunctionOrder."""
        self.order = order
        return self

    def type_names(self, type_names: EngineTypeNames) -> Options:
        """Use the engine's own concrete names for its built-in types."""
        self.engine_type_names = type_names
        return self

    def generate(self, engine: MetadataExporter) -> ModuleDocumentation:
        """Generate documentation for everything registered in `engine`.

        Raises:
            MetadataError: metadata could not be exported or decoded
            PreProcessingError: functions could not be ordered
        """
        try:
            json_fns = engine.gen_fn_metadata_to_json(self.standard_packages)
        except AutodocsError:
            raise
        except Exception as e:
            raise MetadataError(str(e)) from e

        return self.generate_from_metadata(ModuleMetadata.from_json(json_fns))

    def generate_from_metadata(self, metadata: ModuleMetadata) -> ModuleDocumentation:
        """Generate documentation from metadata already decoded."""
        log.debug("Generating documentation ordered %s", self.order.value)
        return generate_module_documentation(
            ROOT_NAMESPACE, metadata, self.order, self.engine_type_names
        )


def options() -> Options:
    """Create new options used to configure docs generation."""
    return Options()
