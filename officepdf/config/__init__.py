from .loader import load_config
from .models import (
    AutomationConfig,
    CollectorConfig,
    ConversionConfig,
    OfficePdfConfig,
    OutputConfig,
)

__all__ = [
    "AutomationConfig",
    "CollectorConfig",
    "ConversionConfig",
    "OfficePdfConfig",
    "OutputConfig",
    "load_config",
]
