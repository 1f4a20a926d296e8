from .loader import load_config
from .models import DirDigestConfig, HashingConfig

__all__ = [
    "DirDigestConfig",
    "HashingConfig",
    "load_config",
]
