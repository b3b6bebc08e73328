# application/resolver_config.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ResolverConfig:
    # Apply X-Forwarded-Path-Prefix in front of every resolved path.
    enable_path_prefix: bool = False
