"""Configuration management for nucgrep."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from loguru import logger

from .core.alphabet import validate_symbols
from .core.revcomp import reverse_complement
from .exceptions import ConfigurationError


class ReverseComplementMode(Enum):
    """Which orientations of the pattern are searched."""
    OFF = "off"
    ALSO = "also"
    ONLY = "only"
    
    @classmethod
    def from_flags(cls, reverse_complement: bool = False, only: bool = False) -> "ReverseComplementMode":
        """Resolve the -r / -R command-line pair into one mode."""
        if only:
            return cls.ONLY
        if reverse_complement:
            return cls.ALSO
        return cls.OFF
    
    @classmethod
    def parse(cls, value) -> "ReverseComplementMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ALSO if value else cls.OFF
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigurationError(
                f"Invalid reverse complement mode {value!r} (choose from {choices})",
                parameter="reverse_complement_mode"
            ) from None
    
    @property
    def searches_forward(self) -> bool:
        return self is not ReverseComplementMode.ONLY
    
    @property
    def searches_reverse(self) -> bool:
        return self is not ReverseComplementMode.OFF


@dataclass(frozen=True)
class ScanConfig:
    """Scan configuration settings."""
    
    pattern: str
    allowance: int = 0
    case_insensitive: bool = False
    reverse_complement_mode: ReverseComplementMode = ReverseComplementMode.OFF
    headers_only: bool = False
    strict: bool = False
    reverse_pattern: Optional[str] = field(default=None, init=False, compare=False)
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.pattern, str) or not self.pattern:
            raise ConfigurationError("Pattern must be a non-empty string", parameter="pattern")
        validate_symbols(self.pattern)
        
        if isinstance(self.allowance, bool) or not isinstance(self.allowance, int):
            raise ConfigurationError(
                f"Allowance must be an integer, got {self.allowance!r}", parameter="allowance"
            )
        if self.allowance < 0:
            raise ConfigurationError(
                f"Allowance must be non-negative, got {self.allowance}", parameter="allowance"
            )
        if self.allowance >= len(self.pattern):
            logger.warning(
                f"Allowance {self.allowance} is not smaller than the pattern length "
                f"{len(self.pattern)}; every window will match"
            )
        
        mode = ReverseComplementMode.parse(self.reverse_complement_mode)
        object.__setattr__(self, "reverse_complement_mode", mode)
        if mode.searches_reverse:
            object.__setattr__(self, "reverse_pattern", reverse_complement(self.pattern))
    
    @property
    def forward_pattern(self) -> str:
        return self.pattern
    
    @classmethod
    def from_yaml(cls, yaml_file: Path, **overrides) -> "ScanConfig":
        """Load configuration from YAML file; non-None overrides win."""
        yaml_file = Path(yaml_file)
        if not yaml_file.exists():
            raise ConfigurationError(f"Config file not found: {yaml_file}")
        
        try:
            with open(yaml_file, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML config: {e}", config_file=str(yaml_file))
        
        if not isinstance(data, dict):
            raise ConfigurationError("Expected a mapping at top level", config_file=str(yaml_file))
        
        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown config parameters: {', '.join(unknown)}", config_file=str(yaml_file)
            )
        
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid config parameters: {e}", config_file=str(yaml_file))
    
    @classmethod
    def from_args(cls, args: dict) -> "ScanConfig":
        """Create configuration from command-line arguments."""
        return cls(**cls.args_to_fields(args))
    
    @staticmethod
    def args_to_fields(args: dict) -> dict:
        """Map command-line argument names to config field names, dropping unset ones."""
        arg_mapping = {
            'pattern': 'pattern',
            'allow_non_matching': 'allowance',
            'ignore_case': 'case_insensitive',
            'headers_only': 'headers_only',
            'strict': 'strict',
        }
        
        config_args = {}
        for arg_name, config_name in arg_mapping.items():
            if arg_name in args and args[arg_name] is not None:
                config_args[config_name] = args[arg_name]
        
        reverse = args.get('reverse_complement')
        only = args.get('reverse_complement_only')
        if reverse or only:
            config_args['reverse_complement_mode'] = ReverseComplementMode.from_flags(
                bool(reverse), bool(only)
            )
        
        # store_true flags arrive as False when absent; only keep explicit ones
        for flag in ('case_insensitive', 'headers_only', 'strict'):
            if config_args.get(flag) is False:
                del config_args[flag]
        
        return config_args
    
    def describe(self) -> str:
        """One-line summary for logging."""
        return (
            f"pattern={self.pattern} allowance={self.allowance} "
            f"case_insensitive={self.case_insensitive} "
            f"reverse_complement={self.reverse_complement_mode.value} "
            f"headers_only={self.headers_only}"
        )
