"""
Configuration system for the graph engine.

This module provides centralized configuration for file loading, report
behavior and logging of graph components.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

MISSING_EDGE_POLICIES = ('skip', 'reject')


@dataclass
class GraphConfig:
    """
    Configuration settings for graph loading and analysis.
    
    Attributes:
        encoding: Text encoding of edge-list files
        skip_blank_lines: Ignore blank data lines instead of rejecting them
            as malformed (off by default)
        missing_edge_policy: How a report treats subgraph pairs that are not
            edges of the full graph. ``'skip'`` leaves them untraversed,
            ``'reject'`` makes the report invalid
        log_level: Level passed to ``setup_logging`` by the command line tools
    """
    
    encoding: str = 'utf-8'
    skip_blank_lines: bool = False
    missing_edge_policy: str = 'skip'
    log_level: str = 'WARNING'
    
    def __post_init__(self):
        """Validate settings after initialization."""
        if self.missing_edge_policy not in MISSING_EDGE_POLICIES:
            raise ConfigurationError(
                f"Invalid missing_edge_policy '{self.missing_edge_policy}'; "
                f"expected one of {', '.join(MISSING_EDGE_POLICIES)}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Invalid log_level '{self.log_level}'")
    
    @classmethod
    def from_file(cls, config_filepath: Union[str, Path]) -> 'GraphConfig':
        """
        Load configuration from a JSON file.
        
        Args:
            config_filepath: Path to a JSON object with GraphConfig keys
            
        Returns:
            New GraphConfig instance
            
        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        config_filepath = Path(config_filepath)
        if not config_filepath.exists():
            raise ConfigurationError(f"Configuration file not found: {config_filepath}")
        
        try:
            with open(config_filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {config_filepath}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration from {config_filepath}: {e}")
        
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {config_filepath} must be a JSON object")
        
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        
        logger.info(f"Successfully loaded graph configuration from: {config_filepath}")
        return cls(**data)
    
    def get_setting(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.
        
        Args:
            key: Setting key to retrieve
            default: Default value if key not found
            
        Returns:
            Setting value or default
        """
        return getattr(self, key, default)
    
    def update_settings(self, **kwargs) -> None:
        """
        Update multiple settings and re-validate.
        
        Args:
            **kwargs: Settings to update
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        self.__post_init__()
    
    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            'encoding': self.encoding,
            'skip_blank_lines': self.skip_blank_lines,
            'missing_edge_policy': self.missing_edge_policy,
            'log_level': self.log_level,
        }
