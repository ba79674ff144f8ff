"""
BuildConfig - Build root and logging configuration.
"""

import logging
import os
from dataclasses import dataclass
from typing import List


@dataclass
class BuildConfig:
    """
    Configuration for variant generation.

    Attributes:
        build_dir: Root directory for variant output
        log_level: Logging level name (DEBUG, INFO, ...)
    """
    build_dir: str = 'build'
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls) -> 'BuildConfig':
        """Load configuration from VARIANTGEN_* environment variables."""
        return cls(
            build_dir=os.getenv('VARIANTGEN_BUILD_DIR', 'build'),
            log_level=os.getenv('VARIANTGEN_LOG_LEVEL', 'INFO').upper(),
        )

    def validate(self) -> List[str]:
        """
        Check configuration.

        Returns:
            List of error messages, empty if valid
        """
        errors = []
        if not self.build_dir:
            errors.append("Build directory is not set (VARIANTGEN_BUILD_DIR or --build-dir)")
        elif os.path.exists(self.build_dir) and not os.path.isdir(self.build_dir):
            errors.append(f"Build directory is not a directory: {self.build_dir}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")
        return errors
