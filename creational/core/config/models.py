"""
Configuration models for the application.
"""

import os
from dataclasses import dataclass, field


@dataclass
class PathSettings:
    """
    Path and filename settings.
    All paths are absolute and constructed from the working directory.
    """

    root_dir: str = field(init=False)
    docs_dir: str = field(init=False)
    log_dir: str = field(init=False)

    def __post_init__(self):
        from .utils import get_working_root

        self.root_dir = get_working_root()
        self.docs_dir = os.path.join(self.root_dir, "docs")
        # Allow overriding log_dir with environment variable
        self.log_dir = os.getenv("LOG_DIR", os.path.join(self.root_dir, "logs"))


@dataclass
class DocsSettings:
    """Settings for rendering the markdown documentation."""

    output_file: str
    title: str = "Creational Design Patterns"
    include_source: bool = True
    include_output: bool = True


@dataclass
class AppSettings:
    """Root settings object passed around the application."""

    paths: PathSettings
    docs: DocsSettings
    console_log_level: str = "INFO"
