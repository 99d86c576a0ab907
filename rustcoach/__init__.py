"""Terminal status lines, rust-project.json generation and worked drill answers for an exercise course."""

__version__ = "0.1.0"