"""Centralized constants for the aimax package."""

# Claude configuration directory name, resolved under the user's home
TOOL_DIR_NAME = ".claude"

# Manifest recording the most recent install
MANIFEST_FILENAME = ".aimax-version"

# Suffix appended to an existing target file before it is overwritten
BACKUP_SUFFIX = ".backup"

# Only files with this suffix are copied by non-recursive components
MARKDOWN_SUFFIX = ".md"

# Environment variables overriding the source and target roots
SOURCE_DIR_ENV = "AIMAX_SOURCE_DIR"
CLAUDE_DIR_ENV = "AIMAX_CLAUDE_DIR"
