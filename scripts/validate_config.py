#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from heroine_state.config.loader import ConfigLoader
from heroine_state.config.validation import ConfigValidator
from heroine_state.errors import ConfigurationError


def main(config_dir: Optional[str] = None) -> int:
    """Validate the heroine configuration file and report each error."""
    loader = ConfigLoader.create(config_dir)
    print(f"🔍 Validating {loader.config_file}...")

    if not loader.config_file.exists():
        print("ℹ️  No configuration file found, built-in defaults apply")
        return 0

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ Could not read configuration: {e}")
        return 1

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return 1

    print("✅ Configuration is valid")
    for section, values in config.items():
        for key, value in values.items():
            print(f"  {section}.{key} = {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
