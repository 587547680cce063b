#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stocks_app.config.loader import ConfigLoader
from stocks_app.config.validation import ConfigValidator
from stocks_app.errors import ConfigurationError


def main():
    """Main validation function."""
    config_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_file)

    print(f"🔍 Validating {loader.config_file}...")

    if not loader.config_file.exists():
        print("ℹ️  File not found, only built-in defaults apply")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ Could not load configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    try:
        loader.build_config(config)
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"✅ Symbols: {', '.join(config['report']['symbols'])}")
    print(f"✅ SMA window: {config['signals']['sma_window']}")
    print("\n🎉 Configuration validation passed!")
    sys.exit(0)


if __name__ == "__main__":
    main()
