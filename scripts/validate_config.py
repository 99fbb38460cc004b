#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from assetviz_app.config.loader import ConfigLoader
from assetviz_app.config.validation import ConfigValidator


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating AssetViz configuration in {loader.config_dir}...")

    overrides_file = loader.config_dir / "datasets.yaml"
    if overrides_file.exists():
        print(f"📄 Using overrides from {overrides_file}")
    else:
        print("📄 No datasets.yaml found, validating defaults")

    try:
        config = loader.merge_config()
    except Exception as e:
        print(f"❌ Error reading configuration: {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("✅ Configuration is valid")
    print(f"   stocks: {config['sources']['stocks_path']}")
    print(f"   crypto: {config['sources']['crypto_path']}")
    print(f"   companies: {config['sources']['companies_path']}")
    sys.exit(0)


if __name__ == "__main__":
    main()
