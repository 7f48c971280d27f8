#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from reality_stats.config.loader import ConfigLoader
from reality_stats.config.validation import ConfigValidator, ValidationError
from reality_stats.data.gateway import InMemoryShowGateway
from reality_stats.errors import ConfigurationError, DataQualityError
from reality_stats.logging import configure_logging


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration of a config directory."""
    loader = ConfigLoader.create(config_dir)
    try:
        loader.load_config()
    except ConfigurationError as e:
        return e.errors
    return []


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating Reality Stats configuration...")

    all_valid = True

    errors = validate_config_dir(config_dir)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Configuration is valid")

    # Check the snapshot file, if one is configured
    if all_valid:
        config = ConfigLoader.create(config_dir).load_config()
        configure_logging(**asdict(config.logging))
        data_file = config.gateway.data_file
        if data_file:
            print(f"\n📋 Loading snapshot {data_file}...")
            try:
                gateway = InMemoryShowGateway.from_file(data_file)
                print(f"✅ Loaded {len(gateway.list_shows())} shows")
            except (OSError, DataQualityError) as e:
                print(f"❌ Snapshot could not be loaded: {e}")
                all_valid = False

    # Test call-time overrides
    print("\n📋 Testing call-time overrides...")
    loader = ConfigLoader.create(config_dir)
    merged = loader.merge_config({"reports": {"top_prizes_per_show": 5}})
    override_errors = ConfigValidator.validate_config(merged)
    if override_errors:
        print("❌ Override validation failed:")
        for error in override_errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
